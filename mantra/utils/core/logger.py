import logging
import sys
from typing import Optional

# CLI 전용 로그 레벨 정의 (INFO=20, WARNING=30 사이)
# 기본: 스캐폴딩 액션(create/run/invoke)은 항상 출력, -v 옵션 시 DEBUG까지 출력
CLI_LEVEL = 25
logging.addLevelName(CLI_LEVEL, "CLI")

# 전역 로거 객체
logger = logging.getLogger("mantra")


class TerminalFormatter(logging.Formatter):
    """
    터미널용 포맷터: 레벨/타임스탬프 없이 메시지만 출력.

    스캐폴딩 액션 로그는 `[CREATE] src/app.js` 처럼 태그가 메시지에 포함되므로
    추가 장식이 필요 없습니다.
    """

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and record.levelno >= logging.ERROR:
            return f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_log_level(level: int) -> None:
    """
    런타임 로그 레벨 변경 (-v 옵션 지원).
    핸들러가 없으면 기본 콘솔 핸들러를 추가하여 즉시 출력 가능하게 함.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if not root_logger.handlers:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(TerminalFormatter())
        root_logger.addHandler(console_handler)
    else:
        for handler in root_logger.handlers:
            handler.setLevel(level)


# 표준화된 카테고리별 로깅 함수
# 카테고리: CREATE(파일/디렉토리 생성), RUN(명령 실행), INVOKE(스크립트 호출),
#          EDIT(마커 편집), CONFIG(설정 로드), ERROR(오류)


def log_create(path: str) -> None:
    """파일/디렉토리 생성 로그 (기본 모드에서 터미널에 항상 출력)"""
    logger.log(CLI_LEVEL, f"[CREATE] {path}")


def log_run(cmd: str) -> None:
    """외부 명령 실행 로그"""
    logger.log(CLI_LEVEL, f"[RUN] {cmd}")


def log_invoke(name: str) -> None:
    """스크립트 파일 호출 로그"""
    logger.log(CLI_LEVEL, f"[INVOKE] {name}")


def log_edit(message: str, path: Optional[str] = None) -> None:
    """마커 기반 파일 편집 로그 (상세 로그, DEBUG 레벨)"""
    if path:
        logger.debug(f"[EDIT:{path}] {message}")
    else:
        logger.debug(f"[EDIT] {message}")


def log_config(message: str) -> None:
    """설정 로드 관련 로그 (mantra_cli.yaml 로드 시 사용)"""
    logger.info(f"[CONFIG] {message}")


def log_template(message: str) -> None:
    """템플릿 렌더링 상세 로그 (DEBUG)"""
    logger.debug(f"[TEMPLATE] {message}")


def log_error(message: str, category: Optional[str] = None) -> None:
    """오류 로그"""
    if category:
        logger.error(f"[ERROR:{category}] {message}")
    else:
        logger.error(f"[ERROR] {message}")
