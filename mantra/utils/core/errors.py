"""mantra-cli 예외 계층.

설정 파일 부재(FileNotFoundError)만 로컬에서 처리되고(기본 설정 사용),
나머지는 모두 최상위 CLI 호출까지 전파되어 명령을 중단시킵니다.
파일 시스템 오류(OSError)는 감싸지 않고 그대로 전파합니다.
"""

from pathlib import Path
from typing import Optional, Union


class MantraError(Exception):
    """
    mantra-cli에서 발생하는 오류의 기본 클래스.
    """

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        """
        Args:
            message: 오류 메시지
            original_error: 원본 예외 (있는 경우)
        """
        super().__init__(message)
        self.original_error = original_error


class AnchorNotFoundError(MantraError, LookupError):
    """마커 편집 시 앵커 또는 제거할 텍스트를 찾지 못한 경우."""

    def __init__(self, pattern: str, path: Optional[Union[str, Path]] = None):
        self.pattern = pattern
        self.path = str(path) if path is not None else None
        location = f" in {self.path}" if self.path else ""
        super().__init__(f"Anchor not found{location}: {pattern!r}")


class ConfigParseError(MantraError, ValueError):
    """설정 YAML 문서를 해석할 수 없는 경우."""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        original_error: Optional[Exception] = None,
    ):
        self.path = str(path) if path is not None else None
        if self.path:
            message = f"{self.path}: {message}"
        super().__init__(message, original_error)


class ConfigValidationError(ConfigParseError):
    """tabSize, storybook 등 인식되는 키의 값 타입이 잘못된 경우."""


class TemplateEvaluationError(MantraError):
    """템플릿 평가 실패 (정의되지 않은 변수 참조, 문법 오류)."""

    def __init__(
        self,
        message: str,
        template: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.template = template
        if template:
            message = f"{template}: {message}"
        super().__init__(message, original_error)


class ExternalCommandError(MantraError):
    """외부 명령 또는 스크립트가 0이 아닌 종료 코드로 끝난 경우."""

    def __init__(
        self,
        cmd: str,
        returncode: int,
        output: Optional[str] = None,
        stderr: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.cmd = cmd
        self.returncode = returncode
        self.output = output
        self.stderr = stderr
        message = f"Command failed with exit code {returncode}: {cmd}"
        detail = (stderr or output or "").strip()
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message, original_error)
