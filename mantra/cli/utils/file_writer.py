"""
File Writer Utility
렌더링된 템플릿을 디스크에 기록하고 생성 로그를 남깁니다.
"""

import re
from pathlib import Path
from typing import Optional, Union

from mantra.cli.utils.template_engine import TemplateEngine, TemplateVariables
from mantra.utils.core.logger import log_create

PathLike = Union[str, Path]

_CURRENT_DIR_PREFIX = re.compile(r"^\./")


def _display_path(path: PathLike) -> str:
    """로그 표시용 경로 (선행 './' 제거)"""
    return _CURRENT_DIR_PREFIX.sub("", str(path))


def write(target_path: PathLike, content: str) -> None:
    """
    파일을 생성합니다. 상위 디렉토리가 없으면 재귀적으로 생성하고,
    기존 파일은 덮어씁니다.

    Args:
        target_path: 생성할 파일 경로
        content: 파일 내용
    """
    output_path = Path(target_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" 으로 CRLF 템플릿 내용을 변환 없이 기록
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)

    log_create(_display_path(target_path))


def create_file(
    template_path: PathLike,
    target_path: PathLike,
    variables: Optional[TemplateVariables] = None,
    engine: Optional[TemplateEngine] = None,
) -> None:
    """
    템플릿과 변수로 파일을 생성합니다.

    Args:
        template_path: 템플릿 파일 경로
        target_path: 생성할 파일 경로
        variables: 템플릿 변수 (None이면 템플릿을 그대로 복사)
        engine: 사용할 템플릿 엔진 (기본: 디렉토리 없는 엔진)

    Raises:
        FileNotFoundError: 템플릿 파일이 없을 경우
        TemplateEvaluationError: 템플릿 평가 실패
    """
    engine = engine or TemplateEngine()
    content = engine.get_file_content(template_path, variables)
    write(target_path, content)


def create_directory(path: PathLike) -> None:
    """
    디렉토리를 생성하고 로그를 남깁니다. 이미 존재해도 성공합니다.

    Args:
        path: 생성할 디렉토리 경로
    """
    Path(path).mkdir(parents=True, exist_ok=True)

    display_path = _display_path(path)
    if not display_path.endswith("/"):
        display_path = f"{display_path}/"
    log_create(display_path)
