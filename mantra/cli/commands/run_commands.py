"""
Run Commands Implementation
셸 명령 및 스크립트 파일 실행
"""

from pathlib import Path
from typing import List, Optional

import typer

from mantra.utils.core.errors import ExternalCommandError
from mantra.utils.core.logger import log_error
from mantra.utils.core.process import execute_command, run_script_file


def run_command(
    cmd: str = typer.Argument(..., help="실행할 셸 명령"),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="작업 디렉토리"),
) -> None:
    """
    셸 명령을 실행합니다. 0이 아닌 종료 코드는 그대로 반환됩니다.

    Examples:
        mantra run "npm install"
    """
    try:
        execute_command(cmd, cwd=cwd)
    except ExternalCommandError as e:
        log_error(str(e), "CLI")
        raise typer.Exit(e.returncode or 1)


def invoke_command(
    script: Path = typer.Argument(..., help="실행할 스크립트 파일"),
    args: Optional[List[str]] = typer.Argument(None, help="스크립트 인자"),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="작업 디렉토리"),
) -> None:
    """
    스크립트 파일을 실행합니다 (Windows가 아니면 bash로 호출).
    """
    try:
        run_script_file(script, args or [], cwd=cwd)
    except ExternalCommandError as e:
        log_error(str(e), "CLI")
        raise typer.Exit(e.returncode or 1)
