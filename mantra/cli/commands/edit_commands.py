"""
Edit Commands Implementation
기존 파일에 마커 기반으로 텍스트를 삽입/제거합니다.
"""

from pathlib import Path
from typing import Optional

import typer

from mantra.cli.utils.marker_editor import EditOptions, insert_to_file, remove_from_file
from mantra.utils.core.errors import MantraError
from mantra.utils.core.logger import log_error


def _build_options(**kwargs) -> EditOptions:
    try:
        return EditOptions(**kwargs)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def insert_command(
    path: Path = typer.Argument(..., help="편집할 파일 경로"),
    text: str = typer.Argument(..., help="삽입할 텍스트"),
    after: Optional[str] = typer.Option(None, "--after", "-a", help="이 앵커가 있는 줄 뒤에 삽입"),
    before: Optional[str] = typer.Option(None, "--before", "-b", help="이 앵커가 있는 줄 앞에 삽입"),
    regex: bool = typer.Option(False, "--regex", "-r", help="앵커를 정규식으로 해석"),
    last: bool = typer.Option(False, "--last", help="마지막 일치 앵커 사용"),
    occurrence: int = typer.Option(1, "--occurrence", "-n", help="사용할 앵커 순번 (1부터)"),
    new_line: bool = typer.Option(False, "--new-line", help="삽입 텍스트 끝에 줄바꿈 추가"),
    inline: bool = typer.Option(False, "--inline", help="줄 경계 대신 앵커 바로 앞/뒤에 삽입"),
) -> None:
    """
    파일의 앵커 위치에 텍스트를 삽입합니다. 앵커가 없으면 실패합니다.

    Examples:
        mantra insert client/main.js "import './routes';" --after "import React" --new-line
    """
    if (after is None) == (before is None):
        raise typer.BadParameter("Exactly one of --after and --before is required")

    options = _build_options(
        after=after,
        before=before,
        regex=regex,
        last=last,
        occurrence=occurrence,
        as_new_line=new_line,
        inline=inline,
    )
    try:
        insert_to_file(path, text, options)
    except MantraError as e:
        log_error(str(e), "CLI")
        raise typer.Exit(1)
    except OSError as e:
        log_error(f"파일 편집 실패: {e}", "CLI")
        raise typer.Exit(1)


def remove_command(
    path: Path = typer.Argument(..., help="편집할 파일 경로"),
    text: str = typer.Argument(..., help="제거할 텍스트"),
    after: Optional[str] = typer.Option(None, "--after", "-a", help="이 앵커 이후에서만 검색"),
    before: Optional[str] = typer.Option(None, "--before", "-b", help="이 앵커 이전에서만 검색"),
    regex: bool = typer.Option(False, "--regex", "-r", help="텍스트와 앵커를 정규식으로 해석"),
    multi: bool = typer.Option(False, "--all", help="범위 내 모든 일치 항목 제거"),
    last: bool = typer.Option(False, "--last", help="마지막 일치 항목 제거"),
) -> None:
    """
    파일에서 텍스트를 제거합니다. 텍스트가 없으면 실패합니다.
    """
    options = _build_options(after=after, before=before, regex=regex, multi=multi, last=last)
    try:
        remove_from_file(path, text, options)
    except MantraError as e:
        log_error(str(e), "CLI")
        raise typer.Exit(1)
    except OSError as e:
        log_error(f"파일 편집 실패: {e}", "CLI")
        raise typer.Exit(1)
