"""
Config Commands Implementation
init-config: 새 프로젝트용 mantra_cli.yaml 생성
show-config: 현재 디렉토리의 유효 설정 출력
"""

from pathlib import Path
from typing import List, Optional

import typer

from mantra.cli.utils.arguments import parse_assignments
from mantra.cli.utils.file_writer import write
from mantra.cli.utils.output import print_command_title, print_config, print_written_config
from mantra.settings import (
    CONFIG_FILE_NAME,
    check_file_exists,
    get_custom_config,
    load_config,
    merge_config,
)
from mantra.utils.core.errors import MantraError
from mantra.utils.core.logger import log_error


def init_config_command(
    tab_size: Optional[int] = typer.Option(None, "--tab-size", "-t", help="들여쓰기 폭"),
    storybook: Optional[bool] = typer.Option(
        None, "--storybook/--no-storybook", help="Storybook 파일 생성 여부"
    ),
    extra: Optional[List[str]] = typer.Option(
        None, "--set", "-s", help="추가 설정 (KEY=VALUE, 여러 번 사용 가능)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="기존 파일 덮어쓰기"),
) -> None:
    """
    기본 설정에 옵션 값을 덮어써서 mantra_cli.yaml을 생성합니다.

    Examples:
        mantra init-config
        mantra init-config --tab-size 4 --storybook
        mantra init-config --set lint=eslint
    """
    try:
        overrides = parse_assignments(extra, "--set")
        if tab_size is not None:
            overrides["tabSize"] = tab_size
        if storybook is not None:
            overrides["storybook"] = storybook

        config_path = Path(".") / CONFIG_FILE_NAME
        if check_file_exists(config_path) and not force:
            log_error(f"{CONFIG_FILE_NAME} 파일이 이미 존재합니다 (--force로 덮어쓰기)", "CLI")
            raise typer.Exit(1)

        print_command_title("init-config", "mantra_cli.yaml generator")
        write(f"./{CONFIG_FILE_NAME}", get_custom_config(overrides))
        print_written_config(CONFIG_FILE_NAME, merge_config(overrides))

    except MantraError as e:
        log_error(f"Config 생성 실패: {e}", "CLI")
        raise typer.Exit(1)
    except OSError as e:
        log_error(f"파일 시스템 오류: {e}", "CLI")
        raise typer.Exit(1)


def show_config_command() -> None:
    """
    현재 디렉토리의 mantra_cli.yaml과 기본 설정을 병합한 유효 설정을 출력합니다.
    """
    try:
        config = load_config()
    except MantraError as e:
        log_error(f"Config 로드 실패: {e}", "CLI")
        raise typer.Exit(1)
    except OSError as e:
        log_error(f"파일 시스템 오류: {e}", "CLI")
        raise typer.Exit(1)

    source = CONFIG_FILE_NAME if check_file_exists(CONFIG_FILE_NAME) else "defaults"
    print_config(config.to_dict(), source)
