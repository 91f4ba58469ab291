"""
mantra CLI - Main Commands Router
단순 라우팅만 담당하는 메인 CLI 진입점
"""

import logging

import typer
from typing_extensions import Annotated

from mantra.cli.commands.config_commands import init_config_command, show_config_command
from mantra.cli.commands.edit_commands import insert_command, remove_command
from mantra.cli.commands.generate_command import generate_command, mkdir_command, templates_command
from mantra.cli.commands.run_commands import invoke_command, run_command
from mantra.utils.core.logger import CLI_LEVEL, setup_log_level


def _get_version() -> str:
    """
    Read the installed package version.

    Returns:
        str: Version string, defaults to "unknown" if the package is not installed
    """
    try:
        from importlib.metadata import version

        return version("mantra-cli")
    except Exception:
        return "unknown"


# Main CLI App
app = typer.Typer(
    help="mantra - scaffolding utilities (config, templates, marker edits, commands)",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """
    Callback function for --version option.

    Raises:
        typer.Exit: Always exits after displaying version
    """
    if value:
        typer.echo(f"mantra-cli {_get_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option("--version", callback=version_callback, is_eager=True, help="Show version")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="상세 로그 출력 (DEBUG)")
    ] = False,
) -> None:
    """
    mantra CLI - Main entry point for all commands.
    """
    setup_log_level(logging.DEBUG if verbose else CLI_LEVEL)


# ═══════════════════════════════════════════════════
# Config Commands
# ═══════════════════════════════════════════════════

app.command("init-config", help="mantra_cli.yaml 생성")(init_config_command)
app.command("show-config", help="유효 설정 출력")(show_config_command)


# ═══════════════════════════════════════════════════
# Scaffolding Commands
# ═══════════════════════════════════════════════════

app.command("generate", help="템플릿으로 파일 생성")(generate_command)
app.command("templates", help="템플릿 목록 출력")(templates_command)
app.command("mkdir", help="디렉토리 생성")(mkdir_command)
app.command("insert", help="앵커 위치에 텍스트 삽입")(insert_command)
app.command("remove", help="파일에서 텍스트 제거")(remove_command)


# ═══════════════════════════════════════════════════
# Process Commands
# ═══════════════════════════════════════════════════

app.command("run", help="셸 명령 실행")(run_command)
app.command("invoke", help="스크립트 파일 실행")(invoke_command)


if __name__ == "__main__":
    app()
