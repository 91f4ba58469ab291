"""
CLI 결과 출력 유틸리티

init-config, show-config 결과를 rich로 출력합니다.
스캐폴딩 액션([CREATE] 등)은 logger 모듈이 담당합니다.
"""

from pathlib import Path
from typing import Any, Mapping, Union

import yaml
from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.syntax import Syntax

_console = Console()


def dump_config_yaml(config: Mapping[Any, Any]) -> str:
    """설정을 mantra_cli.yaml과 같은 형식(블록 스타일, 키 순서 유지)으로 직렬화"""
    return yaml.safe_dump(dict(config), default_flow_style=False, sort_keys=False)


def print_command_title(command_title: str, description: str = "") -> None:
    """
    명령 제목을 구분선으로 출력합니다.

    Args:
        command_title: 명령어 이름 (예: "init-config")
        description: 짧은 설명
    """
    title = f"[bold]mantra {escape(command_title)}[/bold]"
    if description:
        title = f"{title} [dim]{escape(description)}[/dim]"
    _console.print(Rule(title, align="left", style="dim"))


def print_config(config: Mapping[Any, Any], source: str) -> None:
    """
    유효 설정을 YAML 블록으로 출력합니다.

    Args:
        config: 평탄한 설정 딕셔너리
        source: 설정 출처 (파일 이름 또는 "defaults")
    """
    _console.print(f"[bold cyan][CONFIG][/bold cyan] {escape(source)}")
    _console.print(Syntax(dump_config_yaml(config).rstrip("\n"), "yaml", background_color="default"))


def print_written_config(path: Union[str, Path], config: Mapping[Any, Any]) -> None:
    """생성된 설정 파일 경로와 키별 값을 출력"""
    _console.print(f"[bold green][OK][/bold green] {escape(str(path))}")
    for key, value in config.items():
        _console.print(f"  [dim]{escape(str(key))}[/dim] = {escape(repr(value))}")
