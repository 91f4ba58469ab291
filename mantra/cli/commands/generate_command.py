"""
Generate Command Implementation
템플릿 파일로부터 파일/디렉토리를 생성합니다.
"""

from pathlib import Path
from typing import List, Optional

import typer
from jinja2 import TemplateNotFound

from mantra.cli.utils.arguments import parse_assignments
from mantra.cli.utils.file_writer import create_directory, create_file, write
from mantra.cli.utils.template_engine import TemplateEngine
from mantra.settings import load_config
from mantra.utils.core.errors import MantraError
from mantra.utils.core.logger import log_error


def generate_command(
    template_path: Path = typer.Argument(
        ..., help="템플릿 파일 경로 (--templates-dir 사용 시 템플릿 이름)"
    ),
    target_path: Path = typer.Argument(..., help="생성할 파일 경로"),
    variables: Optional[List[str]] = typer.Option(
        None, "--var", "-V", help="템플릿 변수 (KEY=VALUE, 여러 번 사용 가능)"
    ),
    raw: bool = typer.Option(False, "--raw", help="변수 치환 없이 템플릿을 그대로 복사"),
    templates_dir: Optional[Path] = typer.Option(
        None, "--templates-dir", "-T", help="템플릿 이름을 찾을 디렉토리"
    ),
) -> None:
    """
    템플릿을 렌더링하여 파일을 생성합니다.

    템플릿 변수는 유효 설정(tabSize, storybook 등)에 --var 값을 덮어쓴 것입니다.

    Examples:
        mantra generate templates/component.js.tt src/components/header.js --var name=Header
        mantra generate component.js.tt src/components/header.js -T templates --var name=Header
        mantra generate templates/LICENSE LICENSE --raw
    """
    try:
        template_vars = None
        if not raw:
            template_vars = load_config().to_dict()
            template_vars.update(parse_assignments(variables, "--var"))

        if templates_dir is not None:
            engine = TemplateEngine(templates_dir)
            write(str(target_path), engine.render_template(str(template_path), template_vars))
        else:
            create_file(template_path, str(target_path), template_vars)

    except TemplateNotFound as e:
        log_error(f"템플릿 없음: {e.name} (in {templates_dir})", "CLI")
        raise typer.Exit(1)
    except FileNotFoundError as e:
        log_error(f"템플릿 파일 없음: {e.filename or e}", "CLI")
        raise typer.Exit(1)
    except MantraError as e:
        log_error(f"파일 생성 실패: {e}", "CLI")
        raise typer.Exit(1)
    except OSError as e:
        log_error(f"파일 시스템 오류: {e}", "CLI")
        raise typer.Exit(1)


def templates_command(
    templates_dir: Path = typer.Argument(..., help="템플릿 디렉토리"),
    pattern: Optional[str] = typer.Option(None, "--pattern", "-p", help="파일 패턴 (예: '*.tt')"),
) -> None:
    """
    템플릿 디렉토리의 템플릿 이름을 출력합니다 (generate --templates-dir 에 사용).
    """
    try:
        engine = TemplateEngine(templates_dir)
    except FileNotFoundError as e:
        log_error(str(e), "CLI")
        raise typer.Exit(1)

    for name in engine.list_templates(pattern):
        typer.echo(name)


def mkdir_command(
    path: Path = typer.Argument(..., help="생성할 디렉토리 경로"),
) -> None:
    """
    디렉토리를 생성합니다. 이미 존재해도 성공합니다.
    """
    try:
        create_directory(str(path))
    except OSError as e:
        log_error(f"디렉토리 생성 실패: {e}", "CLI")
        raise typer.Exit(1)
