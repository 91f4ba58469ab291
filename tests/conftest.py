"""
mantra-cli - Core Test Fixtures
No Mock Hell: real files in temporary directories, minimal mocking
"""

import logging
from pathlib import Path

import pytest


# ═══════════════════════════════════════════════════════════════════════════════
# TEST ISOLATION FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture(scope="function")
def isolated_working_directory(tmp_path, monkeypatch):
    """
    완전히 격리된 작업 디렉토리를 제공합니다.

    mantra_cli.yaml 탐색과 파일 생성이 프로젝트 디렉토리에 영향을 주지 않도록
    임시 디렉토리로 작업 디렉토리를 변경합니다.

    Returns:
        Path: 격리된 임시 작업 디렉토리 경로
    """
    monkeypatch.chdir(tmp_path)

    # 추가로 Path.cwd()도 임시 디렉토리를 반환하도록 보장
    monkeypatch.setattr(Path, "cwd", lambda: tmp_path)

    yield tmp_path


@pytest.fixture
def mantra_logs(caplog):
    """mantra 로거의 모든 레벨 로그를 캡처합니다."""
    caplog.set_level(logging.DEBUG, logger="mantra")
    return caplog


# ═══════════════════════════════════════════════════════════════════════════════
# TEMPLATE FIXTURES
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def template_dir(tmp_path):
    """Create a temporary template directory with sample templates."""
    template_dir = tmp_path / "templates"
    template_dir.mkdir()

    (template_dir / "greeting.tt").write_text("Hello ${name}!\n")
    (template_dir / "static.txt").write_text("No placeholders here.\n")
    (template_dir / "component.js.tt").write_text(
        "import React from 'react';\n"
        "\n"
        "const ${componentName} = () => (\n"
        "${' ' * tabSize}<div />\n"
        ");\n"
        "<% if storybook %>\n"
        "export const story = true;\n"
        "<% endif %>\n"
        "export default ${componentName};\n"
    )

    nested_dir = template_dir / "client"
    nested_dir.mkdir()
    (nested_dir / "routes.js.tt").write_text("// routes for ${moduleName}\n")

    return template_dir
