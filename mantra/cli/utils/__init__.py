"""CLI Utilities Module

템플릿 렌더링, 파일 생성, 마커 기반 파일 편집 유틸리티를 제공합니다.
"""

from .file_writer import create_directory, create_file, write
from .marker_editor import EditOptions, insert_text, insert_to_file, remove_from_file, remove_text
from .template_engine import TemplateEngine, get_file_content, render

__all__ = [
    "TemplateEngine",
    "render",
    "get_file_content",
    "write",
    "create_file",
    "create_directory",
    "EditOptions",
    "insert_text",
    "remove_text",
    "insert_to_file",
    "remove_from_file",
]
