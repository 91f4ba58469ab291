"""Core system utilities for logging, errors, platform detection, and process execution."""

from .errors import (
    AnchorNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    ExternalCommandError,
    MantraError,
    TemplateEvaluationError,
)
from .logger import logger, setup_log_level
from .platform import get_line_break, is_windows
from .process import execute_command, run_script_file

__all__ = [
    "logger",
    "setup_log_level",
    "MantraError",
    "AnchorNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ExternalCommandError",
    "TemplateEvaluationError",
    "is_windows",
    "get_line_break",
    "execute_command",
    "run_script_file",
]
