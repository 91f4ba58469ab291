"""Settings Module Public API"""

from .config import (
    DEFAULT_CONFIG,
    MantraConfig,
    generate_config,
    get_custom_config,
    merge_config,
)
from .loader import (
    CONFIG_FILE_NAME,
    check_file_exists,
    get_config_path,
    load_config,
    parse_yaml_from_file,
    read_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "MantraConfig",
    "merge_config",
    "generate_config",
    "get_custom_config",
    "CONFIG_FILE_NAME",
    "check_file_exists",
    "get_config_path",
    "load_config",
    "parse_yaml_from_file",
    "read_config",
]
