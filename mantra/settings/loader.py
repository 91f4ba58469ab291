"""
mantra_cli.yaml 로더

작업 디렉토리의 mantra_cli.yaml을 읽어 기본 설정 위에 병합합니다.
파일이 없으면 기본 설정을 그대로 반환합니다.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from mantra.settings.config import MantraConfig, generate_config
from mantra.utils.core.errors import ConfigParseError
from mantra.utils.core.logger import log_config

CONFIG_FILE_NAME = "mantra_cli.yaml"


def check_file_exists(path: Union[str, Path]) -> bool:
    """
    파일 또는 디렉토리 존재 여부 확인.

    "존재하지 않음" 외의 오류(권한 거부 등)는 그대로 전파됩니다.

    Args:
        path: 확인할 경로 (절대/상대 경로)

    Returns:
        존재하면 True
    """
    try:
        Path(path).lstat()
    except FileNotFoundError:
        return False
    return True


def parse_yaml_from_file(path: Union[str, Path]) -> Any:
    """
    YAML 파일을 파싱합니다.

    Args:
        path: YAML 파일 경로

    Returns:
        파싱된 객체 (빈 문서는 None)

    Raises:
        ConfigParseError: YAML 문법 오류
    """
    content = Path(path).read_text(encoding="utf-8")
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML document: {e}", path=path, original_error=e) from e


def get_config_path(base_path: Optional[Path] = None) -> Path:
    """
    mantra_cli.yaml 경로 반환.

    Args:
        base_path: 프로젝트 루트 경로 (기본값: 현재 작업 디렉토리)
    """
    base_path = base_path or Path.cwd()
    return base_path / CONFIG_FILE_NAME


def load_config(base_path: Optional[Path] = None) -> MantraConfig:
    """
    유효 설정 로드.

    Args:
        base_path: 프로젝트 루트 경로 (테스트용)

    Returns:
        기본 설정에 사용자 설정이 병합된 MantraConfig

    Raises:
        ConfigParseError: YAML 문법 오류 또는 최상위가 매핑이 아닌 문서
        ConfigValidationError: 인식되는 키의 값 타입 오류
        OSError: 파일 접근 실패 (파일 없음 제외)
    """
    config_path = get_config_path(base_path)

    if not check_file_exists(config_path):
        log_config(f"{CONFIG_FILE_NAME} 없음, 기본 설정 사용")
        return generate_config()

    user_config = parse_yaml_from_file(config_path)
    if user_config is None:
        user_config = {}
    if not isinstance(user_config, dict):
        raise ConfigParseError(
            f"Top-level YAML document must be a mapping, got {type(user_config).__name__}",
            path=config_path,
        )

    config = generate_config(user_config, source=str(config_path))
    log_config(f"Config 로드 완료: {config_path}")
    return config


def read_config(base_path: Optional[Path] = None) -> Dict[str, Any]:
    """load_config 결과를 평탄한 딕셔너리로 반환"""
    return load_config(base_path).to_dict()
