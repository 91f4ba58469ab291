"""mantra_cli 설정 Pydantic 스키마 및 기본값/사용자 설정 병합"""

from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, ValidationError

from mantra.utils.core.errors import ConfigValidationError

# 컴파일 타임 기본 설정 (읽기 전용, 병합 시 항상 복사 후 사용)
DEFAULT_CONFIG: Mapping[str, Any] = MappingProxyType(
    {
        "tabSize": 2,
        "storybook": False,
    }
)


class MantraConfig(BaseModel):
    """
    유효 설정 레코드.

    인식되는 키(tabSize, storybook)는 타입이 검증되고,
    그 외 키는 검증 없이 model_extra에 그대로 보존됩니다.
    YAML이 허용하는 문자열이 아닌 키(`1: foo`)는 별도로 보관됩니다.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    tab_size: int = Field(
        default=DEFAULT_CONFIG["tabSize"], alias="tabSize", strict=True, description="들여쓰기 폭"
    )
    storybook: bool = Field(
        default=DEFAULT_CONFIG["storybook"], strict=True, description="Storybook 파일 생성 여부"
    )
    _non_string_extras: Dict[Any, Any] = PrivateAttr(default_factory=dict)

    @property
    def extras(self) -> Dict[Any, Any]:
        """인식되지 않은 사용자 키"""
        extras = dict(self.model_extra or {})
        extras.update(self._non_string_extras)
        return extras

    def to_dict(self) -> Dict[Any, Any]:
        """원본 키 이름(tabSize 등)을 사용하는 평탄한 딕셔너리로 변환"""
        data = self.model_dump(by_alias=True)
        data.update(self._non_string_extras)
        return data


def merge_config(
    overrides: Optional[Mapping[str, Any]] = None,
    defaults: Mapping[str, Any] = DEFAULT_CONFIG,
) -> Dict[str, Any]:
    """
    기본 설정 위에 사용자 설정을 덮어씁니다 (최상위 키 단위 얕은 병합).

    Args:
        overrides: 기본값을 덮어쓸 키-값 쌍
        defaults: 기본 설정 (변경되지 않음)

    Returns:
        새로 생성된 병합 설정 딕셔너리
    """
    config = dict(defaults)
    if overrides:
        config.update(overrides)
    return config


def generate_config(
    overrides: Optional[Mapping[str, Any]] = None, source: Optional[str] = None
) -> MantraConfig:
    """
    기본 설정과 사용자 설정을 병합하여 검증된 설정 레코드를 생성합니다.

    Args:
        overrides: 기본값을 덮어쓸 키-값 쌍
        source: 설정 출처 (오류 메시지용 파일 경로)

    Returns:
        병합된 MantraConfig

    Raises:
        ConfigValidationError: tabSize, storybook 값의 타입이 잘못된 경우
    """
    merged = merge_config(overrides)
    # pydantic은 문자열 키만 허용하므로 나머지는 검증 없이 따로 보관
    string_keyed = {key: value for key, value in merged.items() if isinstance(key, str)}
    try:
        config = MantraConfig.model_validate(string_keyed)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigValidationError(
            f"Invalid configuration value ({problems})", path=source, original_error=e
        ) from e

    config._non_string_extras.update(
        (key, value) for key, value in merged.items() if not isinstance(key, str)
    )
    return config


def get_custom_config(overrides: Optional[Mapping[str, Any]] = None) -> str:
    """
    병합된 설정을 YAML 문서로 직렬화합니다.
    새 프로젝트의 mantra_cli.yaml 생성에 사용됩니다.

    Args:
        overrides: 기본값을 덮어쓸 키-값 쌍

    Returns:
        YAML 문자열
    """
    config = generate_config(overrides)
    return yaml.safe_dump(config.to_dict(), default_flow_style=False, sort_keys=False)
