"""CLI 인자 파싱 유틸리티"""

from typing import Any, Dict, List, Optional

import typer
import yaml


def parse_assignments(assignments: Optional[List[str]], option_name: str = "--set") -> Dict[str, Any]:
    """
    KEY=VALUE 형식의 인자 목록을 딕셔너리로 변환합니다.
    값은 YAML 스칼라로 해석됩니다 (예: "4" -> 4, "true" -> True).

    Args:
        assignments: KEY=VALUE 문자열 목록
        option_name: 오류 메시지에 표시할 옵션 이름

    Raises:
        typer.BadParameter: 형식이 잘못된 경우
    """
    result: Dict[str, Any] = {}
    for item in assignments or []:
        key, sep, raw_value = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint=option_name)
        try:
            result[key] = yaml.safe_load(raw_value) if raw_value else ""
        except yaml.YAMLError:
            result[key] = raw_value
    return result
