"""
Template Engine for mantra CLI
Jinja2 기반 `${...}` 플레이스홀더 템플릿 렌더링

템플릿 문법:
    - `${ expr }`: 변수 치환 (Jinja2 표현식, 필터 사용 가능)
    - `<% ... %>`: 제어문 (`<% if storybook %>...<% endif %>`)
    - `<%# ... %>`: 주석
    - `<%= expr %>`: `${ expr }`와 같은 변수 치환

`${`, `<%`가 없는 템플릿은 평가하지 않고 원문 그대로 반환합니다.
"""

import re
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
    UndefinedError,
)

from mantra.settings.config import MantraConfig
from mantra.utils.core.errors import TemplateEvaluationError
from mantra.utils.core.logger import log_template, logger

TemplateSource = Union[bytes, str]
TemplateVariables = Union[Mapping[str, Any], MantraConfig]

_TEMPLATE_MARKERS = ("${", "<%")
_INTERPOLATE_TAG = re.compile(r"<%=\s*(.*?)\s*%>", re.DOTALL)


class TemplateEngine:
    """`${...}` 문법을 사용하는 Jinja2 렌더링 엔진.

    스캐폴딩 템플릿 파일을 읽어 변수를 치환합니다. 정의되지 않은 변수를
    참조하면 빈 문자열로 대체하지 않고 TemplateEvaluationError를 발생시킵니다.
    """

    def __init__(self, template_dir: Optional[Path] = None):
        """템플릿 엔진 초기화.

        Args:
            template_dir: 이름으로 템플릿을 찾을 디렉토리 (없으면 경로/문자열만 렌더링)

        Raises:
            FileNotFoundError: 템플릿 디렉토리가 존재하지 않을 경우
        """
        if template_dir is not None and not template_dir.exists():
            raise FileNotFoundError(f"Template directory not found: {template_dir}")

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)) if template_dir is not None else None,
            variable_start_string="${",
            variable_end_string="}",
            block_start_string="<%",
            block_end_string="%>",
            comment_start_string="<%#",
            comment_end_string="%>",
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render(
        self,
        template_source: TemplateSource,
        variables: Optional[TemplateVariables] = None,
        template_name: Optional[str] = None,
    ) -> str:
        """템플릿 원문을 렌더링합니다.

        Args:
            template_source: 템플릿 원문 (bytes는 UTF-8로 디코딩)
            variables: 치환 변수. None이면 원문을 그대로 반환
            template_name: 오류 메시지에 표시할 템플릿 이름

        Returns:
            렌더링된 문자열

        Raises:
            TemplateEvaluationError: 정의되지 않은 변수 참조 또는 템플릿 문법 오류
        """
        if isinstance(template_source, bytes):
            template_source = template_source.decode("utf-8")

        if variables is None:
            return template_source

        # Jinja2는 줄바꿈을 하나로 통일하므로 평가할 것이 없으면 원문 유지
        if not any(marker in template_source for marker in _TEMPLATE_MARKERS):
            return template_source

        template_source = _INTERPOLATE_TAG.sub(
            lambda match: "${ " + match.group(1) + " }", template_source
        )
        context = _to_context(variables)

        # CRLF 템플릿은 줄바꿈을 그대로 유지 (섞인 경우 CRLF로 통일)
        env = self.env
        if "\r\n" in template_source:
            env = env.overlay(newline_sequence="\r\n")

        try:
            template = env.from_string(template_source)
            rendered = template.render(context)
        except UndefinedError as e:
            raise TemplateEvaluationError(
                f"Undefined template variable: {e.message}", template=template_name, original_error=e
            ) from e
        except TemplateError as e:
            raise TemplateEvaluationError(
                f"Template evaluation failed: {e.message}", template=template_name, original_error=e
            ) from e

        log_template(f"렌더링 완료: {template_name or '<string>'} ({len(context)} variables)")
        return rendered

    def get_file_content(
        self, template_path: Union[str, Path], variables: Optional[TemplateVariables] = None
    ) -> str:
        """템플릿 파일을 읽고 필요하면 변수를 치환합니다.

        Args:
            template_path: 템플릿 파일 경로
            variables: 치환 변수. None이면 파일 내용을 그대로 반환

        Raises:
            FileNotFoundError: 템플릿 파일이 없을 경우
            TemplateEvaluationError: 템플릿 평가 실패
        """
        template_content = Path(template_path).read_bytes()
        return self.render(template_content, variables, template_name=str(template_path))

    def render_template(
        self, template_name: str, variables: Optional[TemplateVariables] = None
    ) -> str:
        """template_dir 기준 상대 경로로 템플릿을 찾아 렌더링합니다.

        Raises:
            FileNotFoundError: template_dir 없이 생성된 엔진
            TemplateNotFound: 템플릿 파일을 찾을 수 없을 경우
        """
        if self.template_dir is None:
            raise FileNotFoundError("TemplateEngine was created without a template directory")

        template_path = self.template_dir / template_name
        if not template_path.is_file():
            logger.error(f"Template을 찾을 수 없습니다: {template_name}")
            raise TemplateNotFound(template_name)

        return self.get_file_content(template_path, variables)

    def list_templates(self, pattern: Optional[str] = None) -> list[str]:
        """사용 가능한 템플릿 파일 목록 반환.

        Args:
            pattern: 파일 패턴 (예: "*.tt", "client/*.tt")
        """
        if self.template_dir is None:
            return []

        if pattern:
            template_paths = self.template_dir.glob(pattern)
        else:
            template_paths = self.template_dir.rglob("*")

        return sorted(
            str(path.relative_to(self.template_dir)) for path in template_paths if path.is_file()
        )


def _to_context(variables: TemplateVariables) -> dict:
    if isinstance(variables, MantraConfig):
        return variables.to_dict()
    return dict(variables)


_default_engine: Optional[TemplateEngine] = None


def _get_default_engine() -> TemplateEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = TemplateEngine()
    return _default_engine


def render(template_source: TemplateSource, variables: Optional[TemplateVariables] = None) -> str:
    """기본 엔진으로 템플릿 원문을 렌더링"""
    return _get_default_engine().render(template_source, variables)


def get_file_content(
    template_path: Union[str, Path], variables: Optional[TemplateVariables] = None
) -> str:
    """기본 엔진으로 템플릿 파일을 읽고 렌더링"""
    return _get_default_engine().get_file_content(template_path, variables)
