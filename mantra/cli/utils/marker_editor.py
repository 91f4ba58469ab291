"""
Marker Editor Utility
기존 파일에서 앵커(문자열 또는 정규식)를 찾아 텍스트를 삽입하거나 제거합니다.

각 편집은 "전체 읽기 -> 수정 -> 전체 덮어쓰기"로 수행되며 원자적이지 않습니다.
같은 파일을 동시에 편집하지 않는 것은 호출자의 책임입니다.
"""

import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

from mantra.utils.core.errors import AnchorNotFoundError
from mantra.utils.core.logger import log_edit
from mantra.utils.core.platform import get_line_break

PathLike = Union[str, Path]
Span = Tuple[int, int]


@dataclass(frozen=True)
class EditOptions:
    """
    마커 편집 옵션.

    Attributes:
        before: 이 앵커가 있는 줄 앞에 삽입 (remove에서는 앵커 이전 범위로 제한)
        after: 이 앵커가 있는 줄 뒤에 삽입 (remove에서는 앵커 이후 범위로 제한)
        regex: 앵커와 제거 텍스트를 정규식(re.MULTILINE)으로 해석
        last: 마지막 일치 항목 사용
        occurrence: 사용할 일치 항목 순번 (1부터 시작)
        as_new_line: 삽입 텍스트 끝에 줄바꿈 추가
        inline: 줄 경계 대신 일치 위치 바로 앞/뒤에 삽입
        multi: remove 시 범위 내 모든 일치 항목 제거
        fallbacks: 앵커를 찾지 못했을 때 순서대로 시도할 대체 옵션
    """

    before: Optional[str] = None
    after: Optional[str] = None
    regex: bool = False
    last: bool = False
    occurrence: int = 1
    as_new_line: bool = False
    inline: bool = False
    multi: bool = False
    fallbacks: Tuple["EditOptions", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.before is not None and self.after is not None:
            raise ValueError("Only one of 'before' and 'after' may be given")
        if self.occurrence < 1:
            raise ValueError(f"occurrence must be >= 1, got {self.occurrence}")

    @property
    def anchor(self) -> Optional[str]:
        return self.after if self.after is not None else self.before

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> "EditOptions":
        """딕셔너리 옵션 변환. 대체 옵션은 'fallbacks' 또는 'or' 키로 전달합니다."""
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in options.items():
            if key == "or":
                key = "fallbacks"
            if key not in known:
                raise ValueError(f"Unknown edit option: {key}")
            values[key] = value

        if "fallbacks" in values:
            values["fallbacks"] = tuple(
                fb if isinstance(fb, EditOptions) else cls.from_dict(fb)
                for fb in values["fallbacks"]
            )
        return cls(**values)


EditOptionsLike = Union[EditOptions, Mapping[str, Any], None]


def _coerce_options(options: EditOptionsLike) -> EditOptions:
    if options is None:
        return EditOptions()
    if isinstance(options, EditOptions):
        return options
    return EditOptions.from_dict(options)


def _detect_line_break(content: str) -> str:
    if "\r\n" in content:
        return "\r\n"
    if "\n" in content:
        return "\n"
    return get_line_break()


def _find_matches(content: str, pattern: str, regex: bool) -> List[Span]:
    """겹치지 않는 모든 일치 위치"""
    if not pattern:
        raise ValueError("Anchor pattern must not be empty")

    if regex:
        matches = re.finditer(pattern, content, re.MULTILINE)
        return [m.span() for m in matches if m.end() > m.start()]

    spans = []
    index = content.find(pattern)
    while index != -1:
        spans.append((index, index + len(pattern)))
        index = content.find(pattern, index + len(pattern))
    return spans


def _select(spans: List[Span], options: EditOptions) -> Optional[Span]:
    if not spans:
        return None
    if options.last:
        return spans[-1]
    if options.occurrence > len(spans):
        return None
    return spans[options.occurrence - 1]


def _insertion_point(content: str, options: EditOptions) -> Optional[Tuple[int, str]]:
    """삽입 위치와 삽입 전에 붙일 접두 문자열. 앵커가 없으면 None."""
    span = _select(_find_matches(content, options.anchor, options.regex), options)
    if span is None:
        return None

    start, end = span
    if options.inline:
        return (end if options.after is not None else start), ""

    if options.before is not None:
        return content.rfind("\n", 0, start) + 1, ""

    # 앵커 자체가 줄바꿈으로 끝나면 이미 다음 줄의 시작
    if content[end - 1] == "\n":
        return end, ""
    line_end = content.find("\n", end)
    if line_end == -1:
        return len(content), _detect_line_break(content)
    return line_end + 1, ""


def insert_text(content: str, text: str, options: EditOptionsLike) -> str:
    """
    문자열 content의 앵커 위치에 text를 삽입한 결과를 반환합니다.

    Args:
        content: 원본 문자열
        text: 삽입할 텍스트
        options: before/after 앵커를 포함한 편집 옵션

    Returns:
        수정된 문자열

    Raises:
        ValueError: before/after 앵커가 모두 없을 때
        AnchorNotFoundError: 앵커 및 모든 대체 앵커를 찾지 못했을 때
    """
    options = _coerce_options(options)
    candidates = (options, *options.fallbacks)
    for candidate in candidates:
        if candidate.anchor is None:
            raise ValueError("insert requires a 'before' or 'after' anchor")

    for candidate in candidates:
        located = _insertion_point(content, candidate)
        if located is None:
            continue

        position, prefix = located
        payload = text
        if candidate.as_new_line and not payload.endswith("\n"):
            payload += _detect_line_break(content)
        return content[:position] + prefix + payload + content[position:]

    raise AnchorNotFoundError(options.anchor)


def remove_text(content: str, text: str, options: EditOptionsLike = None) -> str:
    """
    문자열 content에서 text를 제거한 결과를 반환합니다.

    before/after 앵커는 검색 범위를 제한하며 첫 번째 일치 앵커를 기준으로 합니다.
    last/occurrence는 제거할 text의 일치 항목을 선택합니다.

    Raises:
        AnchorNotFoundError: 범위 앵커 또는 제거할 텍스트를 찾지 못했을 때
    """
    options = _coerce_options(options)

    scope_start, scope_end = 0, len(content)
    if options.anchor is not None:
        anchor_spans = _find_matches(content, options.anchor, options.regex)
        if not anchor_spans:
            raise AnchorNotFoundError(options.anchor)
        if options.after is not None:
            scope_start = anchor_spans[0][1]
        else:
            scope_end = anchor_spans[0][0]

    spans = [
        (start + scope_start, end + scope_start)
        for start, end in _find_matches(content[scope_start:scope_end], text, options.regex)
    ]
    if options.multi:
        targets = spans
    else:
        selected = _select(spans, options)
        targets = [selected] if selected is not None else []

    if not targets:
        raise AnchorNotFoundError(text)

    for start, end in reversed(targets):
        content = content[:start] + content[end:]
    return content


def _edit_file(path_to_file: PathLike, edit: Callable[[str], str]) -> None:
    # newline="" 으로 기존 줄바꿈(CRLF 포함)을 그대로 유지
    with open(path_to_file, "r", encoding="utf-8", newline="") as f:
        file_content = f.read()

    try:
        updated_content = edit(file_content)
    except AnchorNotFoundError as e:
        raise AnchorNotFoundError(e.pattern, path_to_file) from e

    with open(path_to_file, "w", encoding="utf-8", newline="") as f:
        f.write(updated_content)


def insert_to_file(path_to_file: PathLike, text: str, options: EditOptionsLike) -> None:
    """
    파일의 앵커 위치에 텍스트를 삽입합니다.

    Args:
        path_to_file: 대상 파일 경로 (절대/상대 경로)
        text: 삽입할 텍스트
        options: 편집 옵션 (EditOptions 또는 딕셔너리)

    Raises:
        AnchorNotFoundError: 앵커를 찾지 못했을 때 (파일은 변경되지 않음)
    """
    _edit_file(path_to_file, lambda content: insert_text(content, text, options))
    log_edit("insert", str(path_to_file))


def remove_from_file(path_to_file: PathLike, text: str, options: EditOptionsLike = None) -> None:
    """
    파일에서 텍스트를 제거합니다.

    Raises:
        AnchorNotFoundError: 제거할 텍스트를 찾지 못했을 때 (파일은 변경되지 않음)
    """
    _edit_file(path_to_file, lambda content: remove_text(content, text, options))
    log_edit("remove", str(path_to_file))
