"""Host platform detection."""

import sys


def is_windows() -> bool:
    """현재 호스트가 Windows 계열 OS인지 확인"""
    return sys.platform.startswith("win")


def get_line_break() -> str:
    """플랫폼별 줄바꿈 문자 반환"""
    if is_windows():
        return "\r\n"
    return "\n"
