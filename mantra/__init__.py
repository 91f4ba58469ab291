"""mantra-cli top-level package.

스캐폴딩 CLI를 위한 설정 로드, 템플릿 기반 파일 생성, 마커 기반 파일 편집,
외부 명령 실행 유틸리티를 제공합니다.
"""

__all__ = [
    "cli",
    "settings",
    "utils",
]
