"""
External command execution.

모든 명령은 동기적으로 실행되며, 0이 아닌 종료 코드는
ExternalCommandError로 변환되어 호출자에게 전파됩니다.
"""

import shlex
import subprocess
from pathlib import Path
from typing import Any, Sequence, Union

from mantra.utils.core.errors import ExternalCommandError
from mantra.utils.core.logger import log_invoke, log_run
from mantra.utils.core.platform import is_windows


def execute_command(cmd: str, **options: Any) -> subprocess.CompletedProcess:
    """
    셸 명령을 실행하고 실행 로그를 남깁니다.

    Args:
        cmd: 실행할 셸 명령 문자열
        **options: subprocess.run에 전달할 옵션 (cwd, env, capture_output 등)

    Returns:
        완료된 프로세스 정보

    Raises:
        ExternalCommandError: 명령이 0이 아닌 종료 코드로 끝났을 때
    """
    log_run(cmd)

    try:
        return subprocess.run(cmd, shell=True, check=True, **options)
    except subprocess.CalledProcessError as e:
        raise ExternalCommandError(
            cmd,
            e.returncode,
            output=_as_text(e.output),
            stderr=_as_text(e.stderr),
            original_error=e,
        ) from e


def run_script_file(
    path_to_script: Union[str, Path],
    args: Sequence[str] = (),
    **options: Any,
) -> subprocess.CompletedProcess:
    """
    스크립트 파일을 실행합니다. Windows가 아니면 bash로 호출합니다.

    Args:
        path_to_script: 스크립트 파일 경로
        args: 스크립트에 전달할 인자 목록
        **options: subprocess.run에 전달할 옵션

    Returns:
        완료된 프로세스 정보

    Raises:
        ExternalCommandError: 스크립트가 0이 아닌 종료 코드로 끝났을 때
    """
    script_name = Path(path_to_script).name.split(".", 1)[0]
    log_invoke(script_name)

    parts = [str(path_to_script), *(str(arg) for arg in args)]

    # 공백이 포함된 경로/인자는 셸 규칙에 맞게 인용
    if is_windows():
        cmd = subprocess.list2cmdline(parts)
    else:
        cmd = shlex.join(["bash", *parts])

    # invoke 로그로 대체하므로 run 로그는 남기지 않음
    try:
        return subprocess.run(cmd, shell=True, check=True, **options)
    except subprocess.CalledProcessError as e:
        raise ExternalCommandError(
            cmd,
            e.returncode,
            output=_as_text(e.output),
            stderr=_as_text(e.stderr),
            original_error=e,
        ) from e


def _as_text(value: Any) -> Any:
    """bytes 출력은 문자열로 변환"""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value
