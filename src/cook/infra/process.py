from __future__ import annotations

import signal
import subprocess
import threading
from typing import Mapping, Sequence


def spawn_process(
    cmd: Sequence[str],
    *,
    env: Mapping[str, str] | None = None,
) -> int:
    proc = subprocess.Popen(
        list(cmd),
        env=dict(env) if env is not None else None,
    )
    if threading.current_thread() is not threading.main_thread():
        return proc.wait()

    # Ctrl-C reaches the whole process group; the child decides what it means.
    previous = signal.signal(signal.SIGINT, signal.SIG_IGN)
    try:
        return proc.wait()
    finally:
        signal.signal(signal.SIGINT, previous if previous is not None else signal.SIG_DFL)
