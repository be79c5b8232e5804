from __future__ import annotations

import shutil
import subprocess
from typing import Sequence, Tuple

def which(binary: str) -> str | None:
    return shutil.which(binary)

def run_cmd(cmd: Sequence[str], timeout: float = 2.5) -> Tuple[int, str, str]:
    """
    Run a command without shell, return (returncode, stdout, stderr).
    Never raises; on error returns nonzero code and empty out/err.
    """
    try:
        cp = subprocess.run(
            list(cmd),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            timeout=timeout,
            check=False,
            text=True,
        )
        return cp.returncode, cp.stdout or "", cp.stderr or ""
    except (OSError, subprocess.SubprocessError):
        return 1, "", ""
