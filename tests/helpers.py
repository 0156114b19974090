from __future__ import annotations

import os
from pathlib import Path


def set_mtime(path: Path, timestamp: float) -> None:
    os.utime(path, (timestamp, timestamp))


def write_config(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def set_mtime_ns(path: Path, timestamp_ns: int) -> None:
    os.utime(path, ns=(timestamp_ns, timestamp_ns))
