"""Filesystem helpers for atomic writes of records and images."""

from __future__ import annotations

import errno
import os
import shutil
import uuid
from pathlib import Path


def fsync_file(path: Path) -> None:
    try:
        with path.open("rb") as handle:
            os.fsync(handle.fileno())
    except FileNotFoundError:
        return


def fsync_dir(path: Path) -> None:
    if os.name == "nt":
        return
    fd = os.open(str(path), os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def safe_replace(source: Path, destination: Path) -> None:
    try:
        os.replace(source, destination)
        return
    except OSError as exc:
        if exc.errno != errno.EXDEV:
            raise
    shutil.copyfile(source, destination)
    source.unlink(missing_ok=True)


def atomic_write_bytes(destination: Path, payload: bytes) -> None:
    """Write ``payload`` to a sibling temp file, then move it into place."""

    destination.parent.mkdir(parents=True, exist_ok=True)
    temp_path = destination.with_name(f".tmp-{destination.name}-{uuid.uuid4().hex}")
    try:
        temp_path.write_bytes(payload)
        fsync_file(temp_path)
        safe_replace(temp_path, destination)
        fsync_dir(destination.parent)
    finally:
        temp_path.unlink(missing_ok=True)


def atomic_write_text(destination: Path, text: str) -> None:
    atomic_write_bytes(destination, text.encode("utf-8"))
