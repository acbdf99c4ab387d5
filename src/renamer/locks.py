from __future__ import annotations

import os
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Mapping

SESSION_LOCK_ENV = "RENAMER_SESSION_LOCK"


def _truthy(v: str) -> bool:
    s = v.strip().lower()
    return s in ("1", "true", "yes", "y", "on")


def _falsey(v: str) -> bool:
    s = v.strip().lower()
    return s in ("0", "false", "no", "n", "off")


def rename_session_lock_path(tree_path: Path) -> Path:
    """
    Per-document lock path: a hidden sibling of the tree file.

    ``models/app.json`` -> ``models/.app.json.lock``
    """
    p = Path(tree_path)
    return p.with_name(f".{p.name}.lock")


@contextmanager
def file_lock(lock_path: Path) -> Iterator[None]:
    """
    Cross-process exclusive advisory lock.

    POSIX: fcntl.flock
    Windows: msvcrt.locking (1-byte range lock)

    Lock lifetime is tied to the open FD; crashes release locks.
    """
    lock_path = Path(lock_path)
    lock_path.parent.mkdir(parents=True, exist_ok=True)

    with lock_path.open("a+b") as f:
        # Windows range locks need at least 1 byte.
        f.seek(0, os.SEEK_END)
        if f.tell() == 0:
            f.write(b"\0")
            f.flush()

        if os.name == "posix":
            import fcntl

            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        else:
            import msvcrt

            f.seek(0)
            msvcrt.locking(f.fileno(), msvcrt.LK_LOCK, 1)
            try:
                yield
            finally:
                f.seek(0)
                msvcrt.locking(f.fileno(), msvcrt.LK_UNLCK, 1)


@contextmanager
def rename_session_lock(tree_path: Path) -> Iterator[None]:
    """Hold the lock for one in-place rewrite of ``tree_path``."""
    with file_lock(rename_session_lock_path(tree_path)):
        yield


def rename_session_lock_enabled(
    *, cli_no_session_lock: bool = False, env: Mapping[str, str] | None = None
) -> bool:
    """
    Default: ON.

    Controls:
      - CLI: --no-session-lock disables
      - Env: RENAMER_SESSION_LOCK overrides (true/false)

    Unknown env values => default ON.
    """
    if cli_no_session_lock:
        return False

    v = (os.environ if env is None else env).get(SESSION_LOCK_ENV)
    if v is None:
        return True

    if _truthy(v):
        return True
    if _falsey(v):
        return False

    return True
