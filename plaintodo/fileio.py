"""File access utilities for plaintodo.

Every operation reports failure by logging one ``Failed to ...`` record and
returning ``False`` (or ``None`` for reads). Callers treat failures as
non-fatal and keep going.
"""

from __future__ import annotations

import fcntl
import logging
import os
import shutil
import tempfile
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)


def file_size(path: Path) -> int:
    """Size of a file in bytes, 0 if missing."""
    if not path.exists():
        return 0
    return path.stat().st_size


def create_file(path: Path) -> bool:
    """Create an empty file (and its parent directories) unless it exists."""
    if path.exists():
        return True
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error("Failed to create directories: %s : %s", path.parent, _reason(e))
        return False
    try:
        path.touch()
    except OSError as e:
        logger.error("Failed to create file: %s in: %s : %s", path.name, path.parent, _reason(e))
        return False
    return True


def delete_file(path: Path) -> bool:
    if not path.exists():
        logger.error("Failed to delete file: %s : No such file or directory", path)
        return False
    try:
        path.unlink()
    except OSError as e:
        logger.error("Failed to delete file: %s : %s", path, _reason(e))
        return False
    return True


def rename_file(path: Path, new_name: str) -> Path | None:
    """Rename a file within its directory. Returns the new path."""
    if not path.exists():
        logger.error("Failed to rename file: %s : No such file or directory", path)
        return None
    target = path.with_name(new_name)
    try:
        path.rename(target)
    except OSError as e:
        logger.error("Failed to rename file: %s : %s", path, _reason(e))
        return None
    return target


def _destination(src: Path, dst: Path) -> Path:
    # A destination with a suffix names a file; its directory is used.
    directory = dst.parent if dst.suffix else dst
    return directory / src.name


def copy_file(src: Path, dst: Path) -> Path | None:
    """Copy *src* into the directory *dst*, replacing any existing copy."""
    if not src.exists():
        logger.error("Failed to copy file: %s : No such file or directory", src)
        return None
    target = _destination(src, dst)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, target)
    except OSError as e:
        logger.error("Failed to copy file: %s : %s", src, _reason(e))
        return None
    return target


def move_file(src: Path, dst: Path) -> Path | None:
    """Move *src* into the directory *dst*, replacing any existing file there."""
    if not src.exists():
        logger.error("Failed to move file: %s : No such file or directory", src)
        return None
    target = _destination(src, dst)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        os.replace(src, target)
    except OSError as e:
        logger.error("Failed to move file: %s : %s", src, _reason(e))
        return None
    return target


def _atomic_write(path: Path, content: str | bytes, suffix: str = ".tmp") -> None:
    """Atomic write with file locking: temp file + flock + rename."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp_", suffix=suffix)
    binary = isinstance(content, bytes)
    try:
        with os.fdopen(fd, "wb" if binary else "w", encoding=None if binary else "utf-8") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_EX)
            try:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        os.rename(temp_path, path)
    except BaseException:
        if os.path.exists(temp_path):
            os.unlink(temp_path)
        raise


def write_file(path: Path, content: str, append: bool = False) -> bool:
    """Write text to *path*.

    With ``append`` the content is added to the end of the file; otherwise the
    file is replaced atomically.
    """
    if not create_file(path):
        return False
    try:
        if append:
            with path.open("a", encoding="utf-8") as f:
                f.write(content)
        else:
            _atomic_write(path, content, suffix=".txt")
    except OSError as e:
        logger.error("Failed to write to file: %s : %s", path, _reason(e))
        return False
    return True


def read_text(path: Path) -> str | None:
    if not path.exists():
        logger.error("Failed to open: %s : No such file or directory", path)
        return None
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Failed to read: %s : %s", path, _reason(e))
        return None


def read_lines(path: Path) -> list[str] | None:
    """Read every line of a text file without line terminators."""
    text = read_text(path)
    if text is None:
        return None
    # Only "\n" ends a line; form feeds and Unicode separators stay in the text.
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def write_binary(path: Path, data: bytes) -> bool:
    if not create_file(path):
        return False
    try:
        _atomic_write(path, data, suffix=".bin")
    except OSError as e:
        logger.error("Failed to write to file: %s : %s", path, _reason(e))
        return False
    return True


def read_binary(path: Path) -> bytes | None:
    if not path.exists():
        logger.error("Failed to open: %s : No such file or directory", path)
        return None
    try:
        return path.read_bytes()
    except OSError as e:
        logger.error("Failed to read: %s : %s", path, _reason(e))
        return None


def create_backup(
    path: Path,
    backup_dir: Path | None = None,
    keep_existing: bool = False,
) -> Path | None:
    """Copy *path* to ``<name>.bak`` next to it or inside *backup_dir*.

    With ``keep_existing`` a timestamp is inserted
    (``<name>.<YYYYMMDDHHMMSS>.bak``) so older backups are not overwritten.
    """
    data = read_binary(path)
    if data is None:
        return None
    directory = backup_dir if backup_dir is not None else path.parent
    name = path.name
    if keep_existing:
        name += "." + datetime.now().strftime("%Y%m%d%H%M%S")
    target = directory / f"{name}.bak"
    if not write_binary(target, data):
        return None
    return target


def compare_files(first: Path, second: Path) -> bool:
    """True if both files exist and hold the same bytes."""
    a = read_binary(first)
    b = read_binary(second)
    if a is None or b is None:
        return False
    return a == b
