import json
import functools
import threading
from pathlib import Path
from typing import TypeVar, Any
from collections.abc import Callable

from urlshortener.dao.exceptions import DataStoreError
from urlshortener.dao.file.snapshot import MalformedSnapshotError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])

# One writer lock per backing file, shared by every DAO instance in the process
_writer_locks: dict[Path, threading.Lock] = {}
_writer_locks_guard = threading.Lock()


def writer_lock(path: Path) -> threading.Lock:
    """Return the process-wide writer lock for a store file

    Args:
        path (Path):
            Path of the store file. Relative paths and symlinks are resolved,
            so every spelling of the same file gets the same lock.

    Returns:
        threading.Lock:
            Lock serializing all read-modify-write cycles on that file.
    """
    key = Path(path).resolve()
    with _writer_locks_guard:
        return _writer_locks.setdefault(key, threading.Lock())


def handle_file_error(method: F) -> F:
    """Wrap file-backed DAO methods to report storage failures as DataStoreError

    Args:
        method (Callable[..., Any]):
            DAO method reading or writing `self.path`, which may raise OSError,
            json.JSONDecodeError or MalformedSnapshotError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError instead.

    Example:
        >>> @handle_file_error
        ... def get(self, shortcode):
        ...     return self._read().items[shortcode]
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (json.JSONDecodeError, MalformedSnapshotError, UnicodeDecodeError) as e:
            raise DataStoreError(f'Corrupt store file at {self.path}.') from e
        except OSError as e:
            raise DataStoreError(f"Can't access store file at {self.path}.") from e

    return wrapper
