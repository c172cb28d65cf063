"""Data Access Object (DAO) implementation for managing shortened URLs in a JSON file

This module provides a file-based implementation of ShortURLBaseDAO. All mappings
live in a single JSON snapshot which survives process restarts.

Responsibilities:
    - Create the backing file with an empty snapshot on first use;
    - Add, remove and resolve shortcodes via full read-modify-write cycles;
    - Serialize every mutation on a file through one writer lock;
    - Replace the file atomically so readers only ever see committed snapshots;
    - Report I/O failures and corrupt snapshots as DataStoreError.

Classes:
    ShortURLFileDAO:
        DAO for storing and retrieving shortcode mappings in a JSON file.

Example:
    >>> from urlshortener.dao.file import ShortURLFileDAO

    >>> dao = ShortURLFileDAO('testing.json')
    >>> dao.add('abc1234567', 'https://example.com')
    <ShortURLFileDAO>

    >>> # a fresh instance sees the same data
    >>> ShortURLFileDAO('testing.json').get('abc1234567')
    'https://example.com'
"""

import os
import logging
import tempfile
import contextlib
from pathlib import Path

from beartype import beartype

from urlshortener.dao.base import ShortURLBaseDAO
from urlshortener.dao.file.snapshot import StoreSnapshot
from urlshortener.dao.file.helpers import handle_file_error, writer_lock
from urlshortener.dao.exceptions import DataStoreError, ShortURLAlreadyExistsError, ShortURLNotFoundError


logger = logging.getLogger(__name__)

FILE_MODE = 0o644


class ShortURLFileDAO(ShortURLBaseDAO):
    """JSON file-based Data Access Object (DAO) for short URL mappings

    Attributes:
        path (Path):
            Location of the JSON snapshot backing this store.

    Methods:
        add(shortcode: str, target: str, **kwargs) -> ShortURLFileDAO:
            Read the snapshot, reject a present shortcode, insert and rewrite the file.
            Raises ShortURLAlreadyExistsError when the shortcode is already mapped.
            Raises DataStoreError on I/O failure or corrupt snapshot.

        remove(shortcode: str, **kwargs) -> ShortURLFileDAO:
            Read the snapshot, delete the shortcode and rewrite the file.
            Raises ShortURLNotFoundError when the shortcode is not mapped.
            Raises DataStoreError on I/O failure or corrupt snapshot.

        get(shortcode: str, **kwargs) -> str:
            Read the snapshot and resolve the shortcode. Never writes.
            Raises ShortURLNotFoundError when the shortcode is not mapped.
            Raises DataStoreError on I/O failure or corrupt snapshot.

        snapshot() -> StoreSnapshot:
            Return the last committed snapshot.

    NOTE:
        The writer lock is per process. Several processes sharing one store
        file can still lose updates.
    """

    def __init__(self, path: str | os.PathLike):
        """Initialize a file-based DAO, creating the store file if missing

        Args:
            path (str | os.PathLike):
                Location of the JSON snapshot.

        Raises:
            DataStoreError:
                If the store file does not exist and cannot be created.
        """
        self.path = Path(path)
        self._lock = writer_lock(self.path)

        with self._lock:
            if self.path.exists():
                return
            try:
                self._write(StoreSnapshot())
            except OSError as e:
                raise DataStoreError(f'Unable to create store file at {self.path}.') from e

        logger.info('Created empty store file.', extra={'path': str(self.path)})

    @handle_file_error
    @beartype
    def add(self, shortcode: str, target: str, **kwargs) -> 'ShortURLFileDAO':
        with self._lock:
            snapshot = self._read()
            if shortcode in snapshot.items:
                raise ShortURLAlreadyExistsError(f"Short URL with code '{shortcode}' already exists.")

            snapshot.items[shortcode] = target
            self._write(snapshot)

        logger.debug('Added short URL mapping to store file.', extra={'shortcode': shortcode, 'path': str(self.path)})
        return self

    @handle_file_error
    @beartype
    def remove(self, shortcode: str, **kwargs) -> 'ShortURLFileDAO':
        with self._lock:
            snapshot = self._read()
            if shortcode not in snapshot.items:
                raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

            del snapshot.items[shortcode]
            self._write(snapshot)

        logger.debug('Removed short URL mapping from store file.', extra={'shortcode': shortcode, 'path': str(self.path)})
        return self

    @handle_file_error
    @beartype
    def get(self, shortcode: str, **kwargs) -> str:
        snapshot = self._read()
        try:
            return snapshot.items[shortcode]
        except KeyError:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.") from None

    @handle_file_error
    def snapshot(self) -> StoreSnapshot:
        return self._read()

    def _read(self) -> StoreSnapshot:
        return StoreSnapshot.loads(self.path.read_bytes())

    def _write(self, snapshot: StoreSnapshot) -> None:
        """Atomically replace the store file with `snapshot`

        The snapshot goes to a temporary sibling file first, which is fsynced
        and then renamed over the store file. On failure the temporary file is
        removed and the store file keeps its previous content.
        """
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(snapshot.dumps())
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, FILE_MODE)
            os.replace(tmp_path, self.path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_path)
            raise
