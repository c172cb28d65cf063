"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a shortcode is not present in the data store.

    ShortURLAlreadyExistsError:
        Raised when attempting to add a shortcode that is already present.

    DataStoreError:
        Raised when the backing medium cannot be read or written, or holds
        corrupt data (e.g. I/O failure, malformed JSON snapshot, Redis outage).

Example:
    >>> from urlshortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code 'abc1234567' not found.")
    Traceback (most recent call last):
        ...
    urlshortener.dao.exceptions.ShortURLNotFoundError: Short URL with code 'abc1234567' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a shortcode is not found in the data store."""

    pass


class ShortURLAlreadyExistsError(DAOError):
    """Exception raised when attempting to add a shortcode that already exists in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. unreadable or unwritable files, corrupt snapshots, connection issues, etc.
    """

    pass
