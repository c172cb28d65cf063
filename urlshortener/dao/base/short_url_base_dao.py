"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of the underlying storage mechanism (in-process dict, JSON file, Redis).

Responsibilities:
    - Provide an interface for adding, removing and resolving shortcodes.
    - Standardize error handling across multiple data store implementations.
    - Enforce a consistent API for use by Lambda functions.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from urlshortener.dao.file import ShortURLFileDAO

        >>> dao = ShortURLFileDAO('testing.json')
        >>> dao.add('a9f2b1c044', 'https://example.com/blog/article-123')
        <ShortURLFileDAO>

        >>> dao.get('a9f2b1c044')
        'https://example.com/blog/article-123'

        >>> dao.remove('a9f2b1c044')
        <ShortURLFileDAO>
"""

from abc import ABC, abstractmethod


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        add(shortcode: str, target: str, **kwargs) -> ShortURLBaseDAO:
            Map a shortcode to a target URL.
            Raises ShortURLAlreadyExistsError if the shortcode is already mapped.
            Raises DataStoreError on read or write failure.

        remove(shortcode: str, **kwargs) -> ShortURLBaseDAO:
            Delete the mapping for a shortcode.
            Raises ShortURLNotFoundError if the shortcode is not mapped.
            Raises DataStoreError on read or write failure.

        get(shortcode: str, **kwargs) -> str:
            Return the target URL mapped to a shortcode.
            Raises ShortURLNotFoundError if the shortcode is not mapped.
            Raises DataStoreError on read failure.

    Subclassing:
        Datastore-specific implementations (e.g., ShortURLMemoryDAO or
        ShortURLFileDAO) must extend this class and implement all
        abstract methods.

    NOTE:
        - An existing mapping is never overwritten. Failed operations leave
          the data store exactly as it was before the call.
    """

    @abstractmethod
    def add(self, shortcode: str, target: str, **kwargs) -> 'ShortURLBaseDAO':
        """Map a shortcode to a target URL.

        Args:
            shortcode (str):
                Unique key of the new mapping.

            target (str):
                URL the shortcode resolves to. May be shared with other shortcodes.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLAlreadyExistsError:
                If the shortcode is already mapped. The existing mapping is kept.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def remove(self, shortcode: str, **kwargs) -> 'ShortURLBaseDAO':
        """Delete the mapping for a shortcode.

        Args:
            shortcode (str):
                Key of the mapping to delete.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortURLBaseDAO: self (for method chaining)

        Raises:
            ShortURLNotFoundError:
                If the shortcode is not mapped.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get(self, shortcode: str, **kwargs) -> str:
        """Retrieve the target URL for a shortcode.

        Args:
            shortcode (str):
                Key of the mapping to resolve.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: The mapped target URL.

        Raises:
            ShortURLNotFoundError:
                If the shortcode is not mapped.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    def __repr__(self) -> str:
        return f'<{type(self).__name__}>'
