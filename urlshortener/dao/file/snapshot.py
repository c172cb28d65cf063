"""On-disk representation of a File Store

Layout:
    {"version": "v1", "items": {"<shortcode>": "<target url>", ...}}

The whole snapshot is the file content. It is rewritten in full on every
mutation. `version` is preserved on rewrite but never branched on.
"""

import json
from dataclasses import dataclass, field

from urlshortener.constants import SNAPSHOT_VERSION


__all__ = ['StoreSnapshot', 'MalformedSnapshotError']


class MalformedSnapshotError(ValueError):
    """Raised when a snapshot parses as JSON but does not have the expected layout."""

    pass


@dataclass
class StoreSnapshot:
    """Full state of a File Store at one point in time.

    Attributes:
        version (str):
            Format tag, 'v1' for every snapshot written by this package.
        items (dict[str, str]):
            Shortcode to target URL mapping.

    Example:
        >>> snapshot = StoreSnapshot.loads('{"version": "v1", "items": {"abc1234567": "https://example.com"}}')
        >>> snapshot.items['abc1234567']
        'https://example.com'
        >>> snapshot.dumps()
        '{"version": "v1", "items": {"abc1234567": "https://example.com"}}'
    """

    version: str = SNAPSHOT_VERSION
    items: dict[str, str] = field(default_factory=dict)

    @classmethod
    def loads(cls, raw: str | bytes) -> 'StoreSnapshot':
        """Parse a serialized snapshot.

        Raises:
            json.JSONDecodeError:
                If `raw` is not valid JSON.
            MalformedSnapshotError:
                If the JSON document is not a snapshot.
        """
        document = json.loads(raw)
        if not isinstance(document, dict):
            raise MalformedSnapshotError(f'Snapshot must be a JSON object (given type: {type(document).__name__}).')

        version = document.get('version', SNAPSHOT_VERSION)
        if not isinstance(version, str):
            raise MalformedSnapshotError(f"Snapshot 'version' must be a string (given type: {type(version).__name__}).")

        items = document.get('items')
        if not isinstance(items, dict):
            raise MalformedSnapshotError("Snapshot 'items' must be a JSON object.")
        if not all(isinstance(value, str) for value in items.values()):
            raise MalformedSnapshotError("Snapshot 'items' must map shortcodes to strings.")

        return cls(version=version, items=dict(items))

    def dumps(self) -> str:
        return json.dumps({'version': self.version, 'items': self.items})
