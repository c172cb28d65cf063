from urlshortener.dao.file.snapshot import StoreSnapshot, MalformedSnapshotError
from urlshortener.dao.file.short_url_file_dao import ShortURLFileDAO


__all__ = [
    'StoreSnapshot',
    'MalformedSnapshotError',
    'ShortURLFileDAO',
]
