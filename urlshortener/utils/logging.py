"""JSON logging for the URL shortener lambdas

Each handler package calls `initialize_logging()` on import, so every record
emitted while serving a request is one JSON object on stdout. Fields passed
via `extra` are attached as top-level keys. Handlers tag their outcome with an
`event` key (an ErrorCode or one of SHORTEN_SUCCESS, REDIRECT_SUCCESS,
DELETE_SUCCESS), which makes responses searchable by outcome:

    {"timestamp": "2026-10-18T12:00:00.000Z", "level": "INFO",
     "logger": "urlshortener.lambdas.shorten_url.app",
     "message": "Shortened URL. Responding with 201.",
     "shortcode": "bf705e83e0", "created": true, "event": "SHORTEN_SUCCESS"}

    {"timestamp": "2026-10-18T12:00:01.000Z", "level": "ERROR",
     "logger": "urlshortener.lambdas.redirect_url.app",
     "message": "Data store unavailable. Responding with 500.",
     "event": "DATA_STORE_ERROR", "exception": "Traceback (most recent call last): ..."}

The root level comes from LOG_LEVEL (default INFO).
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from urlshortener.constants import ENV


# Attributes every LogRecord carries; anything else on a record came from `extra`
RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {'asctime', 'message'}


class JsonFormatter(logging.Formatter):
    """Render a LogRecord and its `extra` fields as one JSON object"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': self._timestamp(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        # extras never override the fields above
        log.update((key, value) for key, value in vars(record).items() if key not in RECORD_ATTRS and key not in log)
        return json.dumps(log, default=str)

    @staticmethod
    def _timestamp(record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=UTC)
        return created.isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def initialize_logging() -> None:
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                }
            },
            'root': {
                'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(),
                'handlers': ['stdout'],
            },
        }
    )
