from unittest.mock import MagicMock

import pytest

from urlshortener.dao.base import ShortURLBaseDAO


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Handlers must not re-raise as if running locally."""
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)


@pytest.fixture()
def context():
    class _Context:
        function_name = 'urlshortener'

    return _Context()


@pytest.fixture()
def base_url():
    return 'http://localhost:8080/r'


@pytest.fixture()
def config(base_url):
    return {'base_url': base_url, 'memory': {}}


@pytest.fixture()
def dao():
    return MagicMock(spec=ShortURLBaseDAO)
