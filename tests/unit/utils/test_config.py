"""Unit tests for configuration utilities in config.py

Test coverage includes:

1. Environment variable resolution
   - Ensures app_env(), app_name(), app_prefix() correctly read environment variables.

2. Path resolution
   - Ensures project_root() reads PROJECT_ROOT and config_path() honours
     URLSHORTENER_CONFIG and APP_ENV.

3. Configuration loading behavior
   - Ensures load_config() returns base_url plus the active backend section.
   - Ensures Redis sections are namespaced with the app prefix.
   - Ensures missing files raise FileNotFoundError and broken documents
     raise BadConfigurationError.
"""

from pathlib import Path

import pytest

from urlshortener.utils import config
from urlshortener.exceptions import BadConfigurationError


CONFIG_DOCUMENT = """
base_url: https://sho.rt/r
active_backend: file
configs:
  shorten_url:
    file:
      path: /tmp/shorten.json
    redis:
      host: redis.test
  redirect_url:
    file:
      path: /tmp/redirect.json
"""


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    for name in ('APP_ENV', 'APP_NAME', 'PROJECT_ROOT', 'URLSHORTENER_CONFIG'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    path = tmp_path / 'config.yml'
    path.write_text(CONFIG_DOCUMENT, encoding='utf-8')
    monkeypatch.setenv('URLSHORTENER_CONFIG', str(path))
    return path


# -------------------------------
# 1. Environment variable resolution
# -------------------------------


def test_app_env_defaults_to_local():
    assert config.app_env() == 'local'


def test_app_env_is_lowercased(monkeypatch):
    monkeypatch.setenv('APP_ENV', 'DEV')
    assert config.app_env() == 'dev'


def test_app_name(monkeypatch):
    assert config.app_name() is None
    monkeypatch.setenv('APP_NAME', 'urlshortener')
    assert config.app_name() == 'urlshortener'


def test_app_prefix(monkeypatch):
    assert config.app_prefix() is None
    monkeypatch.setenv('APP_NAME', 'urlshortener')
    monkeypatch.setenv('APP_ENV', 'dev')
    assert config.app_prefix() == 'urlshortener:dev'


# -------------------------------
# 2. Path resolution
# -------------------------------


def test_project_root_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('PROJECT_ROOT', str(tmp_path))
    assert config.project_root() == tmp_path


def test_project_root_defaults_to_checkout():
    assert (config.project_root() / 'urlshortener' / 'utils' / 'config.py').exists()


def test_config_path_per_environment(monkeypatch, tmp_path):
    monkeypatch.setenv('PROJECT_ROOT', str(tmp_path))
    monkeypatch.setenv('APP_ENV', 'dev')
    assert config.config_path() == tmp_path / 'config' / 'dev.yml'


def test_config_path_explicit(monkeypatch):
    monkeypatch.setenv('URLSHORTENER_CONFIG', '/etc/urlshortener.yml')
    assert config.config_path() == Path('/etc/urlshortener.yml')


# -------------------------------
# 3. Configuration loading behavior
# -------------------------------


def test_load_config(config_file):
    assert config.load_config('shorten_url') == {
        'base_url': 'https://sho.rt/r',
        'file': {'path': '/tmp/shorten.json'},
    }
    assert config.load_config('redirect_url') == {
        'base_url': 'https://sho.rt/r',
        'file': {'path': '/tmp/redirect.json'},
    }


def test_load_config_default_base_url(tmp_path, monkeypatch):
    path = tmp_path / 'config.yml'
    path.write_text('active_backend: memory\nconfigs:\n  delete_url:\n    memory:\n', encoding='utf-8')
    monkeypatch.setenv('URLSHORTENER_CONFIG', str(path))

    assert config.load_config('delete_url') == {'base_url': 'http://localhost:8080/r', 'memory': {}}


def test_load_config_redis_is_prefixed(config_file, monkeypatch):
    config_file.write_text(CONFIG_DOCUMENT.replace('active_backend: file', 'active_backend: redis'), encoding='utf-8')
    monkeypatch.setenv('APP_NAME', 'urlshortener')
    monkeypatch.setenv('APP_ENV', 'test')

    assert config.load_config('shorten_url')['redis'] == {'prefix': 'urlshortener:test', 'host': 'redis.test'}


def test_load_config_shipped_local_document(monkeypatch):
    """The repository's config/local.yml is loadable for every lambda."""
    for lambda_name in ('shorten_url', 'redirect_url', 'delete_url'):
        assert config.load_config(lambda_name) == {
            'base_url': 'http://localhost:8080/r',
            'file': {'path': 'testing.json'},
        }


def test_load_config_missing_file(monkeypatch, tmp_path):
    monkeypatch.setenv('URLSHORTENER_CONFIG', str(tmp_path / 'missing.yml'))
    with pytest.raises(FileNotFoundError):
        config.load_config('shorten_url')


def test_load_config_missing_lambda_section(config_file):
    with pytest.raises(BadConfigurationError, match="no active backend section for 'delete_url'"):
        config.load_config('delete_url')


def test_load_config_missing_backend_section(config_file):
    """redirect_url has no redis section."""
    config_file.write_text(CONFIG_DOCUMENT.replace('active_backend: file', 'active_backend: redis'), encoding='utf-8')
    with pytest.raises(BadConfigurationError):
        config.load_config('redirect_url')


def test_load_config_invalid_yaml(config_file):
    config_file.write_text('configs: [unclosed', encoding='utf-8')
    with pytest.raises(BadConfigurationError, match='Invalid YAML'):
        config.load_config('shorten_url')
