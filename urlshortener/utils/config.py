"""Utility functions for application configuration management.

Configuration lives in one YAML document per application environment
(`APP_ENV`), read from `config/<app env>.yml` under the project root or from
the file named by `URLSHORTENER_CONFIG`:

    config/
    ├── local.yml
    └── dev.yml

The document follows this structure:

    base_url: http://localhost:8080/r
    active_backend: file
    configs:
        shorten_url:
            file: {path: testing.json}
        redirect_url:
            file: {path: testing.json}
        delete_url:
            file: {path: testing.json}

Each Lambda loads its own section (e.g., `"shorten_url"`) of this document.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the absolute path to the project root directory, using
        `PROJECT_ROOT` when available.

    config_path() -> Path
        Return the path of the YAML document for the current environment.

    load_config(lambda_name: str) -> dict
        Load configuration for a given Lambda and return it as a Python
        dictionary.

Example:
    Typical usage inside a Lambda handler:

        >>> from urlshortener.utils.config import load_config
        >>> config = load_config('shorten_url')
        >>> config
        {'base_url': 'http://localhost:8080/r', 'file': {'path': 'testing.json'}}
"""

import os
import logging
from pathlib import Path

import yaml

from urlshortener.types import LambdaConfiguration
from urlshortener.constants import ENV, DEFAULT_BASE_URL
from urlshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    """Return the project root, from PROJECT_ROOT or the repository checkout"""
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, Path(__file__).resolve().parents[2]))


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'urlshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'urlshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def config_path() -> Path:
    explicit = os.environ.get(ENV.Config.PATH)
    if explicit:
        return Path(explicit)
    return project_root() / 'config' / f'{app_env()}.yml'


def load_config(lambda_name: str) -> LambdaConfiguration:
    """Load configuration for a given Lambda from the YAML config document

    Args:
        lambda_name (str):
            Name of the Lambda (e.g. "shorten_url", "redirect_url" or "delete_url").

    Returns:
        dict: `base_url` plus the active backend's section for this lambda, e.g.
              {'base_url': 'http://localhost:8080/r', 'file': {'path': 'testing.json'}}

    Raises:
        FileNotFoundError:
            If the config document does not exist.
        BadConfigurationError:
            If the document is not valid YAML or lacks the lambda's backend section.
    """
    path = config_path()
    logger.debug('Loading config document.', extra={'configPath': str(path), 'lambdaName': lambda_name})

    with open(path, encoding='utf-8') as f:
        try:
            document = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Invalid YAML in config document {path}.') from e

    try:
        backend = document['active_backend']
        backend_config = document['configs'][lambda_name][backend] or {}
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"Config document {path} has no active backend section for '{lambda_name}'.") from e

    # Namespace Redis keys per application and environment unless configured explicitly
    if backend == 'redis' and app_prefix() is not None:
        backend_config = {'prefix': app_prefix(), **backend_config}

    return {
        'base_url': document.get('base_url', DEFAULT_BASE_URL),
        backend: backend_config,
    }
