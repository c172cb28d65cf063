"""End-to-end tests running all three handlers against a real File Store.

Test coverage includes:

1. shorten -> redirect -> delete -> redirect lifecycle through one JSON file
2. Mappings survive a fresh DAO (simulated cold start)
"""

import json

import pytest

from urlshortener.dao import factory
from urlshortener.lambdas.shorten_url import app as shorten_app
from urlshortener.lambdas.redirect_url import app as redirect_app
from urlshortener.lambdas.delete_url import app as delete_app


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    store = tmp_path / 'store.json'
    document = {
        'base_url': 'https://sho.rt/r',
        'active_backend': 'file',
        'configs': {name: {'file': {'path': str(store)}} for name in ('shorten_url', 'redirect_url', 'delete_url')},
    }
    path = tmp_path / 'config.yml'
    # JSON is valid YAML
    path.write_text(json.dumps(document), encoding='utf-8')
    monkeypatch.setenv('URLSHORTENER_CONFIG', str(path))

    factory._cached_dao.cache_clear()
    yield path
    factory._cached_dao.cache_clear()


def shortcode_event(shortcode):
    return {'pathParameters': {'shortcode': shortcode}}


def test_lifecycle(context, tmp_path):
    response = shorten_app.lambda_handler({'body': json.dumps({'url': 'https://example.com/page'})}, context)
    assert response['statusCode'] == 201
    assert json.loads(response['body'])['shortened_url'] == 'https://sho.rt/r/bf705e83e0'

    stored = json.loads((tmp_path / 'store.json').read_text(encoding='utf-8'))
    assert stored == {'version': 'v1', 'items': {'bf705e83e0': 'https://example.com/page'}}

    # simulated cold start: fresh DAO instances read the file again
    factory._cached_dao.cache_clear()

    response = redirect_app.lambda_handler(shortcode_event('bf705e83e0'), context)
    assert response['statusCode'] == 307
    assert response['headers']['Location'] == 'https://example.com/page'

    response = delete_app.lambda_handler(shortcode_event('bf705e83e0'), context)
    assert response['statusCode'] == 200

    response = redirect_app.lambda_handler(shortcode_event('bf705e83e0'), context)
    assert response['statusCode'] == 404

    response = delete_app.lambda_handler(shortcode_event('bf705e83e0'), context)
    assert response['statusCode'] == 404


def test_shorten_twice_is_idempotent(context, tmp_path):
    event = {'body': json.dumps({'url': 'https://example.com/page'})}

    first = shorten_app.lambda_handler(event, context)
    second = shorten_app.lambda_handler(event, context)

    assert first['statusCode'] == second['statusCode'] == 201
    assert json.loads(first['body']) == json.loads(second['body'])
    assert len(json.loads((tmp_path / 'store.json').read_text(encoding='utf-8'))['items']) == 1


def test_corrupt_store_is_reported(context, tmp_path):
    shorten_app.lambda_handler({'body': json.dumps({'url': 'https://example.com/page'})}, context)
    (tmp_path / 'store.json').write_text('{"version": "v1", "items": ', encoding='utf-8')

    response = redirect_app.lambda_handler(shortcode_event('bf705e83e0'), context)

    assert response['statusCode'] == 500
    assert json.loads(response['body'])['error_code'] == 'DATA_STORE_ERROR'
