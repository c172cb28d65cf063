"""Unit tests for the lambda handler entry points.

Test coverage includes:

1. Every handler is annotated with the shared Lambda type aliases,
   also through the guarantee_500_response wrapper.
"""

import pytest

from urlshortener.lambdas.shorten_url import app as shorten_app
from urlshortener.lambdas.redirect_url import app as redirect_app
from urlshortener.lambdas.delete_url import app as delete_app
from urlshortener.types import LambdaEvent, LambdaContext, LambdaResponse


@pytest.mark.parametrize('module', [shorten_app, redirect_app, delete_app])
def test_lambda_handler_annotations(module):
    assert module.lambda_handler.__annotations__ == {
        'event': LambdaEvent,
        'context': LambdaContext,
        'return': LambdaResponse,
    }
