"""
Content API client tests
========================

requests is patched; nothing here touches the network.
Run with: pytest tests/test_api_client.py -v
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests

from foliodash.core.api_client import ApiClient
from foliodash.core.errors import ConfigurationError, RequestFailure


def make_response(status_code=200, body=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = json.dumps(body).encode() if body is not None else b''
    resp.json.return_value = body
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f'{status_code} Error', response=resp)
    return resp


@pytest.fixture
def client():
    return ApiClient('https://api.example.com/', timeout=7)


def test_missing_base_uri_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        ApiClient('')
    with pytest.raises(ConfigurationError):
        ApiClient(None)


def test_url_joins_base_and_path(client):
    assert client.url('/category') == 'https://api.example.com/category'
    assert client.url('signup/add') == 'https://api.example.com/signup/add'


@patch('foliodash.core.api_client.requests.request')
def test_get_categories_unwraps_envelope(mock_request, client):
    mock_request.return_value = make_response(body={'allCategories': [{'_id': 'c1', 'categoryName': 'Branding'}]})

    assert client.get_categories() == [{'_id': 'c1', 'categoryName': 'Branding'}]
    mock_request.assert_called_once_with('GET', 'https://api.example.com/category', timeout=7)


@patch('foliodash.core.api_client.requests.request')
def test_get_portfolio_list_unwraps_envelope(mock_request, client):
    mock_request.return_value = make_response(body={'PorfolioList': [{'_id': 'X'}]})

    assert client.get_portfolio_list() == [{'_id': 'X'}]
    mock_request.assert_called_once_with(
        'GET', 'https://api.example.com/portfolio/portfolioLists', timeout=7
    )


@patch('foliodash.core.api_client.requests.request')
def test_missing_envelope_key_gives_empty_list(mock_request, client):
    mock_request.return_value = make_response(body={'message': 'ok'})
    assert client.get_categories() == []

    mock_request.return_value = make_response(body=['not', 'an', 'envelope'])
    assert client.get_portfolio_list() == []


@patch('foliodash.core.api_client.requests.request')
def test_non_list_envelope_value_gives_empty_list(mock_request, client):
    mock_request.return_value = make_response(body={'PorfolioList': {'_id': 'X', 'name': 'Logo'}})
    assert client.get_portfolio_list() == []

    mock_request.return_value = make_response(body={'allCategories': 'Branding'})
    assert client.get_categories() == []


@patch('foliodash.core.api_client.requests.request')
def test_add_portfolio_posts_multipart(mock_request, client):
    mock_request.return_value = make_response(body={'success': True})
    parts = [('name', (None, 'Logo Redesign'))]

    assert client.add_portfolio(parts) == {'success': True}
    mock_request.assert_called_once_with(
        'POST', 'https://api.example.com/portfolio/addportfolio', timeout=7, files=parts
    )


@patch('foliodash.core.api_client.requests.request')
def test_update_portfolio_puts_multipart(mock_request, client):
    mock_request.return_value = make_response(body={'success': True})
    parts = [('name', (None, 'Logo Redesign')), ('_id', (None, 'X'))]

    client.update_portfolio(parts)
    mock_request.assert_called_once_with(
        'PUT', 'https://api.example.com/portfolio/updatePortfolio', timeout=7, files=parts
    )


@patch('foliodash.core.api_client.requests.request')
def test_signup_posts_json(mock_request, client):
    mock_request.return_value = make_response(body={'success': True})
    payload = {'name': 'Jane', 'email': 'jane@example.com', 'password': 'secret1'}

    assert client.signup(payload) == {'success': True}
    mock_request.assert_called_once_with(
        'POST', 'https://api.example.com/signup/add', timeout=7, json=payload
    )


@patch('foliodash.core.api_client.requests.request')
def test_empty_body_decodes_to_empty_dict(mock_request, client):
    mock_request.return_value = make_response(status_code=204)
    assert client.update_portfolio([]) == {}


@patch('foliodash.core.api_client.requests.request')
def test_http_error_becomes_request_failure(mock_request, client):
    mock_request.return_value = make_response(409, {'message': 'Email already registered'})

    with pytest.raises(RequestFailure) as excinfo:
        client.signup({'name': 'Jane', 'email': 'jane@example.com', 'password': 'secret1'})

    assert excinfo.value.status_code == 409
    assert excinfo.value.server_message == 'Email already registered'


@patch('foliodash.core.api_client.requests.request')
def test_connection_error_becomes_request_failure(mock_request, client):
    mock_request.side_effect = requests.ConnectionError('refused')

    with pytest.raises(RequestFailure) as excinfo:
        client.get_categories()

    assert excinfo.value.status_code is None
    assert excinfo.value.server_message is None
