"""
Admin GraphQL API client.
"""

from unittest.mock import MagicMock

import pytest
import requests

from storeadmin.core import AdminApiClient, AdminApiError


def make_response(status_code=200, body=None, reason="OK"):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    if isinstance(body, Exception):
        response.json.side_effect = body
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return AdminApiClient("test-shop.myshopify.com", "shpat_test",
                          api_version="2025-10", timeout=5, session=session)


def test_endpoint_includes_shop_and_version(client):
    assert client.endpoint == "https://test-shop.myshopify.com/admin/api/2025-10/graphql.json"


def test_graphql_posts_query_with_token(client, session):
    session.post.return_value = make_response(body={"data": {"shop": {"name": "Test"}}})

    body = client.graphql("query { shop { name } }", {"first": 1})

    assert body == {"data": {"shop": {"name": "Test"}}}
    args, kwargs = session.post.call_args
    assert args[0] == client.endpoint
    assert kwargs["headers"]["X-Shopify-Access-Token"] == "shpat_test"
    assert kwargs["json"] == {"query": "query { shop { name } }", "variables": {"first": 1}}
    assert kwargs["timeout"] == 5


def test_graphql_errors_are_returned_not_raised(client, session):
    payload = {"errors": [{"message": "Access denied for orders field."}], "data": None}
    session.post.return_value = make_response(body=payload)

    assert client.graphql("query { orders { edges { node { id } } } }") == payload


def test_http_error_raises_with_messages(client, session):
    session.post.return_value = make_response(
        status_code=403, reason="Forbidden",
        body={"errors": [{"message": "This app is not approved to access the Order object."}]},
    )

    with pytest.raises(AdminApiError) as excinfo:
        client.graphql("query { orders { edges { node { id } } } }")

    assert excinfo.value.status_code == 403
    assert "not approved" in str(excinfo.value)
    assert excinfo.value.errors == ["This app is not approved to access the Order object."]


def test_http_error_with_string_errors(client, session):
    session.post.return_value = make_response(
        status_code=401, reason="Unauthorized",
        body={"errors": "[API] Invalid API key or access token"},
    )

    with pytest.raises(AdminApiError, match="Invalid API key"):
        client.graphql("query { shop { name } }")


def test_http_error_without_json_body_uses_reason(client, session):
    session.post.return_value = make_response(status_code=502, reason="Bad Gateway",
                                              body=ValueError("no json"))

    with pytest.raises(AdminApiError, match="502: Bad Gateway"):
        client.graphql("query { shop { name } }")


def test_transport_failure_raises(client, session):
    session.post.side_effect = requests.ConnectionError("connection refused")

    with pytest.raises(AdminApiError, match="connection refused"):
        client.graphql("query { shop { name } }")
