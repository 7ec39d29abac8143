"""
Тесты сессии авторизации
"""

import pytest
import requests

from conftest import make_response, sent_body
from exceptions import LoginRequestError, NetworkError


def test_login_with_token_persists_it(auth, token_store, http_session):
    http_session.request.return_value = make_response(200, {"token": "abc"})

    assert auth.login("a@x.com", "secret") is True

    assert token_store.get() == "abc"
    assert auth.is_authenticated() is True


def test_login_sends_credentials(auth, http_session):
    http_session.request.return_value = make_response(200, {"token": "abc"})

    auth.login("a@x.com", "secret")

    assert http_session.request.call_args.args == ("POST", "/auth/login")
    assert sent_body(http_session) == {"email": "a@x.com", "password": "secret"}


@pytest.mark.parametrize(
    "payload",
    [{}, {"token": ""}, {"token": None}, {"user": {"id": 1}}],
)
def test_login_without_token_returns_false(auth, token_store, http_session, payload):
    http_session.request.return_value = make_response(200, payload)

    assert auth.login("a@x.com", "secret") is False
    assert token_store.get() is None


def test_login_without_token_keeps_previous_token(auth, token_store, http_session):
    token_store.set("old")
    http_session.request.return_value = make_response(200, {})

    assert auth.login("a@x.com", "secret") is False
    assert token_store.get() == "old"


def test_login_text_response_returns_false(auth, token_store, http_session):
    http_session.request.return_value = make_response(200, text="ok", content_type="text/plain")

    assert auth.login("a@x.com", "secret") is False
    assert token_store.get() is None


def test_login_declined_returns_false(auth, token_store, http_session):
    http_session.request.return_value = make_response(401, {"message": "Invalid"})

    assert auth.login("a@x.com", "wrong") is False
    assert token_store.get() is None


def test_login_network_failure_raises(auth, token_store, http_session):
    http_session.request.side_effect = requests.exceptions.ConnectionError("offline")

    with pytest.raises(NetworkError):
        auth.login("a@x.com", "secret")
    assert token_store.get() is None


def test_login_unparseable_response_raises(auth, token_store, http_session):
    http_session.request.return_value = make_response(200, text="<html>")

    with pytest.raises(LoginRequestError):
        auth.login("a@x.com", "secret")
    assert token_store.get() is None


def test_logout_clears_token(auth, token_store):
    token_store.set("abc")

    auth.logout()
    auth.logout()

    assert token_store.get() is None
    assert auth.is_authenticated() is False
