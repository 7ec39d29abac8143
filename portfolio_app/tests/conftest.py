"""
Общие фикстуры: хранилище токена в памяти и поддельная HTTP сессия
"""

import json
from typing import Any, Optional
from unittest.mock import MagicMock

import pytest
import requests

from api_client import APIClient
from core.auth import AuthSession
from core.storage import MemoryStorage, TokenStore


def make_response(
    status_code: int = 200,
    payload: Any = None,
    text: Optional[str] = None,
    content_type: str = "application/json",
) -> requests.Response:
    """Собирает requests.Response без сети"""
    response = requests.Response()
    response.status_code = status_code
    if text is None:
        text = json.dumps(payload if payload is not None else {})
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    if content_type:
        response.headers["Content-Type"] = content_type
    return response


@pytest.fixture
def token_store() -> TokenStore:
    return TokenStore(MemoryStorage())


@pytest.fixture
def http_session() -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.request.return_value = make_response(200, {})
    return session


@pytest.fixture
def api_client(token_store, http_session) -> APIClient:
    return APIClient(token_store, base_url="", session=http_session)


@pytest.fixture
def auth(token_store, api_client) -> AuthSession:
    return AuthSession(token_store, api_client)


def sent_headers(http_session: MagicMock) -> dict:
    """Заголовки последнего запроса"""
    return http_session.request.call_args.kwargs["headers"]


def sent_body(http_session: MagicMock) -> Any:
    """Разобранное JSON тело последнего запроса"""
    return json.loads(http_session.request.call_args.kwargs["data"])
