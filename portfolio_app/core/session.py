"""Утилиты для работы с сессиями Streamlit и сборка зависимостей страниц."""

from typing import Any, Dict

import streamlit as st

from api_client import APIClient
from constants import (
    LOCALSTORAGE_AUTH_TOKEN_KEY,
    SESSION_CONTACT_FORM,
    SESSION_LOGIN_FORM,
    SESSION_LS_PENDING_WRITE,
    SESSION_LS_TOKEN,
    SESSION_LS_TOKEN_LOADED,
    SESSION_LS_WRITE_SEQ,
    SESSION_NAV_INTENT,
    SESSION_NOTICE_EDITOR,
    SESSION_TOKEN_CHECK_ATTEMPTS,
)
from core.auth import AuthSession
from core.forms import ContactForm, LoginForm, NoticeEditor
from core.guard import RouteGuard
from core.router import Router
from core.storage import BrowserLocalStorage, TokenStore


def init_session_state() -> bool:
    """
    Инициализация session state с значениями по умолчанию.

    Returns:
        True если токен из localStorage уже прочитан
    """
    defaults: Dict[str, Any] = {
        SESSION_LS_TOKEN: None,
        SESSION_LS_TOKEN_LOADED: False,
        SESSION_LS_PENDING_WRITE: None,
        SESSION_LS_WRITE_SEQ: 0,
        SESSION_TOKEN_CHECK_ATTEMPTS: 0,
        SESSION_NAV_INTENT: None,
        SESSION_CONTACT_FORM: ContactForm(),
        SESSION_LOGIN_FORM: LoginForm(),
        SESSION_NOTICE_EDITOR: NoticeEditor(),
    }

    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    backend = BrowserLocalStorage(st.session_state)
    backend.sync(LOCALSTORAGE_AUTH_TOKEN_KEY)
    return backend.hydrate(LOCALSTORAGE_AUTH_TOKEN_KEY)


def get_token_store() -> TokenStore:
    """Хранилище токена поверх localStorage браузера."""
    return TokenStore(BrowserLocalStorage(st.session_state))


def get_api_client() -> APIClient:
    """
    Получить API клиент.

    Токен не передаётся в клиент: он читается из хранилища при каждом запросе.
    """
    return APIClient(get_token_store())


def get_auth_session() -> AuthSession:
    client = get_api_client()
    return AuthSession(client.token_store, client)


def get_router(auth: AuthSession) -> Router:
    return Router(RouteGuard(auth), st.switch_page)
