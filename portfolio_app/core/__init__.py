"""Модуль core: хранилище токена, авторизация, маршрутизация и формы."""

from core.auth import AuthSession
from core.forms import ContactForm, LoginForm, NoticeEditor
from core.guard import NavigationIntent, Redirect, Render, RouteGuard
from core.router import ROUTES, Route, Router
from core.session import (
    get_api_client,
    get_auth_session,
    get_router,
    get_token_store,
    init_session_state,
)
from core.storage import BrowserLocalStorage, MemoryStorage, TokenStore
from exceptions import (
    AppException,
    LoginRequestError,
    NetworkError,
    RequestFailedError,
)

__all__ = [
    # auth
    "AuthSession",
    # exceptions
    "AppException",
    "LoginRequestError",
    "NetworkError",
    "RequestFailedError",
    # forms
    "ContactForm",
    "LoginForm",
    "NoticeEditor",
    # guard / router
    "NavigationIntent",
    "Redirect",
    "Render",
    "RouteGuard",
    "ROUTES",
    "Route",
    "Router",
    # session
    "get_api_client",
    "get_auth_session",
    "get_router",
    "get_token_store",
    "init_session_state",
    # storage
    "BrowserLocalStorage",
    "MemoryStorage",
    "TokenStore",
]
