"""
Тесты проверки доступа и маршрутизации
"""

import pytest

from conftest import make_response
from constants import PAGE_ADMIN, PAGE_LANDING, PAGE_LOGIN, SESSION_NAV_INTENT
from core.guard import NavigationIntent, Redirect, Render, RouteGuard
from core.router import Router, normalize_path


class FakeNavigator:
    """Записывает вызовы switch_page вместо реального перехода"""

    def __init__(self):
        self.pages = []

    def __call__(self, page: str) -> None:
        self.pages.append(page)


@pytest.fixture
def navigator() -> FakeNavigator:
    return FakeNavigator()


@pytest.fixture
def router(auth, navigator) -> Router:
    return Router(RouteGuard(auth), navigator)


# ==================== RouteGuard ====================


def test_guard_renders_with_token(auth, token_store):
    token_store.set("abc")
    assert RouteGuard(auth).evaluate("/admin") == Render()


def test_guard_redirects_without_token(auth):
    decision = RouteGuard(auth).evaluate("/admin")

    assert decision == Redirect(
        target="/login",
        intent=NavigationIntent(target_path="/login", origin_path="/admin"),
    )


def test_post_login_target_uses_origin(auth):
    guard = RouteGuard(auth)
    intent = NavigationIntent(target_path="/login", origin_path="/admin")
    assert guard.post_login_target(intent) == "/admin"


@pytest.mark.parametrize(
    "intent",
    [None, NavigationIntent(target_path="/login"), NavigationIntent("/login", "")],
)
def test_post_login_target_defaults_to_admin(auth, intent):
    assert RouteGuard(auth).post_login_target(intent) == "/admin"


def test_guard_after_logout_redirects(auth, token_store):
    guard = RouteGuard(auth)
    token_store.set("abc")
    assert guard.evaluate("/admin") == Render()

    auth.logout()

    decision = guard.evaluate("/admin")
    assert isinstance(decision, Redirect)
    assert decision.target == "/login"


# ==================== Router ====================


@pytest.mark.parametrize("path", ["/", "/login"])
def test_public_routes_render_without_token(router, path):
    assert router.resolve(path) == Render()


@pytest.mark.parametrize("path", ["/unknown", "/admin/settings", "/projects"])
def test_unknown_routes_redirect_to_landing(router, path):
    assert router.resolve(path) == Redirect(target="/")


def test_trailing_slash_is_normalized(router, token_store):
    token_store.set("abc")
    assert router.resolve("/admin/") == Render()


@pytest.mark.parametrize(
    "raw, expected",
    [("", "/"), ("/", "/"), ("admin", "/admin"), ("/admin/", "/admin"), ("//", "/")],
)
def test_normalize_path(raw, expected):
    assert normalize_path(raw) == expected


@pytest.mark.parametrize(
    "path, page",
    [("/", PAGE_LANDING), ("/login", PAGE_LOGIN), ("/admin", PAGE_ADMIN), ("/nope", PAGE_LANDING)],
)
def test_page_for(router, path, page):
    assert router.page_for(path) == page


def test_enforce_admin_without_token_records_origin(router, navigator):
    state = {}

    assert router.enforce("/admin", state) is False

    assert navigator.pages == [PAGE_LOGIN]
    assert state[SESSION_NAV_INTENT] == NavigationIntent(target_path="/login", origin_path="/admin")


def test_enforce_admin_with_token_renders(router, navigator, token_store):
    token_store.set("abc")
    state = {}

    assert router.enforce("/admin", state) is True

    assert navigator.pages == []
    assert SESSION_NAV_INTENT not in state


def test_enforce_unknown_path_goes_home_without_intent(router, navigator):
    state = {}

    assert router.enforce("/missing", state) is False

    assert navigator.pages == [PAGE_LANDING]
    assert SESSION_NAV_INTENT not in state


def test_login_returns_to_origin(router, navigator, auth, http_session):
    state = {}
    router.enforce("/admin", state)
    http_session.request.return_value = make_response(200, {"token": "abc"})

    assert auth.login("a@x.com", "secret") is True
    target = router.complete_login(state)

    assert target == "/admin"
    assert navigator.pages == [PAGE_LOGIN, PAGE_ADMIN]
    assert SESSION_NAV_INTENT not in state
    assert router.enforce("/admin", state) is True


def test_login_without_recorded_origin_goes_to_admin(router, navigator):
    assert router.complete_login({}) == "/admin"
    assert navigator.pages == [PAGE_ADMIN]


def test_logout_then_admin_redirects_to_login(router, navigator, auth, token_store):
    token_store.set("abc")
    state = {}
    assert router.enforce("/admin", state) is True

    auth.logout()

    assert router.enforce("/admin", state) is False
    assert navigator.pages == [PAGE_LOGIN]
    assert state[SESSION_NAV_INTENT].origin_path == "/admin"
