"""Маршрутизация страниц: публичные, защищённые и неизвестные пути."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, MutableMapping, Optional

from constants import (
    PAGE_ADMIN,
    PAGE_LANDING,
    PAGE_LOGIN,
    ROUTE_ADMIN,
    ROUTE_LANDING,
    ROUTE_LOGIN,
    SESSION_NAV_INTENT,
)
from core.guard import GuardDecision, NavigationIntent, Redirect, Render, RouteGuard

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Route:
    """Маршрут: путь, скрипт страницы и нужна ли авторизация."""

    path: str
    page: str
    protected: bool = False


ROUTES: Dict[str, Route] = {
    ROUTE_LANDING: Route(ROUTE_LANDING, PAGE_LANDING),
    ROUTE_LOGIN: Route(ROUTE_LOGIN, PAGE_LOGIN),
    ROUTE_ADMIN: Route(ROUTE_ADMIN, PAGE_ADMIN, protected=True),
}


def normalize_path(path: str) -> str:
    """'/admin/' -> '/admin', '' -> '/'."""
    path = (path or "").strip()
    if not path.startswith("/"):
        path = "/" + path
    if len(path) > 1:
        path = path.rstrip("/") or ROUTE_LANDING
    return path


class Router:
    """
    Таблица маршрутов поверх RouteGuard.

    switch_page - примитив навигации (в приложении это st.switch_page).
    """

    def __init__(
        self,
        guard: RouteGuard,
        switch_page: Callable[[str], None],
        routes: Optional[Dict[str, Route]] = None,
        fallback_path: str = ROUTE_LANDING,
    ) -> None:
        self.guard = guard
        self._switch_page = switch_page
        self.routes = routes if routes is not None else ROUTES
        self.fallback_path = fallback_path

    def resolve(self, path: str) -> GuardDecision:
        """
        Решение для запрошенного пути.

        Returns:
            Render, Redirect на вход для защищённых путей без токена
            или Redirect на главную для неизвестных путей
        """
        path = normalize_path(path)
        route = self.routes.get(path)
        if route is None:
            logger.info(f"[ROUTER] Unknown path {path}, redirecting to {self.fallback_path}")
            return Redirect(target=self.fallback_path)
        if route.protected:
            return self.guard.evaluate(path)
        return Render()

    def page_for(self, path: str) -> str:
        """Скрипт страницы для пути (неизвестный путь -> главная)."""
        route = self.routes.get(normalize_path(path)) or self.routes[self.fallback_path]
        return route.page

    def navigate(self, path: str) -> None:
        """Перейти на страницу по пути."""
        logger.info(f"[ROUTER] Navigating to {path}")
        self._switch_page(self.page_for(path))

    def enforce(self, path: str, state: MutableMapping) -> bool:
        """
        Проверить доступ к текущей странице перед отрисовкой.

        Args:
            path: Путь текущей страницы
            state: session_state, куда сохраняется NavigationIntent

        Returns:
            True если страницу можно отрисовать
        """
        decision = self.resolve(path)
        if isinstance(decision, Render):
            return True

        if decision.intent is not None:
            state[SESSION_NAV_INTENT] = decision.intent
        self.navigate(decision.target)
        return False

    def complete_login(self, state: MutableMapping) -> str:
        """
        Переход после успешного входа: на исходную страницу или на /admin.

        Returns:
            Путь, на который выполнен переход
        """
        intent: Optional[NavigationIntent] = state.pop(SESSION_NAV_INTENT, None)
        target = self.guard.post_login_target(intent)
        self.navigate(target)
        return target
