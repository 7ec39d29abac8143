"""Проверка доступа к защищённым страницам."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from constants import ROUTE_ADMIN, ROUTE_LOGIN
from core.auth import AuthSession

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NavigationIntent:
    """Куда ведём пользователя и откуда он пришёл."""

    target_path: str
    origin_path: Optional[str] = None


@dataclass(frozen=True)
class Render:
    """Страницу можно отрисовать."""


@dataclass(frozen=True)
class Redirect:
    """Нужно перейти на другую страницу."""

    target: str
    intent: Optional[NavigationIntent] = None


GuardDecision = Union[Render, Redirect]


class RouteGuard:
    """Решает, показать защищённую страницу или отправить на вход."""

    def __init__(
        self,
        session: AuthSession,
        login_path: str = ROUTE_LOGIN,
        default_path: str = ROUTE_ADMIN,
    ) -> None:
        self.session = session
        self.login_path = login_path
        self.default_path = default_path

    def evaluate(self, requested_path: str) -> GuardDecision:
        """
        Проверить доступ к защищённому пути.

        Args:
            requested_path: Путь, который запросил пользователь

        Returns:
            Render если токен есть, иначе Redirect на страницу входа
            с сохранённым исходным путём
        """
        if self.session.is_authenticated():
            return Render()

        logger.info(f"[GUARD] No token for {requested_path}, redirecting to {self.login_path}")
        return Redirect(
            target=self.login_path,
            intent=NavigationIntent(
                target_path=self.login_path,
                origin_path=requested_path,
            ),
        )

    def post_login_target(self, intent: Optional[NavigationIntent]) -> str:
        """Куда перейти после успешного входа."""
        if intent is not None and intent.origin_path:
            return intent.origin_path
        return self.default_path
