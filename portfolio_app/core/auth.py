"""Сессия авторизации: вход, выход и наличие токена."""

import logging

from api_client import FAILURE_PARSE, APIClient, Failure, Success
from constants import ENDPOINT_AUTH_LOGIN
from core.storage import TokenStore
from exceptions import LoginRequestError

logger = logging.getLogger(__name__)


class AuthSession:
    """
    Сессия = наличие токена в хранилище, отдельного объекта сессии нет.

    login() различает два исхода: False - сервер отказал (неверные данные),
    исключение RequestFailedError - запрос не удался.
    """

    def __init__(self, token_store: TokenStore, api_client: APIClient) -> None:
        self.token_store = token_store
        self.api_client = api_client

    def is_authenticated(self) -> bool:
        """
        Проверка авторизации пользователя.

        Returns:
            True если токен сохранён, иначе False
        """
        return self.token_store.get() is not None

    def login(self, identifier: str, secret: str) -> bool:
        """
        Вход пользователя.

        Args:
            identifier: Email пользователя
            secret: Пароль

        Returns:
            True если токен получен и сохранён

        Raises:
            NetworkError: запрос не удалось выполнить
            LoginRequestError: ответ сервера не удалось разобрать
        """
        outcome = self.api_client.post_json(
            ENDPOINT_AUTH_LOGIN,
            {"email": identifier, "password": secret},
        )

        if isinstance(outcome, Failure):
            if outcome.reason == FAILURE_PARSE:
                raise LoginRequestError(
                    outcome.message,
                    details={"status_code": outcome.status_code},
                    status_code=outcome.status_code,
                )
            logger.info(f"Login declined with status {outcome.status_code}")
            return False

        token = None
        if isinstance(outcome, Success) and isinstance(outcome.payload, dict):
            token = outcome.payload.get("token")

        if not token or not isinstance(token, str):
            logger.warning("Login response has no token")
            return False

        self.token_store.set(token)
        logger.info(f"User logged in, token length: {len(token)}")
        return True

    def logout(self) -> None:
        """Выход из системы."""
        self.token_store.clear()
        logger.info("User logged out")
