"""Централизованный API клиент для взаимодействия с backend."""

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Union

import requests

from config import app_config
from constants import (
    CONTENT_TYPE_JSON,
    HTTP_SUCCESS_MAX,
    HTTP_SUCCESS_MIN,
    MSG_INVALID_JSON,
    MSG_REQUEST_FAILED,
)
from exceptions import NetworkError

if TYPE_CHECKING:
    from core.storage import TokenStore

logger = logging.getLogger(__name__)

FAILURE_STATUS = "status"
FAILURE_PARSE = "parse"


@dataclass(frozen=True)
class RequestDescriptor:
    """Описание одного запроса к API."""

    path: str
    method: str = "GET"
    body: Optional[str] = None
    headers: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def post_json(cls, path: str, payload: Any) -> "RequestDescriptor":
        return cls(path=path, method="POST", body=json.dumps(payload))


@dataclass(frozen=True)
class Success:
    """Успешный ответ: JSON или текст."""

    payload: Any


@dataclass(frozen=True)
class Failure:
    """
    Неуспешный ответ.

    reason = "status" - сервер вернул статус вне 2xx,
    reason = "parse" - тело с content-type JSON не удалось разобрать.
    """

    status_code: int
    payload: Any
    message: str
    reason: str = FAILURE_STATUS


ResponseOutcome = Union[Success, Failure]


class APIClient:
    """Клиент для взаимодействия с backend."""

    def __init__(
        self,
        token_store: "TokenStore",
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Инициализация API клиента.

        Args:
            token_store: Хранилище токена (читается при каждом запросе)
            base_url: Базовый URL API (по умолчанию из конфигурации)
            session: HTTP сессия requests
        """
        if base_url is None:
            base_url = app_config.api_base_url
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store
        self._session = session or requests.Session()

    def _get_headers(self, extra: Mapping[str, str]) -> Dict[str, str]:
        """Заголовки запроса: токен берётся из хранилища в момент вызова"""
        headers = dict(extra)
        headers["Content-Type"] = CONTENT_TYPE_JSON
        token = self.token_store.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _handle_response(self, response: requests.Response) -> ResponseOutcome:
        """
        Приведение ответа сервера к Success/Failure.

        Args:
            response: Ответ от сервера

        Returns:
            Success с данными или Failure со статусом и сообщением
        """
        status = response.status_code
        content_type = response.headers.get("Content-Type", "")

        if CONTENT_TYPE_JSON in content_type:
            try:
                payload = response.json()
            except ValueError as e:
                logger.error(f"Failed to parse JSON response (status {status}): {e}")
                return Failure(
                    status_code=status,
                    payload=response.text,
                    message=MSG_INVALID_JSON,
                    reason=FAILURE_PARSE,
                )
        else:
            payload = response.text

        if not HTTP_SUCCESS_MIN <= status <= HTTP_SUCCESS_MAX:
            message = None
            if isinstance(payload, dict):
                message = payload.get("message")
            if not message:
                message = MSG_REQUEST_FAILED.format(status=status)
            logger.warning(f"API request failed with status {status}: {message}")
            return Failure(status_code=status, payload=payload, message=str(message))

        return Success(payload=payload)

    def request(self, descriptor: RequestDescriptor) -> ResponseOutcome:
        """
        Выполнить один запрос (без повторов и таймаута).

        Args:
            descriptor: Описание запроса

        Returns:
            Success или Failure

        Raises:
            NetworkError: запрос не удалось выполнить
        """
        url = f"{self.base_url}{descriptor.path}"
        try:
            response = self._session.request(
                descriptor.method,
                url,
                data=descriptor.body,
                headers=self._get_headers(descriptor.headers),
                timeout=None,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{descriptor.method} {url} failed: {e}")
            raise NetworkError(descriptor.method, url, str(e)) from e

        logger.info(f"{descriptor.method} {descriptor.path} -> {response.status_code}")
        return self._handle_response(response)

    def post_json(self, path: str, payload: Any) -> ResponseOutcome:
        """POST с JSON телом."""
        return self.request(RequestDescriptor.post_json(path, payload))
