"""
Исключения клиентского слоя
"""

from typing import Any, Dict, Optional


class AppException(Exception):
    """Базовое исключение приложения"""

    status_code: Optional[int] = None
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.details = details or {}
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class RequestFailedError(AppException):
    """Запрос не дал пригодного результата (не путать с отказом сервера)"""

    error_code = "REQUEST_FAILED"


class NetworkError(RequestFailedError):
    """Запрос не удалось выполнить: нет соединения, неверный URL и т.п."""

    error_code = "NETWORK_ERROR"

    def __init__(self, method: str, url: str, reason: str):
        super().__init__(
            message=f"{method} {url} failed: {reason}",
            details={"method": method, "url": url},
        )


class LoginRequestError(RequestFailedError):
    """Ответ на запрос входа не удалось разобрать"""

    error_code = "LOGIN_REQUEST_FAILED"
