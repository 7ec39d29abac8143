"""Формы с отправкой на backend: контакт, вход, объявление в админке."""

import logging
from dataclasses import dataclass
from typing import Optional

from api_client import APIClient, Failure
from constants import (
    ENDPOINT_ADMIN_NOTICE,
    ENDPOINT_CONTACT,
    MSG_EMPTY_FIELDS,
    MSG_INVALID_CREDENTIALS,
    MSG_LOGIN_FAILED,
    MSG_MESSAGE_SENT,
    MSG_NOTICE_FAILED,
    MSG_NOTICE_SAVED,
    MSG_SEND_FAILED,
    STATUS_ERROR,
    STATUS_IDLE,
    STATUS_SUBMITTING,
    STATUS_SUCCESS,
)
from core.auth import AuthSession
from exceptions import RequestFailedError

logger = logging.getLogger(__name__)


@dataclass
class SubmitState:
    """Жизненный цикл отправки: idle -> submitting -> success | error."""

    status: str = STATUS_IDLE
    banner: str = ""

    @property
    def is_submitting(self) -> bool:
        return self.status == STATUS_SUBMITTING

    def _begin(self) -> bool:
        # Повторная отправка, пока первая не завершилась, игнорируется
        if self.is_submitting:
            logger.info(f"[{type(self).__name__}] Submission already in progress, ignoring")
            return False
        self.status = STATUS_SUBMITTING
        self.banner = ""
        return True

    def _finish(self, status: str, banner: str) -> None:
        self.status = status
        self.banner = banner


@dataclass
class ContactForm(SubmitState):
    """Форма обратной связи на главной странице."""

    name: str = ""
    email: str = ""
    message: str = ""

    def validate(self) -> Optional[str]:
        """Сообщение об ошибке или None если все поля заполнены"""
        if not self.name.strip() or not self.email.strip() or not self.message.strip():
            return MSG_EMPTY_FIELDS
        return None

    def clear(self) -> None:
        self.name = ""
        self.email = ""
        self.message = ""

    def submit(self, api_client: APIClient) -> bool:
        """
        Отправить сообщение.

        Поля очищаются только при успехе.

        Returns:
            True если сообщение отправлено
        """
        if not self._begin():
            return False

        try:
            outcome = api_client.post_json(
                ENDPOINT_CONTACT,
                {"name": self.name, "email": self.email, "message": self.message},
            )
        except RequestFailedError as e:
            logger.error(f"Contact submission failed: {e}")
            self._finish(STATUS_ERROR, MSG_SEND_FAILED)
            return False
        except Exception:
            # Непредвиденная ошибка не должна оставить форму в состоянии отправки
            self._finish(STATUS_ERROR, MSG_SEND_FAILED)
            raise

        if isinstance(outcome, Failure):
            self._finish(STATUS_ERROR, MSG_SEND_FAILED)
            return False

        self.clear()
        self._finish(STATUS_SUCCESS, MSG_MESSAGE_SENT)
        return True


@dataclass
class LoginForm(SubmitState):
    """Форма входа."""

    email: str = ""
    password: str = ""

    def validate(self) -> Optional[str]:
        if not self.email.strip() or not self.password:
            return MSG_EMPTY_FIELDS
        return None

    def submit(self, auth: AuthSession) -> bool:
        """
        Войти в систему.

        Отказ сервера -> "Invalid credentials", сбой запроса -> "Login failed".

        Returns:
            True если вход выполнен
        """
        if not self._begin():
            return False

        try:
            ok = auth.login(self.email, self.password)
        except RequestFailedError as e:
            logger.error(f"Login request failed: {e}")
            self._finish(STATUS_ERROR, MSG_LOGIN_FAILED)
            return False
        except Exception:
            # Непредвиденная ошибка не должна оставить форму в состоянии отправки
            self._finish(STATUS_ERROR, MSG_LOGIN_FAILED)
            raise

        if not ok:
            self._finish(STATUS_ERROR, MSG_INVALID_CREDENTIALS)
            return False

        self.password = ""
        self._finish(STATUS_SUCCESS, "")
        return True


@dataclass
class NoticeEditor(SubmitState):
    """Редактор объявления сайта в админке."""

    message: str = ""

    def save(self, api_client: APIClient) -> str:
        """
        Сохранить объявление.

        Отказ и сбой не различаются: в обоих случаях "Failed".

        Returns:
            Текст статуса для отображения
        """
        if not self._begin():
            return self.banner

        try:
            outcome = api_client.post_json(ENDPOINT_ADMIN_NOTICE, {"message": self.message})
        except RequestFailedError as e:
            logger.error(f"Notice save failed: {e}")
            self._finish(STATUS_ERROR, MSG_NOTICE_FAILED)
            return self.banner
        except Exception:
            # Непредвиденная ошибка не должна оставить форму в состоянии отправки
            self._finish(STATUS_ERROR, MSG_NOTICE_FAILED)
            raise

        if isinstance(outcome, Failure):
            self._finish(STATUS_ERROR, MSG_NOTICE_FAILED)
            return self.banner

        status_text = None
        if isinstance(outcome.payload, dict):
            status_text = outcome.payload.get("status")
        self._finish(STATUS_SUCCESS, str(status_text) if status_text else MSG_NOTICE_SAVED)
        return self.banner
