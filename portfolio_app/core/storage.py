"""Хранилище токена авторизации (localStorage браузера или память)."""

import json
import logging
from typing import Any, Callable, Dict, MutableMapping, Optional, Protocol

import streamlit as st
from streamlit_js_eval import streamlit_js_eval

from constants import (
    LOCALSTORAGE_AUTH_TOKEN_KEY,
    MAX_TOKEN_CHECK_ATTEMPTS,
    SESSION_LS_PENDING_WRITE,
    SESSION_LS_TOKEN,
    SESSION_LS_TOKEN_LOADED,
    SESSION_LS_WRITE_SEQ,
    SESSION_TOKEN_CHECK_ATTEMPTS,
)

logger = logging.getLogger(__name__)


class StorageBackend(Protocol):
    """Минимальный интерфейс key-value хранилища."""

    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


class MemoryStorage:
    """Хранилище в памяти процесса (тесты, headless-режим)."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class BrowserLocalStorage:
    """
    localStorage браузера через streamlit_js_eval.

    Значение зеркалируется в session_state: компонент возвращает результат
    JavaScript только на следующем прогоне скрипта, поэтому чтение идёт из
    зеркала. Запись откладывается и уходит в браузер при sync() в начале
    следующего прогона, который досматривается до конца.
    """

    def __init__(
        self,
        state: Optional[MutableMapping] = None,
        js_eval: Callable[..., Any] = streamlit_js_eval,
    ) -> None:
        self._state = state if state is not None else st.session_state
        self._js_eval = js_eval

    @property
    def is_loaded(self) -> bool:
        return bool(self._state.get(SESSION_LS_TOKEN_LOADED, False))

    def hydrate(self, key: str) -> bool:
        """
        Подтянуть значение из localStorage (один раз за сессию).

        Компонент отдаёт None, пока браузер не ответил; ответ приходит
        вместе с автоматическим перезапуском скрипта. Число прогонов
        без ответа ограничено MAX_TOKEN_CHECK_ATTEMPTS, после чего
        хранилище считается пустым.

        Returns:
            True если проверка токена завершена
        """
        if self.is_loaded:
            return True

        attempts = self._state.get(SESSION_TOKEN_CHECK_ATTEMPTS, 0)
        raw = self._js_eval(
            js_expressions=f"JSON.stringify({{token: localStorage.getItem({json.dumps(key)})}})",
            key=f"ls_read_{key}",
        )

        if raw is None:
            attempts += 1
            self._state[SESSION_TOKEN_CHECK_ATTEMPTS] = attempts
            if attempts < MAX_TOKEN_CHECK_ATTEMPTS:
                logger.info(
                    f"[HYDRATE] Token not loaded yet, waiting for browser "
                    f"(attempt {attempts}/{MAX_TOKEN_CHECK_ATTEMPTS})"
                )
                return False
            logger.warning("[HYDRATE] Max attempts reached, treating storage as empty")
            self._finish_hydration(None)
            return True

        token = None
        try:
            token = json.loads(raw).get("token")
        except (TypeError, ValueError, AttributeError) as e:
            logger.error(f"[HYDRATE] Unexpected localStorage payload: {e}")

        if isinstance(token, str) and token:
            logger.info(f"[HYDRATE] Loaded token from localStorage, length: {len(token)}")
            self._finish_hydration(token)
        else:
            logger.info("[HYDRATE] No token in localStorage")
            self._finish_hydration(None)
        return True

    def _finish_hydration(self, token: Optional[str]) -> None:
        self._state[SESSION_LS_TOKEN] = token
        self._state[SESSION_LS_TOKEN_LOADED] = True
        self._state[SESSION_TOKEN_CHECK_ATTEMPTS] = 0

    def sync(self, key: str) -> None:
        """Отправить отложенную запись в localStorage."""
        pending = self._state.get(SESSION_LS_PENDING_WRITE)
        if pending is None:
            return

        action, value = pending
        if action == "set":
            script = f"localStorage.setItem({json.dumps(key)}, {json.dumps(value)})"
        else:
            script = f"localStorage.removeItem({json.dumps(key)})"

        # Новый ключ компонента на каждую запись, иначе браузер не выполнит скрипт повторно
        seq = self._state.get(SESSION_LS_WRITE_SEQ, 0) + 1
        self._state[SESSION_LS_WRITE_SEQ] = seq
        self._js_eval(js_expressions=script, key=f"ls_write_{key}_{seq}", want_output=False)
        self._state[SESSION_LS_PENDING_WRITE] = None
        logger.info(f"[SYNC_TOKEN] localStorage {action} sent")

    def _mark_written(self) -> None:
        # Запись, сделанная до ответа браузера, важнее сохранённого значения
        self._state[SESSION_LS_TOKEN_LOADED] = True
        self._state[SESSION_TOKEN_CHECK_ATTEMPTS] = 0

    def get_item(self, key: str) -> Optional[str]:
        return self._state.get(SESSION_LS_TOKEN)

    def set_item(self, key: str, value: str) -> None:
        self._state[SESSION_LS_TOKEN] = value
        self._state[SESSION_LS_PENDING_WRITE] = ("set", value)
        self._mark_written()
        logger.info(f"[SAVE_TOKEN] Token queued for localStorage, length: {len(value)}")

    def remove_item(self, key: str) -> None:
        self._state[SESSION_LS_TOKEN] = None
        self._state[SESSION_LS_PENDING_WRITE] = ("remove", None)
        self._mark_written()
        logger.info("[REMOVE_TOKEN] Token removal queued for localStorage")


class TokenStore:
    """
    Ячейка с единственным токеном авторизации.

    Операции синхронные и не бросают исключений: недоступное хранилище
    считается пустым.
    """

    def __init__(
        self,
        backend: StorageBackend,
        key: str = LOCALSTORAGE_AUTH_TOKEN_KEY,
    ) -> None:
        self._backend = backend
        self._key = key

    def get(self) -> Optional[str]:
        """
        Получить текущий токен.

        Returns:
            Токен или None если токена нет
        """
        try:
            token = self._backend.get_item(self._key)
        except Exception as e:
            logger.error(f"[GET_TOKEN] Storage unavailable: {e}", exc_info=True)
            return None
        return token or None

    def set(self, token: str) -> None:
        """
        Сохранить токен, заменив предыдущий.

        Args:
            token: Токен для сохранения
        """
        if not token:
            self.clear()
            return
        try:
            self._backend.set_item(self._key, token)
        except Exception as e:
            logger.error(f"[SAVE_TOKEN] Failed to save token: {e}", exc_info=True)

    def clear(self) -> None:
        """Удалить токен (повторный вызов ничего не делает)."""
        try:
            self._backend.remove_item(self._key)
        except Exception as e:
            logger.error(f"[REMOVE_TOKEN] Failed to remove token: {e}", exc_info=True)
