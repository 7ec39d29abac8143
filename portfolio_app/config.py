"""Конфигурация приложения."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class PageConfig:
    """Конфигурация страницы Streamlit."""

    title: str
    icon: str
    layout: str = "wide"
    initial_sidebar_state: str = "collapsed"


@dataclass
class AppConfig:
    """Основная конфигурация приложения."""

    # API настройки (пустая строка - относительные пути)
    api_base_url: str = os.getenv("API_BASE_URL", "").strip().rstrip("/")

    # Логирование
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    log_json: bool = _env_flag("LOG_JSON")


# Конфигурации страниц
PAGE_CONFIGS = {
    "main": PageConfig(
        title="Vivid Portfolio",
        icon="🎨",
        layout="wide",
    ),
    "login": PageConfig(
        title="Login - Vivid Portfolio",
        icon="🔐",
        layout="centered",
    ),
    "admin": PageConfig(
        title="Admin Panel - Vivid Portfolio",
        icon="🛠️",
        layout="centered",
    ),
}


# Глобальная конфигурация
app_config = AppConfig()
