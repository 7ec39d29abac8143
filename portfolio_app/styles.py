"""Централизованные стили для Streamlit приложения."""

import html
from typing import Final

# ===== COLORS =====
PRIMARY_COLOR: Final[str] = "#2563EB"
ACCENT_COLOR: Final[str] = "#F59E0B"
ERROR_COLOR: Final[str] = "#DC2626"

# ===== SIDEBAR STYLES =====
SIDEBAR_HIDE_STYLE: Final[str] = """
<style>
    [data-testid="stSidebar"] {
        display: none;
    }
    [data-testid="stSidebarNav"] {
        display: none;
    }
</style>
"""

# ===== HERO =====
HERO_STYLE: Final[str] = f"""
<style>
.hero-title {{
    font-size: 2.4rem;
    font-weight: 800;
    background: linear-gradient(135deg, {PRIMARY_COLOR} 0%, {ACCENT_COLOR} 100%);
    -webkit-background-clip: text;
    -webkit-text-fill-color: transparent;
}}
</style>
"""


def get_status_html(text: str, is_error: bool = False) -> str:
    """
    HTML для строки статуса формы.

    Args:
        text: Текст статуса
        is_error: Красный цвет для ошибок

    Returns:
        HTML строка
    """
    color = ERROR_COLOR if is_error else "green"
    role = "alert" if is_error else "status"
    return f'<span role="{role}" style="color: {color};">{html.escape(text)}</span>'
