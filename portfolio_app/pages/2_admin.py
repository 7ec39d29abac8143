"""Админ-панель (доступна только с токеном)."""

import logging

import streamlit as st

from components import render_logout_button, render_notice_editor
from config import PAGE_CONFIGS, app_config
from constants import ROUTE_ADMIN, SESSION_NOTICE_EDITOR
from core import get_api_client, get_auth_session, get_router, init_session_state
from logging_config import setup_logging

setup_logging(level=app_config.log_level, json_logs=app_config.log_json)
logger = logging.getLogger(__name__)

# Конфигурация страницы
page_config = PAGE_CONFIGS["admin"]
st.set_page_config(
    page_title=page_config.title,
    page_icon=page_config.icon,
    layout=page_config.layout,
    initial_sidebar_state=page_config.initial_sidebar_state,
)

# Пока браузер не вернул токен из localStorage, страница не решает о доступе
if not init_session_state():
    st.stop()

# Проверка доступа (без токена - переход на /login с запоминанием /admin)
auth = get_auth_session()
router = get_router(auth)
if not router.enforce(ROUTE_ADMIN, st.session_state):
    st.stop()

col_title, col_logout = st.columns([4, 1])
with col_title:
    st.markdown("# Admin Panel")
with col_logout:
    render_logout_button(auth)

st.markdown("Update portfolio content (example protected area).")

render_notice_editor(st.session_state[SESSION_NOTICE_EDITOR], get_api_client())
