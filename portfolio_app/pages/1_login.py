"""Страница входа."""

import logging

import streamlit as st

from components import render_login_form
from config import PAGE_CONFIGS, app_config
from constants import ROUTE_LOGIN, SESSION_LOGIN_FORM
from core import get_auth_session, get_router, init_session_state
from logging_config import setup_logging
from styles import SIDEBAR_HIDE_STYLE

setup_logging(level=app_config.log_level, json_logs=app_config.log_json)
logger = logging.getLogger(__name__)

# Настройка страницы
page_config = PAGE_CONFIGS["login"]
st.set_page_config(
    page_title=page_config.title,
    page_icon=page_config.icon,
    layout=page_config.layout,
    initial_sidebar_state=page_config.initial_sidebar_state,
)

init_session_state()

auth = get_auth_session()
router = get_router(auth)
router.enforce(ROUTE_LOGIN, st.session_state)

# Скрываем sidebar и навигацию на странице входа
st.markdown(SIDEBAR_HIDE_STYLE, unsafe_allow_html=True)

render_login_form(st.session_state[SESSION_LOGIN_FORM], auth, router)
