"""Главная страница: заголовок портфолио и форма обратной связи."""

import logging

import streamlit as st

from components import render_contact_form
from config import PAGE_CONFIGS, app_config
from constants import ROUTE_LANDING, SESSION_CONTACT_FORM
from core import get_api_client, get_auth_session, get_router, init_session_state
from logging_config import setup_logging
from styles import HERO_STYLE

setup_logging(level=app_config.log_level, json_logs=app_config.log_json)
logger = logging.getLogger(__name__)

# Настройка страницы
page_config = PAGE_CONFIGS["main"]
st.set_page_config(
    page_title=page_config.title,
    page_icon=page_config.icon,
    layout=page_config.layout,
    initial_sidebar_state=page_config.initial_sidebar_state,
)

# Инициализация session state
init_session_state()

router = get_router(get_auth_session())
router.enforce(ROUTE_LANDING, st.session_state)

st.markdown(HERO_STYLE, unsafe_allow_html=True)
st.markdown(
    '<h1 class="hero-title">Designing delightful, performant web experiences.</h1>',
    unsafe_allow_html=True,
)
st.page_link("pages/2_admin.py", label="Admin", icon="🛠️")

render_contact_form(st.session_state[SESSION_CONTACT_FORM], get_api_client())
