"""Общие компоненты для Streamlit приложения."""

import streamlit as st

from api_client import APIClient
from constants import STATUS_ERROR
from core.auth import AuthSession
from core.forms import ContactForm, LoginForm, NoticeEditor
from core.router import Router
from styles import get_status_html


def render_status(text: str, is_error: bool = False) -> None:
    """Отображает строку статуса формы."""
    if text:
        st.markdown(get_status_html(text, is_error), unsafe_allow_html=True)


def render_contact_form(form: ContactForm, api_client: APIClient) -> None:
    """
    Отображает форму обратной связи.

    Args:
        form: Состояние формы (хранится в session_state)
        api_client: API клиент
    """
    st.markdown("## Contact")

    with st.form(key="contact_form", clear_on_submit=False):
        form.name = st.text_input("Name", value=form.name)
        form.email = st.text_input("Email", value=form.email)
        form.message = st.text_area("Message", value=form.message)

        submitted = st.form_submit_button(
            "Sending…" if form.is_submitting else "Send",
            disabled=form.is_submitting,
        )

    if submitted:
        error = form.validate()
        if error:
            st.error(error)
        else:
            with st.spinner("Sending…"):
                sent = form.submit(api_client)
            if sent:
                # Перезапуск, чтобы виджеты отрисовались с очищенными полями
                st.rerun()

    render_status(form.banner, is_error=form.status == STATUS_ERROR)


def render_login_form(form: LoginForm, auth: AuthSession, router: Router) -> None:
    """
    Отображает форму входа и после успеха ведёт на исходную страницу.

    Args:
        form: Состояние формы
        auth: Сессия авторизации
        router: Маршрутизатор
    """
    with st.form(key="login_form"):
        st.markdown("### Login")
        form.email = st.text_input("Email", value=form.email, placeholder="you@example.com")
        form.password = st.text_input("Password", type="password")

        submitted = st.form_submit_button(
            "Signing in…" if form.is_submitting else "Sign in",
            disabled=form.is_submitting,
            use_container_width=True,
        )

    if submitted:
        error = form.validate()
        if error:
            st.error(error)
            return
        with st.spinner("Signing in…"):
            ok = form.submit(auth)
        if ok:
            router.complete_login(st.session_state)
            return

    if form.status == STATUS_ERROR:
        st.error(form.banner)


def render_notice_editor(editor: NoticeEditor, api_client: APIClient) -> None:
    """
    Отображает редактор объявления сайта.

    Args:
        editor: Состояние редактора
        api_client: API клиент
    """
    editor.message = st.text_area(
        "Site notice",
        value=editor.message,
        placeholder="Type a notice to save…",
    )

    col_save, col_status = st.columns([1, 3])
    with col_save:
        clicked = st.button(
            "Saving…" if editor.is_submitting else "Save",
            type="primary",
            disabled=editor.is_submitting,
        )
    if clicked:
        with st.spinner("Saving…"):
            editor.save(api_client)

    with col_status:
        render_status(editor.banner, is_error=editor.status == STATUS_ERROR)


def render_logout_button(auth: AuthSession) -> None:
    """Отображает кнопку выхода (редирект на вход сделает проверка доступа)."""
    if st.button("Logout", type="secondary"):
        auth.logout()
        st.rerun()
