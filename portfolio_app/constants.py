"""Константы приложения."""

from typing import Final

# ===== HTTP =====
HTTP_SUCCESS_MIN: Final[int] = 200
HTTP_SUCCESS_MAX: Final[int] = 299
CONTENT_TYPE_JSON: Final[str] = "application/json"

# ===== SESSION STATE KEYS =====
SESSION_LS_TOKEN: Final[str] = "ls_token"
SESSION_LS_TOKEN_LOADED: Final[str] = "ls_token_loaded"
SESSION_LS_PENDING_WRITE: Final[str] = "ls_pending_write"
SESSION_LS_WRITE_SEQ: Final[str] = "ls_write_seq"
SESSION_TOKEN_CHECK_ATTEMPTS: Final[str] = "token_check_attempts"
SESSION_NAV_INTENT: Final[str] = "nav_intent"
SESSION_CONTACT_FORM: Final[str] = "contact_form"
SESSION_LOGIN_FORM: Final[str] = "login_form"
SESSION_NOTICE_EDITOR: Final[str] = "notice_editor"

# ===== LOCALSTORAGE KEYS =====
LOCALSTORAGE_AUTH_TOKEN_KEY: Final[str] = "auth_token"

# ===== TOKEN HYDRATION =====
MAX_TOKEN_CHECK_ATTEMPTS: Final[int] = 3

# ===== ROUTES =====
ROUTE_LANDING: Final[str] = "/"
ROUTE_LOGIN: Final[str] = "/login"
ROUTE_ADMIN: Final[str] = "/admin"

PAGE_LANDING: Final[str] = "app.py"
PAGE_LOGIN: Final[str] = "pages/1_login.py"
PAGE_ADMIN: Final[str] = "pages/2_admin.py"

# ===== API ENDPOINTS =====
ENDPOINT_AUTH_LOGIN: Final[str] = "/auth/login"
ENDPOINT_CONTACT: Final[str] = "/contact"
ENDPOINT_ADMIN_NOTICE: Final[str] = "/admin/notice"

# ===== FORM STATUSES =====
STATUS_IDLE: Final[str] = "idle"
STATUS_SUBMITTING: Final[str] = "submitting"
STATUS_SUCCESS: Final[str] = "success"
STATUS_ERROR: Final[str] = "error"

# ===== UI MESSAGES =====
MSG_REQUEST_FAILED: Final[str] = "Request failed {status}"
MSG_INVALID_JSON: Final[str] = "Invalid JSON in response body"
MSG_MESSAGE_SENT: Final[str] = "Message sent!"
MSG_SEND_FAILED: Final[str] = "Failed to send. Try again."
MSG_INVALID_CREDENTIALS: Final[str] = "Invalid credentials"
MSG_LOGIN_FAILED: Final[str] = "Login failed"
MSG_NOTICE_SAVED: Final[str] = "Saved!"
MSG_NOTICE_FAILED: Final[str] = "Failed"
MSG_EMPTY_FIELDS: Final[str] = "Please fill in all fields"
