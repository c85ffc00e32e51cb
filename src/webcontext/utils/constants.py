"""Constants shared by the web context and its session collaborators."""

CONTENT_TYPE_HEADER = 'Content-Type'
SET_COOKIE_HEADER = 'set-cookie'

HTTP_SCHEME = 'http'
HTTPS_SCHEME = 'https'
DEFAULT_PORTS = {HTTP_SCHEME: 80, HTTPS_SCHEME: 443, 'ws': 80, 'wss': 443}

FORM_CONTENT_TYPES = (
    'application/x-www-form-urlencoded',
    'multipart/form-data',
)

SESSION_MANAGER_ATTACHMENT_KEY = 'webcontext.session_manager'
SESSION_CONFIG_ATTACHMENT_KEY = 'webcontext.session_config'
SESSION_ID_ATTACHMENT_KEY = 'webcontext.session_id'

DEFAULT_SESSION_COOKIE_NAME = 'SESSIONID'
DEFAULT_MAX_INACTIVE_INTERVAL = 1800
DEFAULT_REDIS_KEY_PREFIX = 'webcontext.session.'
