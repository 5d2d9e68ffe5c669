# Environment variables
ENV_TIMEOUT = "ROUTEKIT_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "ROUTEKIT_FOLLOW_REDIRECTS"
ENV_DISABLE_SSL_VERIFY = "ROUTEKIT_DISABLE_SSL_VERIFY"

# Headers
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_PRAGMA = "Pragma"
HEADER_USER_AGENT = "User-Agent"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM_URLENCODED = "application/x-www-form-urlencoded; charset=utf-8"

# Request defaults
DEFAULT_TIMEOUT = 10.0
NO_CACHE = "no-cache"

# Headers whose values are never written to logs
SENSITIVE_HEADERS = frozenset(
    {"authorization", "proxy-authorization", "cookie", "x-api-key"}
)

PACKAGE_NAME = "routekit"
