"""Configuration constants for the ANZ internet-banking client."""

# Credentials can also be supplied via ANZ_USERNAME / ANZ_PASSWORD env vars
USERNAME_ENV = "ANZ_USERNAME"
PASSWORD_ENV = "ANZ_PASSWORD"

PREAUTH_DOMAIN = "digital.anz.co.nz"
SECURE_DOMAIN  = "secure.anz.co.nz"

LOGIN_URL       = f"https://{PREAUTH_DOMAIN}/preauth/web/service/login"
SESSION_URL     = (
    f"https://{SECURE_DOMAIN}/IBCS/service/session"
    "?referrer=https%3A%2F%2Fsecure.anz.co.nz%2F"
)
INITIALISE_URL   = f"https://{SECURE_DOMAIN}/IBCS/service/home/initialise"
TRANSACTIONS_URL = f"https://{SECURE_DOMAIN}/IBCS/service/api/transactions"
GOODBYE_URL      = f"https://{SECURE_DOMAIN}/IBCS/service/goodbye"

# The portal refuses to log in unless it believes cookies are enabled
COOKIE_DETECT_NAME  = "IBCookieDetect"
COOKIE_DETECT_VALUE = "1"

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/111.0.0.0 Safari/537.36"
)

REQUEST_TIMEOUT = 30    # seconds per HTTP request

LOGIN_SUCCESS_CODE = "success"

# Env var naming the session file used when --session-file is not given
SESSION_FILE_ENV = "ANZ_SESSION_FILE"
