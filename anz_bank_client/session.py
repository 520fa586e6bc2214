"""HTTP session management for the ANZ internet-banking client."""

import requests

from .config import (
    COOKIE_DETECT_NAME,
    COOKIE_DETECT_VALUE,
    PREAUTH_DOMAIN,
    USER_AGENT,
)


def build_session(verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session that follows redirects, keeps every cookie the
    portal sets, and presents itself as a desktop browser.

    No retry adapter is mounted: each request is attempted exactly once.
    """
    session = requests.Session()
    session.verify = verify_ssl
    session.headers.update({
        "User-Agent": USER_AGENT,
        "Connection": "keep-alive",
    })
    # Tell the portal we have cookies enabled
    session.cookies.set(
        COOKIE_DETECT_NAME,
        COOKIE_DETECT_VALUE,
        domain=PREAUTH_DOMAIN,
        path="/",
    )
    return session
