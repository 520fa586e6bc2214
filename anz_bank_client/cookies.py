"""
Cookie-jar persistence.

The portal is purely cookie-authenticated, so saving the jar is enough to
resume a logged-in session later.  Cookies are dumped as a YAML list of
plain mappings; session cookies (no expiry) are kept, already-expired
cookies are dropped.
"""

from http.cookiejar import Cookie

import yaml
from requests.cookies import RequestsCookieJar, create_cookie

_HTTP_ONLY = "HttpOnly"


def _is_http_only(cookie: Cookie) -> bool:
    # Attribute names are stored as the server sent them
    return any(name.lower() == _HTTP_ONLY.lower() for name in cookie._rest)


def dump_cookies(jar: RequestsCookieJar) -> str:
    """Serialise every live cookie in *jar* to a YAML document."""
    records = []
    for cookie in jar:
        if cookie.is_expired():
            continue
        records.append({
            "name": cookie.name,
            "value": cookie.value,
            "domain": cookie.domain,
            "path": cookie.path,
            "secure": bool(cookie.secure),
            "expires": cookie.expires,
            "discard": bool(cookie.discard),
            "http_only": _is_http_only(cookie),
        })
    return yaml.safe_dump(records, default_flow_style=False, sort_keys=False)


def load_cookies(jar: RequestsCookieJar, text: str) -> int:
    """
    Replace the contents of *jar* with the cookies in the YAML *text*.

    Returns the number of cookies loaded.  Raises ValueError when *text* is
    not a YAML list of cookie mappings.
    """
    try:
        records = yaml.safe_load(text) or []
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid cookie dump: {exc}") from exc
    if not isinstance(records, list):
        raise ValueError("Invalid cookie dump: expected a list of cookies")

    cookies = []
    for record in records:
        if not isinstance(record, dict) or "name" not in record:
            raise ValueError(f"Invalid cookie record: {record!r}")
        cookies.append(create_cookie(
            record["name"],
            record.get("value", ""),
            domain=record.get("domain", ""),
            path=record.get("path", "/"),
            secure=record.get("secure", False),
            expires=record.get("expires"),
            discard=record.get("discard", True),
            rest={_HTTP_ONLY: None} if record.get("http_only") else {},
        ))

    jar.clear()
    for cookie in cookies:
        jar.set_cookie(cookie)
    return len(cookies)
