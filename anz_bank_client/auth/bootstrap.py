"""
Extraction of the login key material and CSRF token from portal pages.

The login page embeds the RSA key in inline JavaScript and the session page
sets the CSRF token the same way.  Scraping that text is the part most
likely to break when the portal changes, so it lives behind
:class:`BootstrapExtractor` and can be replaced without touching
:class:`anz_bank_client.client.Session`.
"""

import re
from abc import ABC, abstractmethod
from typing import NamedTuple

from ..errors import ProtocolError


class LoginKeys(NamedTuple):
    encryption_key: str
    encryption_key_id: str


class BootstrapExtractor(ABC):
    """Pulls credential-bootstrap values out of raw page bodies."""

    @abstractmethod
    def extract_login_keys(self, text: str) -> LoginKeys:
        """Return the RSA key and key id, or raise ProtocolError."""

    @abstractmethod
    def extract_csrf_token(self, text: str) -> str:
        """Return the session CSRF token, or raise ProtocolError."""


class PatternBootstrapExtractor(BootstrapExtractor):
    """Regex-based extractor matching the portal's inline JavaScript."""

    ENCRYPTION_KEY_RE = re.compile(r"""encryptionKey\s*:\s*["']([^"']*)["']""")
    ENCRYPTION_KEY_ID_RE = re.compile(r"""encryptionKeyId\s*:\s*["']([^"']*)["']""")
    CSRF_TOKEN_RE = re.compile(r"""sessionCsrfToken\s*=\s*["']([^"']*)["']\s*;""")

    def extract_login_keys(self, text: str) -> LoginKeys:
        key = self.ENCRYPTION_KEY_RE.search(text)
        key_id = self.ENCRYPTION_KEY_ID_RE.search(text)
        if not key:
            raise ProtocolError("Could not find encryptionKey in login page", body=text)
        if not key_id:
            raise ProtocolError("Could not find encryptionKeyId in login page", body=text)
        return LoginKeys(key.group(1), key_id.group(1))

    def extract_csrf_token(self, text: str) -> str:
        m = self.CSRF_TOKEN_RE.search(text)
        if not m:
            raise ProtocolError("Could not find CSRF token in page body", body=text)
        return m.group(1)
