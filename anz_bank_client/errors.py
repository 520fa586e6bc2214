"""Exception hierarchy for the ANZ internet-banking client."""


class AnzBankClientError(Exception):
    """
    Base class for every failure raised by the client.

    *status_code* and *body* carry the HTTP response that triggered the
    error (when there was one) so the caller can diagnose upstream changes.
    """

    def __init__(self, message: str, status_code: int | None = None,
                 body: str | None = None) -> None:
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(self._render())

    def _render(self) -> str:
        if self.status_code is None and not self.body:
            return self.message
        parts = [self.message]
        if self.status_code is not None:
            parts[0] = f"{self.message}: {self.status_code}"
        if self.body:
            parts.append(self.body)
        return "\n\n".join(parts)


class AuthError(AnzBankClientError):
    """The portal rejected the login attempt or the login page was unavailable."""


class NotLoggedInError(AuthError):
    """An operation that needs the account roster ran before login() or load()."""


class ProtocolError(AnzBankClientError):
    """An authenticated request failed or a response no longer has the expected shape."""


class NotFoundError(AnzBankClientError):
    """The requested account is not part of the cached account roster."""
