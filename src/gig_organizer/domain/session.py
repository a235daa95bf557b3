"""Session credential held for one browser session."""

from dataclasses import dataclass


@dataclass
class SessionContext:
    """Bearer token for the current organizer, passed explicitly to the gateway.

    ``changed`` is set whenever the token is replaced or cleared so the HTTP
    layer knows to write or delete the session cookie.
    """

    token: str | None = None
    changed: bool = False

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def set_token(self, token: str) -> None:
        self.token = token
        self.changed = True

    def clear(self) -> None:
        if self.token is not None:
            self.changed = True
        self.token = None
