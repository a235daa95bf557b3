"""Error types shared across the dashboard."""


class ApiError(Exception):
    """Non-2xx response from the organizer API."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"API request failed with status {status}: {body}")
        self.status = status
        self.body = body


class FormValidationError(ValueError):
    """Client-side validation failure raised before any request is sent."""


class ActionInFlightError(RuntimeError):
    """An action is already running for the same item."""

    def __init__(self, item_id: str, action: str) -> None:
        super().__init__(f"{action} already in progress for {item_id}")
        self.item_id = item_id
        self.action = action
