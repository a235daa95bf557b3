"""Non-blocking user notifications."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Notification:
    """Short message shown to the organizer after an action."""

    level: str
    message: str


@dataclass
class Notifier:
    """Collects notifications raised while handling one request."""

    items: list[Notification] = field(default_factory=list)

    def success(self, message: str) -> None:
        self.items.append(Notification(level="success", message=message))

    def error(self, message: str) -> None:
        self.items.append(Notification(level="error", message=message))

    def as_dicts(self) -> list[dict[str, str]]:
        return [{"level": item.level, "message": item.message} for item in self.items]
