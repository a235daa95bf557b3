"""Per-item in-flight flags for mutation actions."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

from gig_organizer.domain.errors import ActionInFlightError


@dataclass
class InFlightRegistry:
    """Tracks which item is busy with which action.

    Any action on a busy item is refused; other items stay available. Scoped
    registries share storage but never see each other's keys.
    """

    scope: str = ""
    _active: dict[str, str] = field(default_factory=dict)

    def scoped(self, scope: str) -> "InFlightRegistry":
        return InFlightRegistry(scope=scope, _active=self._active)

    def _key(self, item_id: str) -> str:
        return f"{self.scope}:{item_id}"

    def is_busy(self, item_id: str) -> bool:
        return self._key(item_id) in self._active

    def busy_action(self, item_id: str) -> str | None:
        return self._active.get(self._key(item_id))

    def busy_items(self) -> dict[str, str]:
        prefix = f"{self.scope}:"
        return {
            key.removeprefix(prefix): action
            for key, action in self._active.items()
            if key.startswith(prefix)
        }

    @asynccontextmanager
    async def claim(self, item_id: str, action: str) -> AsyncIterator[None]:
        """Hold the flag for the duration of the block; always released."""
        key = self._key(item_id)
        if key in self._active:
            raise ActionInFlightError(item_id, self._active[key])
        self._active[key] = action
        try:
            yield
        finally:
            self._active.pop(key, None)
