"""Tests for per-item in-flight flags."""

import asyncio

import pytest

from gig_organizer.domain.errors import ActionInFlightError
from gig_organizer.services.inflight import InFlightRegistry


def test_busy_item_refuses_any_action_while_others_proceed() -> None:
    async def scenario() -> None:
        registry = InFlightRegistry()
        gate = asyncio.Event()

        async def hold() -> None:
            async with registry.claim("a", "accept"):
                await gate.wait()

        task = asyncio.create_task(hold())
        await asyncio.sleep(0)

        assert registry.is_busy("a")
        assert registry.busy_action("a") == "accept"
        with pytest.raises(ActionInFlightError) as excinfo:
            async with registry.claim("a", "reject"):
                pass
        assert excinfo.value.action == "accept"

        async with registry.claim("b", "reject"):
            assert registry.busy_items() == {"a": "accept", "b": "reject"}

        gate.set()
        await task
        assert not registry.is_busy("a")
        assert registry.busy_items() == {}

    asyncio.run(scenario())


def test_flag_released_when_action_fails() -> None:
    async def scenario() -> None:
        registry = InFlightRegistry()
        with pytest.raises(RuntimeError):
            async with registry.claim("a", "publish"):
                raise RuntimeError("upstream down")
        assert not registry.is_busy("a")

    asyncio.run(scenario())


def test_scopes_share_storage_but_not_keys() -> None:
    async def scenario() -> None:
        root = InFlightRegistry()
        alice = root.scoped("alice")
        bob = root.scoped("bob")
        async with alice.claim("a", "accept"):
            assert alice.is_busy("a")
            assert not bob.is_busy("a")
            assert root.scoped("alice").is_busy("a")

    asyncio.run(scenario())
