"""Organizer dashboard endpoints; every route sits behind the session guard."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from gig_organizer.api.deps import require_session
from gig_organizer.containers import SessionServices  # noqa: TC001
from gig_organizer.domain.base import ApiModel
from gig_organizer.domain.profile import OrganizerProfile
from gig_organizer.services.fanout import Settled, gather_settled
from gig_organizer.services.filtering import ALL_STATUSES
from gig_organizer.services.gigs import GigDraft
from gig_organizer.services.notifications import Notifier
from gig_organizer.views.applications import ApplicationsBoard
from gig_organizer.views.gig_detail import GigDetailView
from gig_organizer.views.gigs import gig_list_view
from gig_organizer.views.lists import IDLE
from gig_organizer.views.messages import ConversationView, chat_list_view

router = APIRouter(prefix="/dashboard", tags=["dashboard"])
_logger = logging.getLogger(__name__)


class DecisionForm(BaseModel):
    """Reason attached to a rejection."""

    reason: str = ""


class CancelForm(BaseModel):
    """Optional reason attached to a gig cancellation."""

    reason: str | None = None


class MessageForm(BaseModel):
    """Body of a chat message."""

    content: str = ""


def _outcome(ok: bool, notifier: Notifier, view: object) -> dict[str, object]:
    return {"ok": ok, "notifications": notifier.as_dicts(), "view": view}


def _section(outcome: Settled[ApiModel], label: str) -> dict[str, Any]:
    if outcome.ok and outcome.value is not None:
        return outcome.value.to_payload()
    _logger.error("Failed to load %s: %s", label, outcome.error)
    return {"state": "error", "error": f"Failed to load {label}. Please try again."}


async def _read(
    call: Callable[[], Awaitable[ApiModel | None]], label: str
) -> dict[str, Any] | None:
    (outcome,) = await gather_settled(call())
    if outcome.ok and outcome.value is None:
        return None
    return _section(outcome, label)


@router.get("")
async def overview(
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    """Statistics, recent gigs and the unread badge."""
    summary = await services.dashboard.load()
    return summary.to_dict()


@router.get("/gigs")
async def list_gigs(
    search: str = "",
    status_filter: str = Query(default=ALL_STATUSES, alias="status"),
    page: int = 0,
    size: int = 20,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    view = gig_list_view(services.gigs, page, size)
    await view.load()
    return view.snapshot(search, status_filter)


@router.post("/gigs", status_code=status.HTTP_201_CREATED)
async def create_gig(
    draft: GigDraft,
    as_draft: bool = False,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    """Create a gig, published later, or saved as a draft without validation."""
    notifier = Notifier()
    gig = await services.gigs.create_gig(draft, as_draft=as_draft)
    notifier.success("Gig saved as draft" if as_draft else "Gig created")
    return _outcome(True, notifier, gig.to_payload() if gig else None)


@router.get("/gigs/{gig_id}")
async def gig_detail(
    gig_id: str, services: SessionServices = Depends(require_session)
) -> dict[str, object]:
    view = _gig_view(gig_id, services, Notifier())
    await view.load()
    return view.snapshot()


@router.put("/gigs/{gig_id}")
async def update_gig(
    gig_id: str,
    draft: GigDraft,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    notifier = Notifier()
    gig = await services.gigs.update_gig(gig_id, draft)
    notifier.success("Gig updated")
    return _outcome(True, notifier, gig.to_payload())


@router.post("/gigs/{gig_id}/publish")
async def publish_gig(
    gig_id: str, services: SessionServices = Depends(require_session)
) -> dict[str, object]:
    return await _gig_action(gig_id, services, lambda view: view.publish())


@router.post("/gigs/{gig_id}/complete")
async def complete_gig(
    gig_id: str, services: SessionServices = Depends(require_session)
) -> dict[str, object]:
    return await _gig_action(gig_id, services, lambda view: view.complete())


@router.post("/gigs/{gig_id}/cancel")
async def cancel_gig(
    gig_id: str,
    form: CancelForm | None = None,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    reason = form.reason if form else None
    return await _gig_action(gig_id, services, lambda view: view.cancel(reason))


@router.post("/gigs/{gig_id}/applications/{application_id}/accept")
async def accept_gig_application(
    gig_id: str,
    application_id: str,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    return await _gig_action(
        gig_id, services, lambda view: view.accept(application_id)
    )


@router.post("/gigs/{gig_id}/applications/{application_id}/reject")
async def reject_gig_application(
    gig_id: str,
    application_id: str,
    form: DecisionForm,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    return await _gig_action(
        gig_id, services, lambda view: view.reject(application_id, form.reason)
    )


@router.get("/applications")
async def list_applications(
    search: str = "",
    status_filter: str = Query(default=ALL_STATUSES, alias="status"),
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    board = _board(services, Notifier())
    await board.load()
    return board.listing.snapshot(search, status_filter)


@router.post("/applications/{application_id}/accept")
async def accept_application(
    application_id: str,
    gig_id: str | None = None,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    """Accept from the board; ``gig_id`` skips loading every gig first."""
    notifier = Notifier()
    board = _board(services, notifier)
    if gig_id is None:
        await board.load()
    ok = await board.accept(application_id, gig_id)
    return await _board_outcome(ok, notifier, board)


@router.post("/applications/{application_id}/reject")
async def reject_application(
    application_id: str,
    form: DecisionForm,
    gig_id: str | None = None,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    notifier = Notifier()
    board = _board(services, notifier)
    if gig_id is None:
        await board.load()
    ok = await board.reject(application_id, form.reason, gig_id)
    return await _board_outcome(ok, notifier, board)


@router.get("/messages")
async def list_chats(
    search: str = "",
    status_filter: str = Query(default=ALL_STATUSES, alias="status"),
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    view = chat_list_view(services.chats)
    await view.load()
    return view.snapshot(search, status_filter)


@router.get("/messages/{chat_id}")
async def conversation(
    chat_id: str, services: SessionServices = Depends(require_session)
) -> dict[str, object]:
    view = _conversation(chat_id, services, Notifier())
    await view.load()
    return view.snapshot()


@router.post("/messages/{chat_id}")
async def send_message(
    chat_id: str,
    form: MessageForm,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    notifier = Notifier()
    view = _conversation(chat_id, services, notifier)
    await view.load()
    ok = await view.send(form.content)
    return _outcome(ok, notifier, view.snapshot())


@router.get("/profile")
async def profile(
    services: SessionServices = Depends(require_session),
) -> dict[str, Any] | None:
    return await _read(services.profile.get_profile, "profile")


@router.put("/profile")
async def update_profile(
    body: OrganizerProfile,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    notifier = Notifier()
    try:
        stored = await services.profile.update_profile(body)
    except Exception:
        _logger.exception("Error updating organizer profile")
        notifier.error("Failed to update profile. Please try again.")
        return _outcome(False, notifier, body.to_payload())
    notifier.success("Profile updated")
    return _outcome(True, notifier, stored.to_payload())


@router.get("/profile/statistics")
async def statistics(
    services: SessionServices = Depends(require_session),
) -> dict[str, Any] | None:
    return await _read(services.profile.get_statistics, "statistics")


@router.get("/performers/{performer_id}")
async def performer(
    performer_id: str, services: SessionServices = Depends(require_session)
) -> dict[str, Any] | None:
    return await _read(
        lambda: services.profile.get_performer(performer_id), "performer profile"
    )


@router.get("/reviews")
async def reviews(
    page: int = 0,
    size: int = 20,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    """Review summary, statistics and both review lists, loaded independently."""
    summary, stats, received, given = await gather_settled(
        services.reviews.summary(),
        services.reviews.statistics(),
        services.reviews.received(page, size),
        services.reviews.given(page, size),
    )
    return {
        "summary": _section(summary, "review summary"),
        "statistics": _section(stats, "review statistics"),
        "received": _section(received, "received reviews"),
        "given": _section(given, "given reviews"),
    }


@router.get("/payments")
async def payments(
    page: int = 0,
    size: int = 20,
    services: SessionServices = Depends(require_session),
) -> dict[str, object]:
    summary, listing = await gather_settled(
        services.payments.summary(),
        services.payments.list_payments(page, size),
    )
    return {
        "summary": _section(summary, "payment summary"),
        "payments": _section(listing, "payments"),
    }


@router.get("/payments/by-gig/{gig_id}")
async def payment_for_gig(
    gig_id: str, services: SessionServices = Depends(require_session)
) -> dict[str, Any] | None:
    return await _read(lambda: services.payments.for_gig(gig_id), "payment")


def _gig_view(
    gig_id: str, services: SessionServices, notifier: Notifier
) -> GigDetailView:
    return GigDetailView(
        gig_id=gig_id,
        gig_service=services.gigs,
        application_service=services.applications,
        inflight=services.inflight,
        notifier=notifier,
    )


async def _gig_action(
    gig_id: str,
    services: SessionServices,
    action: Callable[[GigDetailView], Awaitable[bool]],
) -> dict[str, object]:
    notifier = Notifier()
    view = _gig_view(gig_id, services, notifier)
    ok = await action(view)
    if not ok:
        await view.load()
    return _outcome(ok, notifier, view.snapshot())


def _board(services: SessionServices, notifier: Notifier) -> ApplicationsBoard:
    return ApplicationsBoard(
        service=services.applications,
        inflight=services.inflight,
        notifier=notifier,
    )


async def _board_outcome(
    ok: bool, notifier: Notifier, board: ApplicationsBoard
) -> dict[str, object]:
    if board.listing.state == IDLE:
        await board.load()
    return _outcome(ok, notifier, board.listing.snapshot())


def _conversation(
    chat_id: str, services: SessionServices, notifier: Notifier
) -> ConversationView:
    return ConversationView(
        chat_id=chat_id,
        service=services.chats,
        inflight=services.inflight,
        notifier=notifier,
    )
