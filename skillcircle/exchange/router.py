"""Skill exchange domain router.

Learners create requests for offered skills; teachers respond to and start
them; either side completes them.
"""

import uuid

from fastapi import APIRouter, Depends

from skillcircle.auth.dependencies import CurrentUserDep, SetupUserDep, require_auth
from skillcircle.core.constants import CommonResponses, Routes
from skillcircle.core.deps import SessionDep, SettingsDep
from skillcircle.exchange import service
from skillcircle.exchange.schemas import (
    ExchangeActionResponse,
    ExchangeCreate,
    ExchangeListResponse,
    ExchangeRead,
    ExchangeRespond,
    ExchangeStart,
)

router = APIRouter(
    prefix=Routes.EXCHANGE.prefix,
    tags=[Routes.EXCHANGE.tag],
    dependencies=[Depends(require_auth)],
    responses={
        **CommonResponses.UNAUTHORIZED,
        **CommonResponses.BAD_REQUEST,
    },
)

_ACTION_RESPONSES = {**CommonResponses.NOT_FOUND, **CommonResponses.FORBIDDEN}


@router.post(
    "/create",
    response_model=ExchangeActionResponse,
    responses={**CommonResponses.NOT_FOUND, **CommonResponses.FORBIDDEN},
)
async def create_exchange(
    payload: ExchangeCreate, user: SetupUserDep, session: SessionDep
):
    """Request another user's offered skill. Requires a completed profile."""
    return service.create_exchange(session, user.id, payload)


# Declared before /{exchange_id} so "requests" is not parsed as an id.
@router.get("/requests", response_model=ExchangeListResponse)
async def list_exchanges(
    user: CurrentUserDep,
    session: SessionDep,
    settings: SettingsDep,
    type: str | None = None,
    status: str | None = None,
    page: str | None = None,
    limit: str | None = None,
):
    """List the current user's exchanges.

    type is incoming (as teacher), outgoing (as learner) or all. page and
    limit fall back to 1 and 10 when missing or invalid.
    """
    params = service.ExchangeListParams.from_query(
        type=type,
        status=status,
        page=page,
        limit=limit,
        max_limit=settings.max_page_size,
    )
    return service.list_exchanges(session, user.id, params)


@router.get(
    "/{exchange_id}", response_model=ExchangeRead, responses=_ACTION_RESPONSES
)
async def get_exchange(
    exchange_id: uuid.UUID, user: CurrentUserDep, session: SessionDep
):
    return service.get_exchange(session, user.id, exchange_id)


@router.patch(
    "/{exchange_id}/respond",
    response_model=ExchangeActionResponse,
    responses=_ACTION_RESPONSES,
)
async def respond_to_exchange(
    exchange_id: uuid.UUID,
    payload: ExchangeRespond,
    user: CurrentUserDep,
    session: SessionDep,
):
    """Accept or reject a pending request. Teacher only."""
    return service.respond_to_exchange(
        session, user.id, exchange_id, payload.action, payload.response_message
    )


@router.patch(
    "/{exchange_id}/start",
    response_model=ExchangeActionResponse,
    responses=_ACTION_RESPONSES,
)
async def start_exchange(
    exchange_id: uuid.UUID,
    user: CurrentUserDep,
    session: SessionDep,
    payload: ExchangeStart | None = None,
):
    """Start an accepted exchange. Teacher only."""
    note = payload.progress_note if payload else None
    return service.start_exchange(session, user.id, exchange_id, note)


@router.patch(
    "/{exchange_id}/complete",
    response_model=ExchangeActionResponse,
    responses=_ACTION_RESPONSES,
)
async def complete_exchange(
    exchange_id: uuid.UUID, user: CurrentUserDep, session: SessionDep
):
    return service.complete_exchange(session, user.id, exchange_id)


@router.patch(
    "/{exchange_id}/cancel",
    response_model=ExchangeActionResponse,
    responses=_ACTION_RESPONSES,
)
async def cancel_exchange(
    exchange_id: uuid.UUID, user: CurrentUserDep, session: SessionDep
):
    """Withdraw a pending request. Requester only."""
    return service.cancel_exchange(session, user.id, exchange_id)
