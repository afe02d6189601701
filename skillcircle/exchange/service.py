"""Skill exchange request engine.

Creation, the teacher's response, the start/complete/cancel transitions and
per-user listing of exchanges.

Every status change is a conditional UPDATE guarded by the expected source
status, so two concurrent actors cannot both move the same exchange. Duplicate
active requests are caught by a pre-insert check and, for concurrent creates,
by the partial unique index on (learner_id, offered_skill_id).
"""

import logging
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy import ColumnElement, func, or_, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import aliased
from sqlmodel import Session, col, select

from skillcircle.core.mixins import utc_now
from skillcircle.core.pagination import PageRequest, Pagination
from skillcircle.core.query import parse_enum_filter
from skillcircle.exchange.exceptions import (
    DuplicateExchangeRequestError,
    ExchangeForbiddenError,
    ExchangeNotFoundError,
    InvalidExchangeStatusError,
    SelfExchangeRequestError,
    SkillUnavailableError,
)
from skillcircle.exchange.models import (
    ACTIVE_STATUSES,
    ExchangeRole,
    ExchangeStatus,
    SkillExchange,
)
from skillcircle.exchange.schemas import (
    ExchangeAction,
    ExchangeActionResponse,
    ExchangeCreate,
    ExchangeListResponse,
    ExchangeRead,
    OfferedSkillSummary,
    WantedSkillSummary,
)
from skillcircle.skill.exceptions import SkillNotFoundError
from skillcircle.skill.models import SkillOffered, SkillWanted
from skillcircle.user.models import User
from skillcircle.user.schemas import UserSummary

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 10

ACCEPTED_NOTE = "Request accepted by teacher"
REJECTED_NOTE = "Request rejected by teacher"

Teacher = aliased(User, name="teacher")
Learner = aliased(User, name="learner")


class ExchangeListType(str, Enum):
    incoming = "incoming"
    outgoing = "outgoing"
    all = "all"


@dataclass(frozen=True)
class ExchangeListParams:
    """Normalized listing input."""

    page: PageRequest
    type: ExchangeListType = ExchangeListType.all
    status: ExchangeStatus | None = None

    @classmethod
    def from_query(
        cls,
        *,
        type: str | None = None,
        status: str | None = None,
        page: str | int | None = None,
        limit: str | int | None = None,
        max_limit: int = 100,
    ) -> "ExchangeListParams":
        """Build params from raw query-string values.

        A missing type lists both directions; "all" (any case) is accepted
        for status.

        Raises:
            ValidationError: If type or status is unknown
        """
        list_type = parse_enum_filter(
            type.lower() if type else type, ExchangeListType, "type"
        )
        return cls(
            page=PageRequest.from_query(
                page, limit, default_limit=DEFAULT_LIST_LIMIT, max_limit=max_limit
            ),
            type=list_type or ExchangeListType.all,
            status=parse_enum_filter(
                status.upper() if status else status, ExchangeStatus, "status"
            ),
        )


def role_of(exchange: SkillExchange, viewer_id: uuid.UUID) -> ExchangeRole:
    """Return the viewer's side of an exchange."""
    if exchange.teacher_id == viewer_id:
        return ExchangeRole.teacher
    return ExchangeRole.learner


def _detail_statement():
    return (
        select(SkillExchange, Teacher, Learner, SkillOffered, SkillWanted)
        .join(Teacher, col(SkillExchange.teacher_id) == Teacher.id)
        .join(Learner, col(SkillExchange.learner_id) == Learner.id)
        .join(
            SkillOffered, col(SkillExchange.offered_skill_id) == col(SkillOffered.id)
        )
        .outerjoin(
            SkillWanted, col(SkillExchange.wanted_skill_id) == col(SkillWanted.id)
        )
    )


def _to_read(row: Any, viewer_id: uuid.UUID) -> ExchangeRead:
    exchange, teacher, learner, offered, wanted = row
    return ExchangeRead.model_validate(
        {
            **exchange.model_dump(),
            "teacher": UserSummary.model_validate(teacher),
            "learner": UserSummary.model_validate(learner),
            "offered_skill": OfferedSkillSummary.model_validate(offered),
            "wanted_skill": (
                WantedSkillSummary.model_validate(wanted) if wanted else None
            ),
            "user_role": role_of(exchange, viewer_id),
        }
    )


def _read_exchange(
    session: Session, exchange_id: uuid.UUID, viewer_id: uuid.UUID
) -> ExchangeRead:
    row = session.exec(
        _detail_statement().where(col(SkillExchange.id) == exchange_id)
    ).one()
    return _to_read(row, viewer_id)


def _get_or_404(session: Session, exchange_id: uuid.UUID) -> SkillExchange:
    exchange = session.get(SkillExchange, exchange_id)
    if exchange is None:
        raise ExchangeNotFoundError()
    return exchange


def _transition(
    session: Session,
    exchange: SkillExchange,
    expected: ExchangeStatus,
    verb: str,
    **values: Any,
) -> None:
    """Move exchange out of expected status, or fail if someone else did first.

    Raises:
        InvalidExchangeStatusError: If the row is no longer in expected status
    """
    if exchange.status != expected:
        raise InvalidExchangeStatusError(exchange.status, verb)

    result = session.exec(
        update(SkillExchange)
        .where(
            col(SkillExchange.id) == exchange.id,
            col(SkillExchange.status) == expected,
        )
        .values(**values)
    )
    if result.rowcount == 0:
        session.rollback()
        session.refresh(exchange)
        raise InvalidExchangeStatusError(exchange.status, verb)
    session.commit()


def create_exchange(
    session: Session, learner_id: uuid.UUID, payload: ExchangeCreate
) -> ExchangeActionResponse:
    """Create a PENDING request from learner_id for an offered skill.

    Raises:
        SkillNotFoundError: If the skill is missing, inactive or not public,
            or the wanted skill is not the learner's
        SelfExchangeRequestError: If the learner owns the skill
        SkillUnavailableError: If the owner is inactive or private
        DuplicateExchangeRequestError: If an active request already exists
    """
    skill = session.get(SkillOffered, payload.offered_skill_id)
    if skill is None or not (skill.is_active and skill.is_public):
        raise SkillNotFoundError()
    if skill.user_id == learner_id:
        raise SelfExchangeRequestError()

    owner = session.get(User, skill.user_id)
    if owner is None or not owner.is_active or owner.is_private:
        raise SkillUnavailableError()

    if payload.wanted_skill_id is not None:
        wanted = session.get(SkillWanted, payload.wanted_skill_id)
        if wanted is None or wanted.user_id != learner_id:
            raise SkillNotFoundError("Wanted skill not found")

    existing = session.exec(
        select(SkillExchange.id).where(
            SkillExchange.learner_id == learner_id,
            SkillExchange.offered_skill_id == skill.id,
            col(SkillExchange.status).in_(ACTIVE_STATUSES),
        )
    ).first()
    if existing is not None:
        raise DuplicateExchangeRequestError()

    exchange = SkillExchange(
        teacher_id=skill.user_id,
        learner_id=learner_id,
        offered_skill_id=skill.id,
        wanted_skill_id=payload.wanted_skill_id,
        exchange_title=payload.exchange_title,
        agreement_terms=payload.agreement_terms,
        format=payload.format,
        estimated_hours=payload.estimated_hours,
        status=ExchangeStatus.PENDING,
    )
    session.add(exchange)
    try:
        session.commit()
    except IntegrityError as e:
        # Lost a race with a concurrent create for the same skill.
        session.rollback()
        raise DuplicateExchangeRequestError() from e

    logger.info(
        "Exchange %s requested for skill %s",
        exchange.id,
        skill.id,
        extra={"exchange_id": exchange.id, "user_id": learner_id, "action": "create"},
    )
    return ExchangeActionResponse(
        data=_read_exchange(session, exchange.id, learner_id),
        message="Skill exchange request created successfully!",
    )


def respond_to_exchange(
    session: Session,
    user_id: uuid.UUID,
    exchange_id: uuid.UUID,
    action: ExchangeAction,
    response_message: str | None = None,
) -> ExchangeActionResponse:
    """Accept or reject a PENDING request as its teacher.

    Raises:
        ExchangeNotFoundError: If the exchange does not exist
        ExchangeForbiddenError: If user_id is not the teacher
        InvalidExchangeStatusError: If the exchange is not PENDING
    """
    exchange = _get_or_404(session, exchange_id)
    if exchange.teacher_id != user_id:
        raise ExchangeForbiddenError()

    if action == ExchangeAction.accept:
        _transition(
            session,
            exchange,
            ExchangeStatus.PENDING,
            "respond to",
            status=ExchangeStatus.ACCEPTED,
            scheduled_start=utc_now(),
            progress_notes=response_message or ACCEPTED_NOTE,
        )
        message = "Request accepted successfully!"
    else:
        _transition(
            session,
            exchange,
            ExchangeStatus.PENDING,
            "respond to",
            status=ExchangeStatus.CANCELLED,
            progress_notes=response_message or REJECTED_NOTE,
        )
        message = "Request rejected successfully!"

    logger.info(
        "Exchange %s %sed by teacher %s",
        exchange_id,
        action.value,
        user_id,
        extra={
            "exchange_id": exchange_id,
            "user_id": user_id,
            "action": action.value,
        },
    )
    return ExchangeActionResponse(
        data=_read_exchange(session, exchange_id, user_id), message=message
    )


def start_exchange(
    session: Session,
    user_id: uuid.UUID,
    exchange_id: uuid.UUID,
    progress_note: str | None = None,
) -> ExchangeActionResponse:
    """Begin an ACCEPTED exchange as its teacher.

    Raises:
        ExchangeNotFoundError: If the exchange does not exist
        ExchangeForbiddenError: If user_id is not the teacher
        InvalidExchangeStatusError: If the exchange is not ACCEPTED
    """
    exchange = _get_or_404(session, exchange_id)
    if exchange.teacher_id != user_id:
        raise ExchangeForbiddenError("Only the teacher can start this exchange")

    values: dict[str, Any] = {
        "status": ExchangeStatus.IN_PROGRESS,
        "actual_start": utc_now(),
    }
    if progress_note:
        values["progress_notes"] = progress_note
    _transition(session, exchange, ExchangeStatus.ACCEPTED, "start", **values)

    logger.info(
        "Exchange %s started",
        exchange_id,
        extra={"exchange_id": exchange_id, "user_id": user_id, "action": "start"},
    )
    return ExchangeActionResponse(
        data=_read_exchange(session, exchange_id, user_id),
        message="Exchange started successfully!",
    )


def complete_exchange(
    session: Session, user_id: uuid.UUID, exchange_id: uuid.UUID
) -> ExchangeActionResponse:
    """Mark an IN_PROGRESS exchange completed. Either participant may do this.

    Raises:
        ExchangeNotFoundError: If the exchange does not exist
        ExchangeForbiddenError: If user_id is not a participant
        InvalidExchangeStatusError: If the exchange is not IN_PROGRESS
    """
    exchange = _get_or_404(session, exchange_id)
    if user_id not in (exchange.teacher_id, exchange.learner_id):
        raise ExchangeForbiddenError("You are not a participant in this exchange")

    _transition(
        session,
        exchange,
        ExchangeStatus.IN_PROGRESS,
        "complete",
        status=ExchangeStatus.COMPLETED,
        completed_at=utc_now(),
    )

    logger.info(
        "Exchange %s completed",
        exchange_id,
        extra={"exchange_id": exchange_id, "user_id": user_id, "action": "complete"},
    )
    return ExchangeActionResponse(
        data=_read_exchange(session, exchange_id, user_id),
        message="Exchange completed successfully!",
    )


def cancel_exchange(
    session: Session, user_id: uuid.UUID, exchange_id: uuid.UUID
) -> ExchangeActionResponse:
    """Withdraw a PENDING request as its learner.

    Raises:
        ExchangeNotFoundError: If the exchange does not exist
        ExchangeForbiddenError: If user_id is not the learner
        InvalidExchangeStatusError: If the exchange is not PENDING
    """
    exchange = _get_or_404(session, exchange_id)
    if exchange.learner_id != user_id:
        raise ExchangeForbiddenError("Only the requester can cancel this request")

    _transition(
        session,
        exchange,
        ExchangeStatus.PENDING,
        "cancel",
        status=ExchangeStatus.CANCELLED,
        progress_notes="Request cancelled by learner",
    )

    logger.info(
        "Exchange %s cancelled by learner",
        exchange_id,
        extra={"exchange_id": exchange_id, "user_id": user_id, "action": "cancel"},
    )
    return ExchangeActionResponse(
        data=_read_exchange(session, exchange_id, user_id),
        message="Request cancelled successfully!",
    )


def get_exchange(
    session: Session, user_id: uuid.UUID, exchange_id: uuid.UUID
) -> ExchangeRead:
    """Read one exchange as one of its participants.

    Raises:
        ExchangeNotFoundError: If the exchange does not exist
        ExchangeForbiddenError: If user_id is not a participant
    """
    exchange = _get_or_404(session, exchange_id)
    if user_id not in (exchange.teacher_id, exchange.learner_id):
        raise ExchangeForbiddenError("You are not a participant in this exchange")
    return _read_exchange(session, exchange_id, user_id)


def build_exchange_list_filters(
    user_id: uuid.UUID, params: ExchangeListParams
) -> list[ColumnElement[bool]]:
    if params.type == ExchangeListType.incoming:
        filters = [col(SkillExchange.teacher_id) == user_id]
    elif params.type == ExchangeListType.outgoing:
        filters = [col(SkillExchange.learner_id) == user_id]
    else:
        filters = [
            or_(
                col(SkillExchange.teacher_id) == user_id,
                col(SkillExchange.learner_id) == user_id,
            )
        ]

    if params.status is not None:
        filters.append(col(SkillExchange.status) == params.status)
    return filters


def list_exchanges(
    session: Session, user_id: uuid.UUID, params: ExchangeListParams
) -> ExchangeListResponse:
    """Return one page of the user's exchanges, newest first."""
    filters = build_exchange_list_filters(user_id, params)

    total_count = session.exec(
        select(func.count()).select_from(SkillExchange).where(*filters)
    ).one()

    rows = []
    if not params.page.is_past_end(total_count):
        rows = session.exec(
            _detail_statement()
            .where(*filters)
            .order_by(
                col(SkillExchange.created_at).desc(), col(SkillExchange.id).desc()
            )
            .offset(params.page.offset)
            .limit(params.page.limit)
        ).all()

    return ExchangeListResponse(
        exchanges=[_to_read(row, user_id) for row in rows],
        pagination=Pagination.build(params.page, total_count),
    )
