"""Profile service.

Profile setup writes the user's details, availability and initial skill
lists in a single transaction. Reads assemble the same pieces back, with
privacy flags applied when the viewer is someone else.
"""

import logging
import uuid

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, select

from skillcircle.core.exceptions import InternalError
from skillcircle.profile.models import Availability
from skillcircle.profile.schemas import (
    AvailabilityRead,
    ProfileRead,
    ProfileSetupRequest,
    PublicProfileRead,
)
from skillcircle.skill.models import SkillOffered, SkillWanted
from skillcircle.skill.schemas import SkillOfferedRead, SkillWantedRead
from skillcircle.user.exceptions import UserNotFoundError
from skillcircle.user.models import User
from skillcircle.user.schemas import UserPublicRead

logger = logging.getLogger(__name__)


def _location_from(payload: ProfileSetupRequest) -> dict | None:
    location = payload.location
    if location is None or not location.address:
        return None
    return {
        "address": location.address,
        "is_public": payload.privacy.show_location,
        "coordinates": (
            location.position.model_dump() if location.position else None
        ),
    }


def setup_profile(
    session: Session, user: User, payload: ProfileSetupRequest
) -> ProfileRead:
    """Complete the user's profile.

    An existing availability row is replaced. Skills are appended to any
    the user already has.

    Raises:
        InternalError: If any write fails; nothing is persisted
    """
    user_id = user.id
    try:
        user.name = payload.name
        user.bio = payload.bio
        user.location = _location_from(payload)
        for key, value in payload.privacy.model_dump().items():
            setattr(user, key, value)
        user.is_setup_completed = True
        session.add(user)

        session.exec(delete(Availability).where(col(Availability.user_id) == user_id))
        session.add(
            Availability(user_id=user_id, **payload.availability.model_dump())
        )

        for skill in payload.skills_offered:
            session.add(SkillOffered(user_id=user_id, **skill.model_dump()))
        for skill in payload.skills_wanted:
            session.add(SkillWanted(user_id=user_id, **skill.model_dump()))

        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(
            "Profile setup failed for user %s: %s",
            user_id,
            e,
            extra={"user_id": user_id},
            exc_info=True,
        )
        raise InternalError("Failed to save profile. Please try again.") from e

    session.refresh(user)
    logger.info(
        "Profile setup completed for user %s (%d offered, %d wanted)",
        user.id,
        len(payload.skills_offered),
        len(payload.skills_wanted),
        extra={"user_id": user.id, "action": "profile_setup"},
    )
    return get_own_profile(session, user)


def _availability(session: Session, user_id: uuid.UUID) -> AvailabilityRead | None:
    availability = session.exec(
        select(Availability).where(Availability.user_id == user_id)
    ).first()
    return AvailabilityRead.model_validate(availability) if availability else None


def _skills(
    session: Session, user_id: uuid.UUID, *, public_only: bool = False
) -> tuple[list[SkillOfferedRead], list[SkillWantedRead]]:
    offered_statement = select(SkillOffered).where(SkillOffered.user_id == user_id)
    if public_only:
        offered_statement = offered_statement.where(
            col(SkillOffered.is_active).is_(True),
            col(SkillOffered.is_public).is_(True),
        )
    offered = session.exec(
        offered_statement.order_by(col(SkillOffered.created_at).desc())
    ).all()
    wanted = session.exec(
        select(SkillWanted)
        .where(SkillWanted.user_id == user_id)
        .order_by(col(SkillWanted.created_at).desc())
    ).all()
    return (
        [SkillOfferedRead.model_validate(s) for s in offered],
        [SkillWantedRead.model_validate(s) for s in wanted],
    )


def get_own_profile(session: Session, user: User) -> ProfileRead:
    offered, wanted = _skills(session, user.id)
    return ProfileRead(
        user=UserPublicRead.model_validate(user),
        availability=_availability(session, user.id),
        skills_offered=offered,
        skills_wanted=wanted,
    )


def get_public_profile(
    session: Session, viewer_id: uuid.UUID, user_id: uuid.UUID
) -> PublicProfileRead:
    """Return user_id's profile as seen by viewer_id.

    Private and inactive users are reported as not found to everyone but
    themselves. Offered skills are limited to active, public ones.

    Raises:
        UserNotFoundError: If the user does not exist or is hidden
    """
    user = session.get(User, user_id)
    is_self = viewer_id == user_id
    if user is None or (not is_self and (user.is_private or not user.is_active)):
        raise UserNotFoundError()

    offered, wanted = _skills(session, user.id, public_only=not is_self)
    show = is_self or user.show_location
    return PublicProfileRead(
        id=user.id,
        name=user.name,
        profile_image=user.profile_image,
        bio=user.bio,
        location=user.location if show else None,
        is_verified=user.is_verified,
        allow_direct_contact=user.allow_direct_contact,
        availability=_availability(session, user.id),
        skills_offered=offered if is_self or user.show_skills_offered else None,
        skills_wanted=wanted if is_self or user.show_skills_wanted else None,
    )
