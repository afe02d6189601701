from sqladmin import ModelView

from skillcircle.exchange.models import SkillExchange
from skillcircle.profile.models import Availability
from skillcircle.skill.models import SkillOffered, SkillWanted
from skillcircle.user.models import User


class UserAdmin(ModelView, model=User):
    name = "User"
    name_plural = "Users"
    icon = "fa-solid fa-user"

    column_list = [
        User.email,
        User.name,
        User.is_active,
        User.is_verified,
        User.is_private,
        User.is_setup_completed,
        User.is_admin,
        User.id,
        User.external_id,
        User.created_at,
        User.updated_at,
    ]

    column_searchable_list = [User.email, User.name, User.external_id]

    column_sortable_list = [getattr(User, field) for field in User.model_fields]

    # Accounts are deactivated, never removed.
    can_delete = False


class SkillOfferedAdmin(ModelView, model=SkillOffered):
    name = "Offered skill"
    name_plural = "Offered skills"
    icon = "fa-solid fa-chalkboard-user"

    column_list = [
        SkillOffered.title,
        SkillOffered.category,
        SkillOffered.experience_level,
        SkillOffered.is_active,
        SkillOffered.is_public,
        SkillOffered.user_id,
        SkillOffered.created_at,
    ]
    column_searchable_list = [SkillOffered.title, SkillOffered.description]
    column_sortable_list = [
        SkillOffered.title,
        SkillOffered.category,
        SkillOffered.created_at,
    ]
    can_delete = False


class SkillWantedAdmin(ModelView, model=SkillWanted):
    name = "Wanted skill"
    name_plural = "Wanted skills"
    icon = "fa-solid fa-graduation-cap"

    column_list = [
        SkillWanted.title,
        SkillWanted.category,
        SkillWanted.current_level,
        SkillWanted.desired_level,
        SkillWanted.user_id,
        SkillWanted.created_at,
    ]
    column_searchable_list = [SkillWanted.title, SkillWanted.description]
    column_sortable_list = [SkillWanted.title, SkillWanted.created_at]


class AvailabilityAdmin(ModelView, model=Availability):
    name = "Availability"
    name_plural = "Availabilities"
    icon = "fa-solid fa-calendar"

    column_list = [
        Availability.user_id,
        Availability.session_duration,
        Availability.timezone,
        Availability.is_recurring,
        Availability.updated_at,
    ]


class SkillExchangeAdmin(ModelView, model=SkillExchange):
    name = "Skill exchange"
    name_plural = "Skill exchanges"
    icon = "fa-solid fa-handshake"

    column_list = [
        SkillExchange.exchange_title,
        SkillExchange.status,
        SkillExchange.format,
        SkillExchange.teacher_id,
        SkillExchange.learner_id,
        SkillExchange.created_at,
    ]
    column_searchable_list = [SkillExchange.exchange_title]
    column_sortable_list = [
        SkillExchange.status,
        SkillExchange.created_at,
        SkillExchange.updated_at,
    ]

    # Status moves only through the exchange API's guarded transitions.
    can_create = False
    can_edit = False
    can_delete = False
