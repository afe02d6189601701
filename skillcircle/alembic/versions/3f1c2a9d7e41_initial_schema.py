"""initial_schema

Revision ID: 3f1c2a9d7e41
Revises:
Create Date: 2026-10-18 10:12:31.504118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7e41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SKILL_CATEGORIES = (
    'TECHNOLOGY', 'BUSINESS', 'CREATIVE', 'LANGUAGES', 'MUSIC', 'SPORTS',
    'COOKING', 'CRAFTS', 'HEALTH_WELLNESS', 'EDUCATION', 'AUTOMOTIVE',
    'HOME_GARDEN', 'OTHER',
)
EXPERIENCE_LEVELS = ('BEGINNER', 'INTERMEDIATE', 'ADVANCED', 'EXPERT')
SESSION_DURATIONS = (
    'THIRTY_MINUTES', 'ONE_HOUR', 'TWO_HOURS', 'THREE_HOURS', 'HALF_DAY',
    'FULL_DAY', 'FLEXIBLE',
)
EXCHANGE_FORMATS = ('ONLINE_ONLY', 'IN_PERSON_ONLY', 'HYBRID')
EXCHANGE_STATUSES = ('PENDING', 'ACCEPTED', 'IN_PROGRESS', 'COMPLETED', 'CANCELLED')

ACTIVE_STATUS_CLAUSE = sa.text("status IN ('PENDING', 'ACCEPTED', 'IN_PROGRESS')")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('external_id', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('profile_image', sqlmodel.sql.sqltypes.AutoString(length=1024), nullable=True),
        sa.Column('bio', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=True),
        sa.Column('location', sa.JSON(), nullable=True),
        sa.Column('is_private', sa.Boolean(), nullable=False),
        sa.Column('show_location', sa.Boolean(), nullable=False),
        sa.Column('show_skills_offered', sa.Boolean(), nullable=False),
        sa.Column('show_skills_wanted', sa.Boolean(), nullable=False),
        sa.Column('show_ratings', sa.Boolean(), nullable=False),
        sa.Column('allow_direct_contact', sa.Boolean(), nullable=False),
        sa.Column('is_setup_completed', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_verified', sa.Boolean(), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_external_id'), 'users', ['external_id'], unique=True)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_created_at'), 'users', ['created_at'], unique=False)

    op.create_table(
        'skills_offered',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column('category', sa.Enum(*SKILL_CATEGORIES, name='skillcategory'), nullable=False),
        sa.Column('experience_level', sa.Enum(*EXPERIENCE_LEVELS, name='experiencelevel'), nullable=False),
        sa.Column('years_of_experience', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('is_public', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_skills_offered_user_id'), 'skills_offered', ['user_id'], unique=False)
    op.create_index(op.f('ix_skills_offered_category'), 'skills_offered', ['category'], unique=False)
    op.create_index(op.f('ix_skills_offered_experience_level'), 'skills_offered', ['experience_level'], unique=False)
    op.create_index(op.f('ix_skills_offered_created_at'), 'skills_offered', ['created_at'], unique=False)

    op.create_table(
        'skills_wanted',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('description', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column('category', sa.Enum(*SKILL_CATEGORIES, name='skillcategory', create_type=False), nullable=False),
        sa.Column('current_level', sa.Enum(*EXPERIENCE_LEVELS, name='experiencelevel', create_type=False), nullable=True),
        sa.Column('desired_level', sa.Enum(*EXPERIENCE_LEVELS, name='experiencelevel', create_type=False), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_skills_wanted_user_id'), 'skills_wanted', ['user_id'], unique=False)
    op.create_index(op.f('ix_skills_wanted_category'), 'skills_wanted', ['category'], unique=False)
    op.create_index(op.f('ix_skills_wanted_created_at'), 'skills_wanted', ['created_at'], unique=False)

    op.create_table(
        'availabilities',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('days_of_week', sa.JSON(), nullable=False),
        sa.Column('time_slots', sa.JSON(), nullable=False),
        sa.Column('session_duration', sa.Enum(*SESSION_DURATIONS, name='sessionduration'), nullable=False),
        sa.Column('timezone', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('is_recurring', sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_availabilities_user_id'), 'availabilities', ['user_id'], unique=True)
    op.create_index(op.f('ix_availabilities_created_at'), 'availabilities', ['created_at'], unique=False)

    op.create_table(
        'skill_exchanges',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('teacher_id', sa.Uuid(), nullable=False),
        sa.Column('learner_id', sa.Uuid(), nullable=False),
        sa.Column('offered_skill_id', sa.Uuid(), nullable=False),
        sa.Column('wanted_skill_id', sa.Uuid(), nullable=True),
        sa.Column('exchange_title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('agreement_terms', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('format', sa.Enum(*EXCHANGE_FORMATS, name='exchangeformat'), nullable=False),
        sa.Column('estimated_hours', sa.Float(), nullable=True),
        sa.Column('status', sa.Enum(*EXCHANGE_STATUSES, name='exchangestatus'), nullable=False),
        sa.Column('scheduled_start', sa.DateTime(), nullable=True),
        sa.Column('actual_start', sa.DateTime(), nullable=True),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('progress_notes', sqlmodel.sql.sqltypes.AutoString(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['teacher_id'], ['users.id']),
        sa.ForeignKeyConstraint(['learner_id'], ['users.id']),
        sa.ForeignKeyConstraint(['offered_skill_id'], ['skills_offered.id']),
        sa.ForeignKeyConstraint(['wanted_skill_id'], ['skills_wanted.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_skill_exchanges_teacher_id'), 'skill_exchanges', ['teacher_id'], unique=False)
    op.create_index(op.f('ix_skill_exchanges_learner_id'), 'skill_exchanges', ['learner_id'], unique=False)
    op.create_index(op.f('ix_skill_exchanges_offered_skill_id'), 'skill_exchanges', ['offered_skill_id'], unique=False)
    op.create_index(op.f('ix_skill_exchanges_status'), 'skill_exchanges', ['status'], unique=False)
    op.create_index(op.f('ix_skill_exchanges_created_at'), 'skill_exchanges', ['created_at'], unique=False)
    # One active request per learner and offered skill; closed ones may repeat.
    op.create_index(
        'uq_skill_exchanges_active_learner_skill',
        'skill_exchanges',
        ['learner_id', 'offered_skill_id'],
        unique=True,
        postgresql_where=ACTIVE_STATUS_CLAUSE,
        sqlite_where=ACTIVE_STATUS_CLAUSE,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('uq_skill_exchanges_active_learner_skill', table_name='skill_exchanges')
    op.drop_table('skill_exchanges')
    op.drop_table('availabilities')
    op.drop_table('skills_wanted')
    op.drop_table('skills_offered')
    op.drop_table('users')

    bind = op.get_bind()
    for name in (
        'exchangestatus', 'exchangeformat', 'sessionduration',
        'experiencelevel', 'skillcategory',
    ):
        sa.Enum(name=name).drop(bind, checkfirst=True)
