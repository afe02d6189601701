"""
Model package.

IMPORTANT (Alembic / SQLModel):
- Alembic autogenerate relies on `SQLModel.metadata`, which is populated only
  when the table models are imported.
- `alembic/env.py` imports `skillcircle.models`, so this module must import all
  SQLModel `table=True` models to register them.
"""

# Import table models so SQLModel registers them in metadata.
from skillcircle.exchange.models import SkillExchange  # noqa: F401
from skillcircle.profile.models import Availability  # noqa: F401
from skillcircle.skill.models import SkillOffered, SkillWanted  # noqa: F401
from skillcircle.user.models import User  # noqa: F401
