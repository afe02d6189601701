"""Centralized dependency type aliases for FastAPI routes.

Import infrastructure dependencies from this module:
    from skillcircle.core.deps import SessionDep, SettingsDep

Authentication dependencies live in skillcircle.auth.dependencies.
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel import Session

from skillcircle.core.settings import Settings, get_settings
from skillcircle.db.engine import get_session

# Database session
SessionDep = Annotated[Session, Depends(get_session)]

# Application settings
SettingsDep = Annotated[Settings, Depends(get_settings)]
