import inspect
import os
from collections.abc import Callable
from datetime import datetime, timedelta
from unittest.mock import MagicMock

# Settings are read when the engine module is imported; provide test values
# before anything from skillcircle is loaded.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SESSION_SECRET_KEY", "test-secret-key")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin")
os.environ.setdefault("ENV_NAME", "test")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import skillcircle.models  # noqa: E402, F401
from skillcircle.auth.dependencies import get_current_user  # noqa: E402
from skillcircle.auth.service import (  # noqa: E402
    FirebaseAuthService,
    TokenClaims,
    get_firebase_auth_service,
)
from skillcircle.core.settings import Settings, get_settings  # noqa: E402
from skillcircle.db.engine import get_session  # noqa: E402
from skillcircle.main import app  # noqa: E402
from skillcircle.skill.models import (  # noqa: E402
    ExperienceLevel,
    SkillCategory,
    SkillOffered,
    SkillWanted,
)
from skillcircle.user.models import User  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="engine")
def engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create an in-memory SQLite database for testing."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="user_factory")
def user_factory_fixture(session: Session) -> Callable[..., User]:
    """Create users with unique uid/email; keyword overrides set any column."""
    counter = 0

    def _create(**overrides) -> User:
        nonlocal counter
        counter += 1
        values = {
            "external_id": f"uid-{counter}",
            "email": f"user{counter}@example.com",
            "name": f"User {counter}",
            "is_setup_completed": True,
        }
        values.update(overrides)
        user = User(**values)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _create


@pytest.fixture(name="skill_factory")
def skill_factory_fixture(session: Session) -> Callable[..., SkillOffered]:
    """Create offered skills. created_at is spread one minute apart per call."""
    base = datetime(2026, 1, 1, 12, 0, 0)
    counter = 0

    def _create(owner: User, **overrides) -> SkillOffered:
        nonlocal counter
        counter += 1
        values = {
            "user_id": owner.id,
            "title": f"Skill {counter}",
            "description": "A skill worth sharing with others",
            "category": SkillCategory.TECHNOLOGY,
            "experience_level": ExperienceLevel.INTERMEDIATE,
            "created_at": base + timedelta(minutes=counter),
        }
        values.update(overrides)
        skill = SkillOffered(**values)
        session.add(skill)
        session.commit()
        session.refresh(skill)
        return skill

    return _create


@pytest.fixture(name="test_user")
def test_user_fixture(user_factory):
    """The authenticated user for the client fixture."""
    return user_factory(
        external_id="test-firebase-uid-123",
        email="test@example.com",
        name="Test User",
    )


@pytest.fixture(name="teacher")
def teacher_fixture(user_factory):
    """A second user who offers skills."""
    return user_factory(
        external_id="teacher-uid-789",
        email="teacher@example.com",
        name="Tina Teacher",
        location={"address": "Berlin, Germany", "is_public": True},
    )


@pytest.fixture(name="inactive_user")
def inactive_user_fixture(user_factory):
    """Create an inactive test user."""
    return user_factory(
        external_id="inactive-uid-456",
        email="inactive@example.com",
        name="Inactive User",
        is_active=False,
    )


@pytest.fixture(name="admin_user")
def admin_user_fixture(user_factory):
    return user_factory(
        external_id="admin-uid-000",
        email="admin@example.com",
        name="Admin User",
        is_admin=True,
    )


@pytest.fixture(name="guitar_skill")
def guitar_skill_fixture(skill_factory, teacher):
    return skill_factory(
        teacher,
        title="Guitar Lessons",
        description="Acoustic and electric guitar for beginners",
        category=SkillCategory.MUSIC,
        experience_level=ExperienceLevel.EXPERT,
    )


@pytest.fixture(name="wanted_skill")
def wanted_skill_fixture(session: Session, test_user):
    skill = SkillWanted(
        user_id=test_user.id,
        title="Guitar",
        description="I want to learn to play chords",
        category=SkillCategory.MUSIC,
        desired_level=ExperienceLevel.INTERMEDIATE,
    )
    session.add(skill)
    session.commit()
    session.refresh(skill)
    return skill


@pytest.fixture(name="mock_firebase_auth")
def mock_firebase_auth_fixture():
    """Create a mock FirebaseAuthService."""
    mock_service = MagicMock(spec=FirebaseAuthService)
    # Default mock behaviors
    mock_service.verify_session_cookie.return_value = TokenClaims(uid="test-uid")
    mock_service.verify_id_token.return_value = TokenClaims(uid="test-uid")
    return mock_service


@pytest.fixture(name="mock_settings")
def mock_settings_fixture():
    """Create mock settings."""
    return Settings(
        env_name="test",
        database_url="sqlite://",
        session_secret_key="test-secret-key",
        admin_username="admin",
        admin_password="admin",
        session_expires_days=5,
    )


@pytest.fixture(name="login_as")
def login_as_fixture() -> Callable[[User], None]:
    """Switch the user the client fixture is authenticated as."""

    def _login(user: User) -> None:
        app.dependency_overrides[get_current_user] = lambda: user

    return _login


@pytest.fixture(name="client")
def client_fixture(
    session: Session,
    test_user: User,
    mock_firebase_auth: MagicMock,
    mock_settings: Settings,
    login_as,
):
    """Create a test client with overridden dependencies."""

    def get_session_override():
        return session

    def get_firebase_auth_override():
        return mock_firebase_auth

    def get_settings_override():
        return mock_settings

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_firebase_auth_service] = get_firebase_auth_override
    app.dependency_overrides[get_settings] = get_settings_override
    login_as(test_user)

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="unauthenticated_client")
def unauthenticated_client_fixture(
    session: Session,
    mock_firebase_auth: MagicMock,
    mock_settings: Settings,
):
    """Create a test client without auth override (for testing auth failures)."""

    def get_session_override():
        return session

    def get_firebase_auth_override():
        return mock_firebase_auth

    def get_settings_override():
        return mock_settings

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_firebase_auth_service] = get_firebase_auth_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
