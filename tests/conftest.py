import inspect
import os
from collections.abc import Callable
from datetime import date, datetime

# Must be set before jalanma.db.engine builds the module-level engine.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_AUTO_CREATE", "false")
os.environ.setdefault("ADMIN_USERNAME", "admin")
os.environ.setdefault("ADMIN_PASSWORD", "admin-password")

import anyio  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlmodel.pool import StaticPool  # noqa: E402

import jalanma.models  # noqa: E402, F401
from jalanma.core.settings import Settings, get_settings  # noqa: E402
from jalanma.db.engine import enable_sqlite_foreign_keys, get_session  # noqa: E402
from jalanma.main import app  # noqa: E402
from jalanma.report.models import ReportStatus, RoadDamageReport  # noqa: E402
from jalanma.upload.service import PhotoUploader, get_photo_uploader  # noqa: E402
from jalanma.user.models import AuthProvider, User  # noqa: E402

TEST_UPLOAD_BASE_URL = "https://storage.test"


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


@pytest.fixture(name="session")
def session_fixture():
    """Create an in-memory SQLite database with foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session


@pytest.fixture(name="make_user")
def make_user_fixture(session: Session) -> Callable[..., User]:
    """Factory inserting a user; keyword arguments override the defaults."""
    counter = 0

    def _make_user(**overrides) -> User:
        nonlocal counter
        counter += 1
        fields = {
            "email": f"user{counter}@example.com",
            "name": f"Test User {counter}",
            "avatar_url": None,
            "provider": AuthProvider.email,
        }
        fields.update(overrides)
        user = User(**fields)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture(name="test_user")
def test_user_fixture(make_user: Callable[..., User]) -> User:
    return make_user(email="test@example.com", name="Test User")


@pytest.fixture(name="make_report")
def make_report_fixture(session: Session) -> Callable[..., RoadDamageReport]:
    """Factory inserting a report for ``user``; keyword arguments override fields."""

    def _make_report(user: User, **overrides) -> RoadDamageReport:
        fields = {
            "reporter_name": "John Doe",
            "reporter_phone": "081234567890",
            "reporter_address": "Jl. Sudirman No. 1, Jakarta",
            "report_date": date(2024, 1, 15),
            "damage_description": "Lubang besar di tengah jalan",
            "photo_url": "https://example.com/photo1.jpg",
            "latitude": -6.2088,
            "longitude": 106.8456,
            "status": ReportStatus.pending,
        }
        fields.update(overrides)
        report = RoadDamageReport(user_id=user.id, **fields)
        session.add(report)
        session.commit()
        session.refresh(report)
        return report

    return _make_report


@pytest.fixture(name="jakarta_reports")
def jakarta_reports_fixture(
    make_user: Callable[..., User],
    make_report: Callable[..., RoadDamageReport],
) -> dict[str, object]:
    """Two users with four Jakarta reports, one per status, created a day apart."""
    user1 = make_user(email="user1@example.com", name="Test User 1")
    user2 = make_user(email="user2@example.com", name="Test User 2")

    reports = [
        make_report(
            user1,
            reporter_name="John Doe",
            latitude=-6.2088,
            longitude=106.8456,
            status=ReportStatus.pending,
            created_at=datetime(2024, 1, 15, 10, 0),
        ),
        make_report(
            user1,
            reporter_name="Jane Smith",
            reporter_address="Jl. Thamrin No. 5, Jakarta",
            report_date=date(2024, 1, 16),
            damage_description="Jalan retak-retak",
            photo_url="https://example.com/photo2.jpg",
            latitude=-6.1951,
            longitude=106.8211,
            status=ReportStatus.in_progress,
            created_at=datetime(2024, 1, 16, 10, 0),
        ),
        make_report(
            user2,
            reporter_name="Bob Johnson",
            reporter_address="Jl. Gatot Subroto No. 10, Jakarta",
            report_date=date(2024, 1, 17),
            damage_description=None,
            photo_url="https://example.com/photo3.jpg",
            latitude=-6.2297,
            longitude=106.8253,
            status=ReportStatus.resolved,
            created_at=datetime(2024, 1, 17, 10, 0),
        ),
        make_report(
            user2,
            reporter_name="Alice Brown",
            reporter_address="Jl. Kuningan No. 15, Jakarta",
            report_date=date(2024, 1, 18),
            damage_description="Jalan berlubang kecil",
            photo_url="https://example.com/photo4.jpg",
            latitude=-6.2378,
            longitude=106.8308,
            status=ReportStatus.rejected,
            created_at=datetime(2024, 1, 18, 10, 0),
        ),
    ]
    return {"user1": user1, "user2": user2, "reports": reports}


@pytest.fixture(name="uploader")
def uploader_fixture() -> PhotoUploader:
    return PhotoUploader(base_url=TEST_UPLOAD_BASE_URL)


@pytest.fixture(name="mock_settings")
def mock_settings_fixture() -> Settings:
    """Create test settings."""
    return Settings(
        env_name="test",
        database_url="sqlite://",
        db_auto_create=False,
        session_secret_key="test-secret-key",
        admin_username="admin",
        admin_password="admin-password",
        upload_base_url=TEST_UPLOAD_BASE_URL,
    )


@pytest.fixture(name="client")
def client_fixture(
    session: Session,
    uploader: PhotoUploader,
    mock_settings: Settings,
):
    """Create a test client with overridden dependencies."""

    def get_session_override():
        return session

    def get_photo_uploader_override():
        return uploader

    def get_settings_override():
        return mock_settings

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_photo_uploader] = get_photo_uploader_override
    app.dependency_overrides[get_settings] = get_settings_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
