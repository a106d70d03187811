"""
AlumniConnect Mentorship - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator, Callable, Awaitable

# Set testing environment before the application settings load
os.environ['DATABASE_URI'] = 'sqlite+aiosqlite:///:memory:'
os.environ['LOG_TO_FILE'] = 'false'
os.environ['REDIS_HOST'] = ''

import pytest
import pytest_asyncio
from faker import Faker
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.database import Database
from src.core.locks import ProgramLockRegistry
from src.main import create_app
from src.models.enums import UserRole, ProfileStatus
from src.models.user import User
from src.repositories.enrollment import EnrollmentRepository
from src.repositories.program import ProgramRepository
from src.repositories.user import UserRepository
from src.schemas.program import ProgramCreate, ProgramResponse
from src.services.enrollment import EnrollmentService
from src.services.notification import NotificationEmitter
from src.services.program import ProgramService

fake = Faker()


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """File-backed SQLite database so concurrent sessions see each other's commits"""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test"""
    async with database.session() as session:
        yield session


@pytest.fixture
def locks() -> ProgramLockRegistry:
    return ProgramLockRegistry()


@pytest_asyncio.fixture
async def notifier(database: Database) -> AsyncGenerator[NotificationEmitter, None]:
    emitter = NotificationEmitter(database)
    yield emitter
    await emitter.drain()


@pytest.fixture
def make_user(db_session: AsyncSession) -> Callable[..., Awaitable[User]]:
    """Factory creating an account, optionally with a profile"""
    user_repo = UserRepository(db_session)

    async def _make_user(role: UserRole = UserRole.STUDENT, with_profile: bool = False, **profile_fields) -> User:
        user = await user_repo.create(fake.unique.email(), role)
        if with_profile:
            await user_repo.create_profile(
                user_id=user.id,
                name=profile_fields.get('name', fake.name()),
                email=profile_fields.get('email', user.email),
                department=profile_fields.get('department', 'Computer Science'),
                designation=profile_fields.get('designation'),
                status=ProfileStatus.APPROVED
            )
        return user

    return _make_user


@pytest_asyncio.fixture
async def mentor(make_user) -> User:
    """Create an alumni mentor with a profile"""
    return await make_user(UserRole.ALUMNI, with_profile=True, designation='Staff Engineer')


@pytest.fixture
def program_service(db_session: AsyncSession) -> ProgramService:
    return ProgramService(ProgramRepository(db_session), UserRepository(db_session))


@pytest.fixture
def make_program(program_service: ProgramService, mentor: User) -> Callable[..., Awaitable[ProgramResponse]]:
    """Factory creating a program owned by the default mentor"""

    async def _make_program(capacity: int = 3, subject: str = None, **fields) -> ProgramResponse:
        return await program_service.create_program(ProgramCreate(
            mentor_id=fields.pop('mentor_id', mentor.id),
            subject=subject or fake.catch_phrase(),
            community_link=fields.pop('community_link', 'https://chat.example.com/cohort'),
            capacity=capacity,
            **fields
        ))

    return _make_program


@pytest.fixture
def enrollment_service_factory(
    database: Database,
    locks: ProgramLockRegistry,
    notifier: NotificationEmitter
) -> Callable[[AsyncSession], EnrollmentService]:
    """Build an enrollment service over a given session, sharing locks and notifier"""

    def _factory(session: AsyncSession) -> EnrollmentService:
        return EnrollmentService(
            program_repo=ProgramRepository(session),
            enrollment_repo=EnrollmentRepository(session),
            user_repo=UserRepository(session),
            locks=locks,
            notifier=notifier
        )

    return _factory


@pytest.fixture
def enrollment_service(db_session: AsyncSession, enrollment_service_factory) -> EnrollmentService:
    return enrollment_service_factory(db_session)


@pytest_asyncio.fixture
async def app(database: Database):
    return create_app(database=database)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the test database"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac
    await app.state.notifier.drain()
