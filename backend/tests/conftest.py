from datetime import date

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from app.assessment_matrices.models import AssessmentMatrix
from app.companies.models import Company
from app.config import settings
from app.database import get_db
from app.main import create_app
from app.models.base import Base
from app.performance_cycles.models import PerformanceCycle
from factories import COMPANY_ID, CYCLE_ID, MATRIX_ID, OTHER_COMPANY_ID

engine = create_async_engine(settings.TEST_DATABASE_URL, echo=False, poolclass=NullPool)
test_session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture(autouse=True)
async def setup_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def override_get_db():
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def db():
    async with test_session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def session_factory():
    """For tests that need more than one session on the same database."""
    return test_session_factory


@pytest_asyncio.fixture
async def client():
    app = create_app()
    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def seeded_matrix(db: AsyncSession) -> AssessmentMatrix:
    """company123 owning cycle001 and matrix456, with no analytics yet."""
    db.add(Company(
        id=COMPANY_ID,
        name="Agile Corp",
        email="contact@agilecorp.com",
        document_number="12345678000190",
        size="medium",
        industry="Technology",
        description="Checkup customer",
    ))
    db.add(Company(
        id=OTHER_COMPANY_ID,
        name="Other Corp",
        email="contact@othercorp.com",
        document_number="98765432000110",
        size="small",
        industry="Finance",
        description="Another tenant",
    ))
    db.add(PerformanceCycle(
        id=CYCLE_ID,
        tenant_id=COMPANY_ID,
        name="2026 H1",
        is_active=True,
        is_time_sensitive=False,
        start_date=date(2026, 1, 1),
        end_date=date(2026, 6, 30),
    ))
    matrix = AssessmentMatrix(
        id=MATRIX_ID,
        tenant_id=COMPANY_ID,
        performance_cycle_id=CYCLE_ID,
        name="Agile Maturity",
    )
    db.add(matrix)
    await db.commit()
    return matrix
