from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from healthtrack.database import Base, get_db
from healthtrack.main import app
from healthtrack.models.user import User
from healthtrack.security import create_access_token

test_engine = create_async_engine("sqlite+aiosqlite://", echo=False)
test_session = async_sessionmaker(test_engine, expire_on_commit=False)


async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
    async with test_session() as session:
        yield session


app.dependency_overrides[get_db] = override_get_db


async def create_user(
    session: AsyncSession, username: str = "alice", email: str = "alice@example.com"
) -> User:
    # Tokens are minted directly, so the password hash is never checked
    user = User(username=username, email=email, hashed_password="not-a-real-hash")
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


def bearer(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture(autouse=True)
async def setup_db() -> AsyncGenerator[None, None]:
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def user() -> User:
    async with test_session() as session:
        return await create_user(session)


@pytest.fixture
def auth_headers(user: User) -> dict[str, str]:
    return bearer(user)
