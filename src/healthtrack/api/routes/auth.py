"""Auth endpoints: registration, login and the current user."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from healthtrack.api.deps import get_current_user
from healthtrack.database import get_db
from healthtrack.errors import AuthError
from healthtrack.models.user import User
from healthtrack.schemas.user import TokenResponse, UserLogin, UserRead, UserRegister
from healthtrack.security import create_access_token, hash_password, verify_password

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=TokenResponse, status_code=201)
async def register(
    body: UserRegister,
    session: AsyncSession = Depends(get_db),
) -> TokenResponse:
    """Create an account and return a token for it."""
    existing = await session.execute(
        select(User).where(or_(User.email == body.email, User.username == body.username))
    )
    if existing.scalars().first() is not None:
        raise AuthError("User already exists")

    user = User(
        username=body.username,
        email=body.email,
        hashed_password=hash_password(body.password),
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise AuthError("User already exists") from exc
    await session.refresh(user)

    logger.info("Registered user %s", user.id)
    return TokenResponse(token=create_access_token(user.id), user=UserRead.model_validate(user))


@router.post("/login", response_model=TokenResponse)
async def login(
    body: UserLogin,
    session: AsyncSession = Depends(get_db),
) -> TokenResponse:
    result = await session.execute(select(User).where(User.email == body.email))
    user = result.scalar_one_or_none()
    if user is None or not verify_password(body.password, user.hashed_password):
        logger.info("Failed login attempt")
        raise AuthError("Invalid credentials")
    return TokenResponse(token=create_access_token(user.id), user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead)
async def me(user: User = Depends(get_current_user)) -> User:
    return user
