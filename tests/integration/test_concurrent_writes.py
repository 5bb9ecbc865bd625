"""
Integration tests for writes racing on the unique indexes

Each use case runs on its own session, as concurrent requests do.
"""
import asyncio
from datetime import timedelta

import pytest
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.password_reset_token_repository import PasswordResetTokenRepository
from src.adapter.repositories.user_repository import UserRepository
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.jwt_token_service import JwtTokenService
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.repositories.password_reset_token_repository import ResetTokenConflictError
from src.app.repositories.user_repository import EmailAlreadyExistsError
from src.app.use_cases.auth import RegisterCommand, RegisterUseCase
from src.domain.base import utcnow
from src.domain.entities import PasswordResetToken, User


async def register_on_own_session(Session, email: str):
    async with Session() as session:
        use_case = RegisterUseCase(
            SqlAlchemyUnitOfWork(session),
            BcryptPasswordHasher(rounds=4),
            JwtTokenService("integration-secret"),
        )
        result = await use_case.execute(
            RegisterCommand(name="A", email=email, password="secret1")
        )
        return result.error.code if result.is_err() else "OK"


@pytest.mark.asyncio
async def test_concurrent_registrations_with_same_email(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    outcomes = await asyncio.gather(
        register_on_own_session(Session, "a@x.com"),
        register_on_own_session(Session, "a@x.com"),
    )

    assert sorted(outcomes) == ["EMAIL_ALREADY_EXISTS", "OK"]
    async with Session() as session:
        users = (await session.exec(select(User).where(User.email == "a@x.com"))).all()
    assert len(users) == 1


@pytest.mark.asyncio
async def test_user_insert_with_taken_email_is_reported(db_session):
    repository = UserRepository(db_session)
    await repository.create(User(name="A", email="a@x.com", password_hash="x"))

    with pytest.raises(EmailAlreadyExistsError):
        await repository.create(User(name="B", email="a@x.com", password_hash="y"))


@pytest.mark.asyncio
async def test_second_reset_token_for_user_is_reported(db_session):
    user = await UserRepository(db_session).create(
        User(name="A", email="a@x.com", password_hash="x")
    )
    await db_session.commit()
    repository = PasswordResetTokenRepository(db_session)
    now = utcnow()

    await repository.create(
        PasswordResetToken(user_id=user.id, token_hash="a" * 64, expires_at=now + timedelta(minutes=30))
    )
    with pytest.raises(ResetTokenConflictError):
        await repository.create(
            PasswordResetToken(user_id=user.id, token_hash="b" * 64, expires_at=now + timedelta(minutes=30))
        )
