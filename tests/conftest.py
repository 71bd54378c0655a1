"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any
from unittest.mock import MagicMock

import pytest
from beanie import PydanticObjectId

from authkit.modules.tokens.config import JWTConfig
from authkit.modules.tokens.service import TokenService
from authkit.modules.tokens.types import TokenType
from authkit.modules.users.models import User, UserRole


TEST_SECRET = "test-secret-key-that-is-long-enough-for-hs256"


class FakeTokenRepository:
    """In-memory stand-in for TokenRepository.

    Records are SimpleNamespace objects with the same attributes as the
    Token document, so tests can inspect exactly what was stored.
    """

    def __init__(self) -> None:
        self.records: list[SimpleNamespace] = []

    async def create(
        self,
        token: str,
        user_id: PydanticObjectId,
        expires: datetime,
        type: TokenType,
        blacklisted: bool = False,
    ) -> SimpleNamespace:
        record = SimpleNamespace(
            id=PydanticObjectId(),
            token=token,
            user=user_id,
            expires=expires,
            type=type,
            blacklisted=blacklisted,
        )
        self.records.append(record)
        return record

    async def find_one(
        self,
        token: str,
        type: TokenType,
        user_id: PydanticObjectId | None = None,
        blacklisted: bool = False,
    ) -> SimpleNamespace | None:
        for record in self.records:
            if (
                record.token == token
                and record.type == type
                and record.blacklisted == blacklisted
                and (user_id is None or record.user == user_id)
            ):
                return record
        return None

    async def blacklist(self, doc: SimpleNamespace) -> SimpleNamespace:
        doc.blacklisted = True
        return doc

    async def delete_for_user(self, user_id: PydanticObjectId, type: TokenType) -> int:
        keep = [r for r in self.records if not (r.user == user_id and r.type == type)]
        deleted = len(self.records) - len(keep)
        self.records = keep
        return deleted

    def of_type(self, type: TokenType) -> list[SimpleNamespace]:
        return [r for r in self.records if r.type == type]


class FakeUserRepository:
    """In-memory stand-in for UserRepository lookups."""

    def __init__(self, users: list[Any] | None = None) -> None:
        self.users = list(users or [])

    async def get_by_email(self, email: str) -> Any | None:
        return next((u for u in self.users if u.email == email.strip().lower()), None)

    async def get_by_id(self, user_id: PydanticObjectId | str) -> Any | None:
        return next((u for u in self.users if str(u.id) == str(user_id)), None)


def make_mock_user(
    user_id: PydanticObjectId | None = None,
    email: str = "test@example.com",
    name: str = "Test User",
    role: UserRole = UserRole.USER,
    is_email_verified: bool = False,
) -> MagicMock:
    """Create a mock User for testing."""
    user = MagicMock(spec=User)
    user.id = user_id or PydanticObjectId()
    user.email = email
    user.name = name
    user.role = role
    user.is_email_verified = is_email_verified
    user.password = "hashedpwd"
    return user


@pytest.fixture
def now() -> datetime:
    """A fixed 'current time' close to the real clock.

    JWT expiry is checked against the real clock by python-jose, so the
    fixed time must not drift far from it.
    """
    return datetime.now(UTC).replace(microsecond=0)


@pytest.fixture
def clock(now: datetime) -> Callable[[], datetime]:
    return lambda: now


@pytest.fixture
def jwt_config() -> JWTConfig:
    return JWTConfig(
        secret=TEST_SECRET,
        access_expiration_minutes=30,
        refresh_expiration_days=30,
        reset_password_expiration_minutes=10,
        verify_email_expiration_minutes=10,
    )


@pytest.fixture
def user() -> MagicMock:
    return make_mock_user()


@pytest.fixture
def token_repo() -> FakeTokenRepository:
    return FakeTokenRepository()


@pytest.fixture
def user_repo(user: MagicMock) -> FakeUserRepository:
    return FakeUserRepository([user])


@pytest.fixture
def token_service(
    jwt_config: JWTConfig,
    token_repo: FakeTokenRepository,
    user_repo: FakeUserRepository,
    clock: Callable[[], datetime],
) -> TokenService:
    return TokenService(
        config=jwt_config,
        token_repo=token_repo,  # type: ignore[arg-type]
        user_repo=user_repo,  # type: ignore[arg-type]
        clock=clock,
    )
