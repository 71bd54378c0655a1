"""Fixtures for tests that run documents against an in-memory MongoDB."""

import pytest
from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient

from authkit.modules.tokens.models import Token
from authkit.modules.users.models import User


TEST_DB = "authkit_test"


@pytest.fixture
async def database() -> None:
    """Register the document models against a fresh mock database.

    A new client per test keeps data from leaking between tests.
    """
    client = AsyncMongoMockClient()
    await init_beanie(database=client[TEST_DB], document_models=[User, Token])
