"""Unit tests for AuthService."""

from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from beanie import PydanticObjectId

from authkit.core.auth.service import AuthService, get_auth_service
from authkit.core.errors import NotFoundError, TokenNotFoundError, UnauthorizedError
from authkit.modules.tokens.types import TokenType
from tests.conftest import make_mock_user


def make_token_doc(user_id: PydanticObjectId, type: TokenType = TokenType.REFRESH):
    return SimpleNamespace(id=PydanticObjectId(), token="tok", user=user_id, type=type)


@pytest.fixture
def user() -> MagicMock:
    user = make_mock_user()
    user.is_password_match.return_value = True
    return user


@pytest.fixture
def mock_token_service() -> AsyncMock:
    service = AsyncMock()
    service.token_repo = AsyncMock()
    return service


@pytest.fixture
def mock_user_service() -> AsyncMock:
    service = AsyncMock()
    service.repo = AsyncMock()
    return service


@pytest.fixture
def auth(mock_token_service: AsyncMock, mock_user_service: AsyncMock) -> AuthService:
    return AuthService(token_service=mock_token_service, user_service=mock_user_service)


class TestLogin:
    """Tests for AuthService.login_user_with_email_and_password."""

    @pytest.mark.asyncio
    async def test_success(self, auth, mock_user_service, user):
        mock_user_service.get_user_by_email.return_value = user

        result = await auth.login_user_with_email_and_password("test@example.com", "password1")

        assert result is user
        user.is_password_match.assert_called_once_with("password1")

    @pytest.mark.asyncio
    async def test_unknown_user(self, auth, mock_user_service):
        mock_user_service.get_user_by_email.return_value = None

        with pytest.raises(UnauthorizedError) as exc_info:
            await auth.login_user_with_email_and_password("nobody@example.com", "password1")

        assert exc_info.value.error_code == "invalid_credentials"

    @pytest.mark.asyncio
    async def test_wrong_password(self, auth, mock_user_service, user):
        user.is_password_match.return_value = False
        mock_user_service.get_user_by_email.return_value = user

        with pytest.raises(UnauthorizedError) as exc_info:
            await auth.login_user_with_email_and_password("test@example.com", "wrong")

        assert exc_info.value.message == "Incorrect email or password"


class TestLogout:
    """Tests for AuthService.logout."""

    @pytest.mark.asyncio
    async def test_blacklists_refresh_record(self, auth, mock_token_service, user):
        doc = make_token_doc(user.id)
        mock_token_service.token_repo.find_one.return_value = doc

        await auth.logout("tok")

        mock_token_service.token_repo.find_one.assert_awaited_once_with(
            token="tok", type=TokenType.REFRESH, blacklisted=False
        )
        mock_token_service.token_repo.blacklist.assert_awaited_once_with(doc)

    @pytest.mark.asyncio
    async def test_unknown_token(self, auth, mock_token_service):
        mock_token_service.token_repo.find_one.return_value = None

        with pytest.raises(NotFoundError):
            await auth.logout("tok")

        mock_token_service.token_repo.blacklist.assert_not_awaited()


class TestRefreshAuth:
    """Tests for AuthService.refresh_auth."""

    @pytest.mark.asyncio
    async def test_rotates_refresh_token(self, auth, mock_token_service, mock_user_service, user):
        doc = make_token_doc(user.id)
        mock_token_service.verify_token.return_value = doc
        mock_user_service.get_user_by_id.return_value = user
        new_tokens = MagicMock()
        mock_token_service.generate_auth_tokens.return_value = new_tokens

        result = await auth.refresh_auth("tok")

        assert result is new_tokens
        mock_token_service.verify_token.assert_awaited_once_with("tok", TokenType.REFRESH)
        mock_token_service.token_repo.blacklist.assert_awaited_once_with(doc)
        mock_token_service.generate_auth_tokens.assert_awaited_once_with(user)

    @pytest.mark.asyncio
    async def test_invalid_token(self, auth, mock_token_service):
        mock_token_service.verify_token.side_effect = TokenNotFoundError()

        with pytest.raises(UnauthorizedError) as exc_info:
            await auth.refresh_auth("tok")

        assert exc_info.value.message == "Please authenticate"
        mock_token_service.generate_auth_tokens.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_user_gone(self, auth, mock_token_service, mock_user_service, user):
        mock_token_service.verify_token.return_value = make_token_doc(user.id)
        mock_user_service.get_user_by_id.return_value = None

        with pytest.raises(UnauthorizedError):
            await auth.refresh_auth("tok")

        mock_token_service.token_repo.blacklist.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, auth, mock_token_service):
        mock_token_service.verify_token.side_effect = ConnectionError("store down")

        with pytest.raises(ConnectionError):
            await auth.refresh_auth("tok")


class TestResetPassword:
    """Tests for AuthService.reset_password."""

    @pytest.mark.asyncio
    async def test_updates_password_and_clears_tokens(
        self, auth, mock_token_service, mock_user_service, user
    ):
        mock_token_service.verify_token.return_value = make_token_doc(
            user.id, TokenType.RESET_PASSWORD
        )
        mock_user_service.get_user_by_id.return_value = user

        with patch("authkit.core.auth.service.hash_password", return_value="newhash"):
            await auth.reset_password("tok", "password2")

        assert user.password == "newhash"
        mock_user_service.repo.update.assert_awaited_once_with(user)
        mock_token_service.token_repo.delete_for_user.assert_awaited_once_with(
            user.id, TokenType.RESET_PASSWORD
        )

    @pytest.mark.asyncio
    async def test_invalid_token(self, auth, mock_token_service, mock_user_service):
        mock_token_service.verify_token.side_effect = TokenNotFoundError()

        with pytest.raises(UnauthorizedError) as exc_info:
            await auth.reset_password("tok", "password2")

        assert exc_info.value.message == "Password reset failed"
        mock_user_service.repo.update.assert_not_awaited()


class TestVerifyEmail:
    """Tests for AuthService.verify_email."""

    @pytest.mark.asyncio
    async def test_marks_verified(self, auth, mock_token_service, mock_user_service, user):
        mock_token_service.verify_token.return_value = make_token_doc(
            user.id, TokenType.VERIFY_EMAIL
        )
        mock_user_service.get_user_by_id.return_value = user
        mock_user_service.repo.update.return_value = user

        result = await auth.verify_email("tok")

        assert result.is_email_verified is True
        mock_token_service.verify_token.assert_awaited_once_with("tok", TokenType.VERIFY_EMAIL)
        mock_token_service.token_repo.delete_for_user.assert_awaited_once_with(
            user.id, TokenType.VERIFY_EMAIL
        )

    @pytest.mark.asyncio
    async def test_invalid_token(self, auth, mock_token_service):
        mock_token_service.verify_token.side_effect = TokenNotFoundError()

        with pytest.raises(UnauthorizedError) as exc_info:
            await auth.verify_email("tok")

        assert exc_info.value.message == "Email verification failed"


def test_get_auth_service_wires_dependencies():
    service = get_auth_service()

    assert service.token_service.user_repo is not None
    assert service.user_service.repo is not None


class TestRotationFlow:
    """Refresh rotation against the real TokenService and in-memory stores."""

    @pytest.fixture
    def flow(self, token_service, user_repo) -> AuthService:
        from authkit.modules.users.services import UserService

        return AuthService(token_service=token_service, user_service=UserService(user_repo))

    @pytest.mark.asyncio
    async def test_old_refresh_token_is_single_use(
        self, flow, token_service, token_repo, user, now
    ):
        first = await token_service.generate_auth_tokens(user)
        token_service.clock = lambda: now + timedelta(seconds=5)

        second = await flow.refresh_auth(first.refresh.token)

        assert len(token_repo.of_type(TokenType.REFRESH)) == 2
        with pytest.raises(UnauthorizedError):
            await flow.refresh_auth(first.refresh.token)
        await token_service.verify_token(second.refresh.token, TokenType.REFRESH)

    @pytest.mark.asyncio
    async def test_logout_revokes(self, flow, token_service, user):
        tokens = await token_service.generate_auth_tokens(user)

        await flow.logout(tokens.refresh.token)

        with pytest.raises(TokenNotFoundError):
            await token_service.verify_token(tokens.refresh.token, TokenType.REFRESH)
