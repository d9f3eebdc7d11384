"""Unit tests for login, registration and session resolution."""

from uuid import uuid4

import pytest

from showcase.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from showcase.domain.error import ValidationError
from showcase.domain.service import JWTService
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_first_login_creates_profile_from_email(self, unit_env):
        login = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)

        response = await login.execute(LoginRequest(email="  Alice@Example.com "))

        assert response.profile.email == "alice@example.com"
        assert response.profile.username == "alice"
        assert jwt_service.get_profile_id_from_token(response.token) == (
            response.profile.id
        )

    @pytest.mark.asyncio
    async def test_repeat_login_returns_same_profile(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        first = await login.execute(LoginRequest(email="alice@example.com"))
        second = await login.execute(LoginRequest(email="ALICE@example.com"))

        assert first.profile.id == second.profile.id

    @pytest.mark.asyncio
    async def test_malformed_email_is_rejected(self, unit_env):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(ValidationError):
            await login.execute(LoginRequest(email="not-an-email"))


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_uses_chosen_username(self, unit_env):
        register = await unit_env.get(RegisterUseCase)

        response = await register.execute(
            RegisterRequest(email="bob@example.com", username="Bobby")
        )

        assert response.profile.username == "Bobby"

    @pytest.mark.asyncio
    async def test_register_twice_yields_one_profile(self, unit_env):
        """Registering an existing email signs in to the existing profile."""
        register = await unit_env.get(RegisterUseCase)

        first = await register.execute(
            RegisterRequest(email="bob@example.com", username="Bobby")
        )
        second = await register.execute(
            RegisterRequest(email="bob@example.com", username="Robert")
        )

        assert second.profile.id == first.profile.id
        assert second.profile.username == "Bobby"

    @pytest.mark.asyncio
    async def test_blank_username_is_rejected(self, unit_env):
        register = await unit_env.get(RegisterUseCase)

        with pytest.raises(ValidationError):
            await register.execute(
                RegisterRequest(email="bob@example.com", username="   ")
            )


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_valid_session_resolves_profile(self, unit_env):
        login = await unit_env.get(LoginUseCase)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        session = await login.execute(LoginRequest(email="carol@example.com"))

        response = await get_current_user.execute(
            GetCurrentUserRequest(token=session.token)
        )

        assert response.authenticated is True
        assert response.profile.id == session.profile.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "garbage"])
    async def test_missing_or_bad_token_is_unauthenticated(self, unit_env, token):
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        response = await get_current_user.execute(GetCurrentUserRequest(token=token))

        assert response.authenticated is False
        assert response.profile is None

    @pytest.mark.asyncio
    async def test_token_for_deleted_profile_is_unauthenticated(self, unit_env):
        jwt_service = await unit_env.get(JWTService)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)
        token = jwt_service.create_token(str(uuid4()), "ghost", "ghost@example.com")

        response = await get_current_user.execute(GetCurrentUserRequest(token=token))

        assert response.authenticated is False
