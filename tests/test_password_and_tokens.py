"""
Tests for the password policy and reset token service.
"""
from datetime import datetime, timedelta, timezone

import pytest

from apps.users.application.services.token_service import TokenService
from apps.users.domain.exceptions import WeakPasswordError
from apps.users.domain.validators.strong_password import StrongPasswordValidator, ensure_strong_password


class TestStrongPasswordValidator:
    """Tests for StrongPasswordValidator."""

    def test_strong_password_passes(self):
        assert StrongPasswordValidator().validate('Secret123') == []

    def test_single_violation_lists_every_missing_requirement(self):
        violations = StrongPasswordValidator().validate('abc')
        assert len(violations) == 1
        assert violations[0].message == (
            "Password must contain at least 8 characters, "
            "at least one uppercase letter, at least one number"
        )

    def test_special_character_only_when_required(self):
        assert StrongPasswordValidator().validate('Secret123') == []
        violations = StrongPasswordValidator(require_special=True).validate('Secret123')
        assert 'special character' in violations[0].message
        assert StrongPasswordValidator(require_special=True).validate('Secret123!') == []

    def test_empty_value_left_to_required_checks(self):
        assert StrongPasswordValidator().validate('') == []
        assert StrongPasswordValidator().validate(None) == []

    def test_ensure_raises_for_blank_and_weak(self):
        with pytest.raises(WeakPasswordError):
            ensure_strong_password('')
        with pytest.raises(WeakPasswordError) as exc_info:
            ensure_strong_password('password', field='new_password')
        assert exc_info.value.field == 'new_password'


class TestTokenService:
    """Tests for TokenService."""

    def test_token_is_64_hex_characters(self):
        token = TokenService().generate_password_reset_token()
        assert len(token) == 64
        int(token, 16)

    def test_tokens_are_unique(self):
        service = TokenService()
        assert service.generate_password_reset_token() != service.generate_password_reset_token()

    def test_hash_is_sha256_hex(self):
        assert TokenService.hash_token('abc') == (
            'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
        )

    def test_expiration_uses_ttl(self):
        now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert TokenService(ttl_hours=2).expiration_time(now) == now + timedelta(hours=2)
        assert TokenService().expiration_time(now) == now + timedelta(hours=24)

    def test_is_expired(self):
        now = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert TokenService.is_expired(now - timedelta(seconds=1), now)
        assert not TokenService.is_expired(now + timedelta(seconds=1), now)
        assert TokenService.is_expired(None, now)
