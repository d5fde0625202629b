"""
Password reset token service.
"""
import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Optional

from shared.domain import utc_now

DEFAULT_TTL_HOURS = 24


class TokenService:
    """Issues reset tokens; only their SHA-256 hash is ever stored."""

    def __init__(self, ttl_hours: int = DEFAULT_TTL_HOURS):
        self.ttl_hours = ttl_hours

    def generate_password_reset_token(self) -> str:
        """64 hex characters from 32 random bytes."""
        return secrets.token_hex(32)

    @staticmethod
    def hash_token(token: str) -> str:
        return hashlib.sha256(token.encode('utf-8')).hexdigest()

    def expiration_time(self, now: Optional[datetime] = None) -> datetime:
        return (now or utc_now()) + timedelta(hours=self.ttl_hours)

    @staticmethod
    def is_expired(expires_at: Optional[datetime], now: Optional[datetime] = None) -> bool:
        """Missing expiry counts as expired."""
        if expires_at is None:
            return True
        return (now or utc_now()) > expires_at
