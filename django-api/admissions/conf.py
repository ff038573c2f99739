"""Immutable app configuration read once from Django settings."""

from dataclasses import dataclass
from typing import Self

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

DEFAULT_BUCKET_SIZE_SECONDS = 30
DEFAULT_TOKEN_LENGTH = 12


@dataclass(frozen=True)
class TokenSettings:
    """Check-in token signing configuration."""

    secret: str
    bucket_size_seconds: int = DEFAULT_BUCKET_SIZE_SECONDS
    token_length: int = DEFAULT_TOKEN_LENGTH
    require_token: bool = False

    def __post_init__(self) -> None:
        if not self.secret:
            raise ImproperlyConfigured("ADMISSIONS['QR_TOKEN_SECRET'] must be set")
        if self.bucket_size_seconds <= 0:
            raise ImproperlyConfigured(
                "ADMISSIONS['BUCKET_SIZE_SECONDS'] must be positive"
            )
        # 32-byte digest encodes to 43 base64url chars
        if not 1 <= self.token_length <= 43:
            raise ImproperlyConfigured(
                "ADMISSIONS['TOKEN_LENGTH'] must be between 1 and 43"
            )

    @classmethod
    def from_settings(cls) -> Self:
        conf = getattr(settings, "ADMISSIONS", {})
        return cls(
            secret=conf.get("QR_TOKEN_SECRET", ""),
            bucket_size_seconds=int(
                conf.get("BUCKET_SIZE_SECONDS", DEFAULT_BUCKET_SIZE_SECONDS)
            ),
            token_length=int(conf.get("TOKEN_LENGTH", DEFAULT_TOKEN_LENGTH)),
            require_token=bool(conf.get("REQUIRE_CHECKIN_TOKEN", False)),
        )
