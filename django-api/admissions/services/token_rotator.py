"""Rotating check-in tokens.

A token is HMAC-SHA256(secret, "<event key>:<bucket>") encoded as unpadded
base64url and truncated. Buckets are fixed 30 second windows, so a
screenshot of the event code stops working within about one bucket. The
previous bucket is still accepted so a scan that lands right on a rotation
is not rejected.
"""

import base64
import hashlib
import hmac
import time
from collections.abc import Callable

from admissions.conf import TokenSettings
from admissions.domain import RotatingToken


class TokenRotator:
    """Derives and validates time-bucketed tokens for an event key."""

    def __init__(
        self, config: TokenSettings, clock: Callable[[], float] = time.time
    ) -> None:
        self._secret = config.secret.encode()
        self._bucket_size = config.bucket_size_seconds
        self._token_length = config.token_length
        self._clock = clock

    @property
    def bucket_size_seconds(self) -> int:
        return self._bucket_size

    def _current_bucket(self, now: float | None = None) -> int:
        if now is None:
            now = self._clock()
        return int(now // self._bucket_size)

    def _token_for(self, event_key: str, bucket: int) -> str:
        message = f"{event_key}:{bucket}".encode()
        digest = hmac.new(self._secret, message, hashlib.sha256).digest()
        encoded = base64.urlsafe_b64encode(digest).decode().rstrip("=")
        return encoded[: self._token_length]

    def generate_token(self, event_key: str) -> RotatingToken:
        now = self._clock()
        bucket = self._current_bucket(now)
        return RotatingToken(
            token=self._token_for(str(event_key), bucket),
            expires_at_ms=(bucket + 1) * self._bucket_size * 1000,
            seconds_remaining=self.seconds_until_rotation(now),
            bucket_size_seconds=self._bucket_size,
        )

    def validate_token(self, event_key: str, token: str) -> bool:
        """Return True if token matches the current or the previous bucket."""
        if not isinstance(token, str) or not token.isascii():
            return False
        if len(token) != self._token_length:
            return False

        bucket = self._current_bucket()
        for candidate in (bucket, bucket - 1):
            if hmac.compare_digest(token, self._token_for(str(event_key), candidate)):
                return True
        return False

    def seconds_until_rotation(self, now: float | None = None) -> int:
        if now is None:
            now = self._clock()
        return self._bucket_size - int(now) % self._bucket_size
