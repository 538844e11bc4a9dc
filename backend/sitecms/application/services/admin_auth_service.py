"""Admin capability: credential checks and signed session cookies.

Write endpoints accept any one of:
    Authorization: Basic base64(email:password)
    Authorization: <password>
    Cookie: admin_session=<signed token from POST /api/admin/login>
"""

import base64
import binascii
import hashlib
import hmac
import logging
import time

import jwt

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "admin_session"
TOKEN_TYPE = "admin_session"
JWT_ALGORITHM = "HS256"


def _same(given: str, expected: str) -> bool:
    return hmac.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


class AdminAuthService:
    """Verifies admin credentials and issues/validates session tokens."""

    def __init__(
        self,
        email: str,
        password: str,
        session_secret: str = "",
        session_ttl_seconds: int = 60 * 60 * 24,
    ):
        self._email = email
        self._password = password
        # HS256 key is the sha256 hex digest of the secret.
        self._secret = hashlib.sha256((session_secret or password).encode("utf-8")).hexdigest()
        self._ttl = session_ttl_seconds

    @property
    def configured(self) -> bool:
        return bool(self._email and self._password)

    @property
    def session_ttl_seconds(self) -> int:
        return self._ttl

    def check_credentials(self, email: str, password: str) -> bool:
        if not self.configured:
            return False
        return _same(email, self._email) and _same(password, self._password)

    # ── Session tokens ──────────────────────────────────────────────

    def issue_session(self) -> str:
        now = int(time.time())
        payload = {"sub": self._email, "type": TOKEN_TYPE, "iat": now, "exp": now + self._ttl}
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify_session(self, token: str | None) -> bool:
        if not token or not self.configured:
            return False
        try:
            payload = jwt.decode(token, self._secret, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.info("Admin session expired")
            return False
        except jwt.InvalidTokenError as exc:
            logger.warning("Invalid admin session token: %s", exc)
            return False
        return payload.get("type") == TOKEN_TYPE and payload.get("sub") == self._email

    # ── Request check ───────────────────────────────────────────────

    def verify_authorization(self, header: str | None) -> bool:
        """Basic ``email:password`` or the bare admin password."""
        if not header or not self.configured:
            return False
        if header.startswith("Basic "):
            try:
                decoded = base64.b64decode(header[6:], validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError):
                logger.debug("Malformed Basic authorization header")
                return False
            email, _, password = decoded.partition(":")
            return self.check_credentials(email, password)
        return _same(header, self._password)

    def is_admin(self, authorization: str | None, session_token: str | None) -> bool:
        return self.verify_authorization(authorization) or self.verify_session(session_token)
