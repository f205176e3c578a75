"""Shared-secret check guarding catalog mutations."""
from __future__ import annotations

import hmac
import logging

from storefront.core.errors import AuthorizationError

logger = logging.getLogger(__name__)


class AdminGate:
    """Compares the caller's admin key against the configured secret."""

    def __init__(self, secret: str) -> None:
        if not secret:
            raise ValueError("Admin secret must not be empty")
        self._secret = secret

    def check(self, token: str | None) -> None:
        """Raise AuthorizationError unless ``token`` equals the configured secret."""
        if token is None or not hmac.compare_digest(token.encode(), self._secret.encode()):
            logger.warning("Rejected catalog mutation with an invalid admin key")
            raise AuthorizationError("Unauthorized: Invalid admin key")
