# Area: Shared
"""
overcookied_client._shared.auth_client — Auth REST API wrapper
==============================================================

Resolves a bearer token into a user session and ends sessions.
The game socket only needs the resulting token and user id; this
client is how a caller obtains them.

Failures are logged and reported as ``None`` / ``False``; nothing here
raises for a network or HTTP error.
"""

from __future__ import annotations
import logging
import time
from typing import Optional

import jwt
import requests

from ..types import UserSession

logger = logging.getLogger("overcookied_client.auth")

DEFAULT_TIMEOUT_SECONDS = 10
_SESSION_FIELDS = ("id", "email", "name", "picture", "token")


class AuthClient:
    """Thin client for ``/auth/verify`` and ``/auth/logout``."""

    def __init__(self, api_url: str = "", timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        """
        Args:
            api_url: Backend base URL. Empty means same-origin relative paths,
                which only make sense behind a proxy that rewrites them.
            timeout: Per-request timeout in seconds.
            session: Optional ``requests.Session`` to reuse connections.
        """
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._http = session or requests.Session()

    def _headers(self, token: str) -> dict:
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def verify_session(self, token: str) -> Optional[UserSession]:
        """Validate ``token`` with the backend and return the user session."""
        try:
            response = self._http.get(
                f"{self.api_url}/auth/verify",
                headers=self._headers(token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Session verification failed: {e}")
            return None

        if not response.ok:
            logger.warning(f"Session verification rejected: HTTP {response.status_code}")
            return None

        try:
            body = response.json()
        except ValueError:
            logger.error("Session verification returned a non-JSON body")
            return None
        if not isinstance(body, dict):
            logger.error("Session verification returned a non-object body")
            return None

        session: UserSession = {key: str(body.get(key) or "") for key in _SESSION_FIELDS}  # type: ignore[misc]
        # The verify endpoint may omit the token it was called with
        if not session["token"]:
            session["token"] = token
        return session

    def logout(self, token: str) -> bool:
        """End the session server-side. Independent of the game socket."""
        try:
            response = self._http.post(
                f"{self.api_url}/auth/logout",
                headers=self._headers(token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Logout failed: {e}")
            return False
        if not response.ok:
            logger.warning(f"Logout rejected: HTTP {response.status_code}")
            return False
        return True


def is_token_fresh(token: str, now: Optional[float] = None) -> bool:
    """
    Check a JWT's ``exp`` claim locally, without verifying its signature.

    Args:
        token: The bearer JWT.
        now: Current time in epoch seconds. Defaults to ``time.time()``.

    Returns:
        True if the token decodes and has not expired.
    """
    if not token:
        return False
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
        expires_at = float(claims["exp"])
    except jwt.PyJWTError as e:
        logger.debug(f"JWT validation error: {e}")
        return False
    except (KeyError, TypeError, ValueError) as e:
        logger.debug(f"JWT has no usable exp claim: {e}")
        return False
    current = time.time() if now is None else now
    return expires_at > current
