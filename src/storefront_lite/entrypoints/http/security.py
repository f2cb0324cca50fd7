"""Bearer-token gate for admin routes.

Tokens are opaque strings mapped to a role by configuration (API_TOKENS).
The mapping lives on ``app.state.api_tokens`` so each app instance, and
each test, can carry its own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from storefront_lite.domain.errors import ForbiddenError, UnauthorizedError

ADMIN_ROLE = "admin"

# auto_error=False: a missing header reaches get_current_principal, which
# raises the domain error so the response keeps the structured format
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True)
class Principal:
    role: str


def get_api_tokens(request: Request) -> dict[str, str]:
    return request.app.state.api_tokens


def get_current_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: dict[str, str] = Depends(get_api_tokens),
) -> Principal:
    """
    Resolve the caller from the Authorization header.

    Raises:
        UnauthorizedError: If the header is missing or the token is unknown
    """
    if credentials is None:
        raise UnauthorizedError("Access token required")

    role = tokens.get(credentials.credentials)
    if role is None:
        raise UnauthorizedError("Invalid or expired token")

    return Principal(role=role)


def require_role(role: str) -> Callable[..., Principal]:
    """Build a dependency that only lets callers holding ``role`` through."""

    def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role != role:
            raise ForbiddenError("Insufficient permissions", required_role=role)
        return principal

    return dependency


require_admin = require_role(ADMIN_ROLE)
