"""
Campus API Backend: Roles, Callers and the Authorization Gate
===============================================================

What:  Resolves who is calling (from a bearer token) and decides whether a
       caller may run an operation.
How:   - get_caller():   FastAPI dependency; verifies the JWT with python-jose
                         and turns its `roles` claim into a Caller
       - authorize():    pure function (caller_roles, required_role) -> bool
       - require_role(): raises ForbiddenError when authorize() says no
Who:   Every ResourceController operation calls require_role() before it
       validates input or touches a store.

Role model:
    USER  → list and get
    ADMIN → create, update and delete

    ADMIN does not imply USER: a caller must hold whichever role the
    operation declares. A request without a valid token is the anonymous
    caller, which holds no roles and is rejected by every gated operation.

Token issuance is not handled here; any issuer sharing JWT_SECRET_KEY (or the
matching key pair) can mint tokens of the form:
    {"sub": "admin@ucsb.edu", "roles": ["ROLE_ADMIN", "ROLE_USER"], "exp": ...}
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Iterable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from campus_api.config import settings
from campus_api.exceptions import ForbiddenError

logger = logging.getLogger(__name__)


class Role(str, Enum):
    USER = "USER"
    ADMIN = "ADMIN"


def normalize_roles(value: Any) -> FrozenSet[Role]:
    """
    Normalize a `roles` claim to a set of known roles.

    Accepts a list/tuple/set of strings or a single string. Matching is
    case-insensitive and tolerates the "ROLE_" prefix ("ROLE_ADMIN",
    "admin", "Admin" all map to Role.ADMIN). Unknown role names are dropped.
    """
    roles_in: Iterable[Any]
    if isinstance(value, (list, tuple, set, frozenset)):
        roles_in = value
    elif isinstance(value, str) and value.strip():
        roles_in = [value]
    else:
        roles_in = []

    out = set()
    for r in roles_in:
        name = str(r or "").strip().upper()
        if name.startswith("ROLE_"):
            name = name[len("ROLE_"):]
        try:
            out.add(Role(name))
        except ValueError:
            continue
    return frozenset(out)


@dataclass(frozen=True)
class Caller:
    """The identity and role set a request runs with."""

    subject: Optional[str] = None
    roles: FrozenSet[Role] = frozenset()


ANONYMOUS = Caller()


# ── Authorization Gate ────────────────────────────────────────────────────

def authorize(caller_roles: Iterable[Role], required_role: Role) -> bool:
    """Return True when `required_role` is among `caller_roles`."""
    return required_role in frozenset(caller_roles)


def require_role(caller: Caller, required_role: Role) -> None:
    """
    Raise ForbiddenError unless the caller holds `required_role`.

    Raises:
        ForbiddenError: caller lacks the role (→ 403)
    """
    if not authorize(caller.roles, required_role):
        logger.info(
            "Denied %s: caller=%s roles=%s",
            required_role.value,
            caller.subject or "anonymous",
            sorted(r.value for r in caller.roles),
        )
        raise ForbiddenError(required_role=required_role.value)


# ── Caller Resolution ─────────────────────────────────────────────────────

# auto_error=False: a missing or non-Bearer Authorization header yields None
# instead of an immediate 403 from FastAPI, so the controller decides.
bearer_scheme = HTTPBearer(
    scheme_name="Bearer",
    description="JWT carrying a `roles` claim",
    auto_error=False,
)


def caller_from_token(token: str) -> Caller:
    """
    Verify a JWT and build the Caller it describes.

    Invalid, expired or wrongly signed tokens resolve to ANONYMOUS.
    """
    options = {"verify_aud": settings.jwt_audience is not None}
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            options=options,
        )
    except JWTError as e:
        logger.debug("Rejected bearer token: %s", str(e))
        return ANONYMOUS

    subject = claims.get("sub")
    return Caller(
        subject=str(subject) if subject is not None else None,
        roles=normalize_roles(claims.get("roles")),
    )


async def get_caller(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Caller:
    """FastAPI dependency resolving the current request's Caller."""
    if credentials is None:
        return ANONYMOUS
    return caller_from_token(credentials.credentials)
