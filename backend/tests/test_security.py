"""
Campus API Backend: Security Unit Tests
=========================================

What:  Tests for role normalization, the authorization gate and caller
       resolution from bearer tokens.
How:   Pure function calls; tokens are minted with the test secret.

What we test:
    ✅ "ROLE_" prefix and case are tolerated, unknown roles dropped
    ✅ authorize() is exact membership (ADMIN does not imply USER)
    ✅ require_role() raises ForbiddenError with "Access Denied"
    ✅ Valid tokens yield the claimed roles; bad tokens yield ANONYMOUS
"""

from datetime import timedelta

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from campus_api.exceptions import ForbiddenError
from campus_api.security import (
    ANONYMOUS,
    Caller,
    Role,
    authorize,
    caller_from_token,
    get_caller,
    normalize_roles,
    require_role,
)


class TestNormalizeRoles:

    def test_prefixed_and_bare_names(self):
        assert normalize_roles(["ROLE_ADMIN", "user"]) == {Role.ADMIN, Role.USER}

    def test_single_string(self):
        assert normalize_roles("Role_User") == {Role.USER}

    def test_unknown_roles_dropped(self):
        assert normalize_roles(["ROLE_MEMBER", "ADMIN", None]) == {Role.ADMIN}

    @pytest.mark.parametrize("value", [None, "", "   ", 42, {"role": "ADMIN"}])
    def test_unusable_claims_yield_no_roles(self, value):
        assert normalize_roles(value) == frozenset()


class TestAuthorize:

    def test_held_role_is_authorized(self):
        assert authorize({Role.USER}, Role.USER)

    def test_admin_does_not_imply_user(self):
        assert not authorize({Role.ADMIN}, Role.USER)

    def test_user_cannot_act_as_admin(self):
        assert not authorize({Role.USER}, Role.ADMIN)

    def test_no_roles(self):
        assert not authorize(frozenset(), Role.USER)


class TestRequireRole:

    def test_passes_silently(self):
        require_role(Caller(roles=frozenset({Role.ADMIN})), Role.ADMIN)

    def test_raises_forbidden(self):
        with pytest.raises(ForbiddenError) as exc_info:
            require_role(ANONYMOUS, Role.USER)

        assert exc_info.value.message == "Access Denied"
        assert exc_info.value.type_tag == "AccessDeniedException"
        assert exc_info.value.required_role == "USER"


class TestCallerFromToken:

    def test_valid_token(self, make_token):
        caller = caller_from_token(make_token(["ROLE_ADMIN", "ROLE_USER"], subject="a@ucsb.edu"))

        assert caller.subject == "a@ucsb.edu"
        assert caller.roles == {Role.ADMIN, Role.USER}

    def test_expired_token_is_anonymous(self, make_token):
        token = make_token(["ROLE_ADMIN"], expires_in=timedelta(seconds=-30))
        assert caller_from_token(token) == ANONYMOUS

    def test_wrong_signature_is_anonymous(self, make_token):
        token = make_token(["ROLE_ADMIN"], secret="someone-elses-secret")
        assert caller_from_token(token) == ANONYMOUS

    def test_garbage_is_anonymous(self):
        assert caller_from_token("not.a.jwt") == ANONYMOUS

    def test_token_without_roles_claim(self, make_token):
        caller = caller_from_token(make_token([]))
        assert caller.roles == frozenset()
        assert caller.subject == "tester@ucsb.edu"


class TestGetCaller:

    @pytest.mark.asyncio
    async def test_no_credentials(self):
        assert await get_caller(None) == ANONYMOUS

    @pytest.mark.asyncio
    async def test_bearer_credentials(self, make_token):
        credentials = HTTPAuthorizationCredentials(
            scheme="Bearer", credentials=make_token(["ROLE_USER"])
        )
        caller = await get_caller(credentials)
        assert caller.roles == {Role.USER}
