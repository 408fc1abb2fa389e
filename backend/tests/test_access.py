import pytest

from jobboard.core.errors import Forbidden, Unauthorized
from jobboard.models.enums import Role
from jobboard.services import access


@pytest.mark.parametrize("role", [r.value for r in Role])
def test_authorize_allows_matching_role(role):
    decision = access.authorize(role, Role(role))
    assert decision.allowed
    assert decision.reason is None


def test_candidate_check_denies_with_forbidden():
    with pytest.raises(Forbidden):
        access.require_candidate(Role.RECRUITER.value)
    access.require_candidate(Role.CANDIDATE.value)


def test_recruiter_check_denies_with_unauthorized():
    with pytest.raises(Unauthorized):
        access.require_recruiter(Role.CANDIDATE.value)
    with pytest.raises(Unauthorized):
        access.require_recruiter(Role.ADMIN.value)
    access.require_recruiter(Role.RECRUITER.value)


def test_admin_check_denies_with_forbidden():
    decision = access.authorize(Role.RECRUITER.value, Role.ADMIN)
    assert not decision.allowed
    assert isinstance(decision.reason, Forbidden)
    with pytest.raises(Forbidden):
        access.require_admin(Role.CANDIDATE.value)


def test_forbidden_and_unauthorized_are_distinct():
    assert not issubclass(Forbidden, Unauthorized)
    assert not issubclass(Unauthorized, Forbidden)


def test_owner_check():
    access.require_owner("abc", "abc")
    with pytest.raises(Unauthorized):
        access.require_owner("abc", "def")
