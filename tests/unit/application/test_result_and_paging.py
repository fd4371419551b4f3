from __future__ import annotations

from uuid import uuid4

from src.application.pagination import Page, offset_for, paging_error, total_pages
from src.application.result import FailureReason, Result, ResultKind
from src.application.services.role_guard import RoleGuard
from src.domain.models.principal import Principal
from src.domain.value_objects.role import RoleName


def test_warning_counts_as_ok_but_invalid_does_not():
    assert Result.warning("nothing matched", []).ok
    assert not Result.invalid("bad page")
    assert Result.not_found("gone").kind is ResultKind.ERROR


def test_payload_carries_reason_code():
    payload = Result.duplicate("Breed 'Labrador' already exists").as_payload()
    assert payload == {
        "type": "error",
        "message": "Breed 'Labrador' already exists",
        "code": FailureReason.DUPLICATE.value,
    }


def test_total_pages_rounds_up():
    assert total_pages(47, 15) == 4
    assert total_pages(45, 15) == 3
    assert total_pages(0, 15) == 0
    page = Page(items=[1, 2], current_page=4, page_size=15, total_count=47)
    assert page.total_pages == 4
    assert offset_for(4, 15) == 45


def test_paging_error_bounds():
    assert paging_error(0, 15, 100) is not None
    assert paging_error(1, 0, 100) is not None
    assert paging_error(1, 101, 100) is not None
    assert paging_error(2, 100, 100) is None


def test_role_guard():
    guard = RoleGuard.of([RoleName.ADMIN, RoleName.MODERATOR])
    moderator = Principal(id=uuid4(), role=RoleName.MODERATOR, display_name="mod")
    user = Principal(id=uuid4(), role=RoleName.USER, display_name="u")

    assert guard.evaluate(moderator).data is moderator
    denied = guard.evaluate(user)
    assert denied.kind is ResultKind.UNAUTHORIZED
    assert denied.message == "Access denied: insufficient role"
    assert guard.evaluate(None).message == "Authentication required"
