from ablehub.services.accessibility_service import AccessibilityService
from ablehub.utils import locks
from ablehub.utils.locks import STRIPES, keyed_lock


def test_same_key_always_gets_same_lock() -> None:
    assert keyed_lock("users", "u1") is keyed_lock("users", "u1")


def test_lock_pool_does_not_grow_with_keys() -> None:
    seen = {id(keyed_lock("accessibility_settings", f"user-{i}")) for i in range(5000)}
    assert len(seen) <= STRIPES
    assert len(locks._stripes) == STRIPES


def test_many_users_leave_pool_size_unchanged(app_ctx) -> None:
    service = AccessibilityService()
    for i in range(200):
        service.handle_get(f"user-{i}")
    assert len(locks._stripes) == STRIPES
