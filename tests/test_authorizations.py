# tests/test_authorizations.py
import pytest
from types import SimpleNamespace
from catalog.authorizations import (
    authorized_admin, authorized_regular, authorized_superuser,
    library_scope, readable_library_scopes, scopes_of
)

FICTION = SimpleNamespace(scope="fiction")
NONFICTION = SimpleNamespace(scope="nonfiction")
UNSCOPED = SimpleNamespace(scope="")

def user(scope):
    return SimpleNamespace(scope=scope)

def test_fiction_regular_scenario():
    """A fiction:regular user reads fiction only, and administers nothing."""
    reader = user("fiction:regular")
    assert authorized_regular(reader, FICTION) is True
    assert authorized_regular(reader, NONFICTION) is False
    assert authorized_admin(reader, FICTION) is False

def test_admin_implies_regular():
    scopes = [
        None, "", "superuser", "fiction:admin", "fiction:regular",
        "nonfiction:admin fiction:regular", "fiction:adminx", "  fiction:admin  ",
    ]
    for scope in scopes:
        for library in (FICTION, NONFICTION, UNSCOPED):
            if authorized_admin(user(scope), library):
                assert authorized_regular(user(scope), library), (scope, library.scope)

@pytest.mark.parametrize("library", [FICTION, NONFICTION, UNSCOPED])
def test_superuser_is_authorized_everywhere(library):
    root = user("superuser")
    assert authorized_superuser(root)
    assert authorized_admin(root, library)
    assert authorized_regular(root, library)

def test_superuser_token_equivalence():
    """Extra tokens next to superuser change nothing."""
    for library in (FICTION, NONFICTION):
        assert authorized_admin(user("superuser"), library) == authorized_admin(user("fiction:regular superuser"), library)

def test_missing_user_is_denied():
    assert authorized_superuser(None) is False
    assert authorized_admin(None, FICTION) is False
    assert authorized_regular(None, FICTION) is False

def test_tokens_must_match_exactly():
    assert authorized_admin(user("fiction:admins"), FICTION) is False
    assert authorized_regular(user("Fiction:regular"), FICTION) is False
    assert authorized_regular(user("fiction"), FICTION) is False
    assert authorized_superuser(user("superusers")) is False

def test_unscoped_library_needs_superuser():
    assert authorized_regular(user(":regular"), UNSCOPED) is False
    assert authorized_admin(user("superuser"), UNSCOPED) is True

def test_scopes_of_ignores_extra_whitespace():
    assert scopes_of(user("  fiction:admin   superuser ")) == {"fiction:admin", "superuser"}
    assert scopes_of(user(None)) == set()
    assert scopes_of(SimpleNamespace()) == set()

def test_library_scope():
    assert library_scope(FICTION, "admin") == "fiction:admin"
    assert library_scope(UNSCOPED, "admin") is None

def test_readable_library_scopes():
    assert readable_library_scopes(user("superuser fiction:regular")) is None
    assert readable_library_scopes(user("fiction:regular nonfiction:admin other:guest")) == {"fiction", "nonfiction"}
    assert readable_library_scopes(user("")) == set()
