# catalog/authorizations.py
"""Decide whether a user may act on a library at a given privilege level.

A user's ``scope`` is a space delimited string of tokens. A token is either
``superuser`` or ``{library.scope}:{tier}`` where tier is ``admin`` or
``regular``. These predicates are pure and never raise for a denied user.
"""
from typing import Optional, Protocol

SUPERUSER = "superuser"
ADMIN = "admin"
REGULAR = "regular"


class HasScope(Protocol):
    scope: Optional[str]


def scopes_of(user: Optional[HasScope]) -> set[str]:
    """Return the set of scope tokens granted to this user"""
    if user is None:
        return set()
    scope = getattr(user, "scope", None)
    if not isinstance(scope, str) or not scope:
        return set()
    return {token for token in scope.split(" ") if token}


def library_scope(library: HasScope, tier: str) -> Optional[str]:
    """Return the token granting ``tier`` access to this library, if it has a scope"""
    scope = getattr(library, "scope", None)
    if not isinstance(scope, str) or not scope:
        return None
    return f"{scope}:{tier}"


def authorized_superuser(user: Optional[HasScope]) -> bool:
    return SUPERUSER in scopes_of(user)


def authorized_admin(user: Optional[HasScope], library: HasScope) -> bool:
    scopes = scopes_of(user)
    if SUPERUSER in scopes:
        return True
    required = library_scope(library, ADMIN)
    return required is not None and required in scopes


def authorized_regular(user: Optional[HasScope], library: HasScope) -> bool:
    scopes = scopes_of(user)
    if SUPERUSER in scopes:
        return True
    admin = library_scope(library, ADMIN)
    regular = library_scope(library, REGULAR)
    return (admin is not None and admin in scopes) or (regular is not None and regular in scopes)


def readable_library_scopes(user: Optional[HasScope]) -> Optional[set[str]]:
    """Return the library scopes this user may read, or None for "all of them"

    Only meaningful for listing; a single library is checked with
    ``authorized_regular``.
    """
    scopes = scopes_of(user)
    if SUPERUSER in scopes:
        return None
    result = set()
    for token in scopes:
        scope, _, tier = token.rpartition(":")
        if scope and tier in (ADMIN, REGULAR):
            result.add(scope)
    return result
