# tests/test_sa/test_repositories/test_user_repository.py

import pytest
from datetime import datetime, timedelta, UTC
from catalog.errors import BadRequest, NotFound, NotUnique
from catalog.sa.models import AccessToken
from catalog.sa.repositories.options import UserAllOptions, UserFindOptions
from catalog.sa.repositories.user import UserRepository

def test_insert_and_exact(user_repo):
    user = user_repo.insert({"username": "ged", "password": "sparrowhawk", "name": "Ged"})
    assert user.scope == ""
    assert user.active is True
    assert user_repo.exact("ged").id == user.id

def test_insert_requires_fields(user_repo):
    with pytest.raises(BadRequest):
        user_repo.insert({"username": "nopassword", "name": "No Password"})

def test_username_is_unique(user_repo, make_user):
    make_user("tenar")
    with pytest.raises(NotUnique):
        user_repo.insert({"username": "tenar", "password": "x", "name": "Other Tenar"})

def test_password_hasher_is_applied(db_session):
    repo = UserRepository(db_session, password_hasher=lambda value: f"hashed:{value}")
    user = repo.insert({"username": "ogion", "password": "silence", "name": "Ogion"})
    assert user.password == "hashed:silence"
    updated = repo.update(user.id, {"username": "ogion", "name": "Ogion the Silent"})
    assert updated.password == "hashed:silence"
    updated = repo.update(user.id, {"username": "ogion", "name": "Ogion", "password": "new"})
    assert updated.password == "hashed:new"

def test_all_filters(user_repo, make_user):
    make_user("alpha")
    make_user("beta", active=False)
    make_user("alphonse")
    assert [u.username for u in user_repo.all()] == ["alpha", "alphonse", "beta"]
    assert [u.username for u in user_repo.all(UserAllOptions(active=True))] == ["alpha", "alphonse"]
    assert [u.username for u in user_repo.all(UserAllOptions(username="ALPH"))] == ["alpha", "alphonse"]

def test_access_token_lookup(user_repo, make_user):
    user = make_user("reader", "fiction:regular")
    assert user_repo.by_access_token("reader-token").id == user.id
    assert user_repo.by_access_token("unknown") is None

def test_access_token_carries_scope(user_repo, make_user):
    user = make_user("reader", "fiction:regular")
    found = user_repo.find(user.id, UserFindOptions(with_access_tokens=True))
    assert [t.scope for t in found.access_tokens] == ["fiction:regular"]

def test_expired_token_is_rejected(user_repo, make_user):
    user = make_user("late")
    user_repo.add_access_token(user.id, lifetime=timedelta(seconds=-1), token="stale")
    assert user_repo.by_access_token("stale") is None

def test_inactive_user_token_is_rejected(db_session, user_repo, make_user):
    user = make_user("gone")
    user.active = False
    db_session.commit()
    assert user_repo.by_access_token("gone-token") is None

def test_deactivate_revokes_tokens(db_session, user_repo, make_user):
    user = make_user("retired")
    assert user_repo.deactivate(user.id).active is False
    assert db_session.query(AccessToken).count() == 0

def test_revoke_and_purge(db_session, user_repo, make_user):
    user = make_user("busy")
    user_repo.add_access_token(user.id, lifetime=timedelta(hours=-2), token="old")
    assert user_repo.purge_expired_tokens() == 1
    assert user_repo.by_access_token("busy-token") is not None
    assert user_repo.revoke_tokens(user.id) == 1
    assert user_repo.by_access_token("busy-token") is None

def test_remove_deletes_tokens(db_session, user_repo, make_user):
    user_id = make_user("temp").id
    user_repo.remove(user_id)
    assert db_session.query(AccessToken).count() == 0
    with pytest.raises(NotFound):
        user_repo.find(user_id)

def test_token_expiry_handles_naive_datetimes():
    token = AccessToken(token="t", expires=datetime.now(UTC).replace(tzinfo=None) + timedelta(minutes=5))
    assert token.is_expired() is False
    assert token.is_expired(datetime.now(UTC) + timedelta(minutes=10)) is True
