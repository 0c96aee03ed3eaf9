# tests/test_sa/test_repositories/test_author_repository.py

import logging
import pytest
from catalog.errors import BadRequest, NotFound, NotUnique
from catalog.sa.models import AuthorStory, AuthorVolume, Story
from catalog.sa.repositories.options import AuthorAllOptions, AuthorFindOptions

@pytest.fixture
def authors(author_repo, fiction):
    """Several authors, one of them inactive."""
    rows = [
        ("Anne", "McCaffrey", True),
        ("Ursula", "Le Guin", True),
        ("Ann", "Leckie", True),
        ("Robert", "Heinlein", False),
    ]
    return [
        author_repo.insert(fiction.id, {"first_name": first, "last_name": last, "active": active})
        for first, last, active in rows
    ]

def test_insert_requires_both_names(author_repo, fiction):
    with pytest.raises(BadRequest):
        author_repo.insert(fiction.id, {"first_name": "Cher"})
    with pytest.raises(BadRequest):
        author_repo.insert(fiction.id, {"first_name": "", "last_name": "Nobody"})

def test_insert_into_missing_library(author_repo):
    with pytest.raises(NotFound):
        author_repo.insert(999, {"first_name": "No", "last_name": "Library"})

def test_insert_cannot_choose_library(author_repo, fiction, nonfiction):
    author = author_repo.insert(fiction.id, {"first_name": "A", "last_name": "B", "library_id": nonfiction.id})
    assert author.library_id == fiction.id

def test_names_need_not_be_unique(author_repo, fiction):
    first = author_repo.insert(fiction.id, {"first_name": "John", "last_name": "Smith"})
    second = author_repo.insert(fiction.id, {"first_name": "John", "last_name": "Smith"})
    assert first.id != second.id
    # The oldest match wins
    assert author_repo.exact(fiction.id, "John", "Smith").id == first.id

def test_exact_is_scoped_to_library(author_repo, fiction, nonfiction, sample_author):
    assert author_repo.exact(fiction.id, "Ursula", "Le Guin").id == sample_author.id
    with pytest.raises(NotFound):
        author_repo.exact(nonfiction.id, "Ursula", "Le Guin")

def test_find_in_other_library_is_not_found(author_repo, fiction, nonfiction, sample_author):
    with pytest.raises(NotFound):
        author_repo.find(nonfiction.id, sample_author.id)

def test_all_orders_by_last_then_first_name(author_repo, fiction, authors):
    names = [a.last_name for a in author_repo.all(fiction.id)]
    assert names == ["Heinlein", "Le Guin", "Leckie", "McCaffrey"]

def test_all_active_only(author_repo, fiction, authors):
    names = [a.last_name for a in author_repo.all(fiction.id, AuthorAllOptions(active=True))]
    assert "Heinlein" not in names
    assert len(names) == 3

def test_all_name_matches_first_or_last_word(author_repo, fiction, authors):
    matched = author_repo.all(fiction.id, AuthorAllOptions(name="ann"))
    assert sorted(a.first_name for a in matched) == ["Ann", "Anne"]
    matched = author_repo.all(fiction.id, AuthorAllOptions(name="Ursula Leckie"))
    assert sorted(a.last_name for a in matched) == ["Le Guin", "Leckie"]

def test_all_is_scoped_to_library(author_repo, nonfiction, authors):
    assert author_repo.all(nonfiction.id) == []

def test_update_and_deactivate(author_repo, fiction, sample_author):
    updated = author_repo.update(fiction.id, sample_author.id, {
        "first_name": "Ursula K.", "last_name": "Le Guin", "notes": "Hainish cycle"
    })
    assert updated.full_name == "Ursula K. Le Guin"
    assert updated.notes == "Hainish cycle"
    assert author_repo.deactivate(fiction.id, sample_author.id).active is False

def test_update_in_other_library(author_repo, nonfiction, sample_author):
    with pytest.raises(NotFound):
        author_repo.update(nonfiction.id, sample_author.id, {"first_name": "X", "last_name": "Y"})

def test_story_connect_and_listing(author_repo, story_repo, fiction, sample_author, sample_story):
    author_repo.story_connect(fiction.id, sample_author.id, sample_story.id, principal=True)
    assert [a.id for a in author_repo.by_story(fiction.id, sample_story.id)] == [sample_author.id]
    assert [s.id for s in story_repo.by_author(fiction.id, sample_author.id)] == [sample_story.id]
    principals = author_repo.principals(fiction.id, AuthorStory, AuthorStory.story_id, sample_story.id)
    assert [a.id for a in principals] == [sample_author.id]

def test_connect_twice_is_not_unique(author_repo, fiction, sample_author, sample_volume):
    author_repo.volume_connect(fiction.id, sample_author.id, sample_volume.id)
    with pytest.raises(NotUnique):
        author_repo.volume_connect(fiction.id, sample_author.id, sample_volume.id)

def test_connect_across_libraries_is_rejected(author_repo, story_repo, fiction, nonfiction, sample_author):
    foreign = story_repo.insert(nonfiction.id, {"name": "The Selfish Gene"})
    with pytest.raises(BadRequest):
        author_repo.story_connect(fiction.id, sample_author.id, foreign.id)
    with pytest.raises(NotFound):
        author_repo.story_connect(fiction.id, sample_author.id, 999)

def test_disconnect_missing_join(author_repo, fiction, sample_author, sample_series):
    with pytest.raises(NotFound):
        author_repo.series_disconnect(fiction.id, sample_author.id, sample_series.id)

def test_disconnect_last_principal_warns(author_repo, fiction, sample_author, sample_volume, caplog):
    author_repo.volume_connect(fiction.id, sample_author.id, sample_volume.id, principal=True)
    with caplog.at_level(logging.WARNING):
        author_repo.volume_disconnect(fiction.id, sample_author.id, sample_volume.id)
    assert "has no principal Author" in caplog.text

def test_find_with_join_metadata(author_repo, fiction, sample_author, sample_series, sample_volume):
    author_repo.series_connect(fiction.id, sample_author.id, sample_series.id, principal=True)
    author_repo.volume_connect(fiction.id, sample_author.id, sample_volume.id)
    found = author_repo.find(fiction.id, sample_author.id, AuthorFindOptions(with_series=True, with_volumes=True))
    assert [(j.series.name, j.principal) for j in found.authors_series] == [("Earthsea", True)]
    assert [(j.volume.name, j.principal) for j in found.authors_volumes] == [("The Earthsea Quartet", False)]

def test_remove_keeps_related_entities(db_session, author_repo, fiction, sample_author, sample_story, sample_volume):
    library_id, author_id = fiction.id, sample_author.id
    author_repo.story_connect(library_id, author_id, sample_story.id)
    author_repo.volume_connect(library_id, author_id, sample_volume.id)
    author_repo.remove(library_id, author_id)
    assert db_session.query(AuthorStory).count() == 0
    assert db_session.query(AuthorVolume).count() == 0
    assert db_session.query(Story).count() == 1
    with pytest.raises(NotFound):
        author_repo.find(library_id, author_id)
