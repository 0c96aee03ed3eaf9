# tests/test_parents.py
import pytest
from catalog.errors import NotFound
from catalog.parents import KIND_BY_MODEL, Parent, ParentKind, stories_of
from catalog.sa.repositories.options import StoryAllOptions

def test_every_kind_has_a_model():
    assert set(KIND_BY_MODEL.values()) == set(ParentKind)

def test_parent_of_entities(fiction, sample_author, sample_volume):
    assert Parent.of(fiction) == Parent.library(fiction.id)
    assert Parent.of(sample_author) == Parent(ParentKind.AUTHOR, fiction.id, sample_author.id)
    assert Parent.of(sample_volume).href == f"/base/{fiction.id}/volumes/{sample_volume.id}"

def test_parent_of_rejects_other_objects():
    with pytest.raises(TypeError):
        Parent.of(object())

def test_parent_of_matches_model_classes_not_names():
    Author = type('Author', (), {'id': 1, 'library_id': 1})
    with pytest.raises(TypeError):
        Parent.of(Author())

def test_parent_is_a_value():
    assert Parent(ParentKind.SERIES, 1, 5) == Parent(ParentKind.SERIES, 1, 5)
    assert len({Parent(ParentKind.SERIES, 1, 5), Parent(ParentKind.SERIES, 1, 5)}) == 1

def test_stories_of_library(db_session, fiction, multiple_stories):
    stories = stories_of(db_session, Parent.of(fiction), StoryAllOptions(limit=5))
    assert len(stories) == 5
    assert [s.name for s in stories] == sorted(s.name for s in stories)

def test_stories_of_author(db_session, fiction, sample_author, sample_story, multiple_stories, author_repo):
    author_repo.story_connect(fiction.id, sample_author.id, sample_story.id, principal=True)
    stories = stories_of(db_session, Parent.of(sample_author))
    assert [s.id for s in stories] == [sample_story.id]

def test_stories_of_series_in_ordinal_order(db_session, fiction, sample_series, multiple_stories, series_repo):
    first, second, third = multiple_stories[:3]
    series_repo.story_connect(fiction.id, sample_series.id, third.id, ordinal=1)
    series_repo.story_connect(fiction.id, sample_series.id, first.id)
    series_repo.story_connect(fiction.id, sample_series.id, second.id, ordinal=2)
    stories = stories_of(db_session, Parent.of(sample_series))
    assert [s.id for s in stories] == [third.id, second.id, first.id]

def test_stories_of_volume(db_session, fiction, sample_volume, multiple_stories, volume_repo):
    volume_repo.story_connect(fiction.id, sample_volume.id, multiple_stories[0].id)
    stories = stories_of(db_session, Parent.of(sample_volume))
    assert [s.id for s in stories] == [multiple_stories[0].id]

def test_stories_of_story_is_empty(db_session, fiction, sample_story):
    assert stories_of(db_session, Parent.of(sample_story)) == []

def test_stories_of_foreign_parent(db_session, fiction, nonfiction, sample_series):
    with pytest.raises(NotFound):
        stories_of(db_session, Parent(ParentKind.SERIES, nonfiction.id, sample_series.id))
