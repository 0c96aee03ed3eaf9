# tests/test_sa/test_repositories/test_series_repository.py

import pytest
from catalog.errors import BadRequest, NotFound, NotUnique
from catalog.sa.models import Series, SeriesStory
from catalog.sa.repositories.options import SeriesAllOptions, SeriesFindOptions, StoryAllOptions

def test_insert_exact_round_trip(series_repo, fiction):
    series = series_repo.insert(fiction.id, {"name": "Pern", "copyright": "1968"})
    assert series_repo.exact(fiction.id, "Pern").id == series.id

def test_name_unique_within_library_only(series_repo, fiction, nonfiction, sample_series):
    with pytest.raises(NotUnique):
        series_repo.insert(fiction.id, {"name": "Earthsea"})
    other = series_repo.insert(nonfiction.id, {"name": "Earthsea"})
    assert other.library_id == nonfiction.id
    assert series_repo.unique_name(fiction.id, sample_series.id, "Earthsea")
    assert not series_repo.unique_name(fiction.id, None, "Earthsea")

def test_unique_constraint_backs_up_name_check(monkeypatch, series_repo, fiction, sample_series):
    """A duplicate that slips past the lookup is still rejected by the database."""
    monkeypatch.setattr(series_repo, "unique_name", lambda *args: True)
    with pytest.raises(NotUnique) as excinfo:
        series_repo.insert(fiction.id, {"name": "Earthsea"})
    assert "Earthsea" in excinfo.value.message
    assert [s.name for s in series_repo.all(fiction.id)] == ["Earthsea"]

def test_find_with_wrong_library_scenario(db_session, series_repo, fiction, nonfiction):
    """Series 5 in one library is not found through another library."""
    db_session.add(Series(id=5, library_id=fiction.id, name="Fifth Series"))
    db_session.commit()
    assert series_repo.find(fiction.id, 5).name == "Fifth Series"
    with pytest.raises(NotFound):
        series_repo.find(nonfiction.id, 5)

def test_update_rejects_duplicate_name(series_repo, fiction, sample_series):
    other = series_repo.insert(fiction.id, {"name": "Hainish"})
    with pytest.raises(NotUnique):
        series_repo.update(fiction.id, other.id, {"name": "Earthsea"})
    with pytest.raises(BadRequest):
        series_repo.update(fiction.id, other.id, {"copyright": "1966"})

def test_update_replaces_whole_record(series_repo, fiction, sample_series):
    updated = series_repo.update(fiction.id, sample_series.id, {"name": "Earthsea Cycle"})
    assert updated.name == "Earthsea Cycle"
    assert updated.copyright is None

def test_all_filters(series_repo, fiction):
    series_repo.insert(fiction.id, {"name": "Dragonriders of Pern"})
    series_repo.insert(fiction.id, {"name": "Dragon Jousters", "active": False})
    series_repo.insert(fiction.id, {"name": "Discworld"})
    names = [s.name for s in series_repo.all(fiction.id, SeriesAllOptions(name="dragon"))]
    assert names == ["Dragon Jousters", "Dragonriders of Pern"]
    names = [s.name for s in series_repo.all(fiction.id, SeriesAllOptions(name="dragon", active=True))]
    assert names == ["Dragonriders of Pern"]

def test_story_ordinals_are_kept_as_given(series_repo, story_repo, fiction, sample_series, multiple_stories):
    first, second, third = multiple_stories[:3]
    series_repo.story_connect(fiction.id, sample_series.id, first.id, ordinal=2)
    series_repo.story_connect(fiction.id, sample_series.id, second.id, ordinal=2)
    series_repo.story_connect(fiction.id, sample_series.id, third.id, ordinal=7)
    stories = story_repo.by_series(fiction.id, sample_series.id)
    # Duplicate ordinals fall back to name order
    assert [s.name for s in stories] == sorted([first.name, second.name]) + [third.name]
    series_repo.story_disconnect(fiction.id, sample_series.id, first.id)
    found = series_repo.find(fiction.id, sample_series.id, SeriesFindOptions(with_stories=True))
    assert [(j.story.name, j.ordinal) for j in found.series_stories] == [(second.name, 2), (third.name, 7)]

def test_story_connect_twice(series_repo, fiction, sample_series, sample_story):
    series_repo.story_connect(fiction.id, sample_series.id, sample_story.id, ordinal=1)
    with pytest.raises(NotUnique):
        series_repo.story_connect(fiction.id, sample_series.id, sample_story.id, ordinal=2)

def test_by_author_and_by_story(series_repo, author_repo, fiction, sample_author, sample_series, sample_story):
    series_repo.author_connect(fiction.id, sample_series.id, sample_author.id, principal=True)
    series_repo.story_connect(fiction.id, sample_series.id, sample_story.id)
    assert [s.id for s in series_repo.by_author(fiction.id, sample_author.id)] == [sample_series.id]
    assert [s.id for s in series_repo.by_story(fiction.id, sample_story.id)] == [sample_series.id]
    assert [a.id for a in author_repo.by_series(fiction.id, sample_series.id)] == [sample_author.id]

def test_by_author_in_other_library(series_repo, nonfiction, sample_author):
    with pytest.raises(NotFound):
        series_repo.by_author(nonfiction.id, sample_author.id)

def test_remove_drops_join_rows_only(db_session, series_repo, story_repo, fiction, sample_series, sample_story):
    library_id, series_id = fiction.id, sample_series.id
    series_repo.story_connect(library_id, series_id, sample_story.id, ordinal=1)
    series_repo.remove(library_id, series_id)
    assert db_session.query(SeriesStory).count() == 0
    assert story_repo.all(library_id, StoryAllOptions())[0].name == "A Wizard of Earthsea"
