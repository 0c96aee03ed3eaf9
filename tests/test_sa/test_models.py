# tests/test_sa/test_models.py
from catalog.sa.models import (
    Author, AuthorSeries, Library, Series, SeriesStory, Story, Volume, VolumeStory
)

def test_library_relationships(db_session, fiction, sample_author, sample_series, sample_story, sample_volume):
    """Test that every catalog entity hangs off its library"""
    library = db_session.get(Library, fiction.id)
    assert [a.last_name for a in library.authors] == ["Le Guin"]
    assert [s.name for s in library.series] == ["Earthsea"]
    assert [s.name for s in library.stories] == ["A Wizard of Earthsea"]
    assert [v.name for v in library.volumes] == ["The Earthsea Quartet"]
    assert sample_volume.library.scope == "fiction"

def test_join_models_and_convenience_relationships(db_session, sample_author, sample_series, sample_story, sample_volume):
    db_session.add(AuthorSeries(author_id=sample_author.id, series_id=sample_series.id, principal=True))
    db_session.add(SeriesStory(series_id=sample_series.id, story_id=sample_story.id, ordinal=1))
    db_session.add(VolumeStory(volume_id=sample_volume.id, story_id=sample_story.id))
    db_session.commit()

    author = db_session.get(Author, sample_author.id)
    assert author.authors_series[0].principal is True
    assert [s.name for s in author.series] == ["Earthsea"]

    series = db_session.get(Series, sample_series.id)
    assert [a.full_name for a in series.authors] == ["Ursula Le Guin"]
    assert series.series_stories[0].story.name == "A Wizard of Earthsea"

    story = db_session.get(Story, sample_story.id)
    assert [v.name for v in story.volumes] == ["The Earthsea Quartet"]
    assert [s.name for s in story.series] == ["Earthsea"]

    volume = db_session.get(Volume, sample_volume.id)
    assert [s.name for s in volume.stories] == ["A Wizard of Earthsea"]

def test_timestamps_are_set(sample_story):
    assert sample_story.created_at is not None
    assert sample_story.updated_at is not None
