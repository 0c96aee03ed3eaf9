# tests/test_sa/test_repositories/test_volume_repository.py

import pytest
from catalog.errors import BadRequest, NotFound
from catalog.sa.repositories.options import VolumeAllOptions, VolumeFindOptions
from catalog.validators import VolumeType

def test_insert_defaults(volume_repo, fiction):
    volume = volume_repo.insert(fiction.id, {"name": "Tales from Earthsea"})
    assert volume.type == VolumeType.SINGLE.value
    assert volume.read is False
    assert volume.location is None
    assert volume.active is True

def test_insert_validates_location_and_type(volume_repo, fiction):
    with pytest.raises(BadRequest):
        volume_repo.insert(fiction.id, {"name": "Nowhere", "location": "Shelf"})
    with pytest.raises(BadRequest):
        volume_repo.insert(fiction.id, {"name": "Omnibus", "type": "Omnibus"})

def test_update_validates_location(volume_repo, fiction, sample_volume):
    with pytest.raises(BadRequest):
        volume_repo.update(fiction.id, sample_volume.id, {"name": "The Earthsea Quartet", "location": "kindle"})
    updated = volume_repo.update(fiction.id, sample_volume.id, {
        "name": "The Earthsea Quartet", "location": "Kindle", "type": "Collection", "read": True,
        "isbn": "9780140348231",
    })
    assert (updated.location, updated.type, updated.read) == ("Kindle", "Collection", True)

def test_author_and_story_links(volume_repo, author_repo, story_repo,
                                fiction, sample_author, sample_story, sample_volume):
    volume_repo.author_connect(fiction.id, sample_volume.id, sample_author.id, principal=True)
    volume_repo.story_connect(fiction.id, sample_volume.id, sample_story.id)
    assert [v.id for v in volume_repo.by_author(fiction.id, sample_author.id)] == [sample_volume.id]
    assert [v.id for v in volume_repo.by_story(fiction.id, sample_story.id)] == [sample_volume.id]
    assert [a.id for a in author_repo.by_volume(fiction.id, sample_volume.id)] == [sample_author.id]
    found = volume_repo.find(fiction.id, sample_volume.id, VolumeFindOptions(with_authors=True, with_stories=True))
    assert [j.principal for j in found.authors_volumes] == [True]
    assert [j.story.name for j in found.volumes_stories] == ["A Wizard of Earthsea"]
    volume_repo.author_disconnect(fiction.id, sample_volume.id, sample_author.id)
    volume_repo.story_disconnect(fiction.id, sample_volume.id, sample_story.id)
    assert volume_repo.by_author(fiction.id, sample_author.id) == []

def test_all_scoped_and_filtered(volume_repo, fiction, nonfiction, sample_volume):
    volume_repo.insert(nonfiction.id, {"name": "The Earthsea Quartet"})
    assert [v.id for v in volume_repo.all(fiction.id, VolumeAllOptions(name="quartet"))] == [sample_volume.id]

def test_find_in_other_library(volume_repo, nonfiction, sample_volume):
    with pytest.raises(NotFound):
        volume_repo.find(nonfiction.id, sample_volume.id)
