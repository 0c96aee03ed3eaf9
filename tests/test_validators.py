# tests/test_validators.py
import pytest
from catalog.validators import (
    VolumeLocation, VolumeType, validate_href, validate_library_scope,
    validate_volume_location, validate_volume_type
)

@pytest.mark.parametrize("href", [
    "/base/1",
    "/base/12/authors/3",
    "/base/12/series/3",
    "/base/12/stories/3",
    "/base/12/volumes/3",
    "/authors/1/2",
    "/series/1/2",
    "/stories/1/2",
    "/volumes/1/2",
])
def test_valid_hrefs(href):
    assert validate_href(href)

@pytest.mark.parametrize("href", [
    None,
    "",
    "/base",
    "/base/x",
    "/base/1/books/2",
    "/base/1/authors",
    "/libraries/1",
    "https://example.com/base/1",
    "/base/1/",
])
def test_invalid_hrefs(href):
    assert not validate_href(href)

def test_library_scope():
    assert validate_library_scope("fiction")
    assert validate_library_scope("SciFi2")
    assert validate_library_scope("")
    assert validate_library_scope(None)
    assert not validate_library_scope("sci fi")
    assert not validate_library_scope("sci-fi")
    assert not validate_library_scope("fiction:admin")

def test_volume_location():
    for location in VolumeLocation:
        assert validate_volume_location(location.value)
    assert validate_volume_location(None)
    assert not validate_volume_location("kindle")
    assert not validate_volume_location("Shelf")

def test_volume_type():
    assert [t.value for t in VolumeType] == ["Single", "Collection", "Anthology"]
    assert validate_volume_type("Anthology")
    assert not validate_volume_type("Omnibus")
