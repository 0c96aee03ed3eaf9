# tests/test_options.py
import pytest
from catalog.errors import BadRequest
from catalog.sa.models import Story
from catalog.sa.repositories.options import (
    AuthorAllOptions, LibraryFindOptions, StoryAllOptions,
    include_flags, is_last_page, paginate
)

def test_include_flags():
    assert include_flags(None) == []
    assert include_flags(LibraryFindOptions()) == []
    assert include_flags(AuthorAllOptions(with_series=True, with_volumes=True, active=True)) == [
        "with_series", "with_volumes"
    ]

def test_is_last_page():
    assert is_last_page([1, 2], None) is True
    assert is_last_page([1, 2], 0) is True
    assert is_last_page([1], 2) is True
    # A full page might be followed by more rows
    assert is_last_page([1, 2], 2) is False

def test_paginate_rejects_negative_values(db_session):
    query = db_session.query(Story)
    with pytest.raises(BadRequest):
        paginate(query, StoryAllOptions(offset=-1))
    with pytest.raises(BadRequest):
        paginate(query, StoryAllOptions(limit=-5))

def test_paginate_without_options_is_unbounded(db_session):
    query = db_session.query(Story)
    assert paginate(query, None) is query
    assert paginate(query, StoryAllOptions(limit=0, offset=0)) is query
