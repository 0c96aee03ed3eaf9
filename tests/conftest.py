# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from catalog.sa.models import Base
from catalog.sa.database import Database
from catalog.sa.repositories import (
    AuthorRepository, LibraryRepository, SeriesRepository,
    StoryRepository, UserRepository, VolumeRepository
)

# Children before parents, so foreign keys never block a delete
TABLES = [
    "authors_series", "authors_stories", "authors_volumes",
    "series_stories", "volumes_stories",
    "access_token", "refresh_token",
    "author", "series", "story", "volume",
    "library", "user",
]

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_catalog.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    Base.metadata.drop_all(db.engine)
    Base.metadata.create_all(db.engine)

    yield db

    db.engine.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass  # Ignore errors if file doesn't exist

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database._SessionFactory()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(db_session):
    """Clean up database tables before each test"""
    for table in TABLES:
        db_session.execute(text(f'DELETE FROM "{table}"'))
    db_session.commit()
    yield
    # Clean up after test as well
    db_session.rollback()

# Repositories

@pytest.fixture
def library_repo(db_session):
    return LibraryRepository(db_session)

@pytest.fixture
def author_repo(db_session):
    return AuthorRepository(db_session)

@pytest.fixture
def series_repo(db_session):
    return SeriesRepository(db_session)

@pytest.fixture
def story_repo(db_session):
    return StoryRepository(db_session)

@pytest.fixture
def volume_repo(db_session):
    return VolumeRepository(db_session)

@pytest.fixture
def user_repo(db_session):
    return UserRepository(db_session)

# Sample data

@pytest.fixture
def fiction(library_repo):
    """Library with scope "fiction"."""
    return library_repo.insert({"name": "Fiction Library", "scope": "fiction"})

@pytest.fixture
def nonfiction(library_repo):
    """Library with scope "nonfiction"."""
    return library_repo.insert({"name": "Nonfiction Library", "scope": "nonfiction"})

@pytest.fixture
def sample_author(author_repo, fiction):
    return author_repo.insert(fiction.id, {"first_name": "Ursula", "last_name": "Le Guin"})

@pytest.fixture
def sample_series(series_repo, fiction):
    return series_repo.insert(fiction.id, {"name": "Earthsea", "copyright": "1968"})

@pytest.fixture
def sample_story(story_repo, fiction):
    return story_repo.insert(fiction.id, {"name": "A Wizard of Earthsea", "copyright": "1968"})

@pytest.fixture
def sample_volume(volume_repo, fiction):
    return volume_repo.insert(fiction.id, {"name": "The Earthsea Quartet", "location": "Box"})

@pytest.fixture
def multiple_stories(story_repo, fiction):
    """Twelve stories, seven of which mention dragons."""
    names = [
        "Dragon Fire", "Dragonflight", "Dragonsong", "Dragonsinger", "Dragondrums",
        "The Dragon Reborn", "Here Be Dragons",
        "Rocannon's World", "Planet of Exile", "City of Illusions", "The Dispossessed", "Tehanu",
    ]
    return [story_repo.insert(fiction.id, {"name": name}) for name in names]

# Users and tokens

@pytest.fixture
def make_user(user_repo):
    """Factory creating a user with the given scope and a known access token."""
    def _make_user(username: str, scope: str = "", active: bool = True):
        user = user_repo.insert({
            "username": username,
            "password": "secret",
            "name": username.title(),
            "scope": scope,
            "active": active,
        })
        if active:
            user_repo.add_access_token(user.id, token=f"{username}-token")
        return user
    return _make_user

@pytest.fixture
def superuser(make_user):
    return make_user("root", "superuser")
