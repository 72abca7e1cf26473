import pytest
from databases import Database
from conference_central.modules.database import init_db
from conference_central.modules.conferences.repositories import ConferenceRepository, ProfileRepository
from conference_central.modules.conferences.services import ConferenceService, ProfileService


@pytest.fixture
async def db(tmp_path):
    """SQLite database file with the service schema."""
    database = Database(f"sqlite:///{tmp_path / 'conference_central.db'}")
    await database.connect()
    await init_db(database)
    yield database
    await database.disconnect()


@pytest.fixture
def profile_repository(db):
    return ProfileRepository(db)


@pytest.fixture
def conference_repository(db):
    return ConferenceRepository(db)


@pytest.fixture
def profile_service(profile_repository):
    return ProfileService(profile_repository)


@pytest.fixture
def conference_service(conference_repository, profile_service):
    return ConferenceService(conference_repository, profile_service)
