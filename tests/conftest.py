import pytest

from domain.state import ApplicationState
from domain.storage import MemoryStorage


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def state(storage: MemoryStorage) -> ApplicationState:
    return ApplicationState.from_storage(storage, results_per_page=10)
