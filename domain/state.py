import json
import logging
from typing import Self

from config import Config
from domain.errors import StorageError
from domain.models import Recipe, SearchState
from domain.storage import JsonFileStorage, Storage


logger = logging.getLogger(__name__)


BOOKMARKS_KEY = "bookmarks"


def load_bookmarks(storage: Storage) -> list[Recipe]:
    raw = storage.get_item(BOOKMARKS_KEY)
    if not raw:
        return []
    try:
        bookmarks = [Recipe.from_dict(b) for b in json.loads(raw)]
    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        logger.error("Ignoring unreadable bookmarks entry: %r", e)
        return []
    logger.info("Loaded %s bookmarks", len(bookmarks))
    return bookmarks


class ApplicationState:
    """Current recipe, search state and bookmarks for one application.

    Built once per application and handed to every operation in
    `domain.services`. Bookmarks are read from storage only here.
    """

    def __init__(
        self,
        *,
        storage: Storage,
        results_per_page: int,
        bookmarks: list[Recipe] | None = None,
    ) -> None:
        self.storage = storage
        self.recipe: Recipe | None = None
        self.search = SearchState(results_per_page=results_per_page)
        self.bookmarks = [] if bookmarks is None else bookmarks

    @classmethod
    def from_storage(cls, storage: Storage, *, results_per_page: int) -> Self:
        return cls(
            storage=storage,
            results_per_page=results_per_page,
            bookmarks=load_bookmarks(storage),
        )

    @classmethod
    def from_config(cls, config: Config | None = None) -> Self:
        config = Config() if config is None else config
        return cls.from_storage(
            JsonFileStorage(config.storage_path),
            results_per_page=config.res_per_page,
        )

    def is_bookmarked(self, id: str) -> bool:
        return any(bookmark.id == id for bookmark in self.bookmarks)

    def persist_bookmarks(self) -> None:
        value = json.dumps([bookmark.to_dict() for bookmark in self.bookmarks])
        try:
            self.storage.set_item(BOOKMARKS_KEY, value)
        except OSError as e:
            raise StorageError(f"Could not persist bookmarks: {e}") from e
