"""Operations on the application state.

The async operations mutate state only after the API response has been fully
transformed. Concurrent calls are not fenced: the last `load_recipe` to
resolve wins, whatever order the calls were made in.
"""

import logging
from typing import Mapping

from domain.api import RecipeApi
from domain.errors import NotFoundError
from domain.models import Recipe, SearchResultItem
from domain.state import ApplicationState
from domain.transform import recipe_from_wire, recipe_to_wire, search_results_from_wire


logger = logging.getLogger(__name__)


async def load_recipe(id: str, *, state: ApplicationState, api: RecipeApi) -> None:
    try:
        data = await api.get_recipe(id)
        recipe = recipe_from_wire(data)
    except Exception:
        logger.exception("Could not load recipe %s", id)
        raise

    recipe.bookmarked = state.is_bookmarked(id)
    state.recipe = recipe
    logger.info("Loaded recipe %s (bookmarked=%s)", id, recipe.bookmarked)


async def load_search_results(
    query: str,
    *,
    state: ApplicationState,
    api: RecipeApi,
) -> None:
    # Kept even when the fetch below fails.
    state.search.query = query

    try:
        data = await api.search(query)
        results = search_results_from_wire(data)
    except Exception:
        logger.exception("Could not search for %r", query)
        raise

    state.search.results = results
    state.search.page = 1
    logger.info("Search %r returned %s results", query, len(results))


def set_page_and_get_results(
    state: ApplicationState,
    page: int | None = None,
) -> list[SearchResultItem]:
    """Move the pagination cursor to `page` and return that window of results.

    Pages past the end give a short or empty list.
    """
    page = state.search.page if page is None else page
    if page < 1:
        raise ValueError(f"Page must be 1 or more, got {page}.")

    state.search.page = page
    start = (page - 1) * state.search.results_per_page
    end = page * state.search.results_per_page
    return state.search.results[start:end]


def update_servings(new_servings: int, *, state: ApplicationState) -> None:
    recipe = state.recipe
    if recipe is None:
        raise ValueError("No recipe loaded.")
    if new_servings < 1:
        raise ValueError(f"Servings must be 1 or more, got {new_servings}.")
    if not isinstance(recipe.servings, int) or recipe.servings < 1:
        raise ValueError(f"Cannot scale a recipe with {recipe.servings!r} servings.")

    for ingredient in recipe.ingredients:
        # Unspecified amounts stay unspecified.
        if ingredient.quantity is None:
            continue
        ingredient.quantity = ingredient.quantity * new_servings / recipe.servings

    recipe.servings = new_servings


def add_bookmark(recipe: Recipe, *, state: ApplicationState) -> None:
    """Bookmark `recipe`. The collection stores a snapshot, not `recipe` itself."""
    recipe.bookmarked = True
    state.bookmarks.append(recipe.copy())
    state.persist_bookmarks()
    logger.info("Bookmarked %s", recipe.id)


def delete_bookmark(id: str, *, state: ApplicationState) -> None:
    for index, bookmark in enumerate(state.bookmarks):
        if bookmark.id == id:
            break
    else:
        raise NotFoundError(f"No bookmark with id {id}")

    del state.bookmarks[index]
    if state.recipe is not None and state.recipe.id == id:
        state.recipe.bookmarked = False
    state.persist_bookmarks()
    logger.info("Removed bookmark %s", id)


async def upload_recipe(
    draft: Mapping[str, str],
    *,
    state: ApplicationState,
    api: RecipeApi,
) -> None:
    try:
        payload = recipe_to_wire(draft)
        data = await api.create_recipe(payload)
        recipe = recipe_from_wire(data)
    except Exception:
        logger.exception("Could not upload recipe %r", draft.get("title"))
        raise

    state.recipe = recipe
    add_bookmark(recipe, state=state)
    logger.info("Uploaded recipe %s", recipe.id)
