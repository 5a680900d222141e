"""Wire format <-> domain model.

The API speaks snake_case (`source_url`, `image_url`, `cooking_time`), the
domain does not.
"""

import math
from typing import Any, Mapping

from domain.errors import ShapeError, ValidationError, WRONG_INGREDIENT_FORMAT
from domain.models import Ingredient, Quantity, Recipe, SearchResultItem


INGREDIENT_PREFIX = "ingredient"


def recipe_from_wire(data: Any) -> Recipe:
    """Build a Recipe from a `{"data": {"recipe": {...}}}` envelope."""
    try:
        recipe = data["data"]["recipe"]
        return Recipe(
            id=recipe["id"],
            title=recipe["title"],
            publisher=recipe["publisher"],
            source_url=recipe["source_url"],
            image=recipe["image_url"],
            servings=servings_from_wire(recipe["servings"]),
            cooking_time=recipe["cooking_time"],
            ingredients=[Ingredient.from_dict(i) for i in recipe["ingredients"]],
            key=recipe.get("key") or None,
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise ShapeError(f"Unexpected recipe response: {e!r}") from e


def servings_from_wire(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ShapeError(f"Servings must be a positive integer, got {value!r}")
    return value


def search_results_from_wire(data: Any) -> list[SearchResultItem]:
    try:
        return [
            SearchResultItem(
                id=rec["id"],
                title=rec["title"],
                publisher=rec["publisher"],
                image=rec["image_url"],
                key=rec.get("key") or None,
            )
            for rec in data["data"]["recipes"]
        ]
    except (KeyError, TypeError, AttributeError) as e:
        raise ShapeError(f"Unexpected search response: {e!r}") from e


def parse_number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        raise ValidationError(f"Not a number: {text!r}") from None
    if not math.isfinite(number):
        raise ValidationError(f"Not a finite number: {text!r}")
    return number


def parse_count(text: str, *, minimum: int) -> int:
    number = parse_number(text)
    if not isinstance(number, int) or number < minimum:
        raise ValidationError(f"Expected a whole number of at least {minimum}: {text!r}")
    return number


def ingredient_from_text(text: str) -> Ingredient:
    """Parse `"quantity, unit, description"`; quantity may be left empty."""
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 3:
        raise ValidationError(WRONG_INGREDIENT_FORMAT)

    quantity_text, unit, description = parts
    quantity: Quantity = parse_number(quantity_text) if quantity_text else None
    return Ingredient(quantity=quantity, unit=unit, description=description)


def ingredients_from_draft(draft: Mapping[str, str]) -> list[Ingredient]:
    return [
        ingredient_from_text(value)
        for name, value in draft.items()
        if name.startswith(INGREDIENT_PREFIX) and value != ""
    ]


def recipe_to_wire(draft: Mapping[str, str]) -> dict[str, Any]:
    """Upload payload for a user-authored draft. Validates before building."""
    ingredients = ingredients_from_draft(draft)
    return {
        "title": draft.get("title", ""),
        "source_url": draft.get("sourceUrl", ""),
        "image_url": draft.get("image", ""),
        "publisher": draft.get("publisher", ""),
        "cooking_time": parse_count(draft.get("cookingTime", ""), minimum=0),
        "servings": parse_count(draft.get("servings", ""), minimum=1),
        "ingredients": [i.to_dict() for i in ingredients],
    }
