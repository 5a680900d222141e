import math
from typing import Any, Self, TypeAlias


Quantity: TypeAlias = int | float | None


class Ingredient:
    def __init__(
        self,
        *,
        quantity: Quantity,
        unit: str,
        description: str,
    ) -> None:
        self.quantity = quantity
        self.unit = unit
        self.description = description

    def __repr__(self) -> str:
        return f"<Ingredient({self.quantity} {self.unit} {self.description})>"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict[str, Any]:
        return {
            "quantity": self.quantity,
            "unit": self.unit,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            quantity=data.get("quantity"),
            unit=data.get("unit") or "",
            description=data.get("description") or "",
        )


class Recipe:
    """A full recipe in domain shape.

    `bookmarked` is derived. It is recomputed whenever the recipe becomes
    current and whenever bookmarks change, never kept live.
    """

    def __init__(
        self,
        *,
        id: str,
        title: str,
        publisher: str,
        source_url: str,
        image: str,
        servings: int,
        cooking_time: int,
        ingredients: list[Ingredient],
        key: str | None = None,
        bookmarked: bool = False,
    ) -> None:
        self.id = id
        self.title = title
        self.publisher = publisher
        self.source_url = source_url
        self.image = image
        self.servings = servings
        self.cooking_time = cooking_time
        self.ingredients = ingredients
        self.key = key
        self.bookmarked = bookmarked

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, title={self.title})>"

    def to_dict(self) -> dict[str, Any]:
        """Domain shape, as persisted in the bookmarks entry."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "publisher": self.publisher,
            "sourceUrl": self.source_url,
            "image": self.image,
            "servings": self.servings,
            "cookingTime": self.cooking_time,
            "ingredients": [i.to_dict() for i in self.ingredients],
        }
        if self.key:
            data["key"] = self.key
        data["bookmarked"] = self.bookmarked
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            publisher=data.get("publisher", ""),
            source_url=data.get("sourceUrl", ""),
            image=data.get("image", ""),
            servings=data.get("servings", 1),
            cooking_time=data.get("cookingTime", 0),
            ingredients=[Ingredient.from_dict(i) for i in data.get("ingredients", [])],
            key=data.get("key"),
            bookmarked=data.get("bookmarked", False),
        )

    def copy(self) -> Self:
        return type(self).from_dict(self.to_dict())


class SearchResultItem:
    def __init__(
        self,
        *,
        id: str,
        title: str,
        publisher: str,
        image: str,
        key: str | None = None,
    ) -> None:
        self.id = id
        self.title = title
        self.publisher = publisher
        self.image = image
        self.key = key

    def __repr__(self) -> str:
        return f"<SearchResultItem(id={self.id}, title={self.title})>"

    def to_dict(self) -> dict[str, str]:
        data = {
            "id": self.id,
            "title": self.title,
            "publisher": self.publisher,
            "image": self.image,
        }
        if self.key:
            data["key"] = self.key
        return data


class SearchState:
    def __init__(
        self,
        *,
        results_per_page: int,
        query: str = "",
        page: int = 1,
        results: list[SearchResultItem] | None = None,
    ) -> None:
        if results_per_page < 1:
            raise ValueError("results_per_page must be positive.")
        self._results_per_page = results_per_page
        self.query = query
        self.page = page
        self.results = [] if results is None else results

    def __repr__(self) -> str:
        return (
            f"<SearchState(query={self.query!r}, page={self.page}, "
            f"results={len(self.results)})>"
        )

    @property
    def results_per_page(self) -> int:
        return self._results_per_page

    @property
    def num_pages(self) -> int:
        return math.ceil(len(self.results) / self.results_per_page)
