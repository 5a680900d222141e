from typing import Any, Callable, TypeAlias

import httpx

from config import Config
from domain.api import RecipeApi


Handler: TypeAlias = Callable[[httpx.Request], httpx.Response]


API_URL = "https://api.test/recipes"


def wire_recipe(id: str = "5ed6604591c37cdc054bc886", **overrides: Any) -> dict[str, Any]:
    recipe = {
        "id": id,
        "title": "Pizza Margherita",
        "publisher": "Closet Cooking",
        "source_url": "https://example.com/pizza",
        "image_url": "https://example.com/pizza.jpg",
        "servings": 4,
        "cooking_time": 45,
        "ingredients": [
            {"quantity": 2, "unit": "cups", "description": "flour"},
            {"quantity": 0.5, "unit": "tsp", "description": "salt"},
            {"quantity": None, "unit": "", "description": "basil leaves"},
        ],
    }
    recipe.update(overrides)
    return {"status": "success", "data": {"recipe": recipe}}


def wire_search(n: int) -> dict[str, Any]:
    recipes = [
        {
            "id": f"r{i}",
            "title": f"Pizza {i}",
            "publisher": "Closet Cooking",
            "image_url": f"https://example.com/{i}.jpg",
        }
        for i in range(n)
    ]
    return {"status": "success", "results": n, "data": {"recipes": recipes}}


def make_api(handler: Handler, key: str | None = "test-key") -> RecipeApi:
    client = httpx.AsyncClient(
        base_url=API_URL,
        transport=httpx.MockTransport(handler),
    )
    return RecipeApi(client, config=Config(key=key))


class RecordingHandler:
    """Answers every request with `response` and remembers the requests."""

    def __init__(self, response: httpx.Response) -> None:
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response
