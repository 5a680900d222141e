from typing import Any

import httpx

from config import Config
from domain.errors import NetworkError, ShapeError


def recipe_api_client_factory(config: Config | None = None) -> httpx.AsyncClient:
    config = Config() if config is None else config
    return httpx.AsyncClient(
        base_url=config.api_url.rstrip("/"),
        headers={"Content-Type": "application/json"},
        timeout=config.timeout,
    )


class RecipeApi:
    """The three calls the state core makes against the recipe API.

    Returns raw wire envelopes; `domain.transform` maps them.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *,
        key: str | None = None,
        config: Config | None = None,
    ) -> None:
        config = Config() if config is None else config
        self.http_client = (
            recipe_api_client_factory(config) if http_client is None else http_client
        )
        self.key = config.key if key is None else key

    def _params(self, **params: str) -> dict[str, str]:
        if self.key:
            params["key"] = self.key
        return params

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str],
        json: dict[str, Any] | None = None,
    ) -> Any:
        try:
            resp = await self.http_client.request(method, url, params=params, json=json)
        except httpx.HTTPError as e:
            raise NetworkError(f"{type(e).__name__}: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            if resp.is_success:
                raise ShapeError(f"Response is not JSON ({resp.status_code})") from e
            data = {}

        if not resp.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            raise NetworkError(
                f"{message or resp.reason_phrase} ({resp.status_code})",
                status_code=resp.status_code,
            )
        return data

    async def get_recipe(self, id: str) -> Any:
        return await self._request("GET", f"/{id}", params=self._params())

    async def search(self, query: str) -> Any:
        return await self._request("GET", "", params=self._params(search=query))

    async def create_recipe(self, payload: dict[str, Any]) -> Any:
        return await self._request("POST", "", params=self._params(), json=payload)

    async def aclose(self) -> None:
        await self.http_client.aclose()
