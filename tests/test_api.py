import json

import httpx
import pytest

from domain.errors import NetworkError, ShapeError
from tests.fakes import RecordingHandler, make_api, wire_recipe, wire_search


@pytest.mark.asyncio
async def test_get_recipe_url() -> None:
    handler = RecordingHandler(httpx.Response(200, json=wire_recipe("abc")))
    api = make_api(handler)

    data = await api.get_recipe("abc")

    assert data["data"]["recipe"]["id"] == "abc"
    (request,) = handler.requests
    assert request.method == "GET"
    assert request.url.path == "/recipes/abc"
    assert request.url.params["key"] == "test-key"


@pytest.mark.asyncio
async def test_search_url() -> None:
    handler = RecordingHandler(httpx.Response(200, json=wire_search(1)))
    api = make_api(handler)

    await api.search("pizza pie")

    (request,) = handler.requests
    assert request.url.path == "/recipes/"
    assert request.url.params["search"] == "pizza pie"
    assert request.url.params["key"] == "test-key"


@pytest.mark.asyncio
async def test_key_is_optional() -> None:
    handler = RecordingHandler(httpx.Response(200, json=wire_search(1)))
    api = make_api(handler, key=None)

    await api.search("pizza")

    (request,) = handler.requests
    assert "key" not in request.url.params


@pytest.mark.asyncio
async def test_create_recipe_posts_json() -> None:
    handler = RecordingHandler(httpx.Response(201, json=wire_recipe()))
    api = make_api(handler)

    await api.create_recipe({"title": "t"})

    (request,) = handler.requests
    assert request.method == "POST"
    assert json.loads(request.content) == {"title": "t"}


@pytest.mark.asyncio
async def test_error_status_uses_api_message() -> None:
    api = make_api(
        lambda request: httpx.Response(
            400, json={"status": "fail", "message": "Invalid _id: nope"}
        )
    )

    with pytest.raises(NetworkError) as e:
        await api.get_recipe("nope")

    assert str(e.value) == "Invalid _id: nope (400)"
    assert e.value.status_code == 400


@pytest.mark.asyncio
async def test_error_status_without_body() -> None:
    api = make_api(lambda request: httpx.Response(503))

    with pytest.raises(NetworkError, match=r"\(503\)"):
        await api.search("pizza")


@pytest.mark.asyncio
async def test_transport_failure_is_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("timed out", request=request)

    api = make_api(handler)

    with pytest.raises(NetworkError):
        await api.get_recipe("abc")


@pytest.mark.asyncio
async def test_non_json_success_is_shape_error() -> None:
    api = make_api(lambda request: httpx.Response(200, text="<html></html>"))

    with pytest.raises(ShapeError):
        await api.get_recipe("abc")
