"""Raindrop.io REST API client."""

import logging
from typing import Any, Optional, TypeVar

import httpx
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from raindrop_mcp_server.config import DEFAULT_API_BASE
from raindrop_mcp_server.errors import RemoteError
from raindrop_mcp_server.models import (
    CollectionRef,
    CollectionsResponse,
    CreatedBookmark,
    SearchResponse,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def _parse(model: type[ResponseT], data: Any) -> ResponseT:
    """Validate a decoded response body against its expected shape."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        logger.debug("Unexpected %s payload: %s", model.__name__, e)
        raise RemoteError("invalid response") from e


class RaindropClient:
    """Raindrop API client: one HTTP round trip per call, no caching or retries."""

    def __init__(
        self, token: str, base_url: str = DEFAULT_API_BASE, timeout: float = 30.0
    ):
        """Initialize the client with API token."""
        self.token = token
        self.base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
        )

    async def __aenter__(self) -> "RaindropClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(
        self, method: str, endpoint: str, body: Optional[dict[str, Any]] = None
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)

        try:
            response = await self._http.request(method, url, json=body)
        except httpx.HTTPError as e:
            raise RemoteError(str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.debug("Raindrop answered %s for %s %s", response.status_code, method, url)
            raise RemoteError(response.reason_phrase, response.status_code)

        try:
            return response.json()
        except ValueError as e:
            raise RemoteError("invalid JSON response", response.status_code) from e

    async def create_bookmark(
        self,
        link: str,
        title: Optional[str] = None,
        tags: Optional[list[str]] = None,
        collection: Optional[CollectionRef] = None,
    ) -> CreatedBookmark:
        """Create a bookmark. Omitted fields are left out of the request body."""
        body: dict[str, Any] = {"link": link}
        if title is not None:
            body["title"] = title
        if tags is not None:
            body["tags"] = tags
        if collection is not None:
            body["collection"] = collection.model_dump(by_alias=True)

        data = await self._request("POST", "/raindrop", body)
        return _parse(CreatedBookmark, data)

    async def search_bookmarks(self, collection_id: int, query: str) -> SearchResponse:
        """Search a collection (0 for all) with an already URL-encoded query string."""
        data = await self._request("GET", f"/raindrops/{collection_id}?{query}")
        return _parse(SearchResponse, data)

    async def list_collections(self) -> CollectionsResponse:
        """List the user's root collections."""
        data = await self._request("GET", "/collections")
        return _parse(CollectionsResponse, data)

    async def close(self) -> None:
        """Close the client and clean up resources."""
        await self._http.aclose()
