"""MCP tools for Raindrop.io bookmark operations."""

import logging
from typing import Annotated, Any, Awaitable, Callable, Literal, Optional, TypeVar, get_args
from urllib.parse import urlencode

from pydantic import (
    AnyUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    TypeAdapter,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError

from raindrop_mcp_server.client import RaindropClient
from raindrop_mcp_server.config import Settings
from raindrop_mcp_server.errors import UnknownToolError, ValidationError
from raindrop_mcp_server.formatting import (
    format_collections,
    format_created,
    format_search_results,
)
from raindrop_mcp_server.models import CollectionRef

logger = logging.getLogger(__name__)

SortKey = Literal[
    "-created",
    "created",
    "-last_update",
    "last_update",
    "-title",
    "title",
    "-domain",
    "domain",
]

SORT_KEYS = get_args(SortKey)

TOOLS: list[dict[str, Any]] = [
    {
        "name": "create-bookmark",
        "description": "Create a new bookmark in Raindrop.io",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {
                    "type": "string",
                    "description": "URL to bookmark",
                },
                "title": {
                    "type": "string",
                    "description": "Title for the bookmark (optional)",
                },
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Tags for the bookmark (optional)",
                },
                "collection": {
                    "type": "number",
                    "description": "Collection ID to save to (optional)",
                },
            },
            "required": ["url"],
        },
    },
    {
        "name": "search-bookmarks",
        "description": "Search through your Raindrop.io bookmarks",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search query",
                },
                "tags": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Filter by tags (optional)",
                },
                "page": {
                    "type": "number",
                    "description": "Page number (0-based, optional)",
                },
                "perpage": {
                    "type": "number",
                    "description": "Items per page (1-50, optional)",
                },
                "sort": {
                    "type": "string",
                    "enum": list(SORT_KEYS),
                    "description": "Sort order (optional). Prefix with - for descending order.",
                },
                "collection": {
                    "type": "number",
                    "description": "Collection ID to search in (optional, 0 for all collections)",
                },
                "word": {
                    "type": "boolean",
                    "description": "Whether to match exact words only (optional)",
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": "list-collections",
        "description": "List all your Raindrop.io collections",
        "inputSchema": {
            "type": "object",
            "properties": {},
        },
    },
]

_ABSOLUTE_URL = TypeAdapter(AnyUrl)


def _whole_number(value: Any) -> Any:
    # The catalog types these fields as JSON "number"; 3.0 is accepted as 3
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


WholeNumber = Annotated[int, BeforeValidator(_whole_number)]


class CreateBookmarkParams(BaseModel):
    """Parameters for creating a bookmark."""

    model_config = ConfigDict(strict=True)

    url: str = Field(description="URL to bookmark")
    title: Optional[str] = Field(None, description="Title for the bookmark")
    tags: Optional[list[str]] = Field(None, description="Tags for the bookmark")
    collection: Optional[WholeNumber] = Field(None, description="Collection ID to save to")

    @field_validator("url")
    @classmethod
    def _check_url(cls, value: str) -> str:
        # Validate only; the link is sent exactly as the caller wrote it
        try:
            _ABSOLUTE_URL.validate_python(value)
        except PydanticValidationError:
            raise PydanticCustomError("url_parsing", "Invalid url") from None
        return value


class SearchBookmarksParams(BaseModel):
    """Parameters for searching bookmarks."""

    model_config = ConfigDict(strict=True)

    query: str = Field(min_length=1, description="Search query")
    tags: Optional[list[str]] = Field(None, description="Filter by tags")
    page: Optional[WholeNumber] = Field(None, ge=0, description="Page number, 0-based")
    perpage: Optional[WholeNumber] = Field(None, ge=1, le=50, description="Items per page")
    sort: Optional[SortKey] = Field(None, description="Sort order")
    collection: Optional[WholeNumber] = Field(
        None, description="Collection ID to search in, 0 for all collections"
    )
    word: Optional[bool] = Field(None, description="Match exact words only")


ParamsT = TypeVar("ParamsT", bound=BaseModel)


def parse_arguments(model: type[ParamsT], arguments: dict[str, Any]) -> ParamsT:
    """Validate tool arguments, reporting every violation at once."""
    try:
        return model.model_validate(arguments)
    except PydanticValidationError as e:
        violations = [
            (".".join(str(part) for part in error["loc"]), error["msg"])
            for error in e.errors()
        ]
        raise ValidationError(violations) from e


def build_search_query(params: SearchBookmarksParams) -> str:
    """Build the URL-encoded query string for a bookmark search."""
    query = {"search": params.query}
    if params.tags is not None:
        query["tags"] = ",".join(params.tags)
    if params.page is not None:
        query["page"] = str(params.page)
    if params.perpage is not None:
        query["perpage"] = str(params.perpage)
    if params.sort:
        query["sort"] = params.sort
    if params.word is not None:
        query["word"] = "true" if params.word else "false"
    return urlencode(query)


async def create_bookmark(client: RaindropClient, arguments: dict[str, Any]) -> str:
    """Create a bookmark, in the unsorted collection unless one is given."""
    params = parse_arguments(CreateBookmarkParams, arguments)
    response = await client.create_bookmark(
        link=params.url,
        title=params.title,
        tags=params.tags,
        collection=CollectionRef(id=params.collection or 0),
    )
    return format_created(response)


async def search_bookmarks(client: RaindropClient, arguments: dict[str, Any]) -> str:
    """Search bookmarks within a collection, or across all of them."""
    params = parse_arguments(SearchBookmarksParams, arguments)
    collection_id = params.collection if params.collection is not None else 0
    response = await client.search_bookmarks(collection_id, build_search_query(params))
    return format_search_results(response, params.page)


async def list_collections(client: RaindropClient, arguments: dict[str, Any]) -> str:
    """List all collections."""
    response = await client.list_collections()
    return format_collections(response)


ToolHandler = Callable[[RaindropClient, dict[str, Any]], Awaitable[str]]

HANDLERS: dict[str, ToolHandler] = {
    "create-bookmark": create_bookmark,
    "search-bookmarks": search_bookmarks,
    "list-collections": list_collections,
}


async def call_tool(
    name: str,
    arguments: Optional[dict[str, Any]],
    settings: Settings,
    client_factory: Callable[..., RaindropClient] = RaindropClient,
) -> str:
    """Run one tool call: check the token, validate, call Raindrop and format.

    Each call gets its own client, so nothing is shared between requests.
    """
    token = settings.require_token()

    handler = HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(name)

    logger.debug("Calling tool %s", name)
    async with client_factory(
        token, base_url=settings.api_base_url, timeout=settings.timeout
    ) as client:
        return await handler(client, arguments or {})
