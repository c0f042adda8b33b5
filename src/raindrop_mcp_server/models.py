"""Data models for the Raindrop MCP Server."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Bookmark(BaseModel):
    """A Raindrop bookmark ("raindrop") as returned by the API."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(description="The bookmark title")
    link: str = Field(description="The bookmarked URL")
    tags: Optional[list[str]] = Field(None, description="Tags, if any")
    created: str = Field(description="ISO-8601 creation timestamp")
    last_update: str = Field(
        alias="lastUpdate", description="ISO-8601 last update timestamp"
    )


class ParentRef(BaseModel):
    """Reference to a parent collection."""

    # Raindrop sends {"$id": n}; older payloads use {"_id": n}
    id: int = Field(validation_alias=AliasChoices("$id", "_id"))


class Collection(BaseModel):
    """A Raindrop collection."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="_id", description="Collection identifier")
    title: str = Field(description="Collection name")
    count: int = Field(description="Number of bookmarks in the collection")
    created: str = Field(description="ISO-8601 creation timestamp")
    parent: Optional[ParentRef] = Field(None, description="Parent collection")


class CollectionRef(BaseModel):
    """Collection reference sent when creating a bookmark."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="$id")


class CreatedItem(BaseModel):
    """The part of a created raindrop echoed back to the caller."""

    link: str


class CreatedBookmark(BaseModel):
    """Response of POST /raindrop."""

    item: CreatedItem


class SearchResponse(BaseModel):
    """Response of GET /raindrops/{collectionId}."""

    items: list[Bookmark] = Field(default_factory=list)
    count: int = Field(0, description="Total number of matches across all pages")


class CollectionsResponse(BaseModel):
    """Response of GET /collections."""

    items: list[Collection] = Field(default_factory=list)
