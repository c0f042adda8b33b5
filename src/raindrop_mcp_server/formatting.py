"""Text rendering of Raindrop responses for the calling agent."""

from typing import Optional

from dateutil.parser import isoparse

from raindrop_mcp_server.models import (
    Bookmark,
    Collection,
    CollectionsResponse,
    CreatedBookmark,
    SearchResponse,
)

NO_BOOKMARKS = "No bookmarks found matching your search."
NO_COLLECTIONS = "No collections found."


def format_timestamp(value: str) -> str:
    """Render an ISO-8601 timestamp as a local, locale-formatted date and time.

    Values that do not parse are shown as received.
    """
    try:
        parsed = isoparse(value)
    except (ValueError, OverflowError):
        return value
    return parsed.astimezone().strftime("%c")


def format_created(response: CreatedBookmark) -> str:
    """Confirmation message for a newly created bookmark."""
    return f"Bookmark created successfully: {response.item.link}"


def _format_bookmark(item: Bookmark) -> str:
    tags = ", ".join(item.tags) if item.tags else "No tags"
    return (
        f"\nTitle: {item.title}"
        f"\nURL: {item.link}"
        f"\nTags: {tags}"
        f"\nCreated: {format_timestamp(item.created)}"
        f"\nLast Updated: {format_timestamp(item.last_update)}"
        "\n---"
    )


def display_page(page: Optional[int]) -> int:
    """One-based page number for a zero-based requested page (absent means 0)."""
    return (page or 0) + 1


def format_search_results(response: SearchResponse, page: Optional[int] = None) -> str:
    """Format search results.

    The header reports the total match count from the API, the number of
    items on this page and the requested page, shown one-based.
    """
    if not response.items:
        return NO_BOOKMARKS

    blocks = "\n".join(_format_bookmark(item) for item in response.items)
    return (
        f"Found {response.count} total bookmarks "
        f"(showing {len(response.items)} on page {display_page(page)}):\n{blocks}"
    )


def _format_collection(item: Collection) -> str:
    parent = item.parent.id if item.parent is not None else "None"
    return (
        f"\nName: {item.title}"
        f"\nID: {item.id}"
        f"\nCount: {item.count} bookmarks"
        f"\nParent: {parent}"
        f"\nCreated: {format_timestamp(item.created)}"
        "\n---"
    )


def format_collections(response: CollectionsResponse) -> str:
    """Format the collection list, one block per collection."""
    if not response.items:
        return NO_COLLECTIONS

    blocks = "\n".join(_format_collection(item) for item in response.items)
    return f"Found {len(response.items)} collections:\n{blocks}"
