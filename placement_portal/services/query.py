"""
Query Layer - paginated, filtered, sorted listings.

Every listing endpoint goes through paginate(): the page of documents and
the total count are two independent reads run concurrently on the default
executor. They are not a consistent snapshot; under concurrent writes
totalItems may be slightly stale.
"""

import asyncio
import math
import re
from typing import Dict, List, Optional, Tuple

from pymongo import ASCENDING, DESCENDING
from pymongo.collection import Collection

from placement_portal.utils.documents import serialize_docs


def parse_sort(sort_by: str) -> List[Tuple[str, int]]:
    """'-submissionDate' -> [('submissionDate', DESCENDING), ('_id', DESCENDING)]

    _id breaks ties so pages never overlap when sort values repeat.
    """
    if sort_by.startswith("-"):
        return [(sort_by[1:], DESCENDING), ("_id", DESCENDING)]
    return [(sort_by, ASCENDING), ("_id", ASCENDING)]


def contains_filter(text: str) -> Dict[str, str]:
    """Case-insensitive substring match; the search text is matched literally."""
    return {"$regex": re.escape(text), "$options": "i"}


def build_filter(exact: Optional[Dict[str, Optional[str]]] = None,
                 contains: Optional[Dict[str, Optional[str]]] = None,
                 base: Optional[dict] = None) -> dict:
    """
    Build a Mongo filter, skipping empty parameters.

    Example:
        build_filter(exact={"status": "Pending"}, contains={"companyName": "acme"})
        -> {"status": "Pending", "companyName": {"$regex": "acme", "$options": "i"}}
    """
    query = dict(base or {})
    for field, value in (exact or {}).items():
        if value:
            query[field] = value
    for field, value in (contains or {}).items():
        if value:
            query[field] = contains_filter(value)
    return query


def pagination_info(page: int, limit: int, total: int) -> dict:
    total_pages = math.ceil(total / limit) if limit else 0
    return {
        "currentPage": page,
        "totalPages": total_pages,
        "totalItems": total,
        "itemsPerPage": limit,
        "hasNextPage": page < total_pages,
        "hasPreviousPage": page > 1,
    }


async def paginate(
    collection: Collection,
    query: dict,
    sort: List[Tuple[str, int]],
    page: int,
    limit: int
) -> dict:
    """
    Returns:
        {"items": [...], "pagination": {...}}
    """
    skip = (page - 1) * limit

    def fetch_items() -> list:
        cursor = collection.find(query).sort(sort).skip(skip).limit(limit)
        return list(cursor)

    def count_items() -> int:
        return collection.count_documents(query)

    loop = asyncio.get_running_loop()
    docs, total = await asyncio.gather(
        loop.run_in_executor(None, fetch_items),
        loop.run_in_executor(None, count_items),
    )

    return {
        "items": serialize_docs(docs),
        "pagination": pagination_info(page, limit, total),
    }
