"""
Translate request parameters into MongoDB query arguments
"""
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pymongo

DEFAULT_PAGE = 0
DEFAULT_SIZE = 9
POPULAR_LIMIT = 6
# skip/limit are encoded as BSON int64
MAX_INT64 = 2 ** 63 - 1

SORT_BY_PRICE = {
    "asc": pymongo.ASCENDING,
    "desc": pymongo.DESCENDING,
}


@dataclass
class Pagination:
    skip: int
    limit: int


@dataclass
class FoodQuery:
    filter: Dict[str, Any]
    pagination: Pagination
    sort: Optional[List[Tuple[str, int]]] = None

    @property
    def is_search(self) -> bool:
        return bool(self.filter)


def parse_or_default(value: Optional[str], default: int) -> int:
    """Parse a non-negative integer, falling back to ``default``"""
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    if parsed < 0 or parsed > MAX_INT64:
        return default
    return parsed


def build_pagination(page: Optional[str], size: Optional[str]) -> Pagination:
    page_number = parse_or_default(page, DEFAULT_PAGE)
    page_size = parse_or_default(size, DEFAULT_SIZE)
    # limit(0) means "no limit" to MongoDB
    if page_size == 0:
        page_size = DEFAULT_SIZE
    if page_number * page_size > MAX_INT64:
        page_number = DEFAULT_PAGE
    return Pagination(skip=page_number * page_size, limit=page_size)


def build_search_filter(search: Optional[str]) -> Dict[str, Any]:
    """Case-insensitive substring match on the food name"""
    if not search or not search.strip():
        return {}
    return {"name": {"$regex": re.escape(search.strip()), "$options": "i"}}


def build_price_sort(sort_filter: Optional[str]) -> Optional[List[Tuple[str, int]]]:
    direction = SORT_BY_PRICE.get((sort_filter or "").strip().lower())
    if direction is None:
        return None
    return [("price", direction)]


def build_food_query(
    page: Optional[str] = None,
    size: Optional[str] = None,
    search: Optional[str] = None,
    sort_filter: Optional[str] = None,
) -> FoodQuery:
    return FoodQuery(
        filter=build_search_filter(search),
        pagination=build_pagination(page, size),
        sort=build_price_sort(sort_filter),
    )
