#!/usr/bin/env python3
"""
First-match traversal over paginated collections
"""

from typing import Any, Callable, List, Optional, Tuple

# list_page(cursor) -> (items on that page, cursor of the next page or None)
PageFetcher = Callable[[Any], Tuple[List[Any], Optional[Any]]]


def find_first(list_page: PageFetcher, predicate: Callable[[Any], bool], start_cursor: Any = 0) -> Optional[Any]:
    """Return the first item matching predicate, in listing order

    Pages are fetched one at a time and traversal stops on the page
    holding the match, so later pages are never requested.
    """
    cursor = start_cursor
    while cursor is not None:
        items, cursor = list_page(cursor)
        for item in items:
            if predicate(item):
                return item
    return None
