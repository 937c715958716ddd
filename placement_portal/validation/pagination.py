"""
Query-string validation for listing endpoints.

One policy everywhere: a page or limit that is present but out of range
is rejected, never clamped.
"""

from typing import List, Optional, Tuple

from placement_portal.validation.common import Errors, parse_int

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Keeps (page - 1) * limit a valid int64 skip
MAX_PAGE = 1_000_000


def validate_pagination(page: Optional[str], limit: Optional[str]) -> Tuple[int, int, Errors]:
    """
    Returns:
        (page, limit, errors) - defaults are used for absent values
    """
    errors: Errors = {}
    page_num, limit_num = DEFAULT_PAGE, DEFAULT_LIMIT

    if page not in (None, ""):
        parsed = parse_int(page)
        if parsed is None or not 1 <= parsed <= MAX_PAGE:
            errors["page"] = f"Page must be a number between 1 and {MAX_PAGE:,}"
        else:
            page_num = parsed

    if limit not in (None, ""):
        parsed = parse_int(limit)
        if parsed is None or not 1 <= parsed <= MAX_LIMIT:
            errors["limit"] = f"Limit must be between 1 and {MAX_LIMIT}"
        else:
            limit_num = parsed

    return page_num, limit_num, errors


def sort_choices(fields: List[str]) -> List[str]:
    """['a'] -> ['a', '-a']"""
    choices = []
    for field in fields:
        choices.extend([field, f"-{field}"])
    return choices


def validate_sort(sort_by: str, allowed_fields: List[str]) -> Errors:
    choices = sort_choices(allowed_fields)
    if sort_by not in choices:
        return {"sortBy": f"Sort field must be one of: {', '.join(choices)}"}
    return {}
