import math


def clamp_pagination(page: int, limit: int, max_limit: int = 100) -> tuple[int, int]:
    limit = max(1, min(limit, max_limit))
    page = max(1, page)
    return page, limit


def page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0
