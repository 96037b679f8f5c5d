from typing import Optional


def paginate(qs, page: Optional[int] = None, page_size: Optional[int] = None):
    """Slice ``qs`` when a page size is given; return (rows, pagination)."""
    total = qs.count()
    if page_size:
        page = page or 1
        start = (page - 1) * page_size
        qs = qs[start:start + page_size]
    return list(qs), {'total': total, 'page': page or 1, 'pageSize': page_size or total}
