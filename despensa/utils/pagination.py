# despensa/utils/pagination.py
import math
from typing import Any, Dict, List, Sequence

DEFAULT_PER_PAGE = 10


def paginate(items: Sequence[Any], page: int = 1, per_page: int = DEFAULT_PER_PAGE) -> Dict[str, Any]:
    """
    Corta una lista en páginas.

    Si la página pedida supera la última (por ejemplo después de borrar
    registros) se usa la última página; las páginas menores a 1 se tratan
    como 1.

    Returns:
        {'items', 'page', 'per_page', 'total', 'total_pages'}
    """
    per_page = max(1, int(per_page or DEFAULT_PER_PAGE))
    total = len(items)
    total_pages = math.ceil(total / per_page)

    page = max(1, int(page or 1))
    if total_pages > 0 and page > total_pages:
        page = total_pages

    start = (page - 1) * per_page
    page_items: List[Any] = list(items[start:start + per_page])
    return {
        'items': page_items,
        'page': page,
        'per_page': per_page,
        'total': total,
        'total_pages': total_pages,
    }
