# ==============================================================================
# SERVICIO DE CATÁLOGO (VISTA DE TIENDA)
# ==============================================================================
# Filtros y ordenamientos de la tienda. Todo se calcula en cada lectura a
# partir del catálogo actual; nunca se modifica el catálogo.
# ==============================================================================

import unicodedata
from typing import Any, Dict, Iterable, List, Optional

from despensa.models import SortOption, MAX_IMAGES, parse_enum
from despensa.repositories.interfaces import IInventoryRepository


# Categorías de la tienda (etiqueta = valor de 'categoria' del producto)
CATEGORY_DEFS = [
    {'id': 'pantry', 'label': 'Pantry Essentials', 'icon': 'inventory_2'},
    {'id': 'dietetic', 'label': 'Dietetic & Bio', 'icon': 'spa'},
    {'id': 'glutenfree', 'label': 'Gluten-Free', 'icon': 'grain'},
    {'id': 'vegan', 'label': 'Vegan Options', 'icon': 'eco'},
]

FEATURED_COUNT = 4


def _collation_key(text: str) -> str:
    """Clave de orden alfabético sin distinguir acentos ni mayúsculas."""
    decomposed = unicodedata.normalize('NFKD', text or '')
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def filter_products(
    products: Iterable[Dict[str, Any]],
    categories: Optional[Iterable[str]] = None,
    query: str = '',
    sort: str = SortOption.RECOMMENDED.value
) -> List[Dict[str, Any]]:
    """
    Filtra y ordena productos para la tienda.

    1. Categorías: si hay alguna elegida, solo productos de esas categorías (OR).
    2. Búsqueda: subcadena en nombre o categoría, sin distinguir mayúsculas.
    3. Orden: recommended (orden del catálogo), price-low, price-high o name.
       Un orden desconocido se trata como recommended.

    Returns:
        Lista nueva; la original no se modifica
    """
    result = list(products)

    selected = set(categories or [])
    if selected:
        result = [p for p in result if p.get('categoria') in selected]

    query = (query or '').strip().lower()
    if query:
        result = [
            p for p in result
            if query in (p.get('nombre') or '').lower() or query in (p.get('categoria') or '').lower()
        ]

    option = parse_enum(SortOption, sort)
    if option == SortOption.PRICE_LOW:
        result = sorted(result, key=lambda p: p.get('price', 0))
    elif option == SortOption.PRICE_HIGH:
        result = sorted(result, key=lambda p: p.get('price', 0), reverse=True)
    elif option == SortOption.NAME:
        result = sorted(result, key=lambda p: _collation_key(p.get('nombre')))

    return result


class CatalogService:
    """
    Servicio de la vista de tienda.

    Responsabilidades:
    - Filtrar/ordenar el catálogo (filter_products)
    - Contar productos por categoría
    - Productos destacados de la portada
    - Vista rápida de un producto
    """

    def __init__(self, inventory_repo: IInventoryRepository):
        self.inventory_repo = inventory_repo

    def browse(self, categories=None, query: str = '', sort: str = 'recommended') -> Dict[str, Any]:
        """
        Vista de la tienda con los filtros aplicados.

        Returns:
            {'products': [...], 'count': int}
        """
        products = filter_products(self.inventory_repo.get_all(), categories, query, sort)
        return {'products': products, 'count': len(products)}

    def categories(self) -> List[Dict[str, Any]]:
        """Definiciones de categorías con la cantidad de productos de cada una."""
        products = self.inventory_repo.get_all()
        return [
            dict(cat, count=sum(1 for p in products if p.get('categoria') == cat['label']))
            for cat in CATEGORY_DEFS
        ]

    def featured(self, limit: int = FEATURED_COUNT) -> List[Dict[str, Any]]:
        """Primeros productos del catálogo (portada)."""
        return list(self.inventory_repo.get_all()[:limit])

    def quick_view(self, pid) -> Optional[Dict[str, Any]]:
        """Detalle de un producto para la vista rápida (máximo 4 imágenes)."""
        product = self.inventory_repo.get_by_id(pid)
        if product is None:
            return None
        view = dict(product)
        view['images'] = list(product.get('images', [])[:MAX_IMAGES])
        return view
