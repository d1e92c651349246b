# ==============================================================================
# REPOSITORIO DE INVENTARIO
# ==============================================================================
# Catálogo de productos como lista ordenada: el orden de la lista es el
# orden "recomendado" de la tienda.
# ==============================================================================

from typing import Any, Dict, Optional

from despensa.repositories.base import ListRepository


class InventoryRepository(ListRepository):
    """
    Repositorio para el catálogo de productos.

    Formato de cada registro:
    {
        "id": "1",
        "sku": "OL-105",
        "nombre": "Aceite de Oliva Extra Virgen",
        "categoria": "Pantry Essentials",
        "price": 18900,
        "stock": 20,
        "images": [...],
        "status": "In Stock",
        ...
    }
    """

    def get_by_sku(self, sku: str) -> Optional[Dict[str, Any]]:
        """
        Busca un producto por SKU (sin distinguir mayúsculas).

        Returns:
            Datos del producto o None
        """
        wanted = (sku or '').strip().lower()
        with self._lock:
            for product in self._data:
                if (product.get('sku') or '').strip().lower() == wanted:
                    return product
        return None

    def sku_taken(self, sku: str, exclude_id: str = None) -> bool:
        """Verifica si el SKU ya lo usa otro producto."""
        product = self.get_by_sku(sku)
        return product is not None and product.get('id') != exclude_id
