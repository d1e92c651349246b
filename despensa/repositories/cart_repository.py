# ==============================================================================
# REPOSITORIO DEL CARRITO
# ==============================================================================
# Carrito del visitante actual: lista de copias de producto con 'cantidad'.
# Arranca vacío en cada sesión.
# ==============================================================================

from despensa.repositories.base import ListRepository


class CartRepository(ListRepository):
    """
    Repositorio para el carrito de compras.

    Formato de cada registro (copia del producto + cantidad):
    {"id": "1", "nombre": "...", "price": 18900, ..., "cantidad": 2}
    """

    def clear(self) -> None:
        """Vacía el carrito."""
        self._write_raw([])
