# ==============================================================================
# SERVICIO DE CARRITO
# ==============================================================================
# Centraliza toda la lógica del carrito de compras del visitante.
# El carrito vive en un CartRepository propio de la sesión de la aplicación.
# ==============================================================================

from typing import Any, Dict, List

from despensa.models import CartItem
from despensa.repositories.cart_repository import CartRepository


class CartService:
    """
    Servicio para gestión del carrito de compras.

    Responsabilidades:
    - Agregar productos (una entrada por producto, la cantidad se acumula)
    - Eliminar entradas y cambiar cantidades (nunca por debajo de 1)
    - Calcular totales

    Todas las operaciones son totales: un id inexistente no cambia nada.
    """

    def __init__(self, cart_repo: CartRepository):
        """
        Inicializa el servicio de carrito.

        Args:
            cart_repo: Repositorio del carrito
        """
        self.cart_repo = cart_repo

    def _find(self, producto_id) -> Dict[str, Any]:
        return self.cart_repo.get_by_id(producto_id)

    def get_cart_items(self) -> List[Dict[str, Any]]:
        """
        Obtiene los items del carrito en orden de inserción.

        Returns:
            Lista de items (copia del producto + 'cantidad')
        """
        return self.cart_repo.get_all()

    def cart_count(self) -> int:
        """Suma de las cantidades de todas las entradas (0 si está vacío)."""
        return sum(item.get('cantidad', 0) for item in self.get_cart_items())

    def get_cart(self) -> Dict[str, Any]:
        """
        Obtiene el carrito con totales calculados.

        Returns:
            Dict con items, total_items, total_monto, items_count
        """
        cart = self.get_cart_items()
        total_monto = sum(item.get('cantidad', 0) * item.get('price', 0) for item in cart)

        return {
            'items': cart,
            'total_items': self.cart_count(),
            'total_monto': round(total_monto, 2),
            'items_count': len(cart)
        }

    def add_item(self, product: Dict[str, Any]) -> Dict[str, Any]:
        """
        Agrega un producto al carrito.
        Si ya está, suma 1 a la cantidad; si no, lo agrega al final con cantidad 1.

        Args:
            product: Datos del producto

        Returns:
            Carrito actualizado (ver get_cart)
        """
        snapshot = dict(product)
        snapshot['id'] = str(snapshot.get('id'))

        existing = self._find(snapshot['id'])
        if existing:
            self.cart_repo.update(existing['id'], {'cantidad': existing['cantidad'] + 1})
        else:
            self.cart_repo.append(CartItem(producto=snapshot, cantidad=1).to_dict())
        return self.get_cart()

    def remove_item(self, producto_id) -> Dict[str, Any]:
        """
        Elimina la entrada del producto. No hace nada si no existe.

        Returns:
            Carrito actualizado
        """
        self.cart_repo.delete(producto_id)
        return self.get_cart()

    def update_quantity(self, producto_id, delta: int) -> Dict[str, Any]:
        """
        Suma delta a la cantidad, con piso en 1.

        Args:
            producto_id: ID del producto
            delta: Variación (ej: +1, -1)

        Returns:
            Carrito actualizado
        """
        existing = self._find(producto_id)
        if existing:
            nueva_cantidad = max(1, existing['cantidad'] + int(delta))
            self.cart_repo.update(existing['id'], {'cantidad': nueva_cantidad})
        return self.get_cart()

    def clear_cart(self) -> Dict[str, Any]:
        """Vacía el carrito completamente."""
        self.cart_repo.clear()
        return self.get_cart()
