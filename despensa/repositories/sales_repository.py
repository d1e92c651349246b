# ==============================================================================
# REPOSITORIO DE VENTAS
# ==============================================================================
# Libro de pedidos como lista ordenada: [{pedido1}, {pedido2}, ...]
# ==============================================================================

from despensa.repositories.base import ListRepository


class SalesRepository(ListRepository):
    """
    Repositorio para el libro de ventas.

    Formato de cada registro:
    {
        "id": "ORD-001",
        "client_name": "Juan Pérez",
        "client_phone": "1122334455",
        "ts": "2024-01-01T10:00:00+00:00",
        "total": 31400,
        "items": [{"nombre": "...", "qty": 2, "unit_price": 12500}],
        "payment_method": "Mercado Pago",
        "shipping_method": "Envío",
        "status": "Entregado"
    }
    """

    ORDER_PREFIX = 'ORD-'

    def get_next_order_id(self) -> str:
        """
        Genera el siguiente número de pedido.
        Formato: ORD-XXX donde XXX es número secuencial.

        Returns:
            Siguiente número de pedido disponible
        """
        max_num = 0
        with self._lock:
            for sale in self._data:
                order_id = sale.get('id', '')
                if order_id.startswith(self.ORDER_PREFIX):
                    try:
                        max_num = max(max_num, int(order_id[len(self.ORDER_PREFIX):]))
                    except ValueError:
                        continue
        return f"{self.ORDER_PREFIX}{max_num + 1:03d}"

    def get_next_id(self) -> str:
        return self.get_next_order_id()
