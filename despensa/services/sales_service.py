# ==============================================================================
# SERVICIO DE VENTAS
# ==============================================================================
# Libro de pedidos: consulta, búsqueda, cambio de estado y registro de
# pedidos confirmados en el checkout.
# ==============================================================================

from typing import Any, Dict, List, Optional

from despensa.models import Sale, SaleItem, SaleStatus, parse_enum
from despensa.repositories.interfaces import ISalesRepository
from despensa.utils.logging import get_logger

logger = get_logger(__name__)


# Estados válidos de pedido
SALE_STATUSES = tuple(status.value for status in SaleStatus)


class SalesService:
    """
    Servicio para gestión del libro de ventas.

    Responsabilidades:
    - Listar y buscar pedidos
    - Cambiar estado (cualquier estado puede pasar a cualquier otro)
    - Registrar pedidos nuevos
    """

    def __init__(self, sales_repo: ISalesRepository):
        """
        Inicializa el servicio de ventas.

        Args:
            sales_repo: Repositorio de ventas
        """
        self.sales_repo = sales_repo

    def get_all_sales(self) -> List[Dict[str, Any]]:
        return self.sales_repo.get_all()

    def get_sale(self, sale_id: str) -> Optional[Dict[str, Any]]:
        return self.sales_repo.get_by_id(sale_id)

    def search_sales(self, term: str = '') -> List[Dict[str, Any]]:
        """
        Búsqueda del panel: nombre del cliente o ID del pedido,
        sin distinguir mayúsculas.
        """
        term = (term or '').strip().lower()
        sales = self.get_all_sales()
        if not term:
            return list(sales)
        return [
            s for s in sales
            if term in (s.get('client_name') or '').lower() or term in (s.get('id') or '').lower()
        ]

    def update_status(self, sale_id: str, new_status: str) -> Dict[str, Any]:
        """
        Cambia el estado de un pedido. No hay restricciones de transición.

        Args:
            sale_id: ID del pedido
            new_status: Pendiente, Enviado, Entregado o Cancelado

        Returns:
            {'ok': True, 'sale': {...}} o {'ok': False, 'error': '...'}
        """
        status = parse_enum(SaleStatus, new_status)
        if status is None:
            return {'ok': False, 'error': f"Estado inválido. Valores permitidos: {', '.join(SALE_STATUSES)}"}

        sale = self.get_sale(sale_id)
        if not sale:
            return {'ok': False, 'error': 'Pedido no encontrado', 'not_found': True}

        old_status = sale.get('status')
        self.sales_repo.update(sale_id, {'status': status.value})

        logger.info(f"Pedido {sale_id}: {old_status} → {status.value}")
        return {'ok': True, 'sale': sale, 'old_status': old_status}

    def record_sale(
        self,
        client_name: str,
        client_phone: str,
        items: List[Dict[str, Any]],
        total: float,
        payment_method: str,
        shipping_method: str,
        status: str = SaleStatus.PENDIENTE.value
    ) -> Dict[str, Any]:
        """
        Registra un pedido nuevo al final del libro.

        Args:
            items: Líneas con nombre, qty y unit_price
            total: Total cobrado (no se recalcula desde las líneas)

        Returns:
            Pedido registrado
        """
        sale = Sale(
            id=self.sales_repo.get_next_order_id(),
            client_name=client_name,
            client_phone=client_phone or '',
            total=round(total, 2),
            items=[SaleItem.from_dict(item) for item in items],
            payment_method=payment_method,
            shipping_method=shipping_method,
            status=status,
        )
        data = sale.to_dict()
        self.sales_repo.append(data)

        logger.info(f"Pedido {sale.id} registrado para {client_name} - Total: {sale.total}")
        return data
