# ==============================================================================
# SERVICIO DE ESTADÍSTICAS DEL PANEL
# ==============================================================================
# Indicadores del dashboard calculados en cada lectura:
# - Valor del inventario: Σ precio × stock
# - Ingresos totales: Σ total de pedidos que NO están Cancelados
# - Pedidos pendientes: cantidad de pedidos en estado Pendiente
# ==============================================================================

from typing import Any, Callable, Dict, List

from despensa.models import SaleStatus
from despensa.utils.formatting import format_price


class StatsService:
    """
    Servicio para cálculo de indicadores.

    Recibe funciones que cargan productos y ventas, así se puede
    probar con listas fijas sin armar repositorios.
    """

    def __init__(
        self,
        products_loader: Callable[[], List[Dict[str, Any]]] = None,
        sales_loader: Callable[[], List[Dict[str, Any]]] = None
    ):
        self._products_loader = products_loader
        self._sales_loader = sales_loader

    def _load_products(self) -> List[Dict[str, Any]]:
        if self._products_loader:
            return self._products_loader()
        return []

    def _load_sales(self) -> List[Dict[str, Any]]:
        if self._sales_loader:
            return self._sales_loader()
        return []

    def inventory_value(self) -> float:
        return round(sum(
            (p.get('price') or 0) * (p.get('stock') or 0)
            for p in self._load_products()
        ), 2)

    def total_revenue(self) -> float:
        return round(sum(
            s.get('total') or 0
            for s in self._load_sales()
            if s.get('status') != SaleStatus.CANCELADO.value
        ), 2)

    def pending_count(self) -> int:
        return sum(1 for s in self._load_sales() if s.get('status') == SaleStatus.PENDIENTE.value)

    def dashboard_stats(self) -> Dict[str, Any]:
        """
        Indicadores del dashboard.

        Returns:
            {
                'inventory_value': float,
                'total_revenue': float,
                'pending_orders': int,
                'cards': [{'label', 'value', 'icon'}, ...]   # listas para mostrar
            }
        """
        inventory_value = self.inventory_value()
        total_revenue = self.total_revenue()
        pending = self.pending_count()
        return {
            'inventory_value': inventory_value,
            'total_revenue': total_revenue,
            'pending_orders': pending,
            'cards': [
                {'label': 'Valor Inventario', 'value': format_price(inventory_value), 'icon': 'inventory'},
                {'label': 'Ingresos Totales', 'value': format_price(total_revenue), 'icon': 'payments'},
                {'label': 'Pedidos Pendientes', 'value': pending, 'icon': 'pending_actions'},
            ]
        }
