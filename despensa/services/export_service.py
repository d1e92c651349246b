# ==============================================================================
# SERVICIO DE EXPORTACIÓN CSV
# ==============================================================================
# Exporta el libro de ventas o el inventario a CSV (una fila de encabezado y
# una fila por registro). Los campos se escriben con csv.writer, así que una
# coma o comilla en un nombre queda entre comillas y no rompe la fila.
# ==============================================================================

import csv
import io
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from despensa.performance_logger import profile_function

SALES_VIEW = 'ventas'
INVENTORY_VIEW = 'inventario'

SALES_HEADERS = ['Orden ID', 'Cliente', 'Fecha', 'Total', 'Metodo Pago', 'Metodo Envio', 'Estado']
INVENTORY_HEADERS = ['ID', 'Nombre', 'SKU', 'Categoria', 'Precio', 'Stock', 'Estado']


def _number(value):
    """12500.0 -> 12500; los decimales reales se conservan."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def export_filename(view: str, today: Optional[date] = None) -> str:
    """Nombre del archivo: <ventas|inventario>_despensa_<YYYY-MM-DD>.csv"""
    today = today or date.today()
    prefix = SALES_VIEW if view == SALES_VIEW else INVENTORY_VIEW
    return f"{prefix}_despensa_{today.isoformat()}.csv"


def sales_rows(sales: List[Dict[str, Any]]) -> List[list]:
    return [
        [s.get('id'), s.get('client_name'), s.get('ts'), _number(s.get('total')),
         s.get('payment_method'), s.get('shipping_method'), s.get('status')]
        for s in sales
    ]


def inventory_rows(products: List[Dict[str, Any]]) -> List[list]:
    return [
        [p.get('id'), p.get('nombre'), p.get('sku'), p.get('categoria'),
         _number(p.get('price')), p.get('stock'), p.get('status')]
        for p in products
    ]


def to_csv(headers: List[str], rows: List[list]) -> str:
    si = io.StringIO()
    writer = csv.writer(si, lineterminator='\n')
    writer.writerow(headers)
    writer.writerows(rows)
    return si.getvalue()


class ExportService:
    """
    Servicio de exportación del panel.

    Recibe funciones que cargan ventas y productos (igual que StatsService).
    """

    def __init__(
        self,
        sales_loader: Callable[[], List[Dict[str, Any]]],
        products_loader: Callable[[], List[Dict[str, Any]]]
    ):
        self._sales_loader = sales_loader
        self._products_loader = products_loader

    @profile_function(name="Exportar CSV")
    def export(self, view: str, today: Optional[date] = None) -> Dict[str, str]:
        """
        Exporta la vista pedida. Cualquier valor distinto de "ventas"
        exporta el inventario.

        Returns:
            {'filename': str, 'content': str}
        """
        if view == SALES_VIEW:
            content = to_csv(SALES_HEADERS, sales_rows(self._sales_loader()))
        else:
            content = to_csv(INVENTORY_HEADERS, inventory_rows(self._products_loader()))
        return {'filename': export_filename(view, today), 'content': content}
