# ==============================================================================
# CAPA DE SERVICIOS - Lógica de negocio
# ==============================================================================
# Esta capa contiene TODA la lógica de negocio de la tienda y del panel.
#
# PRINCIPIOS:
# 1. Los servicios orquestan operaciones entre repositorios
# 2. Aplican reglas de negocio y validaciones
# 3. Las rutas (blueprints) solo llaman a servicios
# 4. Los valores derivados (totales, estados, estadísticas) se calculan
#    en cada lectura, nunca se guardan aparte
#
# ESTRUCTURA:
# ├── inventory_service.py → Productos, validación, imágenes
# ├── catalog_service.py   → Filtros y orden de la tienda, destacados
# ├── cart_service.py      → Carrito del visitante
# ├── checkout_service.py  → Totales, mensaje y enlace de WhatsApp
# ├── sales_service.py     → Libro de ventas y estados de pedido
# ├── stats_service.py     → Indicadores del dashboard
# ├── settings_service.py  → Métodos de envío y de pago
# └── export_service.py    → Exportación CSV
# ==============================================================================

from despensa.services.inventory_service import InventoryService
from despensa.services.catalog_service import CatalogService, filter_products
from despensa.services.cart_service import CartService
from despensa.services.checkout_service import CheckoutService, calculate_totals
from despensa.services.sales_service import SalesService
from despensa.services.stats_service import StatsService
from despensa.services.settings_service import SettingsService
from despensa.services.export_service import ExportService

__all__ = [
    'InventoryService',
    'CatalogService',
    'filter_products',
    'CartService',
    'CheckoutService',
    'calculate_totals',
    'SalesService',
    'StatsService',
    'SettingsService',
    'ExportService',
]
