# ==============================================================================
# CAPA DE REPOSITORIOS - Acceso a datos
# ==============================================================================
# Esta capa encapsula el almacenamiento (en memoria, sin persistencia).
# Los servicios solo usan los métodos públicos definidos en interfaces.py.
#
# ESTRUCTURA:
# ├── interfaces.py            → Protocolos/Interfaces
# ├── base.py                  → Clases base en memoria (ListRepository)
# ├── inventory_repository.py  → Catálogo de productos
# ├── sales_repository.py      → Libro de ventas
# ├── cart_repository.py       → Carrito del visitante
# └── settings_repository.py   → Métodos de envío y de pago
# ==============================================================================

from .interfaces import (
    IRepository,
    IListRepository,
    IInventoryRepository,
    ISalesRepository,
)

from .base import BaseRepository, ListRepository
from .inventory_repository import InventoryRepository
from .sales_repository import SalesRepository
from .cart_repository import CartRepository
from .settings_repository import ShippingMethodRepository, PaymentMethodRepository

__all__ = [
    # Interfaces
    'IRepository',
    'IListRepository',
    'IInventoryRepository',
    'ISalesRepository',

    # Clases base
    'BaseRepository',
    'ListRepository',

    # Implementaciones
    'InventoryRepository',
    'SalesRepository',
    'CartRepository',
    'ShippingMethodRepository',
    'PaymentMethodRepository',
]
