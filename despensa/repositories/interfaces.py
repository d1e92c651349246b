# ==============================================================================
# INTERFACES DE REPOSITORIOS
# ==============================================================================
#
# Contratos (protocolos) que cumplen los repositorios en memoria.
# Los servicios dependen de estas interfaces y no de la implementación,
# así los tests pueden pasar repositorios propios con datos controlados.
#
# ==============================================================================

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class IRepository(Protocol):
    """Operaciones mínimas de cualquier repositorio."""

    def reload(self) -> None:
        """Vuelve a los datos iniciales."""
        ...


@runtime_checkable
class IListRepository(IRepository, Protocol):
    """
    Repositorio de registros ordenados con clave 'id'.
    Usado por: catálogo, carrito, ventas, métodos de envío y pago.
    """

    def get_all(self) -> List[Dict[str, Any]]:
        ...

    def get_by_id(self, record_id: Any) -> Optional[Dict[str, Any]]:
        ...

    def append(self, record: Dict[str, Any]) -> None:
        ...

    def update(self, record_id: Any, updates: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        ...

    def delete(self, record_id: Any) -> Optional[Dict[str, Any]]:
        ...

    def get_next_id(self) -> str:
        ...


@runtime_checkable
class IInventoryRepository(IListRepository, Protocol):
    """Catálogo de productos."""

    def get_by_sku(self, sku: str) -> Optional[Dict[str, Any]]:
        ...

    def sku_taken(self, sku: str, exclude_id: str = None) -> bool:
        ...


@runtime_checkable
class ISalesRepository(IListRepository, Protocol):
    """Libro de ventas."""

    def get_next_order_id(self) -> str:
        ...
