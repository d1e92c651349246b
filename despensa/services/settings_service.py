# ==============================================================================
# SERVICIO DE CONFIGURACIÓN (ENVÍOS Y PAGOS)
# ==============================================================================
# Métodos de envío y de pago del panel: alta, baja y activar/desactivar.
# No se exige que quede al menos un método activo.
# ==============================================================================

from typing import Any, Dict, List, Optional

from despensa.models import ShippingMethod, PaymentMethodConfig
from despensa.repositories.interfaces import IListRepository
from despensa.utils.formatting import to_float, to_text
from despensa.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PAYMENT_ICON = 'credit_card'


class SettingsService:
    """
    Servicio para la configuración de envíos y pagos.

    Responsabilidades:
    - Listar métodos (todos o solo los activos)
    - Activar/desactivar en el lugar
    - Alta con validación y baja por id
    """

    def __init__(self, shipping_repo: IListRepository, payment_repo: IListRepository):
        """
        Args:
            shipping_repo: Repositorio de métodos de envío
            payment_repo: Repositorio de métodos de pago
        """
        self.shipping_repo = shipping_repo
        self.payment_repo = payment_repo

    @staticmethod
    def _toggle(repo: IListRepository, method_id) -> Dict[str, Any]:
        method = repo.get_by_id(method_id)
        if not method:
            return {'ok': False, 'error': 'Método no encontrado', 'not_found': True}
        repo.update(method['id'], {'enabled': not method.get('enabled', False)})
        return {'ok': True, 'method': method}

    @staticmethod
    def _delete(repo: IListRepository, method_id) -> Dict[str, Any]:
        removed = repo.delete(method_id)
        if removed is None:
            return {'ok': False, 'error': 'Método no encontrado', 'not_found': True}
        return {'ok': True, 'method': removed}

    # =========================================================================
    # MÉTODOS DE ENVÍO
    # =========================================================================

    def get_shipping_methods(self, only_enabled: bool = False) -> List[Dict[str, Any]]:
        methods = self.shipping_repo.get_all()
        if only_enabled:
            return [m for m in methods if m.get('enabled')]
        return list(methods)

    def get_shipping_method(self, method_id) -> Optional[Dict[str, Any]]:
        return self.shipping_repo.get_by_id(method_id)

    def add_shipping_method(self, name: str, price=None, estimated_days: str = '') -> Dict[str, Any]:
        """
        Agrega un método de envío (activo).
        Requiere nombre y plazo estimado; precio vacío equivale a 0.

        Returns:
            {'ok': True, 'method': {...}} o {'ok': False, 'error': '...'}
        """
        name = to_text(name)
        estimated_days = to_text(estimated_days)
        if not name or not estimated_days:
            return {'ok': False, 'error': 'Nombre y plazo estimado son obligatorios.'}

        if price is None or (isinstance(price, str) and not price.strip()):
            parsed_price = 0.0
        else:
            parsed_price = to_float(price)
        if parsed_price is None:
            return {'ok': False, 'error': 'Precio inválido.'}
        if parsed_price < 0:
            return {'ok': False, 'error': 'El precio no puede ser negativo.'}

        method = ShippingMethod(
            id=self.shipping_repo.get_next_id(),
            name=name,
            price=parsed_price,
            estimated_days=estimated_days,
        ).to_dict()
        self.shipping_repo.append(method)
        logger.info(f"Método de envío '{name}' agregado (id={method['id']})")
        return {'ok': True, 'method': method}

    def toggle_shipping_method(self, method_id) -> Dict[str, Any]:
        return self._toggle(self.shipping_repo, method_id)

    def delete_shipping_method(self, method_id) -> Dict[str, Any]:
        return self._delete(self.shipping_repo, method_id)

    # =========================================================================
    # MÉTODOS DE PAGO
    # =========================================================================

    def get_payment_methods(self, only_enabled: bool = False) -> List[Dict[str, Any]]:
        methods = self.payment_repo.get_all()
        if only_enabled:
            return [m for m in methods if m.get('enabled')]
        return list(methods)

    def add_payment_method(self, name: str, icon: str = DEFAULT_PAYMENT_ICON,
                           instructions: str = '') -> Dict[str, Any]:
        """
        Agrega un método de pago (activo). Requiere nombre.

        Returns:
            {'ok': True, 'method': {...}} o {'ok': False, 'error': '...'}
        """
        name = to_text(name)
        if not name:
            return {'ok': False, 'error': 'El nombre es obligatorio.'}

        method = PaymentMethodConfig(
            id=self.payment_repo.get_next_id(),
            name=name,
            icon=to_text(icon) or DEFAULT_PAYMENT_ICON,
            instructions=to_text(instructions),
        ).to_dict()
        self.payment_repo.append(method)
        logger.info(f"Método de pago '{name}' agregado (id={method['id']})")
        return {'ok': True, 'method': method}

    def toggle_payment_method(self, method_id) -> Dict[str, Any]:
        return self._toggle(self.payment_repo, method_id)

    def delete_payment_method(self, method_id) -> Dict[str, Any]:
        return self._delete(self.payment_repo, method_id)
