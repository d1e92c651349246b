# ==============================================================================
# REPOSITORIOS DE CONFIGURACIÓN
# ==============================================================================
# Métodos de envío y métodos de pago configurables desde el panel.
# Cada uno es una lista independiente.
# ==============================================================================

from despensa.repositories.base import ListRepository


class ShippingMethodRepository(ListRepository):
    """
    Métodos de envío.

    Formato: {"id": "1", "name": "Envío Estándar", "price": 5000,
              "estimated_days": "3-5 días hábiles", "enabled": true}
    """


class PaymentMethodRepository(ListRepository):
    """
    Métodos de pago.

    Formato: {"id": "1", "name": "Mercado Pago", "icon": "credit_card",
              "enabled": true, "instructions": "..."}
    """
