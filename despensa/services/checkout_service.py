# ==============================================================================
# SERVICIO DE CHECKOUT
# ==============================================================================
# Calcula los totales del pedido y arma el mensaje que se entrega a WhatsApp.
#
# Totales:
#   subtotal = Σ precio × cantidad
#   envío    = costo fijo si la entrega es "Envío" (o el precio del método
#              configurado si se indica shipping_method_id), 0 si es "Retiro"
#   descuento = subtotal × tasa si el pago es "Transferencia"
#   total    = subtotal + envío - descuento
#
# Confirmar un pedido NO descuenta stock. Solo registra la venta en el libro
# si RECORD_CHECKOUT_SALES está activo.
# ==============================================================================

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from despensa.models import ShippingOption, PaymentOption, parse_enum
from despensa.performance_logger import profile_function
from despensa.services.cart_service import CartService
from despensa.services.sales_service import SalesService
from despensa.services.settings_service import SettingsService
from despensa.utils.formatting import format_price
from despensa.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_SHIPPING_COST = 500.0
DEFAULT_DISCOUNT_RATE = 0.05
WHATSAPP_URL = 'https://wa.me/{number}?text={text}'


def calculate_totals(
    items: List[Dict[str, Any]],
    shipping: str,
    payment: str,
    shipping_cost: float = DEFAULT_SHIPPING_COST,
    discount_rate: float = DEFAULT_DISCOUNT_RATE
) -> Dict[str, float]:
    """
    Totales del pedido a partir de los items del carrito.

    Args:
        items: Items con 'price' y 'cantidad'
        shipping: "Envío" o "Retiro"
        payment: "Mercado Pago", "Transferencia" o "Efectivo"
        shipping_cost: Costo aplicado cuando la entrega es "Envío"
        discount_rate: Bonificación aplicada cuando el pago es "Transferencia"

    Returns:
        {'subtotal', 'shipping_cost', 'discount', 'total'}
    """
    subtotal = sum(item.get('price', 0) * item.get('cantidad', 0) for item in items)
    envio = shipping_cost if parse_enum(ShippingOption, shipping) == ShippingOption.ENVIO else 0.0
    descuento = subtotal * discount_rate if parse_enum(PaymentOption, payment) == PaymentOption.TRANSFERENCIA else 0.0
    return {
        'subtotal': round(subtotal, 2),
        'shipping_cost': round(envio, 2),
        'discount': round(descuento, 2),
        'total': round(subtotal + envio - descuento, 2)
    }


def build_order_message(
    customer: Dict[str, str],
    items: List[Dict[str, Any]],
    total: float,
    store_name: str = 'Despensa 1982'
) -> str:
    """Texto del pedido que recibe la tienda por WhatsApp."""
    shipping = customer.get('shipping', '')
    entrega = shipping
    if parse_enum(ShippingOption, shipping) == ShippingOption.ENVIO:
        entrega = f"{shipping} (Dirección: {customer.get('address', '')})"

    lines = [
        f"¡Hola {store_name}! Quisiera realizar un pedido:",
        '',
        f"*Cliente:* {customer.get('name', '')}",
        f"*Teléfono:* {customer.get('phone', '')}",
        f"*Entrega:* {entrega}",
        f"*Pago:* {customer.get('payment', '')}",
        '',
        '*Detalle:*',
    ]
    for item in items:
        cantidad = item.get('cantidad', 0)
        lines.append(f"- {item.get('nombre', '')} ({cantidad}x) : {format_price(item.get('price', 0) * cantidad)}")
    lines.append('')
    lines.append(f"*Total:* {format_price(total)}")
    return '\n'.join(lines)


def build_whatsapp_url(number: str, message: str) -> str:
    return WHATSAPP_URL.format(number=number, text=quote(message, safe=''))


class CheckoutService:
    """
    Servicio de checkout.

    Responsabilidades:
    - Calcular totales del carrito según entrega y pago
    - Validar los datos del cliente
    - Armar el mensaje y el enlace de WhatsApp
    - Opcionalmente registrar la venta como Pendiente
    """

    def __init__(
        self,
        cart_service: CartService,
        settings_service: SettingsService = None,
        sales_service: SalesService = None,
        whatsapp_number: str = '5491122334455',
        store_name: str = 'Despensa 1982',
        shipping_cost: float = DEFAULT_SHIPPING_COST,
        discount_rate: float = DEFAULT_DISCOUNT_RATE,
        record_sales: bool = False
    ):
        self.cart_service = cart_service
        self.settings_service = settings_service
        self.sales_service = sales_service
        self.whatsapp_number = whatsapp_number
        self.store_name = store_name
        self.shipping_cost = shipping_cost
        self.discount_rate = discount_rate
        self.record_sales = record_sales

    def _resolve_shipping_cost(self, shipping: str, shipping_method_id=None) -> Optional[float]:
        """
        Costo de envío a aplicar. Sin shipping_method_id se usa el costo fijo.

        Un método configurado con precio 0 es de retiro: solo vale con
        "Retiro", y uno con precio solo vale con "Envío".

        Returns:
            Costo, o None si el método no existe, está desactivado o no
            corresponde a la forma de entrega elegida
        """
        if shipping_method_id in (None, ''):
            return self.shipping_cost
        if self.settings_service is None:
            return None
        method = self.settings_service.get_shipping_method(shipping_method_id)
        if not method or not method.get('enabled'):
            return None
        price = float(method.get('price', 0))
        is_delivery = parse_enum(ShippingOption, shipping) == ShippingOption.ENVIO
        if is_delivery != (price > 0):
            return None
        return price

    def summary(self, shipping: str, payment: str, shipping_method_id=None) -> Dict[str, Any]:
        """
        Totales del carrito actual.

        Returns:
            {'ok': True, 'totals': {...}, 'items': [...]} o {'ok': False, 'error': '...'}
        """
        if parse_enum(ShippingOption, shipping) is None:
            return {'ok': False, 'error': 'Forma de entrega inválida'}
        if parse_enum(PaymentOption, payment) is None:
            return {'ok': False, 'error': 'Forma de pago inválida'}

        cost = self._resolve_shipping_cost(shipping, shipping_method_id)
        if cost is None:
            return {'ok': False, 'error': 'Método de envío no disponible'}

        items = self.cart_service.get_cart_items()
        totals = calculate_totals(items, shipping, payment, cost, self.discount_rate)
        return {'ok': True, 'totals': totals, 'items': items}

    @staticmethod
    def validate_customer(customer: Dict[str, str]) -> Optional[str]:
        """
        Valida los datos del cliente.

        Returns:
            Mensaje de error o None si son válidos
        """
        if not (customer.get('name') or '').strip():
            return 'El nombre es obligatorio'
        if parse_enum(ShippingOption, customer.get('shipping')) == ShippingOption.ENVIO:
            if not (customer.get('address') or '').strip():
                return 'La dirección es obligatoria para envíos'
        return None

    @profile_function(name="Confirmar pedido")
    def confirm_order(self, customer: Dict[str, Any]) -> Dict[str, Any]:
        """
        Confirma el pedido: valida, calcula el total y arma el enlace de WhatsApp.

        Args:
            customer: name, phone, address, shipping, payment y
                      opcionalmente shipping_method_id

        Returns:
            {'ok': True, 'message', 'whatsapp_url', 'totals', 'sale'}
            o {'ok': False, 'error': '...'}
        """
        items = self.cart_service.get_cart_items()
        if not items:
            return {'ok': False, 'error': 'El carrito está vacío'}

        error = self.validate_customer(customer)
        if error:
            return {'ok': False, 'error': error}

        result = self.summary(
            customer.get('shipping'), customer.get('payment'), customer.get('shipping_method_id')
        )
        if not result['ok']:
            return result

        shipping = parse_enum(ShippingOption, customer.get('shipping')).value
        payment = parse_enum(PaymentOption, customer.get('payment')).value
        normalized = dict(customer, shipping=shipping, payment=payment)

        totals = result['totals']
        message = build_order_message(normalized, items, totals['total'], self.store_name)
        url = build_whatsapp_url(self.whatsapp_number, message)

        sale = None
        if self.record_sales and self.sales_service is not None:
            sale = self.sales_service.record_sale(
                client_name=normalized.get('name', '').strip(),
                client_phone=(normalized.get('phone') or '').strip(),
                items=[
                    {'nombre': item.get('nombre', ''), 'qty': item.get('cantidad', 0), 'unit_price': item.get('price', 0)}
                    for item in items
                ],
                total=totals['total'],
                payment_method=payment,
                shipping_method=shipping,
            )

        logger.info(f"Pedido de {normalized.get('name')} enviado a WhatsApp - Total: {totals['total']}")
        return {
            'ok': True,
            'message': message,
            'whatsapp_url': url,
            'totals': totals,
            'sale': sale
        }
