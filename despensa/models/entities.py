# ==============================================================================
# ENTIDADES DEL DOMINIO - Definiciones de dataclasses
# ==============================================================================
# Cada entidad representa un concepto del negocio de la despensa.
# Los repositorios guardan diccionarios; estas clases normalizan y
# validan la forma de esos diccionarios (to_dict / from_dict).
# ==============================================================================

from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any
from enum import Enum
from datetime import datetime, timezone


# ==============================================================================
# ENUMERACIONES - Estados y tipos válidos
# ==============================================================================

class ProductStatus(str, Enum):
    """Estado de disponibilidad derivado del stock."""
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"


class SaleStatus(str, Enum):
    """Estados posibles de un pedido. Cualquier transición es válida."""
    PENDIENTE = "Pendiente"
    ENVIADO = "Enviado"
    ENTREGADO = "Entregado"
    CANCELADO = "Cancelado"


class ShippingOption(str, Enum):
    """Formas de entrega elegibles en el checkout."""
    ENVIO = "Envío"
    RETIRO = "Retiro"


class PaymentOption(str, Enum):
    """Formas de pago elegibles en el checkout."""
    MERCADO_PAGO = "Mercado Pago"
    TRANSFERENCIA = "Transferencia"
    EFECTIVO = "Efectivo"


class SortOption(str, Enum):
    """Ordenamientos disponibles en la tienda."""
    RECOMMENDED = "recommended"
    PRICE_LOW = "price-low"
    PRICE_HIGH = "price-high"
    NAME = "name"


def parse_enum(enum_cls, value) -> Optional[Enum]:
    """
    Convierte un string al miembro de la enumeración.
    Acepta el valor exacto o el nombre del miembro (ej: "ENVIO").

    Returns:
        Miembro de la enumeración o None si no coincide
    """
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return None
    raw = str(value).strip()
    try:
        return enum_cls(raw)
    except ValueError:
        pass
    return enum_cls.__members__.get(raw.upper().replace(' ', '_').replace('-', '_'))


# Umbral de stock: más de 5 unidades es "In Stock"
LOW_STOCK_THRESHOLD = 5

# Máximo de imágenes por producto
MAX_IMAGES = 4

DEFAULT_IMAGE = (
    'https://images.unsplash.com/photo-1542838132-92c53300491e'
    '?auto=format&fit=crop&q=80&w=400'
)


def derive_status(stock: int) -> str:
    """Estado derivado del stock: > 5 es In Stock, si no Low Stock."""
    if stock > LOW_STOCK_THRESHOLD:
        return ProductStatus.IN_STOCK.value
    return ProductStatus.LOW_STOCK.value


# ==============================================================================
# ENTIDADES DE CATÁLOGO
# ==============================================================================

@dataclass
class Product:
    """
    Producto del catálogo.

    Attributes:
        id: Identificador único del producto
        sku: Código SKU (único dentro del catálogo)
        nombre: Nombre del producto
        categoria: Categoría para filtrado
        price: Precio de venta
        stock: Unidades disponibles
        old_price: Precio anterior (tachado), mayor que price si existe
        peso: Texto de presentación (peso, volumen, origen)
        descripcion: Descripción larga
        images: Lista ordenada de imágenes (máximo 4)
        tag: Etiqueta opcional (ej: NUEVO)
    """
    id: str
    sku: str
    nombre: str
    categoria: str = ''
    price: float = 0.0
    stock: int = 0
    old_price: Optional[float] = None
    peso: str = ''
    descripcion: str = ''
    images: List[str] = field(default_factory=list)
    tag: Optional[str] = None

    @property
    def status(self) -> str:
        """Estado derivado del stock actual."""
        return derive_status(self.stock)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para el repositorio."""
        d = {
            'id': self.id,
            'sku': self.sku,
            'nombre': self.nombre,
            'categoria': self.categoria,
            'price': self.price,
            'stock': self.stock,
            'peso': self.peso,
            'descripcion': self.descripcion,
            'images': list(self.images[:MAX_IMAGES]),
            'status': self.status,
        }
        if self.old_price is not None:
            d['old_price'] = self.old_price
        if self.tag:
            d['tag'] = self.tag
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Product':
        """Crea instancia desde diccionario."""
        return cls(
            id=str(data.get('id', '')),
            sku=data.get('sku', ''),
            nombre=data.get('nombre', ''),
            categoria=data.get('categoria', ''),
            price=data.get('price', 0.0),
            stock=data.get('stock', 0),
            old_price=data.get('old_price'),
            peso=data.get('peso', ''),
            descripcion=data.get('descripcion', ''),
            images=list(data.get('images', [])),
            tag=data.get('tag')
        )


# ==============================================================================
# ENTIDADES DE CARRITO
# ==============================================================================

@dataclass
class CartItem:
    """
    Ítem en el carrito: copia del producto al momento de agregarlo
    más la cantidad elegida.
    """
    producto: Dict[str, Any]
    cantidad: int = 1

    @property
    def subtotal(self) -> float:
        return round(self.producto.get('price', 0) * self.cantidad, 2)

    def to_dict(self) -> Dict[str, Any]:
        d = dict(self.producto)
        d['cantidad'] = max(1, int(self.cantidad))
        return d


# ==============================================================================
# ENTIDADES DE VENTA
# ==============================================================================

@dataclass
class SaleItem:
    """Línea de un pedido (copia del nombre y precio al momento de vender)."""
    nombre: str
    qty: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return round(self.qty * self.unit_price, 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'nombre': self.nombre,
            'qty': self.qty,
            'unit_price': self.unit_price
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SaleItem':
        return cls(
            nombre=data.get('nombre', ''),
            qty=data.get('qty', 0),
            unit_price=data.get('unit_price', 0.0)
        )


@dataclass
class Sale:
    """
    Pedido registrado en el libro de ventas.

    Attributes:
        id: Identificador del pedido (ej: ORD-001)
        client_name: Nombre del cliente
        client_phone: Teléfono de contacto
        ts: Fecha ISO del pedido
        total: Total cobrado (NO se recalcula desde items)
        items: Líneas del pedido
        payment_method: Forma de pago elegida
        shipping_method: Forma de entrega elegida
        status: Estado actual del pedido
    """
    id: str
    client_name: str
    client_phone: str = ''
    ts: str = ''
    total: float = 0.0
    items: List[SaleItem] = field(default_factory=list)
    payment_method: str = PaymentOption.EFECTIVO.value
    shipping_method: str = ShippingOption.RETIRO.value
    status: str = SaleStatus.PENDIENTE.value

    def __post_init__(self):
        if not self.ts:
            self.ts = datetime.now(timezone.utc).isoformat()

    @property
    def is_cancelled(self) -> bool:
        return self.status == SaleStatus.CANCELADO.value

    @property
    def items_total(self) -> float:
        """Suma de las líneas. Puede diferir de total (no se fuerza)."""
        return round(sum(item.line_total for item in self.items), 2)

    def to_dict(self) -> Dict[str, Any]:
        """Convierte a diccionario para el repositorio."""
        return {
            'id': self.id,
            'client_name': self.client_name,
            'client_phone': self.client_phone,
            'ts': self.ts,
            'total': self.total,
            'items': [item.to_dict() for item in self.items],
            'payment_method': self.payment_method,
            'shipping_method': self.shipping_method,
            'status': self.status
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Sale':
        """Crea instancia desde diccionario."""
        return cls(
            id=data.get('id', ''),
            client_name=data.get('client_name', ''),
            client_phone=data.get('client_phone', ''),
            ts=data.get('ts', ''),
            total=data.get('total', 0.0),
            items=[SaleItem.from_dict(i) for i in data.get('items', [])],
            payment_method=data.get('payment_method', PaymentOption.EFECTIVO.value),
            shipping_method=data.get('shipping_method', ShippingOption.RETIRO.value),
            status=data.get('status', SaleStatus.PENDIENTE.value)
        )


# ==============================================================================
# ENTIDADES DE CONFIGURACIÓN
# ==============================================================================

@dataclass
class ShippingMethod:
    """Método de envío configurable desde el panel."""
    id: str
    name: str
    price: float = 0.0
    estimated_days: str = ''
    enabled: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'price': self.price,
            'estimated_days': self.estimated_days,
            'enabled': self.enabled
        }


@dataclass
class PaymentMethodConfig:
    """Método de pago configurable desde el panel."""
    id: str
    name: str
    icon: str = 'credit_card'
    enabled: bool = True
    instructions: str = ''

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'icon': self.icon,
            'enabled': self.enabled,
            'instructions': self.instructions
        }
