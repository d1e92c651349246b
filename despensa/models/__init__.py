# ==============================================================================
# CAPA DE MODELOS - Estructuras de datos del sistema
# ==============================================================================
# Entidades del dominio definidas con dataclasses y enumeraciones de los
# valores válidos (estados, formas de envío y pago, ordenamientos).
# ==============================================================================

from .entities import (
    # Catálogo
    Product,
    ProductStatus,
    derive_status,
    LOW_STOCK_THRESHOLD,
    MAX_IMAGES,
    DEFAULT_IMAGE,

    # Carrito
    CartItem,

    # Ventas
    Sale,
    SaleItem,
    SaleStatus,

    # Checkout
    ShippingOption,
    PaymentOption,

    # Tienda
    SortOption,

    # Configuración
    ShippingMethod,
    PaymentMethodConfig,

    parse_enum,
)

__all__ = [
    # Catálogo
    'Product',
    'ProductStatus',
    'derive_status',
    'LOW_STOCK_THRESHOLD',
    'MAX_IMAGES',
    'DEFAULT_IMAGE',

    # Carrito
    'CartItem',

    # Ventas
    'Sale',
    'SaleItem',
    'SaleStatus',

    # Checkout
    'ShippingOption',
    'PaymentOption',

    # Tienda
    'SortOption',

    # Configuración
    'ShippingMethod',
    'PaymentMethodConfig',

    'parse_enum',
]
