# despensa/data/seed.py
# Datos de demostración con los que arranca cada sesión.
from datetime import datetime, timezone, timedelta

from despensa.models import Sale, SaleItem, ShippingMethod, PaymentMethodConfig, Product


def initial_products():
    products = [
        Product(
            id='1',
            sku='OL-105',
            nombre='Aceite de Oliva Extra Virgen',
            categoria='Pantry Essentials',
            price=18900,
            stock=20,
            peso='750ml • Acidez <0.5%',
            descripcion='Aceite de oliva virgen extra de primera prensada en frío. '
                        'Notas frutadas y picor equilibrado.',
            images=['https://images.unsplash.com/photo-1474979266404-7eaacbcd87c5'
                    '?w=800&auto=format&fit=crop&q=80'],
        ),
        Product(
            id='2',
            sku='MA-013',
            nombre='Té Matcha Ceremonial',
            categoria='Dietetic & Bio',
            price=24500,
            stock=10,
            peso='50g • Japón',
            descripcion='Polvo de té verde grado ceremonial importado de Japón. '
                        'Antioxidante natural y energizante.',
            images=['https://images.unsplash.com/photo-1582793988951-9aed5509eb97'
                    '?w=800&auto=format&fit=crop&q=80'],
            tag='NUEVO',
        ),
        Product(
            id='3',
            sku='CF-016',
            nombre='Café de Especialidad',
            categoria='Pantry Essentials',
            price=21000,
            stock=15,
            peso='250g • En Grano',
            descripcion='Café tostado artesanalmente. Notas a chocolate y caramelo. '
                        '100% Arábica de altura.',
            images=['https://images.unsplash.com/photo-1497935586351-b67a49e012bf'
                    '?w=800&auto=format&fit=crop&q=80'],
        ),
    ]
    return [p.to_dict() for p in products]


def initial_sales():
    now = datetime.now(timezone.utc)
    sales = [
        Sale(
            id='ORD-001',
            client_name='Juan Pérez',
            client_phone='1122334455',
            ts=now.isoformat(),
            total=31400,
            payment_method='Mercado Pago',
            shipping_method='Envío',
            status='Entregado',
            items=[
                SaleItem('Granola Artesanal Miel y Nueces', 2, 12500),
                SaleItem('Harina de Avena Integral', 1, 6400),
            ],
        ),
        Sale(
            id='ORD-002',
            client_name='María García',
            client_phone='1199887766',
            ts=(now - timedelta(days=1)).isoformat(),
            total=18900,
            payment_method='Transferencia',
            shipping_method='Retiro',
            status='Pendiente',
            items=[SaleItem('Aceite de Oliva Extra Virgen', 1, 18900)],
        ),
        Sale(
            id='ORD-003',
            client_name='Carlos Rodríguez',
            client_phone='1155443322',
            ts=(now - timedelta(days=2)).isoformat(),
            total=45300,
            payment_method='Mercado Pago',
            shipping_method='Envío',
            status='Enviado',
            items=[
                SaleItem('Mix de Frutos Secos', 2, 11500),
                SaleItem('Miel Pura de Montaña', 1, 14900),
                SaleItem('Semillas de Chía', 1, 7900),
            ],
        ),
    ]
    return [s.to_dict() for s in sales]


def initial_shipping_methods():
    return [
        ShippingMethod('1', 'Envío Estándar', 5000, '3-5 días hábiles').to_dict(),
        ShippingMethod('2', 'Envío Express', 8500, '24-48 horas').to_dict(),
        ShippingMethod('3', 'Retiro en Local', 0, 'Inmediato').to_dict(),
    ]


def initial_payment_methods():
    return [
        PaymentMethodConfig('1', 'Mercado Pago', 'credit_card',
                            instructions='Pago seguro con tarjeta o saldo MP').to_dict(),
        PaymentMethodConfig('2', 'Transferencia Bancaria', 'account_balance',
                            instructions='CBU: 0000000000000000000000').to_dict(),
        PaymentMethodConfig('3', 'Efectivo', 'payments',
                            instructions='Pago al momento de la entrega o retiro').to_dict(),
    ]
