import io

from despensa.config import TestConfig
from despensa.main import create_app


CUSTOMER = {'name': 'Ana', 'phone': '1133445566', 'address': 'Calle 1',
            'shipping': 'Envío', 'payment': 'Transferencia'}


# ═══════════════════════════════════════════════════════════════════════════
# TIENDA
# ═══════════════════════════════════════════════════════════════════════════

def test_catalog_endpoints(client):
    r = client.get('/api/productos?categoria=Pantry Essentials&sort=price-high')
    assert r.status_code == 200
    data = r.get_json()
    assert data['count'] == 2
    assert [p['price'] for p in data['products']] == [21000, 18900]

    r = client.get('/api/productos?q=matcha')
    assert [p['id'] for p in r.get_json()['products']] == ['2']

    assert client.get('/api/productos/2').get_json()['product']['sku'] == 'MA-013'
    assert client.get('/api/productos/99').status_code == 404
    assert len(client.get('/api/categorias').get_json()['categories']) == 4
    assert len(client.get('/api/destacados').get_json()['products']) == 3


def test_cart_flow(client):
    client.post('/api/carrito/agregar', json={'id': '1'})
    r = client.post('/api/carrito/agregar', json={'id': 1})
    cart = r.get_json()['cart']
    assert cart['total_items'] == 2
    assert cart['items_count'] == 1
    assert cart['total_monto'] == 37800

    r = client.post('/api/carrito/cantidad', json={'id': '1', 'delta': -5})
    assert r.get_json()['cart']['items'][0]['cantidad'] == 1

    assert client.post('/api/carrito/cantidad', json={'id': '1', 'delta': 'x'}).status_code == 400
    assert client.post('/api/carrito/agregar', json={'id': '99'}).status_code == 404

    r = client.post('/api/carrito/eliminar', json={'id': '1'})
    assert r.get_json()['cart']['items'] == []

    client.post('/api/carrito/agregar', json={'id': '2'})
    assert client.post('/api/carrito/limpiar').get_json()['cart']['total_items'] == 0
    assert client.get('/api/carrito').get_json()['cart']['items'] == []


def test_checkout_summary_and_confirm(client, container):
    assert client.post('/api/checkout/confirmar', json=CUSTOMER).status_code == 400

    client.post('/api/carrito/agregar', json={'id': '1'})
    r = client.post('/api/checkout/resumen', json={'shipping': 'Envío', 'payment': 'Transferencia'})
    assert r.get_json()['totals'] == {'subtotal': 18900, 'shipping_cost': 500, 'discount': 945, 'total': 18455}

    r = client.post('/api/checkout/confirmar', json=dict(CUSTOMER, name=''))
    assert r.status_code == 400
    assert r.get_json()['success'] is False

    r = client.post('/api/checkout/confirmar', json=CUSTOMER)
    assert r.status_code == 200
    data = r.get_json()
    assert data['success'] is True
    assert data['whatsapp_url'].startswith('https://wa.me/5491122334455?text=')

    # sin registro de venta ni descuento de stock
    assert len(container.sales_service.get_all_sales()) == 3
    assert container.inventory_service.get_product('1')['stock'] == 20


def test_checkout_records_sale_when_configured():
    class RecordingConfig(TestConfig):
        RECORD_CHECKOUT_SALES = True

    app = create_app(RecordingConfig)
    with app.test_client() as client:
        client.post('/api/carrito/agregar', json={'id': '3'})
        r = client.post('/api/checkout/confirmar', json=dict(CUSTOMER, payment='Efectivo'))
        assert r.get_json()['sale']['id'] == 'ORD-004'

        sales = client.get('/admin/api/ventas').get_json()
        assert sales['total'] == 4
        assert sales['items'][-1]['status'] == 'Pendiente'
        assert sales['items'][-1]['total'] == 21500


# ═══════════════════════════════════════════════════════════════════════════
# PANEL - INVENTARIO
# ═══════════════════════════════════════════════════════════════════════════

def test_dashboard(client):
    stats = client.get('/admin/api/dashboard').get_json()['stats']
    assert stats['pending_orders'] == 1
    assert stats['total_revenue'] == 95600


def test_inventory_listing_is_paginated(client):
    data = client.get('/admin/api/inventario?per_page=2&page=2').get_json()
    assert data['total'] == 3
    assert data['total_pages'] == 2
    assert [p['id'] for p in data['items']] == ['3']

    data = client.get('/admin/api/inventario?page=9').get_json()
    assert data['page'] == 1

    data = client.get('/admin/api/inventario?q=OL-105').get_json()
    assert [p['id'] for p in data['items']] == ['1']


def test_product_crud(client):
    form = {'nombre': 'Miel Pura', 'sku': 'MI-200', 'price': 14900, 'stock': 10, 'categoria': 'Pantry Essentials'}
    r = client.post('/admin/api/productos', json=form)
    assert r.status_code == 201
    product = r.get_json()['product']
    assert product['status'] == 'In Stock'

    assert client.post('/admin/api/productos', json=form).status_code == 400

    r = client.put(f"/admin/api/productos/{product['id']}", json=dict(form, stock=3))
    assert r.get_json()['product']['status'] == 'Low Stock'
    assert client.put('/admin/api/productos/99', json=form).status_code == 404

    r = client.delete(f"/admin/api/productos/{product['id']}")
    assert r.status_code == 400
    assert r.get_json()['confirm']

    assert client.delete(f"/admin/api/productos/{product['id']}?confirm=1").status_code == 200
    assert client.delete(f"/admin/api/productos/{product['id']}?confirm=1").status_code == 404


def test_product_form_field_types(client):
    form = {'nombre': 'Miel Pura', 'sku': 12345, 'price': 14900, 'images': 'https://x.com/a.jpg'}
    r = client.post('/admin/api/productos', json=form)
    assert r.status_code == 201
    assert r.get_json()['product']['sku'] == '12345'
    assert r.get_json()['product']['images'] == ['https://x.com/a.jpg']

    assert client.post('/admin/api/productos', json=dict(form, sku='MI-201', price='inf')).status_code == 400
    assert client.post('/admin/api/productos', json=dict(form, sku='MI-202', images=[1])).status_code == 400
    assert client.post('/admin/api/productos', json=['Miel Pura']).status_code == 400


def test_new_product_after_delete_gets_its_own_cart_entry(client):
    miel = client.post('/admin/api/productos', json={'nombre': 'Miel Pura', 'sku': 'MI-200', 'price': 14900}).get_json()['product']
    client.post('/api/carrito/agregar', json={'id': miel['id']})
    assert client.delete(f"/admin/api/productos/{miel['id']}?confirm=1").status_code == 200

    yerba = client.post('/admin/api/productos', json={'nombre': 'Yerba Mate', 'sku': 'YM-500', 'price': 3500}).get_json()['product']
    assert yerba['id'] != miel['id']

    cart = client.post('/api/carrito/agregar', json={'id': yerba['id']}).get_json()['cart']
    assert [(item['nombre'], item['cantidad']) for item in cart['items']] == [('Miel Pura', 1), ('Yerba Mate', 1)]
    assert cart['total_monto'] == 18400


def test_product_images(client):
    r = client.post('/admin/api/productos/1/imagenes', json={'urls': ['https://example.com/a.jpg']})
    assert len(r.get_json()['images']) == 2

    r = client.post(
        '/admin/api/productos/1/imagenes',
        data={'imagenes': [(io.BytesIO(b'png'), 'foto.png', 'image/png'),
                           (io.BytesIO(b'txt'), 'notas.txt', 'text/plain')]},
        content_type='multipart/form-data'
    )
    images = r.get_json()['images']
    assert len(images) == 3
    assert images[2].startswith('data:image/png;base64,')

    r = client.post('/admin/api/productos/1/imagenes/mover', json={'from': 2, 'to': 0})
    assert r.get_json()['images'][0].startswith('data:image/png')

    r = client.delete('/admin/api/productos/1/imagenes/0')
    assert len(r.get_json()['images']) == 2

    assert client.post('/admin/api/productos/1/imagenes/mover', json={'from': 'a'}).status_code == 400
    assert client.post('/admin/api/productos/99/imagenes', json={'urls': ['x']}).status_code == 404


# ═══════════════════════════════════════════════════════════════════════════
# PANEL - VENTAS Y EXPORTACIÓN
# ═══════════════════════════════════════════════════════════════════════════

def test_sales_status_and_search(client):
    r = client.post('/admin/api/ventas/ORD-002/estado', json={'status': 'Enviado'})
    assert r.status_code == 200
    assert r.get_json()['sale']['status'] == 'Enviado'

    assert client.post('/admin/api/ventas/ORD-002/estado', json={'status': 'Perdido'}).status_code == 400
    assert client.post('/admin/api/ventas/ORD-999/estado', json={'status': 'Enviado'}).status_code == 404

    data = client.get('/admin/api/ventas?q=carlos').get_json()
    assert [s['id'] for s in data['items']] == ['ORD-003']


def test_csv_export(client):
    r = client.get('/admin/api/exportar?vista=ventas')
    assert r.status_code == 200
    assert r.mimetype == 'text/csv'
    assert 'ventas_despensa_' in r.headers['Content-Disposition']
    assert r.get_data(as_text=True).startswith('Orden ID,Cliente,Fecha')

    r = client.get('/admin/api/exportar')
    assert 'inventario_despensa_' in r.headers['Content-Disposition']


# ═══════════════════════════════════════════════════════════════════════════
# PANEL - CONFIGURACIÓN
# ═══════════════════════════════════════════════════════════════════════════

def test_shipping_config_endpoints(client):
    r = client.post('/admin/api/envios', json={'name': 'Moto', 'price': '1500', 'estimated_days': 'En el día'})
    assert r.status_code == 201
    method_id = r.get_json()['method']['id']

    assert client.post('/admin/api/envios', json={'name': 'Moto'}).status_code == 400

    r = client.post(f'/admin/api/envios/{method_id}/toggle')
    assert r.get_json()['method']['enabled'] is False

    assert client.delete(f'/admin/api/envios/{method_id}').status_code == 200
    assert len(client.get('/admin/api/envios').get_json()['methods']) == 3


def test_payment_config_endpoints(client):
    r = client.post('/admin/api/pagos', json={'name': 'Cuenta DNI'})
    assert r.status_code == 201
    assert r.get_json()['method']['icon'] == 'credit_card'

    assert client.post('/admin/api/pagos/1/toggle').get_json()['method']['enabled'] is False
    assert client.delete('/admin/api/pagos/99').status_code == 404
    assert len(client.get('/admin/api/pagos').get_json()['methods']) == 4


def test_unknown_route_returns_json_error(client):
    r = client.get('/api/no-existe')
    assert r.status_code == 404
    assert r.get_json()['success'] is False


def test_apps_do_not_share_state():
    first = create_app(TestConfig)
    second = create_app(TestConfig)
    with first.test_client() as client:
        client.post('/api/carrito/agregar', json={'id': '1'})
    with second.test_client() as client:
        assert client.get('/api/carrito').get_json()['cart']['items'] == []
