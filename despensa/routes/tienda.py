# ==============================================================================
# RUTAS DE LA TIENDA
# ==============================================================================
# Catálogo, vista rápida, carrito y checkout por WhatsApp.
# ==============================================================================

from flask import Blueprint, request

from despensa.app_container import get_container
from despensa.routes.responses import json_body, service_response
from despensa.utils.formatting import to_int

tienda_bp = Blueprint('tienda', __name__, url_prefix='/api')


# ═══════════════════════════════════════════════════════════════════════════
# CATÁLOGO
# ═══════════════════════════════════════════════════════════════════════════

@tienda_bp.route('/productos', methods=['GET'])
def listar_productos():
    """
    Catálogo filtrado.
    Query: categoria (repetible), q (búsqueda), sort (recommended | price-low | price-high | name)
    """
    categorias = [c for c in request.args.getlist('categoria') if c]
    result = get_container().catalog_service.browse(
        categories=categorias,
        query=request.args.get('q', ''),
        sort=request.args.get('sort', 'recommended')
    )
    return {"success": True, **result}


@tienda_bp.route('/productos/<product_id>', methods=['GET'])
def ver_producto(product_id):
    product = get_container().catalog_service.quick_view(product_id)
    if product is None:
        return {"success": False, "error": "Producto no encontrado"}, 404
    return {"success": True, "product": product}


@tienda_bp.route('/categorias', methods=['GET'])
def listar_categorias():
    return {"success": True, "categories": get_container().catalog_service.categories()}


@tienda_bp.route('/destacados', methods=['GET'])
def listar_destacados():
    return {"success": True, "products": get_container().catalog_service.featured()}


# ═══════════════════════════════════════════════════════════════════════════
# CARRITO
# ═══════════════════════════════════════════════════════════════════════════

@tienda_bp.route('/carrito', methods=['GET'])
def ver_carrito():
    return {"success": True, "cart": get_container().cart_service.get_cart()}


@tienda_bp.route('/carrito/agregar', methods=['POST'])
def agregar_al_carrito():
    """Agregar un producto del catálogo al carrito - JSON {id}"""
    data = json_body()
    container = get_container()
    product = container.inventory_service.get_product(data.get('id'))
    if not product:
        return {"success": False, "error": "Producto no encontrado"}, 404
    cart = container.cart_service.add_item(product)
    return {"success": True, "message": f"{product['nombre']} agregado al carrito", "cart": cart}


@tienda_bp.route('/carrito/eliminar', methods=['POST'])
def eliminar_del_carrito():
    data = json_body()
    return {"success": True, "cart": get_container().cart_service.remove_item(data.get('id'))}


@tienda_bp.route('/carrito/cantidad', methods=['POST'])
def cambiar_cantidad():
    """Cambiar cantidad - JSON {id, delta}"""
    data = json_body()
    delta = to_int(data.get('delta'))
    if delta is None:
        return {"success": False, "error": "Variación de cantidad inválida"}, 400
    return {"success": True, "cart": get_container().cart_service.update_quantity(data.get('id'), delta)}


@tienda_bp.route('/carrito/limpiar', methods=['POST'])
def vaciar_carrito():
    return {"success": True, "cart": get_container().cart_service.clear_cart()}


# ═══════════════════════════════════════════════════════════════════════════
# CHECKOUT
# ═══════════════════════════════════════════════════════════════════════════

@tienda_bp.route('/checkout/resumen', methods=['POST'])
def resumen_checkout():
    """Totales del carrito - JSON {shipping, payment, shipping_method_id?}"""
    data = json_body()
    result = get_container().checkout_service.summary(
        data.get('shipping', 'Retiro'),
        data.get('payment', 'Mercado Pago'),
        data.get('shipping_method_id')
    )
    return service_response(result)


@tienda_bp.route('/checkout/confirmar', methods=['POST'])
def confirmar_checkout():
    """
    Confirma el pedido y retorna el enlace de WhatsApp.
    JSON {name, phone, address, shipping, payment, shipping_method_id?}
    """
    data = json_body()
    customer = {
        'name': data.get('name', ''),
        'phone': data.get('phone', ''),
        'address': data.get('address', ''),
        'shipping': data.get('shipping', 'Envío'),
        'payment': data.get('payment', 'Mercado Pago'),
        'shipping_method_id': data.get('shipping_method_id'),
    }
    return service_response(get_container().checkout_service.confirm_order(customer))
