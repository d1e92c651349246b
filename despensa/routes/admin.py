# ==============================================================================
# RUTAS DEL PANEL DE ADMINISTRACIÓN
# ==============================================================================
# Dashboard, inventario (CRUD + imágenes), ventas, exportación CSV y
# configuración de métodos de envío y de pago.
# ==============================================================================

from flask import Blueprint, Response, current_app, request

from despensa.app_container import get_container
from despensa.routes.responses import json_body, service_response
from despensa.utils.formatting import to_int
from despensa.utils.pagination import paginate

admin_bp = Blueprint('admin', __name__, url_prefix='/admin/api')


def _page_args():
    page = to_int(request.args.get('page'), default=1)
    per_page = to_int(request.args.get('per_page'), default=current_app.config.get('ADMIN_PAGE_SIZE', 10))
    return page, per_page


def _truthy(value) -> bool:
    return str(value).strip().lower() in ('1', 'true', 'yes', 'si', 'sí')


# ═══════════════════════════════════════════════════════════════════════════
# DASHBOARD
# ═══════════════════════════════════════════════════════════════════════════

@admin_bp.route('/dashboard', methods=['GET'])
def dashboard():
    return {"success": True, "stats": get_container().stats_service.dashboard_stats()}


# ═══════════════════════════════════════════════════════════════════════════
# INVENTARIO
# ═══════════════════════════════════════════════════════════════════════════

@admin_bp.route('/inventario', methods=['GET'])
def inventario():
    """Inventario paginado. Query: q (nombre o SKU), page, per_page"""
    products = get_container().inventory_service.search_products(request.args.get('q', ''))
    page, per_page = _page_args()
    return {"success": True, **paginate(products, page, per_page)}


@admin_bp.route('/productos', methods=['POST'])
def crear_producto():
    result = get_container().inventory_service.create_product(json_body())
    response = service_response(result)
    if result.get('ok'):
        return response, 201
    return response


@admin_bp.route('/productos/<product_id>', methods=['PUT'])
def editar_producto(product_id):
    return service_response(get_container().inventory_service.update_product(product_id, json_body()))


@admin_bp.route('/productos/<product_id>', methods=['DELETE'])
def eliminar_producto(product_id):
    """Eliminar producto. Requiere ?confirm=1 o JSON {confirm: true}"""
    confirmed = _truthy(request.args.get('confirm', '')) or json_body().get('confirm') is True
    return service_response(get_container().inventory_service.delete_product(product_id, confirmed=confirmed))


@admin_bp.route('/productos/<product_id>/imagenes', methods=['POST'])
def agregar_imagenes(product_id):
    """
    Agregar imágenes (máximo 4 por producto).
    Multipart: archivos en 'imagenes'. JSON: {urls: [...]}
    """
    service = get_container().inventory_service
    files = request.files.getlist('imagenes')
    if files:
        return service_response(service.add_uploaded_images(product_id, files))
    urls = json_body().get('urls') or []
    if isinstance(urls, str):
        urls = [urls]
    return service_response(service.add_images(product_id, urls))


@admin_bp.route('/productos/<product_id>/imagenes/<int:index>', methods=['DELETE'])
def quitar_imagen(product_id, index):
    return service_response(get_container().inventory_service.remove_image(product_id, index))


@admin_bp.route('/productos/<product_id>/imagenes/mover', methods=['POST'])
def mover_imagen(product_id):
    """Reordenar imágenes - JSON {from, to}"""
    data = json_body()
    from_index = to_int(data.get('from'))
    to_index = to_int(data.get('to'))
    if from_index is None or to_index is None:
        return {"success": False, "error": "Posiciones inválidas"}, 400
    return service_response(get_container().inventory_service.move_image(product_id, from_index, to_index))


# ═══════════════════════════════════════════════════════════════════════════
# VENTAS
# ═══════════════════════════════════════════════════════════════════════════

@admin_bp.route('/ventas', methods=['GET'])
def ventas():
    """Ventas paginadas. Query: q (cliente o ID de pedido), page, per_page"""
    sales = get_container().sales_service.search_sales(request.args.get('q', ''))
    page, per_page = _page_args()
    return {"success": True, **paginate(sales, page, per_page)}


@admin_bp.route('/ventas/<sale_id>/estado', methods=['POST'])
def cambiar_estado_venta(sale_id):
    data = json_body()
    return service_response(get_container().sales_service.update_status(sale_id, data.get('status')))


@admin_bp.route('/exportar', methods=['GET'])
def exportar():
    """CSV de la vista actual. Query: vista (ventas | inventario)"""
    export = get_container().export_service.export(request.args.get('vista', 'inventario'))
    return Response(
        export['content'],
        mimetype='text/csv',
        headers={'Content-Disposition': f"attachment;filename={export['filename']}"}
    )


# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURACIÓN - MÉTODOS DE ENVÍO
# ═══════════════════════════════════════════════════════════════════════════

@admin_bp.route('/envios', methods=['GET'])
def listar_envios():
    return {"success": True, "methods": get_container().settings_service.get_shipping_methods()}


@admin_bp.route('/envios', methods=['POST'])
def agregar_envio():
    """JSON {name, price, estimated_days}"""
    data = json_body()
    result = get_container().settings_service.add_shipping_method(
        data.get('name'), data.get('price'), data.get('estimated_days')
    )
    response = service_response(result)
    if result.get('ok'):
        return response, 201
    return response


@admin_bp.route('/envios/<method_id>/toggle', methods=['POST'])
def alternar_envio(method_id):
    return service_response(get_container().settings_service.toggle_shipping_method(method_id))


@admin_bp.route('/envios/<method_id>', methods=['DELETE'])
def eliminar_envio(method_id):
    return service_response(get_container().settings_service.delete_shipping_method(method_id))


# ═══════════════════════════════════════════════════════════════════════════
# CONFIGURACIÓN - MÉTODOS DE PAGO
# ═══════════════════════════════════════════════════════════════════════════

@admin_bp.route('/pagos', methods=['GET'])
def listar_pagos():
    return {"success": True, "methods": get_container().settings_service.get_payment_methods()}


@admin_bp.route('/pagos', methods=['POST'])
def agregar_pago():
    """JSON {name, icon, instructions}"""
    data = json_body()
    result = get_container().settings_service.add_payment_method(
        data.get('name'), data.get('icon'), data.get('instructions')
    )
    response = service_response(result)
    if result.get('ok'):
        return response, 201
    return response


@admin_bp.route('/pagos/<method_id>/toggle', methods=['POST'])
def alternar_pago(method_id):
    return service_response(get_container().settings_service.toggle_payment_method(method_id))


@admin_bp.route('/pagos/<method_id>', methods=['DELETE'])
def eliminar_pago(method_id):
    return service_response(get_container().settings_service.delete_payment_method(method_id))
