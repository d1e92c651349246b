# ==============================================================================
# SERVICIO DE INVENTARIO
# ==============================================================================
# Centraliza toda la lógica de negocio del catálogo: alta, edición y baja de
# productos, y la lista de imágenes (máximo 4) de cada producto.
# ==============================================================================

import base64
from typing import Any, Dict, List, Optional

from despensa.models import (
    Product,
    derive_status,
    MAX_IMAGES,
    DEFAULT_IMAGE,
)
from despensa.repositories.interfaces import IInventoryRepository
from despensa.utils.formatting import to_float, to_int, to_text
from despensa.utils.logging import get_logger

logger = get_logger(__name__)

DELETE_CONFIRM_MESSAGE = '¿Estás seguro de que deseas eliminar este producto permanentemente?'

DEFAULT_CATEGORY = 'Pantry Essentials'


# =========================================================================
# LISTA DE IMÁGENES (funciones puras)
# =========================================================================

def append_images(images: List[str], new_images: List[str]) -> List[str]:
    """
    Agrega imágenes al final respetando el máximo.
    Las que no entran se descartan; las vacías se ignoran.
    """
    result = list(images)
    for image in new_images:
        image = (image or '').strip()
        if not image:
            continue
        if len(result) >= MAX_IMAGES:
            break
        result.append(image)
    return result


def remove_image(images: List[str], index: int) -> List[str]:
    """Quita la imagen en la posición dada. Índices fuera de rango no cambian nada."""
    if index < 0 or index >= len(images):
        return list(images)
    return [img for i, img in enumerate(images) if i != index]


def move_image(images: List[str], from_index: int, to_index: int) -> List[str]:
    """
    Mueve una imagen a otra posición desplazando el resto
    (reordenamiento por arrastre).
    """
    size = len(images)
    if not (0 <= from_index < size and 0 <= to_index < size) or from_index == to_index:
        return list(images)
    result = list(images)
    moved = result.pop(from_index)
    result.insert(to_index, moved)
    return result


def file_to_data_url(file) -> Optional[str]:
    """
    Lee un archivo subido (werkzeug FileStorage) como data URL.
    Retorna None si no es una imagen.
    """
    mimetype = (getattr(file, 'mimetype', None) or '').lower()
    if not mimetype.startswith('image/'):
        return None
    payload = base64.b64encode(file.read()).decode('ascii')
    return f"data:{mimetype};base64,{payload}"


class InventoryService:
    """
    Servicio para gestión del catálogo.

    Responsabilidades:
    - CRUD de productos con validación de formulario
    - Estado derivado del stock (In Stock / Low Stock)
    - Unicidad de SKU
    - Lista ordenada de imágenes (agregar, quitar, reordenar)
    - Búsqueda del panel por nombre o SKU
    """

    def __init__(self, inventory_repo: IInventoryRepository):
        """
        Inicializa el servicio de inventario.

        Args:
            inventory_repo: Repositorio del catálogo
        """
        self.inventory_repo = inventory_repo

    # =========================================================================
    # CONSULTAS
    # =========================================================================

    def get_all_products(self) -> List[Dict[str, Any]]:
        """Productos en el orden del catálogo."""
        return self.inventory_repo.get_all()

    def get_product(self, pid) -> Optional[Dict[str, Any]]:
        return self.inventory_repo.get_by_id(pid)

    def search_products(self, term: str = '') -> List[Dict[str, Any]]:
        """
        Búsqueda del panel: nombre o SKU, sin distinguir mayúsculas.
        Término vacío retorna todo el catálogo.
        """
        term = (term or '').strip().lower()
        products = self.get_all_products()
        if not term:
            return list(products)
        return [
            p for p in products
            if term in (p.get('nombre') or '').lower() or term in (p.get('sku') or '').lower()
        ]

    # =========================================================================
    # VALIDACIÓN DE FORMULARIO
    # =========================================================================

    def _validate_form(self, form: Dict[str, Any], exclude_id: str = None,
                       current: Dict[str, Any] = None) -> Dict[str, Any]:
        """
        Valida y normaliza los campos del formulario de producto.

        Returns:
            {'ok': True, 'fields': {...}} o {'ok': False, 'error': '...'}
        """
        nombre = to_text(form.get('nombre'))
        sku = to_text(form.get('sku'))
        raw_price = form.get('price')

        if not nombre or not sku or raw_price is None or str(raw_price).strip() == '':
            return {'ok': False, 'error': 'Nombre, SKU y precio son obligatorios.'}

        price = to_float(raw_price)
        if price is None or price < 0:
            return {'ok': False, 'error': 'Precio inválido.'}

        if form.get('stock') is not None and str(form.get('stock')).strip() != '':
            stock = to_int(form.get('stock'))
            if stock is None or stock < 0:
                return {'ok': False, 'error': 'El stock debe ser un entero mayor o igual a 0.'}
        else:
            stock = current.get('stock', 0) if current else 0

        old_price = None
        if form.get('old_price') not in (None, ''):
            old_price = to_float(form.get('old_price'))
            if old_price is None or old_price <= price:
                return {'ok': False, 'error': 'El precio anterior debe ser mayor al precio actual.'}
        elif current and 'old_price' not in form:
            old_price = current.get('old_price')
            if old_price is not None and old_price <= price:
                old_price = None

        if self.inventory_repo.sku_taken(sku, exclude_id=exclude_id):
            return {'ok': False, 'error': f"El SKU '{sku}' ya está en uso."}

        images = form.get('images')
        if images is None:
            images = current.get('images', []) if current else []
        elif isinstance(images, str):
            images = [images]
        if not isinstance(images, list) or not all(isinstance(img, str) for img in images):
            return {'ok': False, 'error': 'Las imágenes deben ser una lista de URLs.'}
        images = append_images([], images)
        if not images:
            images = [DEFAULT_IMAGE]

        fields = {
            'nombre': nombre,
            'sku': sku,
            'price': round(price, 2),
            'stock': stock,
            'categoria': to_text(form.get('categoria')) or (current or {}).get('categoria') or DEFAULT_CATEGORY,
            'images': images,
            'old_price': old_price,
        }
        for key in ('peso', 'descripcion', 'tag'):
            if key in form:
                fields[key] = to_text(form.get(key))
        return {'ok': True, 'fields': fields}

    # =========================================================================
    # OPERACIONES DE PRODUCTOS
    # =========================================================================

    def create_product(self, form: Dict[str, Any]) -> Dict[str, Any]:
        """
        Crea un producto desde el formulario del panel.

        Requiere nombre, SKU y precio. Si no hay imágenes se usa una
        imagen por defecto. El estado se deriva del stock.

        Returns:
            {'ok': True, 'product': {...}} o {'ok': False, 'error': '...'}
        """
        result = self._validate_form(form)
        if not result['ok']:
            return result
        fields = result['fields']

        product = Product(
            id=self.inventory_repo.get_next_id(),
            sku=fields['sku'],
            nombre=fields['nombre'],
            categoria=fields['categoria'],
            price=fields['price'],
            stock=fields['stock'],
            old_price=fields['old_price'],
            peso=fields.get('peso') or 'Unitario',
            descripcion=fields.get('descripcion') or 'Producto agregado manualmente.',
            images=fields['images'],
            tag=fields.get('tag') or None,
        )
        data = product.to_dict()
        self.inventory_repo.append(data)

        logger.info(f"Producto '{product.nombre}' creado (id={product.id}, sku={product.sku}, estado={product.status})")
        return {'ok': True, 'product': data}

    def update_product(self, pid, form: Dict[str, Any]) -> Dict[str, Any]:
        """
        Actualiza un producto. Conserva el id y recalcula el estado.

        Returns:
            {'ok': True, 'product': {...}} o {'ok': False, 'error': '...'}
        """
        current = self.get_product(pid)
        if not current:
            return {'ok': False, 'error': 'Producto no encontrado', 'not_found': True}

        result = self._validate_form(form, exclude_id=current['id'], current=current)
        if not result['ok']:
            return result
        fields = result['fields']

        updates = {k: v for k, v in fields.items() if k != 'old_price'}
        updates['status'] = derive_status(fields['stock'])
        updated = self.inventory_repo.update(current['id'], updates)
        if fields['old_price'] is None:
            updated.pop('old_price', None)
        else:
            updated['old_price'] = fields['old_price']
        if not updated.get('tag'):
            updated.pop('tag', None)

        logger.info(f"Producto {updated['id']} actualizado (stock={updated['stock']}, estado={updated['status']})")
        return {'ok': True, 'product': updated}

    def delete_product(self, pid, confirmed: bool = False) -> Dict[str, Any]:
        """
        Elimina un producto. Requiere confirmación explícita.
        No revisa ventas históricas que lo mencionen.

        Returns:
            {'ok': True, 'product': {...}} o {'ok': False, 'error': '...'}
        """
        if not confirmed:
            return {'ok': False, 'error': 'Confirmación requerida', 'confirm': DELETE_CONFIRM_MESSAGE}

        removed = self.inventory_repo.delete(pid)
        if removed is None:
            return {'ok': False, 'error': 'Producto no encontrado', 'not_found': True}

        logger.info(f"Producto '{removed.get('nombre')}' eliminado (id={removed.get('id')})")
        return {'ok': True, 'product': removed}

    # =========================================================================
    # IMÁGENES
    # =========================================================================

    def _set_images(self, pid, transform) -> Dict[str, Any]:
        product = self.get_product(pid)
        if not product:
            return {'ok': False, 'error': 'Producto no encontrado', 'not_found': True}
        images = transform(product.get('images', []))
        self.inventory_repo.update(product['id'], {'images': images})
        return {'ok': True, 'images': images}

    def add_images(self, pid, new_images: List[str]) -> Dict[str, Any]:
        """Agrega imágenes (URL o data URL) al final, hasta 4."""
        return self._set_images(pid, lambda images: append_images(images, new_images))

    def add_uploaded_images(self, pid, files) -> Dict[str, Any]:
        """
        Agrega archivos subidos (input de archivo o arrastrar y soltar).
        Solo se leen los que entran en el cupo; los que no son imagen se ignoran.
        """
        product = self.get_product(pid)
        if not product:
            return {'ok': False, 'error': 'Producto no encontrado', 'not_found': True}
        free = MAX_IMAGES - len(product.get('images', []))
        data_urls = []
        for file in files:
            if len(data_urls) >= free:
                break
            data_url = file_to_data_url(file)
            if data_url:
                data_urls.append(data_url)
        return self.add_images(pid, data_urls)

    def remove_image(self, pid, index: int) -> Dict[str, Any]:
        return self._set_images(pid, lambda images: remove_image(images, index))

    def move_image(self, pid, from_index: int, to_index: int) -> Dict[str, Any]:
        return self._set_images(pid, lambda images: move_image(images, from_index, to_index))
