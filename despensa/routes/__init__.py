# ==============================================================================
# RUTAS - Blueprints de la aplicación
# ==============================================================================
# ├── tienda.py    → /api/...        (catálogo, carrito, checkout)
# ├── admin.py     → /admin/api/...  (inventario, ventas, configuración, CSV)
# └── responses.py → traducción de resultados de servicios a JSON
#
# Las rutas solo leen la request, llaman al servicio y traducen el
# resultado a JSON. La lógica de negocio vive en services/.
# ==============================================================================

from despensa.routes.tienda import tienda_bp
from despensa.routes.admin import admin_bp

__all__ = ['tienda_bp', 'admin_bp']
