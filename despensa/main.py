# ==============================================================================
# APLICACIÓN FLASK - Despensa 1982
# ==============================================================================
# Tienda (catálogo, carrito, checkout por WhatsApp) y panel de administración
# (inventario, ventas, configuración de envíos y pagos).
#
# Uso:
#   from despensa.main import create_app
#   app = create_app()
# ==============================================================================

import logging

from flask import Flask
from werkzeug.exceptions import HTTPException

from despensa.app_container import AppContainer, EXTENSION_KEY
from despensa.config import Config
from despensa.performance_logger import init_profiling
from despensa.routes import tienda_bp, admin_bp
from despensa.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def _register_error_handlers(app: Flask) -> None:

    @app.errorhandler(HTTPException)
    def _http_error(error):
        return {"success": False, "error": error.description}, error.code

    @app.errorhandler(Exception)
    def _unexpected_error(error):
        logger.exception(f"Error no controlado: {error}")
        return {"success": False, "error": "Error interno del servidor"}, 500


def create_app(config_object=Config) -> Flask:
    """
    Crea la aplicación con su propio contenedor (datos semilla limpios).

    Args:
        config_object: Clase de configuración (Config, TestConfig, ...)
    """
    app = Flask(__name__)
    app.config.from_object(config_object)

    # ═══════════════════════════════════════════════════════════════════════
    # LOGGING Y PROFILING
    # ═══════════════════════════════════════════════════════════════════════
    # Mide rendimiento de rutas y funciones. Logs en LOGS_DIR
    # Para desactivar: ENABLE_PROFILING = False en la configuración
    configure_logging(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))
    init_profiling(app)

    # ═══════════════════════════════════════════════════════════════════════
    # CONTENEDOR DE DEPENDENCIAS
    # ═══════════════════════════════════════════════════════════════════════
    app.extensions[EXTENSION_KEY] = AppContainer(config=app.config)

    app.register_blueprint(tienda_bp)
    app.register_blueprint(admin_bp)
    _register_error_handlers(app)

    logger.info(f"{app.config['STORE_NAME']} lista (profiling={'on' if app.config.get('ENABLE_PROFILING') else 'off'})")
    return app
