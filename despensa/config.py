# ==============================================================================
# CONFIGURACIÓN DE LA APLICACIÓN
# ==============================================================================
# Todos los valores se pueden sobrescribir con variables de entorno.
# Uso:
#   app.config.from_object(Config)
# ==============================================================================

import os

BASE = os.path.dirname(os.path.abspath(__file__))


def _env_bool(name, default='0'):
    return os.environ.get(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # SECRET_KEY: en producción DEBE definirse via variable de entorno
    # Comando: export DESPENSA_SECRET_KEY="clave_secreta_larga_y_aleatoria"
    SECRET_KEY = os.environ.get('DESPENSA_SECRET_KEY', 'despensa_dev_secret_key_change_in_production')

    # Número de WhatsApp que recibe los pedidos (formato internacional sin +)
    WHATSAPP_NUMBER = os.environ.get('DESPENSA_WHATSAPP_NUMBER', '5491122334455')
    STORE_NAME = os.environ.get('DESPENSA_STORE_NAME', 'Despensa 1982')

    # Checkout: costo fijo de "Envío" y bonificación por transferencia
    SHIPPING_FLAT_COST = float(os.environ.get('DESPENSA_SHIPPING_FLAT_COST', 500))
    TRANSFER_DISCOUNT_RATE = float(os.environ.get('DESPENSA_TRANSFER_DISCOUNT_RATE', 0.05))

    # True = cada pedido confirmado se registra en el libro de ventas como Pendiente
    RECORD_CHECKOUT_SALES = _env_bool('DESPENSA_RECORD_CHECKOUT_SALES')

    # Panel de administración
    ADMIN_PAGE_SIZE = int(os.environ.get('DESPENSA_ADMIN_PAGE_SIZE', 10))

    # Subida de imágenes (data URLs en memoria)
    MAX_CONTENT_LENGTH = 5 * 1024 * 1024  # 5 MB

    # Profiling de rutas y funciones (logs en LOGS_DIR)
    ENABLE_PROFILING = _env_bool('DESPENSA_ENABLE_PROFILING', '1')
    LOGS_DIR = os.environ.get('DESPENSA_LOGS_DIR', os.path.join(BASE, 'logs'))
    LOG_LEVEL = os.environ.get('DESPENSA_LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    ENABLE_PROFILING = False
    RECORD_CHECKOUT_SALES = False
