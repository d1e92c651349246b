# ==============================================================================
# DESPENSA 1982 - Tienda y panel de administración
# ==============================================================================
# Uso:
#   from despensa.main import create_app
#   app = create_app()
# ==============================================================================

__version__ = '1.0.0'
