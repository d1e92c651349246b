# ==============================================================================
# PROFILING DE RUTAS Y FUNCIONES
# ==============================================================================
# Cada aplicación creada con create_app() tiene su propio RequestProfiler
# (en app.extensions['profiler']). Si ENABLE_PROFILING está activo:
#   - Cada request queda registrada en LOGS_DIR/performance.log
#   - Las requests lentas además en LOGS_DIR/slow_routes.log
#   - Las funciones marcadas con @profile_function acumulan llamadas y
#     tiempos; las lentas se anotan en LOGS_DIR/slow_functions.log
#
# Formato de cada línea (legible y fácil de filtrar con grep):
#   2024-05-01 10:00:00 | Ver catálogo | GET /api/productos | 200 | 12 ms
# ==============================================================================

import os
import threading
import time
from datetime import datetime
from functools import wraps

from flask import current_app, g, has_app_context, request

EXTENSION_KEY = 'profiler'

PERFORMANCE_LOG = 'performance.log'
SLOW_ROUTES_LOG = 'slow_routes.log'
SLOW_FUNCTIONS_LOG = 'slow_functions.log'

# Milisegundos
SLOW_MS = 300
VERY_SLOW_MS = 700

# Endpoint de Flask -> acción legible
ACTIONS = {
    'tienda.listar_productos': 'Ver catálogo',
    'tienda.ver_producto': 'Vista rápida de producto',
    'tienda.listar_categorias': 'Ver categorías',
    'tienda.listar_destacados': 'Ver destacados',
    'tienda.ver_carrito': 'Ver carrito',
    'tienda.agregar_al_carrito': 'Agregar al carrito',
    'tienda.eliminar_del_carrito': 'Eliminar del carrito',
    'tienda.cambiar_cantidad': 'Cambiar cantidad',
    'tienda.vaciar_carrito': 'Vaciar carrito',
    'tienda.resumen_checkout': 'Calcular totales',
    'tienda.confirmar_checkout': 'Confirmar pedido por WhatsApp',

    'admin.dashboard': 'Ver panel principal',
    'admin.inventario': 'Ver inventario',
    'admin.crear_producto': 'Crear producto',
    'admin.editar_producto': 'Editar producto',
    'admin.eliminar_producto': 'Eliminar producto',
    'admin.agregar_imagenes': 'Agregar imágenes',
    'admin.quitar_imagen': 'Quitar imagen',
    'admin.mover_imagen': 'Reordenar imágenes',
    'admin.ventas': 'Ver ventas',
    'admin.cambiar_estado_venta': 'Cambiar estado de pedido',
    'admin.exportar': 'Exportar CSV',
    'admin.listar_envios': 'Ver métodos de envío',
    'admin.agregar_envio': 'Agregar método de envío',
    'admin.alternar_envio': 'Activar/desactivar envío',
    'admin.eliminar_envio': 'Eliminar método de envío',
    'admin.listar_pagos': 'Ver métodos de pago',
    'admin.agregar_pago': 'Agregar método de pago',
    'admin.alternar_pago': 'Activar/desactivar pago',
    'admin.eliminar_pago': 'Eliminar método de pago',
}


def action_name(endpoint, method, path):
    """Nombre legible de la acción; si el endpoint no está mapeado, 'METHOD path'."""
    return ACTIONS.get(endpoint or '', f"{method} {path}")


class RequestProfiler:
    """
    Mide requests y funciones de una aplicación.

    Uso:
        profiler = RequestProfiler(logs_dir='logs', enabled=True)
        profiler.init_app(app)
    """

    def __init__(self, logs_dir, enabled=True):
        self.logs_dir = logs_dir
        self.enabled = enabled
        self._calls = {}
        self._lock = threading.Lock()

    # =========================================================================
    # ARCHIVOS DE LOG
    # =========================================================================

    def _append(self, filename, line):
        stamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        with self._lock:
            os.makedirs(self.logs_dir, exist_ok=True)
            with open(os.path.join(self.logs_dir, filename), 'a', encoding='utf-8') as f:
                f.write(f"{stamp} | {line}\n")

    def record_request(self, action, method, path, status_code, elapsed_ms):
        """Una línea en performance.log; si fue lenta, también en slow_routes.log."""
        detail = f"{action} | {method} {path} | {status_code} | {elapsed_ms:.0f} ms"
        self._append(PERFORMANCE_LOG, detail)
        if elapsed_ms >= VERY_SLOW_MS:
            self._append(SLOW_ROUTES_LOG, f"MUY LENTA (>{VERY_SLOW_MS} ms) | {detail}")
        elif elapsed_ms >= SLOW_MS:
            self._append(SLOW_ROUTES_LOG, f"LENTA (>{SLOW_MS} ms) | {detail}")

    # =========================================================================
    # FUNCIONES
    # =========================================================================

    def record_call(self, func_name, elapsed_ms):
        with self._lock:
            calls, total, worst = self._calls.get(func_name, (0, 0.0, 0.0))
            self._calls[func_name] = (calls + 1, total + elapsed_ms, max(worst, elapsed_ms))
        if elapsed_ms >= SLOW_MS:
            self._append(SLOW_FUNCTIONS_LOG, f"{func_name} | {elapsed_ms:.0f} ms")

    def function_stats(self):
        """
        Returns:
            {nombre: {'calls', 'avg_ms', 'max_ms'}}
        """
        with self._lock:
            return {
                name: {
                    'calls': calls,
                    'avg_ms': round(total / calls, 2) if calls else 0,
                    'max_ms': round(worst, 2),
                }
                for name, (calls, total, worst) in self._calls.items()
            }

    def reset(self):
        with self._lock:
            self._calls.clear()

    # =========================================================================
    # HOOKS DE FLASK
    # =========================================================================

    def init_app(self, app):
        app.extensions[EXTENSION_KEY] = self
        if not self.enabled:
            return

        @app.before_request
        def _start_clock():
            g.profiler_started = time.perf_counter()

        @app.after_request
        def _record(response):
            started = g.pop('profiler_started', None)
            if started is None or request.path.startswith('/static'):
                return response
            elapsed_ms = (time.perf_counter() - started) * 1000
            self.record_request(
                action_name(request.endpoint, request.method, request.path),
                request.method, request.path, response.status_code, elapsed_ms
            )
            return response


def init_profiling(app):
    """Crea el profiler de la app a partir de ENABLE_PROFILING y LOGS_DIR."""
    profiler = RequestProfiler(
        logs_dir=app.config.get('LOGS_DIR') or 'logs',
        enabled=bool(app.config.get('ENABLE_PROFILING', False))
    )
    profiler.init_app(app)
    return profiler


def _active_profiler():
    if not has_app_context():
        return None
    profiler = current_app.extensions.get(EXTENSION_KEY)
    if profiler is None or not profiler.enabled:
        return None
    return profiler


def profile_function(func=None, name=None):
    """
    Mide una función con el profiler de la aplicación activa.
    Fuera de un contexto de Flask, o con el profiling apagado, solo la ejecuta.

        @profile_function(name="Confirmar pedido")
        def confirm_order(self, customer):
            ...
    """
    def decorator(fn):
        label = name or fn.__name__

        @wraps(fn)
        def wrapper(*args, **kwargs):
            profiler = _active_profiler()
            if profiler is None:
                return fn(*args, **kwargs)
            started = time.perf_counter()
            try:
                return fn(*args, **kwargs)
            finally:
                profiler.record_call(label, (time.perf_counter() - started) * 1000)

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
