import pytest

from despensa.config import TestConfig
from despensa.main import create_app
from despensa.performance_logger import RequestProfiler, action_name


@pytest.fixture
def profiled_app(tmp_path):
    class ProfilingConfig(TestConfig):
        ENABLE_PROFILING = True
        LOGS_DIR = str(tmp_path / 'logs')

    return create_app(ProfilingConfig)


def test_route_timings_are_logged(profiled_app, tmp_path):
    with profiled_app.test_client() as client:
        assert client.get('/api/productos').status_code == 200
        assert client.get('/api/productos/99').status_code == 404

    lines = (tmp_path / 'logs' / 'performance.log').read_text(encoding='utf-8').splitlines()
    assert len(lines) == 2
    assert '| Ver catálogo | GET /api/productos | 200 |' in lines[0]
    assert '| Vista rápida de producto | GET /api/productos/99 | 404 |' in lines[1]


def test_profiled_functions_collect_stats(profiled_app):
    with profiled_app.test_client() as client:
        client.get('/admin/api/exportar?vista=ventas')
        client.get('/admin/api/exportar?vista=inventario')

    stats = profiled_app.extensions['profiler'].function_stats()
    assert stats['Exportar CSV']['calls'] == 2


def test_disabled_profiling_records_nothing(app, client, tmp_path):
    client.get('/admin/api/exportar')
    assert app.extensions['profiler'].function_stats() == {}


def test_slow_requests_go_to_slow_routes_log(tmp_path):
    profiler = RequestProfiler(logs_dir=str(tmp_path))
    profiler.record_request('Exportar CSV', 'GET', '/admin/api/exportar', 200, 850)
    profiler.record_request('Ver carrito', 'GET', '/api/carrito', 200, 20)

    slow = (tmp_path / 'slow_routes.log').read_text(encoding='utf-8')
    assert 'MUY LENTA' in slow
    assert 'Exportar CSV' in slow
    assert 'Ver carrito' not in slow


def test_function_stats_and_reset(tmp_path):
    profiler = RequestProfiler(logs_dir=str(tmp_path))
    profiler.record_call('Confirmar pedido', 10)
    profiler.record_call('Confirmar pedido', 30)
    assert profiler.function_stats() == {'Confirmar pedido': {'calls': 2, 'avg_ms': 20, 'max_ms': 30}}

    profiler.reset()
    assert profiler.function_stats() == {}
    assert not (tmp_path / 'slow_functions.log').exists()


def test_unmapped_endpoint_falls_back_to_method_and_path():
    assert action_name(None, 'GET', '/nada') == 'GET /nada'
    assert action_name('admin.exportar', 'GET', '/admin/api/exportar') == 'Exportar CSV'
