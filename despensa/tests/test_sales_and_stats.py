import pytest

from despensa.services import StatsService


def test_status_can_move_in_any_direction(container):
    sales = container.sales_service
    assert sales.update_status('ORD-001', 'Cancelado')['ok']
    result = sales.update_status('ORD-001', 'Pendiente')
    assert result['ok']
    assert result['old_status'] == 'Cancelado'
    assert sales.get_sale('ORD-001')['status'] == 'Pendiente'


def test_invalid_status_and_unknown_order(container):
    sales = container.sales_service
    assert not sales.update_status('ORD-001', 'Perdido')['ok']
    assert sales.update_status('ORD-999', 'Enviado')['not_found']


def test_search_by_client_or_order_id(container):
    sales = container.sales_service
    assert [s['id'] for s in sales.search_sales('maría')] == ['ORD-002']
    assert [s['id'] for s in sales.search_sales('ord-003')] == ['ORD-003']
    assert len(sales.search_sales('')) == 3


def test_record_sale_appends_with_next_order_id(container):
    sale = container.sales_service.record_sale(
        'Lucía', '1100000000', [{'nombre': 'Miel', 'qty': 1, 'unit_price': 14900}],
        14900, 'Efectivo', 'Retiro'
    )
    assert sale['id'] == 'ORD-004'
    assert sale['status'] == 'Pendiente'
    assert container.sales_service.get_all_sales()[-1]['id'] == 'ORD-004'


def test_dashboard_stats_from_seed(container):
    stats = container.stats_service.dashboard_stats()
    assert stats['inventory_value'] == 18900 * 20 + 24500 * 10 + 21000 * 15
    assert stats['total_revenue'] == 31400 + 18900 + 45300
    assert stats['pending_orders'] == 1
    assert [c['label'] for c in stats['cards']] == ['Valor Inventario', 'Ingresos Totales', 'Pedidos Pendientes']
    assert stats['cards'][0]['value'] == '$ 938.000'


def test_revenue_excludes_cancelled_and_follows_status_changes(container):
    container.sales_service.update_status('ORD-001', 'Cancelado')
    container.sales_service.update_status('ORD-003', 'Pendiente')
    stats = container.stats_service
    assert stats.total_revenue() == 18900 + 45300
    assert stats.pending_count() == 2


def test_stats_with_plain_loaders():
    stats = StatsService(
        products_loader=lambda: [{'price': 100.5, 'stock': 2}, {'price': 10, 'stock': 0}],
        sales_loader=lambda: [{'total': 50, 'status': 'Cancelado'}, {'total': 70, 'status': 'Enviado'}]
    )
    assert stats.inventory_value() == pytest.approx(201)
    assert stats.total_revenue() == 70
    assert stats.pending_count() == 0
    assert StatsService().dashboard_stats()['pending_orders'] == 0
