import pytest

from despensa.models import SaleStatus, ShippingOption, SortOption, parse_enum
from despensa.utils.formatting import format_price, to_float, to_int
from despensa.utils.pagination import paginate


@pytest.mark.parametrize('amount,expected', [
    (25000, '$ 25.000'),
    (24250.0, '$ 24.250'),
    (1250.5, '$ 1.251'),
    (0, '$ 0'),
    (1234567, '$ 1.234.567'),
])
def test_format_price(amount, expected):
    assert format_price(amount) == expected


def test_number_parsing():
    assert to_float('12.5') == 12.5
    assert to_float('', default=0.0) == 0.0
    assert to_float('abc') is None
    assert to_float('inf') is None
    assert to_float(float('nan'), default=0.0) == 0.0
    assert to_int('7') == 7
    assert to_int('7.5') is None
    assert to_int(7.5) is None
    assert to_int(3.0) == 3
    assert to_int(None, default=1) == 1


def test_parse_enum_accepts_values_and_names():
    assert parse_enum(ShippingOption, 'Envío') is ShippingOption.ENVIO
    assert parse_enum(ShippingOption, 'envio') is ShippingOption.ENVIO
    assert parse_enum(SortOption, 'price-low') is SortOption.PRICE_LOW
    assert parse_enum(SaleStatus, 'Cancelado') is SaleStatus.CANCELADO
    assert parse_enum(SaleStatus, 'Perdido') is None
    assert parse_enum(SaleStatus, None) is None


def test_paginate_slices_and_counts():
    page = paginate(list(range(25)), page=2, per_page=10)
    assert page['items'] == list(range(10, 20))
    assert page['total'] == 25
    assert page['total_pages'] == 3


def test_paginate_clamps_page():
    assert paginate(list(range(25)), page=9)['page'] == 3
    assert paginate(list(range(25)), page=9)['items'] == list(range(20, 25))
    assert paginate(list(range(25)), page=0)['page'] == 1

    empty = paginate([], page=4)
    assert empty['items'] == []
    assert empty['total_pages'] == 0
    assert empty['page'] == 4
