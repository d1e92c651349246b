from despensa.services import filter_products


PRODUCTS = [
    {'id': '1', 'nombre': 'Aceite de Oliva', 'categoria': 'Pantry Essentials', 'price': 18900},
    {'id': '2', 'nombre': 'Galletas de Avena', 'categoria': 'Gluten-Free', 'price': 12500},
    {'id': '3', 'nombre': 'Harina de Avena Integral', 'categoria': 'Dietetic & Bio', 'price': 8500},
    {'id': '4', 'nombre': 'Pan sin TACC', 'categoria': 'Gluten-Free', 'price': 6400},
]


def _ids(products):
    return [p['id'] for p in products]


def test_category_and_search_are_combined():
    result = filter_products(PRODUCTS, ['Gluten-Free'], 'AVENA')
    assert _ids(result) == ['2']


def test_search_matches_category_text():
    assert _ids(filter_products(PRODUCTS, query='gluten')) == ['2', '4']


def test_categories_are_or_combined():
    result = filter_products(PRODUCTS, ['Gluten-Free', 'Pantry Essentials'])
    assert _ids(result) == ['1', '2', '4']


def test_price_low_and_high():
    subset = PRODUCTS[:3]
    assert [p['price'] for p in filter_products(subset, sort='price-low')] == [8500, 12500, 18900]
    assert [p['price'] for p in filter_products(subset, sort='price-high')] == [18900, 12500, 8500]


def test_recommended_keeps_catalog_order_and_input_untouched():
    original = list(PRODUCTS)
    result = filter_products(PRODUCTS, sort='recommended')
    assert _ids(result) == ['1', '2', '3', '4']
    assert result is not PRODUCTS
    filter_products(PRODUCTS, sort='price-low')
    assert PRODUCTS == original


def test_unknown_sort_behaves_as_recommended():
    assert _ids(filter_products(PRODUCTS, sort='popularity')) == ['1', '2', '3', '4']


def test_name_sort_ignores_accents_and_case():
    products = [
        {'id': 'a', 'nombre': 'banana deshidratada', 'categoria': '', 'price': 1},
        {'id': 'b', 'nombre': 'Azúcar Mascabo', 'categoria': '', 'price': 1},
        {'id': 'c', 'nombre': 'Árbol de té', 'categoria': '', 'price': 1},
    ]
    assert _ids(filter_products(products, sort='name')) == ['c', 'b', 'a']


def test_price_sort_is_stable():
    products = [
        {'id': 'x', 'nombre': 'X', 'categoria': '', 'price': 5000},
        {'id': 'y', 'nombre': 'Y', 'categoria': '', 'price': 5000},
    ]
    assert _ids(filter_products(products, sort='price-low')) == ['x', 'y']


def test_catalog_service_views(container):
    catalog = container.catalog_service

    browse = catalog.browse(categories=['Pantry Essentials'], sort='price-high')
    assert browse['count'] == 2
    assert [p['price'] for p in browse['products']] == [21000, 18900]

    counts = {c['label']: c['count'] for c in catalog.categories()}
    assert counts == {'Pantry Essentials': 2, 'Dietetic & Bio': 1, 'Gluten-Free': 0, 'Vegan Options': 0}

    assert len(catalog.featured()) == 3
    assert catalog.quick_view('2')['nombre'] == 'Té Matcha Ceremonial'
    assert catalog.quick_view('99') is None
