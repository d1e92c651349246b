from despensa.data import seed
from despensa.repositories import (
    CartRepository,
    IInventoryRepository,
    IListRepository,
    ISalesRepository,
    InventoryRepository,
    SalesRepository,
    ShippingMethodRepository,
)


def test_repositories_satisfy_interfaces():
    assert isinstance(InventoryRepository(), IInventoryRepository)
    assert isinstance(SalesRepository(), ISalesRepository)
    assert isinstance(CartRepository(), IListRepository)
    assert not isinstance(CartRepository(), ISalesRepository)


def test_get_by_id_accepts_int_or_str():
    repo = InventoryRepository(seed.initial_products)
    assert repo.get_by_id(2)['sku'] == 'MA-013'
    assert repo.get_by_id('2')['sku'] == 'MA-013'
    assert repo.get_by_sku('ma-013')['id'] == '2'


def test_update_keeps_position_and_delete_returns_record():
    repo = ShippingMethodRepository(seed.initial_shipping_methods)
    repo.update('1', {'enabled': False})
    assert repo.get_all()[0]['enabled'] is False
    assert repo.update('9', {'enabled': False}) is None

    removed = repo.delete('2')
    assert removed['name'] == 'Envío Express'
    assert [m['id'] for m in repo.get_all()] == ['1', '3']
    assert repo.get_next_id() == '4'


def test_next_id_never_reuses_a_deleted_id():
    repo = InventoryRepository(seed.initial_products)
    assert repo.get_next_id() == '4'
    repo.append({'id': '4', 'sku': 'MI-200'})
    repo.delete('4')
    assert repo.get_next_id() == '5'

    repo.reload()
    assert repo.get_next_id() == '4'


def test_reload_restores_seed_data():
    repo = InventoryRepository(seed.initial_products)
    repo.delete('1')
    repo.get_by_id('2')['stock'] = 0
    repo.reload()
    assert repo.count() == 3
    assert repo.get_by_id('2')['stock'] == 10


def test_repositories_do_not_share_seed_data():
    first = InventoryRepository(seed.initial_products)
    second = InventoryRepository(seed.initial_products)
    first.get_by_id('1')['price'] = 1
    assert second.get_by_id('1')['price'] == 18900


def test_order_ids_are_sequential():
    repo = SalesRepository(seed.initial_sales)
    assert repo.get_next_order_id() == 'ORD-004'
    assert SalesRepository().get_next_id() == 'ORD-001'


def test_cart_clear():
    repo = CartRepository()
    repo.append({'id': '1', 'cantidad': 1})
    repo.clear()
    assert repo.get_all() == []
