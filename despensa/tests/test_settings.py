def test_toggle_shipping_method_in_place(container):
    settings = container.settings_service
    assert settings.toggle_shipping_method('1')['ok']
    methods = settings.get_shipping_methods()
    assert [m['id'] for m in methods] == ['1', '2', '3']
    assert methods[0]['enabled'] is False
    assert [m['id'] for m in settings.get_shipping_methods(only_enabled=True)] == ['2', '3']

    settings.toggle_shipping_method('1')
    assert settings.get_shipping_method('1')['enabled'] is True


def test_all_methods_can_be_disabled(container):
    settings = container.settings_service
    for method in settings.get_payment_methods():
        settings.toggle_payment_method(method['id'])
    assert settings.get_payment_methods(only_enabled=True) == []


def test_add_shipping_method_validation(container):
    settings = container.settings_service
    assert not settings.add_shipping_method('', '100', '2 días')['ok']
    assert not settings.add_shipping_method('Moto', '100', '')['ok']
    assert not settings.add_shipping_method('Moto', '-1', '2 días')['ok']
    assert not settings.add_shipping_method('Moto', 'gratis', '2 días')['ok']
    assert not settings.add_shipping_method('Moto', 'inf', '2 días')['ok']
    assert not settings.add_shipping_method(['Moto'], '100', '2 días')['ok']

    result = settings.add_shipping_method('Moto', '', '2 días')
    assert result['ok']
    assert result['method'] == {'id': '4', 'name': 'Moto', 'price': 0.0,
                                'estimated_days': '2 días', 'enabled': True}


def test_add_payment_method_defaults(container):
    settings = container.settings_service
    assert not settings.add_payment_method('  ')['ok']

    method = settings.add_payment_method('Cuenta DNI', icon='', instructions=None)['method']
    assert method['icon'] == 'credit_card'
    assert method['instructions'] == ''
    assert method['enabled'] is True


def test_delete_methods_by_id(container):
    settings = container.settings_service
    assert settings.delete_shipping_method('3')['ok']
    assert [m['id'] for m in settings.get_shipping_methods()] == ['1', '2']
    assert settings.delete_shipping_method('3')['not_found']
    assert settings.delete_payment_method('2')['method']['name'] == 'Transferencia Bancaria'
    assert settings.toggle_payment_method('2')['not_found']
