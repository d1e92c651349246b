import pytest

from despensa.config import TestConfig
from despensa.main import create_app


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c


@pytest.fixture
def container(app):
    return app.extensions['despensa']
