import pytest

from orderhub.domain.model.product import Product
from orderhub.domain.model.value_objects import Money
from tests.fakes import (
    FakeAccountRepository,
    FakeOrderRepository,
    FakeProductRepository,
    make_account,
)


@pytest.fixture
def products():
    return FakeProductRepository([
        Product(id="p1", name="Widget", price=Money.of("10.00")),
        Product(id="p2", name="Gadget", price=Money.of("15.00")),
        Product(id="p3", name="Doohickey", price=Money.of("30.00")),
    ])


@pytest.fixture
def accounts():
    return FakeAccountRepository([
        make_account("alice"),
        make_account("bob"),
        make_account("carol"),
    ])


@pytest.fixture
def orders():
    return FakeOrderRepository()
