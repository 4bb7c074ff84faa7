"""Pytest fixtures for the truck order pipeline."""

from decimal import Decimal

import pytest

from truck_store.models import TruckOrder
from truck_store.processor import OrderProcessor
from truck_store.services import DiscountService, FleetDiscountService
from truck_store.store import InMemoryOrderRepository
from truck_store.validators import TruckOrderValidator


class CountingDiscountService(DiscountService):
    """Wraps a real discount service and records every order it was asked about."""

    def __init__(self, inner: DiscountService):
        self.inner = inner
        self.calls = []

    def name(self) -> str:
        return self.inner.name()

    def calculate_discount(self, order):
        self.calls.append(order)
        return self.inner.calculate_discount(order)


class CountingRepository(InMemoryOrderRepository):
    def __init__(self, fail_with=None):
        super().__init__(fail_with=fail_with)
        self.calls = []

    def save(self, order):
        self.calls.append(order)
        super().save(order)


@pytest.fixture
def repository_factory():
    return CountingRepository


@pytest.fixture
def discount_service_factory():
    return CountingDiscountService


@pytest.fixture
def repository(repository_factory) -> CountingRepository:
    return repository_factory()


@pytest.fixture
def discount_service(discount_service_factory) -> CountingDiscountService:
    return discount_service_factory(FleetDiscountService())


@pytest.fixture
def processor(discount_service, repository) -> OrderProcessor:
    return OrderProcessor(
        validator=TruckOrderValidator(),
        discount_service=discount_service,
        repository=repository,
    )


@pytest.fixture
def fleet_order() -> TruckOrder:
    return TruckOrder(model_name="Model X", quantity=6, base_price=Decimal("100000"))
