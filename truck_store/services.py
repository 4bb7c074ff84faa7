from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, Optional, Type

from truck_store.errors import MissingOrderError
from truck_store.models import TruckOrder


class DiscountService(ABC):
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def calculate_discount(self, order: TruckOrder) -> Decimal: ...

    def _require(self, order: Optional[TruckOrder]) -> TruckOrder:
        if order is None:
            raise MissingOrderError(f"{self.name()}: order is required, validate it before discounting")
        return order


class FleetDiscountService(DiscountService):
    """Скидка за парк: больше min_quantity машин — rate от суммы. Ровно min_quantity — без скидки."""

    def __init__(self, min_quantity: int = 5, rate: Decimal = Decimal("0.10")):
        self.min_quantity = min_quantity
        self.rate = rate

    def name(self) -> str:
        return "fleet"

    def calculate_discount(self, order: TruckOrder) -> Decimal:
        order = self._require(order)
        if order.quantity > self.min_quantity:
            return order.subtotal * self.rate
        return Decimal("0")


class HolidayDiscountService(DiscountService):
    # сезонная скидка, не зависит от количества
    def __init__(self, rate: Decimal = Decimal("0.05")):
        self.rate = rate

    def name(self) -> str:
        return "holiday"

    def calculate_discount(self, order: TruckOrder) -> Decimal:
        order = self._require(order)
        return order.subtotal * self.rate


DISCOUNT_SERVICES: Dict[str, Type[DiscountService]] = {
    "fleet": FleetDiscountService,
    "holiday": HolidayDiscountService,
}


def make_discount_service(name: str) -> DiscountService:
    cls = DISCOUNT_SERVICES.get(name)
    if cls is None:
        raise ValueError(f"Unknown discount service {name!r}, expected one of {sorted(DISCOUNT_SERVICES)}")
    return cls()
