from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional

from truck_store.models import TruckOrder

logger = logging.getLogger(__name__)


class OrderValidator(ABC):
    @abstractmethod
    def validate(self, order: Optional[TruckOrder]) -> bool: ...


class TruckOrderValidator(OrderValidator):
    """
    Проверка заказа перед расчётом.

    Невалидный заказ — обычный исход, поэтому validate() возвращает False, а не бросает исключение.
    Какое именно правило не прошло — пишем в лог.
    """

    def first_violation(self, order: Optional[TruckOrder]) -> Optional[str]:
        if order is None:
            return "Order cannot be empty"
        if not isinstance(order.model_name, str) or not order.model_name.strip():
            return "Truck model name is required"
        # bool — подкласс int, но это не количество
        if not isinstance(order.quantity, int) or isinstance(order.quantity, bool):
            return "Quantity must be a whole number of trucks"
        if order.quantity <= 0:
            return "Quantity must be at least 1 truck"
        if not isinstance(order.base_price, Decimal):
            return "Base price must be a Decimal amount"
        # NaN нельзя сравнивать через <=, Infinity ломает итог
        if not order.base_price.is_finite():
            return "Base price must be a finite amount"
        if order.base_price <= 0:
            return "Base price must be greater than zero"
        return None

    def validate(self, order: Optional[TruckOrder]) -> bool:
        violation = self.first_violation(order)
        if violation is not None:
            logger.warning(f"[validation] {violation}")
            return False
        logger.debug(f"[model={order.model_name}] order for {order.quantity} trucks verified")
        return True
