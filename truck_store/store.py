from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import List, Optional

from truck_store.errors import PersistenceError
from truck_store.models import TruckOrder

logger = logging.getLogger(__name__)


class OrderRepository(ABC):
    @abstractmethod
    def save(self, order: TruckOrder) -> None:
        """Сохранить готовый заказ. Ошибка сохранения — PersistenceError, молча не глотаем."""


class InMemoryOrderRepository(OrderRepository):
    """
    Хранилище в памяти вместо настоящей БД.

    Держит копии сохранённых заказов: дальнейшие изменения у вызывающего их не трогают.
    fail_with — искусственное падение на save (для демо и тестов).
    """

    def __init__(self, fail_with: Optional[str] = None) -> None:
        self.orders: List[TruckOrder] = []
        self.fail_with = fail_with

    def save(self, order: TruckOrder) -> None:
        if self.fail_with is not None:
            raise PersistenceError(f"Artificial failure on save: {self.fail_with}")
        self.orders.append(replace(order))
        logger.info(f"[model={order.model_name}] saved order qty={order.quantity} total={order.total_amount}")
