from __future__ import annotations

import logging
from typing import List, Optional

from truck_store.errors import PersistenceError
from truck_store.models import OrderState, ProcessResult, TruckOrder
from truck_store.services import DiscountService
from truck_store.store import OrderRepository
from truck_store.validators import OrderValidator

logger = logging.getLogger(__name__)


class OrderProcessor:
    """
    Проводит один заказ по шагам: валидация -> скидка -> итог -> сохранение.

    Шаги строго по порядку, без повторов. Единственная развилка — валидация:
    невалидный заказ отклоняется, и дальше ничего не вызывается.
    """

    def __init__(self, validator: OrderValidator, discount_service: DiscountService, repository: OrderRepository):
        self.validator = validator
        self.discount_service = discount_service
        self.repository = repository

    def process(self, order: Optional[TruckOrder]) -> ProcessResult:
        history: List[OrderState] = []
        label = order.model_name if order is not None else None

        def enter(state: OrderState) -> None:
            history.append(state)
            logger.debug(f"[model={label}] {state.name}")

        enter(OrderState.RECEIVED)
        enter(OrderState.VALIDATING)
        if not self.validator.validate(order):
            enter(OrderState.REJECTED)
            logger.info(f"[model={label}] order validation failed")
            return ProcessResult(order=order, state=OrderState.REJECTED, history=tuple(history))

        enter(OrderState.VALIDATED)
        enter(OrderState.DISCOUNTING)
        discount = self.discount_service.calculate_discount(order)

        enter(OrderState.TOTALING)
        order.total_amount = order.subtotal - discount

        enter(OrderState.PERSISTING)
        try:
            self.repository.save(order)
        except PersistenceError as e:
            logger.error(f"[model={label}] persistence failed: {e}")
            raise
        except Exception as e:
            logger.error(f"[model={label}] persistence failed: {e}")
            raise PersistenceError(f"Failed to save order for {label}: {e}") from e

        enter(OrderState.COMPLETED)
        logger.info(
            f"[model={label}] order processed: discount={discount} ({self.discount_service.name()}) total={order.total_amount}"
        )
        return ProcessResult(order=order, state=OrderState.COMPLETED, discount=discount, history=tuple(history))
