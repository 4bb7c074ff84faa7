from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple


@dataclass(slots=True)
class TruckOrder:
    """
    Заказ на грузовики: модель, количество, цена за единицу.

    total_amount заполняет OrderProcessor после успешной валидации и расчёта скидки.
    """

    model_name: str
    quantity: int
    base_price: Decimal
    total_amount: Decimal = Decimal("0")

    @property
    def subtotal(self) -> Decimal:
        return self.base_price * self.quantity


class OrderState(Enum):
    RECEIVED = "received"
    VALIDATING = "validating"
    REJECTED = "rejected"
    VALIDATED = "validated"
    DISCOUNTING = "discounting"
    TOTALING = "totaling"
    PERSISTING = "persisting"
    COMPLETED = "completed"


@dataclass(slots=True)
class ProcessResult:
    order: Optional[TruckOrder]
    state: OrderState
    discount: Optional[Decimal] = None
    history: Tuple[OrderState, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.state is OrderState.COMPLETED
