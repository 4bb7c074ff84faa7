from __future__ import annotations


class OrderProcessingError(Exception):
    pass


class MissingOrderError(OrderProcessingError):
    """Шаг, которому нужен заказ, получил None. Это ошибка вызывающего кода, а не данных."""


class PersistenceError(OrderProcessingError):
    pass
