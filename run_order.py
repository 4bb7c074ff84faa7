from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from truck_store.errors import PersistenceError
from truck_store.models import TruckOrder
from truck_store.processor import OrderProcessor
from truck_store.services import DISCOUNT_SERVICES, make_discount_service
from truck_store.store import InMemoryOrderRepository
from truck_store.validators import TruckOrderValidator

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_PERSISTENCE_FAILED = 2


def _decimal(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a decimal: {value!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Run one truck order through validation, discount and save.")
    p.add_argument("--model", type=str, default="Volvo FH 540")
    p.add_argument("--qty", type=int, default=10)
    p.add_argument("--price", type=_decimal, default=Decimal("1000000"))
    p.add_argument("--discount", choices=sorted(DISCOUNT_SERVICES), default="fleet")
    p.add_argument("--fail-save", type=str, default=None, help="Сообщение для искусственного падения при сохранении")
    p.add_argument("--log-level", type=str.upper, choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="INFO")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # максимально простые логи без "шумных" префиксов
    logging.basicConfig(level=args.log_level, format="%(message)s")

    repository = InMemoryOrderRepository(fail_with=args.fail_save)
    processor = OrderProcessor(
        validator=TruckOrderValidator(),
        discount_service=make_discount_service(args.discount),
        repository=repository,
    )
    order = TruckOrder(model_name=args.model, quantity=args.qty, base_price=args.price)

    print("\n=== RESULT ===")
    try:
        result = processor.process(order)
    except PersistenceError as e:
        print("state: failed")
        print("error:", e)
        return EXIT_PERSISTENCE_FAILED

    print("state:", result.state.value)
    if not result.ok:
        return EXIT_REJECTED
    print("discount:", result.discount)
    print("total:", order.total_amount)
    print("saved:", len(repository.orders))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
