from __future__ import annotations

import logging
import math
import random
from typing import Callable, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..extensions import db
from ..models import GiftEntry


logger = logging.getLogger(__name__)

RandomSource = Callable[[], float]


class TurnOrderError(RuntimeError):
    pass


class TurnOrderPersistenceError(TurnOrderError):
    pass


def shuffle_numbers(count: int, rand: Optional[RandomSource] = None) -> list[int]:
    """
    Returns 1..count in a uniformly random order (Fisher-Yates).

    ``rand`` must return floats in [0, 1); it is called once per swap,
    for i = count-1 down to 1.
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    rand = rand or random.random

    numbers = list(range(1, count + 1))
    for i in range(count - 1, 0, -1):
        r = rand()
        if not 0.0 <= r < 1.0:
            raise ValueError(f"random source returned {r!r}, expected a value in [0, 1)")
        j = math.floor(r * (i + 1))
        numbers[i], numbers[j] = numbers[j], numbers[i]
    return numbers


def assign_turn_order(rand: Optional[RandomSource] = None) -> int:
    """
    Draws a fresh turn order for every gift entry and commits it.

    Entries are paired positionally (by id) with the shuffled numbers.
    Returns the number of entries updated; 0 when there is nothing to assign.
    """
    count = 0
    try:
        gifts = GiftEntry.query.order_by(GiftEntry.id.asc()).all()
        count = len(gifts)
        if not gifts:
            logger.info("No gift entries to assign")
            return 0

        numbers = shuffle_numbers(count, rand)

        # turn_order is unique: clear the previous draw before writing the new one
        for gift in gifts:
            gift.turn_order = None
        db.session.flush()

        for gift, number in zip(gifts, numbers):
            gift.turn_order = number
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception("Failed to persist turn order for %d gift entries", count)
        raise TurnOrderPersistenceError("Turn order was not saved.") from e

    logger.info("Assigned turn order to %d gift entries", count)
    return count
