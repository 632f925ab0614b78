from __future__ import annotations

import logging

from ..extensions import db
from ..models import GiftEntry


logger = logging.getLogger(__name__)


class GiftError(RuntimeError):
    pass


class GiftNotFound(GiftError):
    pass


def _clean(name: str | None, description: str | None) -> tuple[str, str | None]:
    name = (name or "").strip()
    if not name:
        raise GiftError("Gift name is required.")
    description = (description or "").strip() or None
    return name, description


def submit_gift(owner_id: int, name: str, description: str | None = None) -> GiftEntry:
    """
    Each participant brings one gift: a second submission replaces the
    name/description of the first. turn_order is left as drawn.
    """
    name, description = _clean(name, description)

    gift = GiftEntry.query.filter_by(owner_id=owner_id).first()
    if gift:
        gift.name = name
        gift.description = description
    else:
        gift = GiftEntry(owner_id=owner_id, name=name, description=description)
        db.session.add(gift)

    db.session.commit()
    logger.info("Gift %s saved for participant %s", gift.id, owner_id)
    return gift


def _owned(gift_id: int, owner_id: int) -> GiftEntry:
    gift = GiftEntry.query.filter_by(id=gift_id, owner_id=owner_id).first()
    if not gift:
        raise GiftNotFound("Gift not found or unauthorized.")
    return gift


def update_gift(gift_id: int, owner_id: int, name: str, description: str | None = None) -> GiftEntry:
    name, description = _clean(name, description)
    gift = _owned(gift_id, owner_id)
    gift.name = name
    gift.description = description
    db.session.commit()
    return gift


def delete_gift(gift_id: int, owner_id: int) -> None:
    gift = _owned(gift_id, owner_id)
    db.session.delete(gift)
    db.session.commit()
    logger.info("Gift %s deleted by participant %s", gift_id, owner_id)


def withdraw_gift(owner_id: int) -> int:
    """Opt out of the exchange. Returns how many entries were removed."""
    removed = GiftEntry.query.filter_by(owner_id=owner_id).delete(synchronize_session=False)
    db.session.commit()
    if removed:
        logger.info("Participant %s withdrew %d gift(s)", owner_id, removed)
    return removed


def turn_order_listing() -> list[GiftEntry]:
    """Entries in turn order; entries without a number come last."""
    gifts = GiftEntry.query.order_by(GiftEntry.id.asc()).all()
    return sorted(gifts, key=lambda g: (g.turn_order is None, g.turn_order or 0))
