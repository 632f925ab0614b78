import pytest

from holidayhub.extensions import db
from holidayhub.models import GiftEntry
from holidayhub.services.gifts import (
    GiftError,
    GiftNotFound,
    delete_gift,
    submit_gift,
    turn_order_listing,
    update_gift,
    withdraw_gift,
)
from holidayhub.services.turn_order import assign_turn_order


def test_submit_creates_entry_without_turn_order(make_participant):
    owner = make_participant()
    gift = submit_gift(owner.id, "  Board game ", "")
    assert gift.name == "Board game"
    assert gift.description is None
    assert gift.turn_order is None


def test_resubmit_updates_existing_entry(make_participant):
    owner = make_participant()
    first = submit_gift(owner.id, "Scarf")
    second = submit_gift(owner.id, "Gloves", "wool")
    assert first.id == second.id
    assert GiftEntry.query.count() == 1
    assert second.description == "wool"


def test_submit_requires_name(make_participant):
    owner = make_participant()
    with pytest.raises(GiftError):
        submit_gift(owner.id, "   ")


def test_update_checks_owner(make_participant):
    owner = make_participant()
    stranger = make_participant()
    gift = submit_gift(owner.id, "Tea")

    with pytest.raises(GiftNotFound):
        update_gift(gift.id, stranger.id, "Coffee")

    assert update_gift(gift.id, owner.id, "Coffee").name == "Coffee"


def test_delete_checks_owner(make_participant):
    owner = make_participant()
    stranger = make_participant()
    gift = submit_gift(owner.id, "Tea")

    with pytest.raises(GiftNotFound):
        delete_gift(gift.id, stranger.id)

    delete_gift(gift.id, owner.id)
    assert GiftEntry.query.count() == 0


def test_withdraw_removes_only_own_entries(make_participant):
    owner = make_participant()
    other = make_participant()
    submit_gift(owner.id, "Tea")
    submit_gift(other.id, "Book")

    assert withdraw_gift(owner.id) == 1
    assert withdraw_gift(owner.id) == 0
    assert [g.name for g in GiftEntry.query.all()] == ["Book"]


def test_deleting_participant_removes_gifts(make_participant):
    owner = make_participant()
    submit_gift(owner.id, "Tea")
    db.session.delete(owner)
    db.session.commit()
    assert GiftEntry.query.count() == 0


def test_listing_sorted_by_turn_order(make_gifts, make_participant):
    make_gifts("A", "B", "C")
    assign_turn_order(iter([0.9, 0.1]).__next__)
    late = submit_gift(make_participant().id, "Late")

    listing = turn_order_listing()
    assert [g.turn_order for g in listing] == [1, 2, 3, None]
    assert listing[-1].id == late.id
