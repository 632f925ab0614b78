import pytest

from holidayhub import create_app
from holidayhub.extensions import db
from holidayhub.models import GiftEntry, Participant


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_participant(app):
    counter = {"n": 0}

    def _make(name=None):
        counter["n"] += 1
        n = counter["n"]
        p = Participant(email=f"person{n}@example.com", name=name or f"Person {n}", pin_hash="unused")
        db.session.add(p)
        db.session.commit()
        return p

    return _make


@pytest.fixture
def make_gifts(make_participant):
    """Creates one gift per name, each owned by a different participant."""
    def _make(*names):
        gifts = []
        for name in names:
            owner = make_participant()
            gift = GiftEntry(owner_id=owner.id, name=name)
            db.session.add(gift)
            gifts.append(gift)
        db.session.commit()
        return gifts

    return _make


@pytest.fixture
def logged_in(client):
    resp = client.post("/auth/login", json={"email": "host@example.com", "pin": "1234", "name": "Host"})
    assert resp.status_code == 200
    return client
