from datetime import datetime
from flask_login import UserMixin
from .extensions import db, login_manager


class Participant(UserMixin, db.Model):
    __tablename__ = "participants"

    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False)
    name = db.Column(db.String(64), nullable=False)

    # passlib argon2 hash of the 4-digit PIN
    pin_hash = db.Column(db.String(255), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    gifts = db.relationship(
        "GiftEntry",
        back_populates="owner",
        cascade="all, delete-orphan",
    )

    def to_dict(self) -> dict:
        return {"id": self.id, "email": self.email, "name": self.name}


class GiftEntry(db.Model):
    """
    A participant's item for the White Elephant exchange.
    turn_order is null until the shuffle runs, then 1..N across all entries.
    """
    __tablename__ = "gift_entries"

    id = db.Column(db.Integer, primary_key=True)
    owner_id = db.Column(db.Integer, db.ForeignKey("participants.id", ondelete="CASCADE"), nullable=False)

    name = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)

    turn_order = db.Column(db.Integer, unique=True, nullable=True)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    owner = db.relationship("Participant", back_populates="gifts")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "name": self.name,
            "description": self.description,
            "turn_order": self.turn_order,
        }


@login_manager.user_loader
def load_user(user_id: str):
    return db.session.get(Participant, int(user_id))
