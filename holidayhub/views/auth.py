from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request
from flask.views import MethodView
from flask_login import login_user, logout_user, current_user

from ..extensions import db
from ..models import Participant
from ..security import hash_pin, is_valid_pin, verify_pin


logger = logging.getLogger(__name__)

auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def _text(value) -> str:
    return value.strip() if isinstance(value, str) else ""


class LoginView(MethodView):
    """
    Email + PIN. A known email logs in; an unknown one registers,
    which additionally needs a name.
    """
    def post(self):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            body = {}
        # emails are case-insensitive: stored and matched lowercased
        email = _text(body.get("email")).lower()
        pin = str(body.get("pin") or "").strip()
        name = _text(body.get("name"))

        if not email or not pin:
            return jsonify({"error": "Email and PIN are required"}), 400

        if not is_valid_pin(pin):
            return jsonify({"error": "PIN must be exactly 4 digits"}), 400

        user = Participant.query.filter_by(email=email).first()
        if user:
            if not verify_pin(pin, user.pin_hash):
                logger.info("Rejected PIN for %s", email)
                return jsonify({"error": "Invalid PIN"}), 401
        else:
            if not name:
                return jsonify({"error": "Name is required for registration"}), 400

            user = Participant(email=email, name=name, pin_hash=hash_pin(pin))
            db.session.add(user)
            db.session.commit()
            logger.info("Registered participant %s", user.id)

        login_user(user, remember=True)
        return jsonify({"success": True, "user": user.to_dict()})


class LogoutView(MethodView):
    def post(self):
        if current_user.is_authenticated:
            logout_user()
        return jsonify({"success": True})


auth_bp.add_url_rule("/login", view_func=LoginView.as_view("login"), methods=["POST"])
auth_bp.add_url_rule("/logout", view_func=LogoutView.as_view("logout"), methods=["POST"])
