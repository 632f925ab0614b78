from __future__ import annotations

import logging

from flask import Blueprint, jsonify
from flask_login import current_user

from ..policies import LoginRequiredMixin
from ..services.turn_order import assign_turn_order, TurnOrderError


logger = logging.getLogger(__name__)

gifts_bp = Blueprint("gifts", __name__, url_prefix="/gifts")


class ShuffleTurnOrderView(LoginRequiredMixin):
    def post(self):
        try:
            count = assign_turn_order()
        except TurnOrderError:
            return jsonify({"error": "Failed to assign turn order"}), 500

        if count == 0:
            return jsonify({"success": True, "count": 0, "message": "No gifts to shuffle"})

        logger.info("Turn order shuffled by participant %s", current_user.id)
        return jsonify({"success": True, "count": count})


gifts_bp.add_url_rule("/shuffle", view_func=ShuffleTurnOrderView.as_view("shuffle"), methods=["POST"])
