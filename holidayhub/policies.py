from __future__ import annotations

from flask import jsonify
from flask_login import current_user
from flask.views import MethodView


def unauthorized():
    return jsonify({"error": "Unauthorized"}), 401


class LoginRequiredMixin(MethodView):
    def dispatch_request(self, *args, **kwargs):
        if not current_user.is_authenticated:
            return unauthorized()
        return super().dispatch_request(*args, **kwargs)
