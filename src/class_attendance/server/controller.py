from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container, *, route: str) -> None:
    @app.route(route, methods=["GET"], endpoint="get_document")
    def get_document():
        return jsonify(container.document_server.get_document().to_dict())

    @app.route(route, methods=["POST"], endpoint="save_document")
    def save_document():
        payload = request.get_json(silent=True)
        try:
            ack = container.document_server.save_document(payload)
        except ValidationError as e:
            return jsonify({"ok": False, "message": str(e)}), 400
        return jsonify({"ok": ack.ok, "updatedAt": ack.updated_at})
