# server/mindvault/utils/responses.py

from typing import Optional

from flask import jsonify


class ApiResponse:
    """JSON envelope shared by every endpoint.

    Payload keys are placed at the top level next to ``success`` and
    ``message`` so clients read ``token``, ``contents`` or ``folders``
    directly off the body.
    """

    @staticmethod
    def success(data: Optional[dict] = None, message: Optional[str] = None, status: int = 200):
        body = {"success": True}
        if message:
            body["message"] = message
        if data:
            body.update(data)
        return jsonify(body), status

    @staticmethod
    def error(message: str, status: int = 400, code: Optional[str] = None):
        return jsonify({
            "success": False,
            "error": code or _default_codes.get(status, "ERROR"),
            "message": message,
        }), status


_default_codes = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    500: "INTERNAL_ERROR",
}
