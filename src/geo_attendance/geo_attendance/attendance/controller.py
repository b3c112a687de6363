from __future__ import annotations

import logging
import threading
from functools import wraps

from flask import Flask, jsonify, request, session

from ..core.enums import AttendanceStatus, RejectionKind
from ..core.exceptions import GeofenceViolation, PunchRejected, ValidationError
from ..container import Container
from ..position.sources import ReportedPositionSource
from .service import rejection_message
from .state_machine import AttendanceStateMachine

logger = logging.getLogger(__name__)

SESSION_STATUS_KEY = "attendance_status"

REJECTION_HTTP_STATUS = {
    RejectionKind.UNSUPPORTED: 501,
    RejectionKind.PERMISSION_DENIED: 403,
    RejectionKind.TIMEOUT: 504,
    RejectionKind.POSITION_UNAVAILABLE: 503,
    RejectionKind.GEOFENCE_VIOLATION: 403,
}


def register(app: Flask, container: Container) -> None:
    in_flight: set[str] = set()
    # Last accepted status per user in this process; wins over a replayed cookie.
    last_status: dict[str, AttendanceStatus] = {}
    lock = threading.Lock()

    def _current_user_id() -> str:
        return str(session.get("user_id") or "").strip()

    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if not _current_user_id():
                return jsonify({"success": False, "message": "Please log in to continue"}), 401
            return view(*args, **kwargs)

        return wrapper

    def _load_machine(user_id: str) -> AttendanceStateMachine:
        with lock:
            known = last_status.get(user_id)
        if known is not None:
            return AttendanceStateMachine(known)

        raw = session.get(SESSION_STATUS_KEY, AttendanceStatus.CHECKED_OUT.value)
        try:
            return AttendanceStateMachine(AttendanceStatus(raw))
        except ValueError:
            logger.warning("Discarding unknown session status %r", raw)
            return AttendanceStateMachine()

    @app.route("/api/attendance/status", methods=["GET"], endpoint="attendance_status")
    @login_required
    def attendance_status():
        machine = _load_machine(_current_user_id())
        return jsonify({
            "success": True,
            **container.punch_service.status_ui(machine),
            "geolocation": container.punch_service.acquisition_ui(),
        })

    @app.route("/api/attendance/punch", methods=["POST"], endpoint="attendance_punch")
    @login_required
    def attendance_punch():
        """Punch IN/OUT using the position reported by the browser."""
        user_id = _current_user_id()

        with lock:
            if user_id in in_flight:
                return jsonify({"success": False, "message": "A punch is already in progress"}), 409
            in_flight.add(user_id)

        try:
            try:
                source = ReportedPositionSource.from_payload(request.get_json(silent=True))
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400

            machine = _load_machine(user_id)
            try:
                outcome = container.punch_service.punch(user_id, machine, source=source)
            except PunchRejected as e:
                body = {"success": False, "error": e.kind.value, "message": rejection_message(e)}
                if isinstance(e, GeofenceViolation):
                    body["distance_meters"] = e.distance_meters
                return jsonify(body), REJECTION_HTTP_STATUS[e.kind]
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400

            with lock:
                last_status[user_id] = outcome.status
            session[SESSION_STATUS_KEY] = outcome.status.value
            return jsonify({"success": True, **container.punch_service.outcome_ui(outcome)})
        finally:
            with lock:
                in_flight.discard(user_id)
