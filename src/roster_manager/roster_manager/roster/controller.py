from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import EXPORT_FILENAME, EXPORT_MIMETYPE
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.roster_service

    def _payload() -> dict:
        """Accept both JSON bodies and classic form posts."""
        data = request.get_json(silent=True)
        if isinstance(data, dict):
            return data
        return request.form.to_dict()

    def _field(name: str) -> str:
        # JSON null and a missing key both read as blank.
        value = _payload().get(name)
        return "" if value is None else str(value)

    def _ok(message: str, status_code: int = 200, **extra):
        body = {"success": True, "message": message}
        body.update(extra)
        return jsonify(body), status_code

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except Exception:
                logger.exception("Unhandled error in %s", request.path)
                return jsonify({"success": False, "message": "Internal error while updating the roster"}), 500

        return wrapper

    @app.route("/api/roster", methods=["GET"], endpoint="roster_list")
    @json_errors
    def roster_list():
        query = request.args.get("q", "")
        students = service.list_students(query)
        return jsonify(
            {
                "success": True,
                "query": query,
                "students": [s.to_dict() for s in students],
                "counts": service.counts().to_dict(),
            }
        )

    @app.route("/api/roster/students", methods=["POST"], endpoint="roster_add")
    @json_errors
    def roster_add():
        record = service.add_student(_field("name"))
        return _ok("Student added", 201, student=record.to_dict())

    @app.route("/api/roster/students/<int:student_id>", methods=["DELETE"], endpoint="roster_remove")
    @json_errors
    def roster_remove(student_id: int):
        service.remove_student(student_id)
        return _ok("Student removed")

    @app.route("/api/roster/students/<int:student_id>/mark", methods=["POST"], endpoint="roster_mark")
    @json_errors
    def roster_mark(student_id: int):
        service.mark_student(student_id, _field("status"))
        return _ok("Status updated")

    @app.route("/api/roster/students/<int:student_id>/toggle", methods=["POST"], endpoint="roster_toggle")
    @json_errors
    def roster_toggle(student_id: int):
        service.toggle_student(student_id)
        return _ok("Status toggled")

    @app.route("/api/roster/mark-all", methods=["POST"], endpoint="roster_mark_all")
    @json_errors
    def roster_mark_all():
        service.mark_all(_field("status"))
        return _ok("All statuses updated")

    @app.route("/api/roster/reset", methods=["POST"], endpoint="roster_reset")
    @json_errors
    def roster_reset():
        service.reset()
        return _ok("All statuses reset")

    @app.route("/api/roster/export", methods=["GET"], endpoint="roster_export")
    @json_errors
    def roster_export():
        return app.response_class(
            service.export_csv().encode("utf-8"),
            mimetype=EXPORT_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={EXPORT_FILENAME}"},
        )

    @app.route("/api/roster/import", methods=["POST"], endpoint="roster_import")
    @json_errors
    def roster_import():
        imported = service.import_csv(_field("text"))
        if not imported:
            return _ok("No rows could be parsed; roster unchanged", imported=0)
        return _ok(f"Imported {imported} student(s)", imported=imported)
