from __future__ import annotations

import logging

from flask import Flask, jsonify, render_template, request

from ..container import Container
from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.route("/", endpoint="dashboard")
    def dashboard():
        try:
            snapshot = container.snapshot_service.get_snapshot()
        except Exception:
            logger.exception("Failed to load dashboard")
            return "Could not load housekeeping data", 500
        return render_template("index.html", snapshot=snapshot.to_dict())

    @app.route("/api/snapshot", methods=["GET"], endpoint="api_snapshot")
    def api_snapshot():
        try:
            snapshot = container.snapshot_service.get_snapshot()
            return jsonify({"success": True, "data": snapshot.to_dict()})
        except Exception:
            logger.exception("Failed to load snapshot")
            return _error("Could not load housekeeping data", 500)

    @app.route("/api/rooms/update", methods=["POST"], endpoint="api_update_room")
    def api_update_room():
        try:
            snapshot = container.housekeeping_service.update_room(request.get_json(silent=True))
            return jsonify({"success": True, "data": snapshot.to_dict()})
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except Exception:
            logger.exception("Failed to update room")
            return _error("Could not update room", 500)

    @app.route("/api/areas/update", methods=["POST"], endpoint="api_update_area")
    def api_update_area():
        try:
            snapshot = container.housekeeping_service.update_area(request.get_json(silent=True))
            return jsonify({"success": True, "data": snapshot.to_dict()})
        except ValidationError as e:
            return _error(str(e), 400)
        except NotFoundError as e:
            return _error(str(e), 404)
        except Exception:
            logger.exception("Failed to update area")
            return _error("Could not update area", 500)

    @app.route("/api/reset", methods=["POST"], endpoint="api_reset")
    def api_reset():
        try:
            container.reset_service.run_daily_reset()
            snapshot = container.snapshot_service.get_snapshot()
            return jsonify({"success": True, "data": snapshot.to_dict()})
        except Exception:
            logger.exception("Manual daily reset failed")
            return _error("Daily reset failed", 500)

    @app.route("/api/maintenance/repair-area-times", methods=["POST"], endpoint="api_repair_area_times")
    def api_repair_area_times():
        try:
            repaired = container.maintenance_service.repair_area_time_columns()
            return jsonify({"success": True, "repaired": repaired})
        except NotFoundError as e:
            return _error(str(e), 404)
        except Exception:
            logger.exception("Area time column repair failed")
            return _error("Repair failed", 500)
