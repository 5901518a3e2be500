from __future__ import annotations

from decimal import InvalidOperation

from flask import Flask, jsonify, request

from ..core.exceptions import FormulaError, RetrievalError, ValidationError
from ..container import Container
from .model import EmployeePeriodSummary


def register(app: Flask, container: Container) -> None:
    @app.route("/api/billing/summaries", methods=["POST"], endpoint="billing_summaries")
    def billing_summaries():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        try:
            batch = container.billing_service.compute_summary_batch(
                payload.get("start_date"),
                payload.get("end_date"),
            )
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except FormulaError as e:
            return jsonify({"error": str(e), "project_id": e.project_id}), 422
        except RetrievalError as e:
            return jsonify({"error": str(e), "employee_id": e.employee_id}), 502

        return jsonify(
            {
                "summaries": [s.to_dict() for s in batch.summaries],
                "failures": [f.to_dict() for f in batch.failures],
            }
        )

    @app.route("/api/billing/finalize", methods=["POST"], endpoint="billing_finalize")
    def billing_finalize():
        payload = request.get_json(silent=True) or {}
        if not isinstance(payload, dict):
            return jsonify({"error": "Request body must be a JSON object"}), 400
        try:
            raw = payload.get("summaries") or []
            if not isinstance(raw, list):
                raise ValidationError("summaries must be a list")
            summaries = [EmployeePeriodSummary.from_dict(s) for s in raw]
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except (AttributeError, KeyError, TypeError, ValueError, InvalidOperation):
            return jsonify({"error": "Malformed summary payload"}), 400

        try:
            result = container.billing_service.finalize(summaries)
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400

        return jsonify(result.to_dict()), (200 if result.is_complete else 207)
