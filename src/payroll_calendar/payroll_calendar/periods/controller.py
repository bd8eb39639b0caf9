from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.validators import parse_bool, parse_int, require_year
from ..core.enums import PeriodStatus, Role
from ..core.exceptions import (
    AuthorizationError,
    CalendarExhaustedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from ..container import Container
from .model import GenerationRequest

logger = logging.getLogger(__name__)


def _current_role() -> Role:
    return Role(session.get("role"))


def _parse_status(value) -> PeriodStatus:
    try:
        return PeriodStatus(str(value).strip().lower())
    except ValueError:
        allowed = ", ".join(s.value for s in PeriodStatus)
        raise ValidationError(f"status must be one of: {allowed}")


def register(app: Flask, container: Container) -> None:
    def admin_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "login required"}), 401

            if session.get("role") != Role.ADMIN.value:
                return jsonify({"error": "forbidden"}), 403

            return view(*args, **kwargs)

        return wrapper

    def json_errors(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"error": str(e)}), 400
            except AuthorizationError as e:
                return jsonify({"error": str(e)}), 403
            except NotFoundError as e:
                return jsonify({"error": str(e)}), 404
            except CalendarExhaustedError as e:
                return jsonify({"error": str(e)}), 422
            except PersistenceError:
                logger.error("Store failure in %s", request.path, exc_info=True)
                return jsonify({"error": "save failed"}), 500

        return wrapper

    def _json_body() -> dict:
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("request body must be a JSON object")
        return body

    @app.route("/api/payroll/calendar/preview", methods=["POST"], endpoint="payroll_calendar_preview")
    @admin_required
    @json_errors
    def calendar_preview():
        req = GenerationRequest.from_payload(_json_body())
        periods = container.calendar_service.preview(current_role=_current_role(), request=req)
        return jsonify({"periods": [p.to_dict() for p in periods]}), 200

    @app.route("/api/payroll/calendar/save", methods=["POST"], endpoint="payroll_calendar_save")
    @admin_required
    @json_errors
    def calendar_save():
        body = _json_body()
        req = GenerationRequest.from_payload(body)
        confirm = parse_bool(body.get("confirmReplace"), "confirmReplace")

        outcome = container.calendar_service.save(current_role=_current_role(), request=req, confirm_replace=confirm)
        if outcome.requires_confirmation:
            return jsonify(
                {
                    "requiresConfirmation": True,
                    "conflicts": [c.to_dict() for c in outcome.conflicts],
                }
            ), 409

        return jsonify(
            {
                "insertedCount": outcome.inserted_count,
                "replacedCount": outcome.replaced_count,
                "scheduleId": outcome.schedule_id,
            }
        ), 201

    @app.route("/api/payroll/pay-groups/<int:pay_group_id>/next-cycle", methods=["GET"], endpoint="payroll_next_cycle")
    @admin_required
    @json_errors
    def next_cycle(pay_group_id: int):
        year = require_year(request.args.get("year"))
        result = container.calendar_service.next_cycle(current_role=_current_role(), pay_group_id=pay_group_id, year=year)
        return jsonify(result.to_dict()), 200

    @app.route("/api/payroll/pay-groups/<int:pay_group_id>/periods", methods=["GET"], endpoint="payroll_periods")
    @admin_required
    @json_errors
    def list_periods(pay_group_id: int):
        year = require_year(request.args.get("year"))
        status_s = request.args.get("status")
        status = _parse_status(status_s) if status_s else None

        periods = container.calendar_service.list_periods(
            current_role=_current_role(), pay_group_id=pay_group_id, year=year, status=status
        )
        return jsonify({"periods": [p.to_dict() for p in periods]}), 200

    @app.route("/api/payroll/periods/<int:pay_period_id>/status", methods=["POST"], endpoint="payroll_period_status")
    @admin_required
    @json_errors
    def update_period_status(pay_period_id: int):
        status = _parse_status(_json_body().get("status"))
        container.calendar_service.update_period_status(
            current_role=_current_role(), pay_period_id=pay_period_id, status=status
        )
        return jsonify({"id": pay_period_id, "status": status.value}), 200

    @app.route("/api/payroll/schedules", methods=["GET"], endpoint="payroll_schedules")
    @admin_required
    @json_errors
    def list_schedules():
        company_id = parse_int(request.args.get("companyId"), "companyId")
        schedules = container.schedule_service.list_for_company(current_role=_current_role(), company_id=company_id)
        return jsonify(
            {
                "schedules": [
                    {
                        "id": s.schedule_id,
                        "company_id": s.company_id,
                        "pay_group_id": s.pay_group_id,
                        "code": s.code,
                        "name": s.name,
                        "frequency": s.frequency,
                        "cutoff_days_before_pay": s.cutoff_days_before_pay,
                        "is_active": s.is_active,
                    }
                    for s in schedules
                ]
            }
        ), 200

    @app.route("/api/payroll/schedules/<int:schedule_id>/active", methods=["POST"], endpoint="payroll_schedule_active")
    @admin_required
    @json_errors
    def set_schedule_active(schedule_id: int):
        is_active = parse_bool(_json_body().get("isActive"), "isActive")
        container.schedule_service.set_active(current_role=_current_role(), schedule_id=schedule_id, is_active=is_active)
        return jsonify({"id": schedule_id, "isActive": is_active}), 200
