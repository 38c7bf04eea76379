from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from ..app_logger import get_logger
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container
from ..salary.model import SalaryStructureInputs

logger = get_logger(__name__)


def _json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def _int_arg(data: dict[str, Any], key: str) -> int:
    try:
        return int(data[key])
    except KeyError:
        raise ValidationError(f"{key} is required") from None
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{key} must be an integer") from None


def _holiday_dates(raw: Any) -> list:
    try:
        return [parse_iso_date(str(d)) for d in raw or ()]
    except ValueError as e:
        raise ValidationError(f"Invalid holiday date: {e}") from None


def register(app: Flask, container: Container) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.route("/api/payroll/salary-structure", methods=["POST"], endpoint="api_salary_structure")
    def api_salary_structure():
        data = _json_body()
        if data.get("applyDefaultRates"):
            # rates absent from the payload come from the configured defaults
            inputs = container.rate_policy.build_inputs(data.get("basicSalary", data.get("basic_salary")), data)
        else:
            inputs = SalaryStructureInputs.from_mapping(data)
        result = container.salary_calculator.calculate(inputs)
        return jsonify({"success": True, "data": result.to_dict()})

    @app.route("/api/payroll/working-days", methods=["POST"], endpoint="api_working_days")
    def api_working_days():
        data = _json_body()
        info = container.calendar_resolver.resolve(
            _int_arg(data, "year"),
            _int_arg(data, "month"),
            _holiday_dates(data.get("holidayDates")),
            data.get("weeklyOffPattern") or container.default_weekly_off.pattern,
            weekly_off_days=data.get("weeklyOffDays"),
        )
        return jsonify({"success": True, "data": info.to_dict()})

    @app.route("/api/payroll/prorate", methods=["POST"], endpoint="api_prorate")
    def api_prorate():
        data = _json_body()
        salary = data.get("salaryStructure")
        if not isinstance(salary, dict):
            raise ValidationError("salaryStructure is required")
        for key in ("workingDays", "presentDays"):
            if data.get(key) is None:
                raise ValidationError(f"{key} is required")
        structure = container.salary_calculator.calculate(SalaryStructureInputs.from_mapping(salary))
        prorated = container.proration_engine.prorate(structure, data["workingDays"], data["presentDays"])
        return jsonify({"success": True, "data": prorated.to_dict()})

    @app.route("/api/payroll/late-fine", methods=["POST"], endpoint="api_late_fine")
    def api_late_fine():
        data = _json_body()
        raw_records = data.get("records")
        if not isinstance(raw_records, list) or not all(isinstance(r, dict) for r in raw_records):
            raise ValidationError("records must be a list of objects")
        records = [AttendanceRecord.from_mapping(r) for r in raw_records]
        fine = container.fine_policy.compute_fine(
            records,
            daily_salary=data.get("dailySalary"),
            shift_hours=data.get("shiftHours"),
        )
        return jsonify({"success": True, "data": fine.to_dict()})

    @app.route("/api/payroll/staff/<int:staff_id>/estimate", methods=["GET"], endpoint="api_staff_estimate")
    def api_staff_estimate(staff_id: int):
        args = request.args.to_dict()
        present_days = args.get("presentDays")
        estimate = container.payroll_service.monthly_estimate(
            staff_id,
            _int_arg(args, "year"),
            _int_arg(args, "month"),
            present_days=present_days if present_days not in (None, "") else None,
        )
        return jsonify({"success": True, "data": estimate.to_dict()})
