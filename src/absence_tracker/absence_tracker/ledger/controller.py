from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import now_local, try_parse_iso_date
from ..common.validators import optional_int, optional_text
from ..container import Container
from ..core.constants import MONTH_NAMES
from ..core.exceptions import LoadError, SaveError, ValidationError
from ..employees.model import AbsenceEntry
from ..reports.service import cell_comments, cell_text

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    ledger = container.ledger

    def _entry_json(a: AbsenceEntry) -> dict:
        return {
            "date": a.date,
            "code": a.code,
            "minutes": a.minutes,
            "comment": a.comment or "",
        }

    @app.route("/", methods=["GET"], endpoint="month_view")
    def month_view():
        today = now_local()
        month = request.args.get("month") or today.month
        year = request.args.get("year") or today.year

        try:
            report = container.report_service.build_month_report(month=month, year=year)
        except ValidationError as e:
            flash(str(e), "warning")
            report = container.report_service.build_month_report(month=today.month, year=today.year)

        return render_template(
            "month.html",
            report=report,
            month_names=MONTH_NAMES,
            active_page="month",
        )

    @app.route("/api/cell", methods=["GET"], endpoint="api_cell_get")
    def api_cell_get():
        employee_id = request.args.get("employee_id", type=int)
        day = request.args.get("date", "")
        if employee_id is None or not try_parse_iso_date(day):
            return jsonify({"success": False, "message": "employee_id and date (YYYY-MM-DD) are required"}), 400

        employee = ledger.find_employee(employee_id)
        if not employee:
            return jsonify({"success": False, "message": "Employee not found"}), 404

        return jsonify(
            {
                "success": True,
                "employee": {"employeeId": employee.employee_id, "name": employee.name},
                "date": day,
                "entries": [_entry_json(a) for a in ledger.edit_entries_for(employee_id, day)],
                "codes": [{"code": c.code, "value": c.value} for c in ledger.codes()],
            }
        )

    @app.route("/api/cell", methods=["POST"], endpoint="api_cell_save")
    def api_cell_save():
        data = request.get_json(silent=True) or {}
        employee_id = optional_int(data.get("employee_id"))
        day = str(data.get("date") or "")
        if employee_id is None or not try_parse_iso_date(day):
            return jsonify({"success": False, "message": "employee_id and date (YYYY-MM-DD) are required"}), 400

        entries = [
            AbsenceEntry(
                date=day,
                code=str(raw.get("code") or ""),
                minutes=optional_int(raw.get("minutes")),
                comment=optional_text(raw.get("comment")),
            )
            for raw in data.get("entries") or []
            if isinstance(raw, dict)
        ]

        if not ledger.reconcile_date(employee_id, day, entries):
            return jsonify({"success": False, "message": "Employee not found"}), 404

        saved = ledger.entries_for_employee_on_date(employee_id, day)
        return jsonify(
            {
                "success": True,
                "entries": [_entry_json(a) for a in saved],
                "text": cell_text(saved),
                "comments": cell_comments(saved),
            }
        )

    @app.route("/save", methods=["POST"], endpoint="save")
    def save():
        try:
            container.persistence.save(ledger)
            flash("Absence data saved.", "success")
        except SaveError as e:
            logger.error("Save failed: %s", e)
            flash(f"Failed to save data: {e}", "danger")
        except Exception:
            logger.exception("Unexpected error while saving")
            flash("System error while saving data", "danger")

        return redirect(
            url_for(
                "month_view",
                month=request.form.get("month") or None,
                year=request.form.get("year") or None,
            )
        )

    def _raw_document(read):
        try:
            return app.response_class(read(), mimetype="application/json")
        except LoadError as e:
            logger.error("Raw document read failed: %s", e)
            return jsonify({"success": False, "message": str(e)}), 500

    @app.route("/api/data/employees", methods=["GET"], endpoint="api_data_employees")
    def api_data_employees():
        return _raw_document(container.persistence.raw_employees)

    @app.route("/api/data/codes", methods=["GET"], endpoint="api_data_codes")
    def api_data_codes():
        return _raw_document(container.persistence.raw_codes)
