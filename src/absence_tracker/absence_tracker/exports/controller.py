from __future__ import annotations

import io
import logging

from flask import Flask, flash, redirect, render_template, request, send_file, url_for

from ..container import Container
from ..core.constants import MONTH_NAMES
from ..core.exceptions import ValidationError
from .service import ExportFile

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    exports = container.export_service

    def _send(export: ExportFile):
        return send_file(
            io.BytesIO(export.content),
            mimetype=export.mimetype,
            as_attachment=True,
            download_name=export.filename,
        )

    def _fail(message: str, category: str = "warning"):
        flash(message, category)
        return redirect(url_for("export_form"))

    @app.route("/export", methods=["GET"], endpoint="export_form")
    def export_form():
        return render_template(
            "export.html",
            employees=container.ledger.employees(),
            month_names=MONTH_NAMES,
            years=container.ledger.absence_years(),
            active_page="export",
        )

    @app.route("/export/employee.csv", methods=["GET"], endpoint="export_employee_csv")
    def export_employee_csv():
        employee_id = request.args.get("employee_id", type=int)
        if employee_id is None:
            return _fail("Select an employee")

        history = request.args.get("history", "full")
        start = request.args.get("start") if history == "range" else None
        end = request.args.get("end") if history == "range" else None
        if history == "range" and (not start or not end):
            return _fail("Both start and end dates are required for a date range")

        try:
            return _send(exports.employee_history_csv(employee_id, start=start, end=end))
        except ValidationError as e:
            return _fail(str(e))
        except Exception:
            logger.exception("Employee export failed")
            return _fail("System error while exporting", "danger")

    @app.route("/export/month.csv", methods=["GET"], endpoint="export_month_csv")
    def export_month_csv():
        month = request.args.get("month", "")
        year = request.args.get("year", "")
        if not month or not year:
            return _fail("Select a month and a year")

        try:
            return _send(exports.month_csv(month=month, year=year))
        except ValidationError as e:
            return _fail(str(e))
        except Exception:
            logger.exception("Month export failed")
            return _fail("System error while exporting", "danger")

    @app.route("/export/tables.png", methods=["GET"], endpoint="export_tables_png")
    def export_tables_png():
        month = request.args.get("month", "")
        year = request.args.get("year", "")
        if not month or not year:
            return _fail("Select a month and a year")

        try:
            return _send(exports.tables_png(month=month, year=year))
        except ValidationError as e:
            return _fail(str(e))
        except Exception:
            logger.exception("Image export failed")
            return _fail("Failed to generate image. Please try again.", "danger")
