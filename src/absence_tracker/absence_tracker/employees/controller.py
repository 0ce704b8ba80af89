from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    ledger = container.ledger

    @app.route("/manage/employees", methods=["GET", "POST"], endpoint="manage_employees")
    def manage_employees():
        if request.method == "POST":
            name = request.form.get("name", "")
            active = request.form.get("active") is not None
            try:
                employee = ledger.add_employee(name, active=active)
                flash(f"Added employee {employee.name} (id {employee.employee_id}).", "success")
                return redirect(url_for("manage_employees"))
            except ValidationError as e:
                logger.info("Add employee rejected: %s", e)
                flash(str(e), "warning")

        return render_template(
            "manage_employees.html",
            employees=ledger.employees(),
            active_page="manage_employees",
        )

    @app.route("/manage/employees/<int:employee_id>/active", methods=["POST"], endpoint="set_employee_active")
    def set_employee_active(employee_id: int):
        active = request.form.get("active") == "Active"
        if not ledger.set_active(employee_id, active):
            flash("Employee not found", "warning")
        return redirect(url_for("manage_employees"))
