from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..container import Container
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    ledger = container.ledger

    @app.route("/manage/codes", methods=["GET", "POST"], endpoint="manage_codes")
    def manage_codes():
        if request.method == "POST":
            try:
                ledger.add_code(request.form.get("code", ""), request.form.get("value", ""))
                flash("Absence code added.", "success")
                return redirect(url_for("manage_codes"))
            except ValidationError as e:
                logger.info("Add code rejected: %s", e)
                flash(str(e), "warning")

        return render_template("manage_codes.html", codes=ledger.codes(), active_page="manage_codes")

    @app.route("/manage/codes/<int:index>/delete", methods=["POST"], endpoint="delete_code")
    def delete_code(index: int):
        removed = ledger.remove_code(index)
        if removed:
            flash(f"Absence code {removed.code} deleted.", "success")
        return redirect(url_for("manage_codes"))
