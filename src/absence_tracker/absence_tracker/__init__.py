"""Absence Tracker package.

This package is organized by feature modules (employees, codes, ledger, reports,
exports) with a thin Flask controller layer on top of plain service/repository
layers. The desktop shell in :mod:`absence_tracker.desktop` embeds the Flask app
in a native window.
"""
