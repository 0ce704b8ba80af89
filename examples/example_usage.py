"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the absence rules live in the ledger and report services.
"""

import importlib

from config import get_settings_module

from absence_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_config=settings.DATA_CONFIG)
    report = container.report_service.build_month_report(month=3, year=2024)
    for row in report.grid:
        print(row.name, [c.text for c in row.cells if c.text])


if __name__ == "__main__":
    main()
