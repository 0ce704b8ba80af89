"""Create empty employee/code JSON documents if they do not exist yet."""

from __future__ import annotations

import importlib
from pathlib import Path

from config import get_settings_module

from absence_tracker.storage.json_base import write_json_array


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    for key in ("employees_file", "codes_file"):
        path = Path(settings.DATA_CONFIG[key])
        if path.exists():
            print(f"SKIP: {path} already exists")
            continue
        write_json_array(path, [])
        print(f"OK: Created {path}")


if __name__ == "__main__":
    main()
