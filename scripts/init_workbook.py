from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import load_settings

from housekeeping_tracker.store.seed import demo_tables
from housekeeping_tracker.store.workbook_store import create_workbook


def main() -> None:
    settings = load_settings()
    default_path = dict(settings.STORE_CONFIG).get("workbook_path", "data/housekeeping.xlsx")

    parser = argparse.ArgumentParser(description="Create a workbook seeded with demo rooms, areas and staff.")
    parser.add_argument("--path", default=default_path)
    parser.add_argument("--force", action="store_true", help="overwrite an existing workbook")
    args = parser.parse_args()

    path = Path(args.path)
    if path.exists() and not args.force:
        print(f"SKIP: {path} already exists (use --force to overwrite)")
        return

    create_workbook(path, demo_tables())
    print(f"OK: Created workbook -> {path}")


if __name__ == "__main__":
    main()
