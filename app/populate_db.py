from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from app.config import settings
from app.data.word_repo import WordRepo
from app.db.database import init_db
from app.service.word_import_service import WordImportService


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load a words.json file into the dictionary database.")
    parser.add_argument("path", nargs="?", type=Path, default=settings.WORDS_JSON_PATH)
    parser.add_argument("--replace", action="store_true", help="delete existing words first")
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    if not args.path.exists():
        logging.error("%s not found.", args.path)
        return 1

    init_db()
    count = WordImportService(WordRepo()).import_file(args.path, replace=args.replace)
    print(f"Database population complete: {count} words.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
