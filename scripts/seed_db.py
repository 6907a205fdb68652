from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from hr_portal.config import get_settings_module
from hr_portal.database.bootstrap import apply_schema, apply_seed_sql


def main() -> None:
    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    # Seeding wipes both tables, so make sure they exist first.
    apply_schema(db_config)
    apply_seed_sql(db_config)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
