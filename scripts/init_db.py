from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module
from turnos_system.database.bootstrap import apply_schema, list_tables
from turnos_system.database.connection import DBConfig, DatabaseConnection
from turnos_system.main import SCHEMA_PATH, configure_logging

logger = logging.getLogger("init_db")


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(dict(settings.DB_CONFIG)))
    apply_schema(conn, schema_path=SCHEMA_PATH)
    tables = list_tables(conn)
    cfg = conn.config
    logger.info("Applied schema.sql -> %s@%s:%s/%s (tables=%d)", cfg.user, cfg.host, cfg.port, cfg.database, len(tables))


if __name__ == "__main__":
    main()
