import logging
from sqlalchemy import event
from sqlalchemy.engine import Engine
from ablehub.extensions import db
import ablehub.models  # noqa: F401  tabloların metadata'ya kaydı için

logger = logging.getLogger(__name__)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite varsayılan olarak FK'leri (ve ON DELETE CASCADE'i) uygulamaz
    module = type(dbapi_connection).__module__
    if module.startswith("sqlite3") or module.startswith("pysqlite"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(app):
    with app.app_context():
        db.create_all()
        logger.info("Database tables ready (%s)", db.engine.url.get_backend_name())
