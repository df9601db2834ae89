import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import settings

logging.basicConfig(
    filename=settings.LOG_FILE,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    level=settings.LOG_LEVEL.upper(),
)
if settings.SQL_ECHO:
    logging.getLogger('sqlalchemy.engine').setLevel(logging.DEBUG)
    logging.getLogger('sqlalchemy.pool').setLevel(logging.DEBUG)

DATABASE_URL = settings.database_url


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # in-memory databases live as long as their single connection
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


def _install_sqlite_listeners(engine):
    """Make SQLite behave like the row-locking backends for the seat checks.

    SQLite ignores ``FOR UPDATE`` and pysqlite only opens a transaction at the
    first write, so a seat count could be read with no lock held. Driver-level
    transaction handling is switched off and every transaction starts with
    ``BEGIN IMMEDIATE``, which takes the database write lock before the first
    read; concurrent writers wait on the busy timeout instead.
    """

    @event.listens_for(engine, "connect")
    def _configure_connection(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_db_engine(url: str, echo: bool = False):
    engine = create_engine(url, echo=echo, **_engine_kwargs(url))
    if engine.dialect.name == "sqlite":
        _install_sqlite_listeners(engine)
    return engine


engine = create_db_engine(DATABASE_URL, echo=settings.SQL_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
