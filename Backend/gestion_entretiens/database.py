import importlib
import logging
import traceback
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session, declarative_base
from sqlalchemy.pool import StaticPool

from gestion_entretiens import config

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


# ---------------------------------------------------------------------------
# SQLAlchemy Configuration for ORM Models
# ---------------------------------------------------------------------------
def build_engine(url: str):
    """Create the engine; SQLite (tests, local dev) shares one connection."""
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        url,
        echo=False,
        pool_size=config.DB_POOL_SIZE,
        max_overflow=0,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_recycle=config.DB_POOL_RECYCLE,
        pool_pre_ping=True,
    )


engine = build_engine(config.database_url())

Base = declarative_base()
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def ping_db() -> bool:
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.warning("Database ping failed", exc_info=True)
        return False


# keep these in sync with files inside gestion_entretiens/models
MODEL_MODULES = [
    "manager_model",
    "employee_model",
    "verification_code_model",
    "template_model",
    "entretien_model",
    "note_model",
    "objectif_template_model",
    "objectif_assigne_model",
]


def import_models():
    """Import all SQLAlchemy models so Base.metadata knows the schema."""
    for mod in MODEL_MODULES:
        importlib.import_module(f"gestion_entretiens.models.{mod}")
        logger.debug(f"Imported model module: gestion_entretiens.models.{mod}")


# ---------------------------------------------------------------------------
# init_db: create ORM tables and seed sample data
# ---------------------------------------------------------------------------
def init_db(seed: Optional[bool] = None):
    import_models()

    Base.metadata.create_all(bind=engine)
    logger.info("Base.metadata.create_all() executed.")

    if seed is None:
        seed = config.SEED_SAMPLE_DATA
    if not seed:
        return

    from gestion_entretiens.seed import create_sample_data

    db = SessionLocal()
    try:
        create_sample_data(db)
    except Exception:
        db.rollback()
        logger.error("Could not create sample data.")
        logger.error(traceback.format_exc())
    finally:
        db.close()
