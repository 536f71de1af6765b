"""
SQLAlchemy engine and session. Supports PostgreSQL and SQLite (for local use without Docker).
Sync usage; the request handlers get a Session through get_db().
"""
import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from app.config import settings

logger = logging.getLogger(__name__)

_is_sqlite = "sqlite" in settings.database_url
_connect_args = {"check_same_thread": False} if _is_sqlite else {}
engine = create_engine(
    settings.database_url,
    pool_pre_ping=not _is_sqlite,
    connect_args=_connect_args,
    echo=False,  # Set True for SQL logging during development
)

# Largest id an INTEGER primary key can hold on every supported backend
MAX_DB_INT = 2**31 - 1

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


# Seeded once when the topics table is empty: (name, description, icon, color_class)
DEFAULT_TOPICS = [
    ("Your Class", "Teachers & classmates", "fa-graduation-cap", "accent1"),
    ("Childhood", "Memories & experiences", "fa-child", "secondary"),
    ("Travel", "Adventures & destinations", "fa-plane", "secondary"),
    ("Food", "Cuisine & cooking", "fa-utensils", "accent1"),
    ("Friendship", "Relationships & bonds", "fa-users", "accent2"),
    ("Technology", "Digital life & future", "fa-laptop", "primary"),
    ("Hobbies", "Interests & activities", "fa-palette", "secondary"),
    ("Movies", "Films & entertainment", "fa-film", "accent1"),
    ("Dreams", "Aspirations & goals", "fa-star", "accent2"),
]


def seed_topics(db: Session) -> int:
    """Insert DEFAULT_TOPICS when the topics table is empty. Returns number of rows added."""
    from app.models.topic import Topic
    if db.query(Topic).count() > 0:
        return 0
    for name, description, icon, color_class in DEFAULT_TOPICS:
        db.add(Topic(name=name, description=description, icon=icon, color_class=color_class))
    db.commit()
    logger.info("Seeded %s default topics", len(DEFAULT_TOPICS))
    return len(DEFAULT_TOPICS)


def init_db(bind=None):
    """Create tables and seed topics. Call once at app startup."""
    # Import all models so they register with Base before create_all
    from app.models import topic, prompt, user, game_record  # noqa: F401
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    db = Session(bind=bind)
    try:
        seed_topics(db)
    finally:
        db.close()


def get_db():
    """Dependency: yield a DB session, close after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
