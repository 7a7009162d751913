from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from slugline.core.config import settings
from slugline.slugs.listeners import enable_auto_slugs

# SQLite connections are shared across FastAPI's worker threads
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    pool_pre_ping=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Slugs are assigned and validated on every flush of an application session
enable_auto_slugs(SessionLocal)

Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
