from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app.core.config import get_settings

DATABASE_URL = get_settings().DATABASE_URL

# SQLite needs this flag to be shared across the threadpool FastAPI runs sync endpoints in
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def get_db():
    """Dependency to get database session"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db():
    """Create all database tables"""
    from app import models  # noqa: F401  registers the model tables
    Base.metadata.create_all(bind=engine)

if __name__ == "__main__":
    init_db()
    print("All tables created successfully.")
