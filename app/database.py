from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
import os
from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./task_analytics.db")


def build_connect_args(url: str) -> dict:
    """Driver options for the configured database URL"""
    if url.startswith("sqlite"):
        # FastAPI runs sync handlers in a threadpool
        return {"check_same_thread": False}

    # If you're using PostgreSQL on Render or similar, set DB_SSLMODE=require
    sslmode = os.getenv("DB_SSLMODE")
    if sslmode and url.startswith("postgres"):
        return {"sslmode": sslmode}
    return {}


engine = create_engine(
    DATABASE_URL,
    connect_args=build_connect_args(DATABASE_URL)
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# ✅ This is required to be imported wherever DB session is needed
def get_db():
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
