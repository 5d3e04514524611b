from pydantic_settings import BaseSettings
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv
load_dotenv()


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./malasngoding.db"
    JWT_SECRET_KEY: str = "change-me-in-production"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 30
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    SEED_ON_STARTUP: bool = True
    JOURNAL_STORAGE_PATH: str = "~/.ngeluh-dulu/storage.json"


settings = Settings()


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across the threadpool FastAPI runs sync work in.
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


engine = create_engine(settings.DATABASE_URL, connect_args=_connect_args(settings.DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def create_db():
    # Import so every table is registered on Base.metadata before create_all.
    import malasngoding.models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
