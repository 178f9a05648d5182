from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from src.config.config import get_database_url, get_bool_env
from src.utils.constants import APP_ID

# Hosted Postgres poolers cap connections per project; keep the pool small.
engine = create_engine(
    get_database_url(),
    pool_size=5,
    max_overflow=5,
    pool_recycle=1800,
    pool_pre_ping=True,
    pool_timeout=30,
    echo=get_bool_env("SQL_ECHO"),
    connect_args={'connect_timeout': 10, 'application_name': APP_ID},
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
