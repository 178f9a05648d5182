import secrets
from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from src.config.config import get_env
from src.config.database import SessionLocal


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_service(service_class):
    def _get_service(db: Session = Depends(get_db)):
        return service_class(db)
    return _get_service


def verify_cron_secret(authorization: Optional[str] = Header(default=None)) -> None:
    """Gate for scheduler-only endpoints: `Authorization: Bearer <CRON_SECRET>`."""
    secret = get_env("CRON_SECRET", required=True)
    if not authorization or not secrets.compare_digest(authorization.encode(), f"Bearer {secret}".encode()):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
