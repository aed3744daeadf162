from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    # Naive UTC with microseconds; SQLite's CURRENT_TIMESTAMP only has second precision
    return datetime.now(timezone.utc).replace(tzinfo=None)
