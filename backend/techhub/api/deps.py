from sqlalchemy.orm import Session, sessionmaker

from techhub.database.database import SessionLocal

def get_session_factory() -> sessionmaker:
    return SessionLocal

def get_db():
    with SessionLocal() as db:
        yield db
