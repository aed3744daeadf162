from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from techhub.core.config import settings
from techhub.models.base import Base
import techhub.models


def make_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints and the landing fan-out on worker threads
        connect_args["check_same_thread"] = False
    return create_engine(url, connect_args=connect_args)


def make_session_factory(bind) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=bind)


engine = make_engine(settings.DATABASE_URL)
SessionLocal = make_session_factory(engine)


def get_base_metadata():
    return Base.metadata


def init_db(bind=None):
    Base.metadata.create_all(bind=bind or engine)
