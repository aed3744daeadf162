from sqlalchemy import Column, Integer, String, Text, TIMESTAMP
from techhub.models.base import Base, utcnow

class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    slug = Column(String(100), unique=True, nullable=False)
    image_url = Column(Text, nullable=True)
    created_at = Column(TIMESTAMP(timezone=False), nullable=False, default=utcnow)
