from sqlalchemy import Boolean, Column, DECIMAL, Integer, Text, TIMESTAMP
from techhub.models.base import Base, utcnow

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    price = Column(DECIMAL(10, 2), nullable=False)
    original_price = Column(DECIMAL(10, 2), nullable=True)
    image_url = Column(Text, nullable=False)
    category = Column(Text, nullable=False, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    is_new = Column(Boolean, nullable=False, default=False)
    stock_quantity = Column(Integer, nullable=False)
    created_at = Column(TIMESTAMP(timezone=False), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=False), nullable=False, default=utcnow)
