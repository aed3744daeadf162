from sqlalchemy import Boolean, Column, Integer, Text, TIMESTAMP
from techhub.models.base import Base, utcnow

class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, index=True)
    customer_name = Column(Text, nullable=False)
    customer_avatar = Column(Text, nullable=True)
    rating = Column(Integer, nullable=False)
    review_text = Column(Text, nullable=False)
    # Loose reference, intentionally not a foreign key
    product_id = Column(Integer, nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP(timezone=False), nullable=False, default=utcnow)
