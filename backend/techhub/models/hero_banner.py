from sqlalchemy import Boolean, Column, Integer, Text, TIMESTAMP
from techhub.models.base import Base, utcnow

class HeroBanner(Base):
    __tablename__ = "hero_banners"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    subtitle = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    cta_text = Column(Text, nullable=False)
    cta_link = Column(Text, nullable=False)
    background_image = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP(timezone=False), nullable=False, default=utcnow)
    updated_at = Column(TIMESTAMP(timezone=False), nullable=False, default=utcnow)
