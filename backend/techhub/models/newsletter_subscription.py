from sqlalchemy import Boolean, Column, Integer, String, TIMESTAMP
from techhub.models.base import Base, utcnow

class NewsletterSubscription(Base):
    __tablename__ = "newsletter_subscriptions"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False)
    subscribed_at = Column(TIMESTAMP(timezone=False), nullable=False, default=utcnow)
    is_active = Column(Boolean, nullable=False, default=True)
