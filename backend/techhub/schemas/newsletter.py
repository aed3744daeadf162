from pydantic import BaseModel, EmailStr
from datetime import datetime

class NewsletterSubscriptionCreate(BaseModel):
    email: EmailStr

class NewsletterSubscription(BaseModel):
    id: int
    email: str
    subscribed_at: datetime
    is_active: bool

    class Config:
        from_attributes = True
