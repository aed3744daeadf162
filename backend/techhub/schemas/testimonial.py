from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from .validators import FLAG_DEFAULTS, FlagDefaultsModel, UrlStr

class TestimonialCreate(FlagDefaultsModel):
    customer_name: str
    customer_avatar: Optional[UrlStr] = None
    rating: int = Field(..., ge=1, le=5, strict=True)
    review_text: str
    product_id: Optional[int] = None
    is_featured: bool = FLAG_DEFAULTS["is_featured"]

class Testimonial(BaseModel):
    id: int
    customer_name: str
    customer_avatar: Optional[str] = None
    rating: int
    review_text: str
    product_id: Optional[int] = None
    is_featured: bool
    created_at: datetime

    class Config:
        from_attributes = True
