from pydantic import BaseModel
from typing import Optional
from datetime import datetime

from .validators import UrlStr

class CategoryBase(BaseModel):
    name: str
    description: Optional[str] = None
    slug: str

class CategoryCreate(CategoryBase):
    image_url: Optional[UrlStr] = None

class Category(CategoryBase):
    id: int
    image_url: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
