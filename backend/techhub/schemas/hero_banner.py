from pydantic import BaseModel
from datetime import datetime

from .validators import FLAG_DEFAULTS, FlagDefaultsModel, UrlStr

class HeroBannerBase(BaseModel):
    title: str
    subtitle: str
    description: str
    cta_text: str
    cta_link: str

class HeroBannerCreate(HeroBannerBase, FlagDefaultsModel):
    background_image: UrlStr
    is_active: bool = FLAG_DEFAULTS["is_active"]

class HeroBanner(HeroBannerBase):
    id: int
    background_image: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
