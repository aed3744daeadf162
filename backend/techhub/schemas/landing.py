from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .category import Category
from .hero_banner import HeroBanner
from .product import Product
from .testimonial import Testimonial


class LandingPageData(BaseModel):
    hero_banner: Optional[HeroBanner] = Field(None, alias="heroBanner")
    featured_products: List[Product] = Field(default_factory=list, alias="featuredProducts")
    new_products: List[Product] = Field(default_factory=list, alias="newProducts")
    categories: List[Category] = Field(default_factory=list)
    testimonials: List[Testimonial] = Field(default_factory=list)

    class Config:
        populate_by_name = True

    @classmethod
    def empty(cls) -> "LandingPageData":
        return cls()


class HealthCheck(BaseModel):
    status: str = "ok"
    timestamp: datetime
