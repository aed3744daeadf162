from typing import List, Optional

from pydantic import BaseModel, Field


class HeroContent(BaseModel):
    title: str
    subtitle: str
    description: str
    cta_text: str
    cta_link: str
    background_image: str


class ProductCard(BaseModel):
    id: Optional[int] = None
    name: str
    description: str
    price: float
    original_price: Optional[float] = None
    discount_percentage: Optional[int] = None
    image_url: str
    category: str
    is_new: bool = False
    stock_quantity: int


class TestimonialCard(BaseModel):
    customer_name: str
    customer_avatar: Optional[str] = None
    rating: int
    review_text: str


class StorefrontView(BaseModel):
    """What the landing page renders, with static content filled into empty sections."""

    hero: HeroContent
    products: List[ProductCard] = Field(default_factory=list)
    new_products: List[ProductCard] = Field(default_factory=list)
    categories: List[str] = Field(default_factory=list)
    testimonials: List[TestimonialCard] = Field(default_factory=list)
    degraded: bool = False
