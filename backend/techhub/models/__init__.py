from .base import Base
from .product import Product
from .category import Category
from .testimonial import Testimonial
from .newsletter_subscription import NewsletterSubscription
from .hero_banner import HeroBanner

__all__ = [
    "Base",
    "Product",
    "Category",
    "Testimonial",
    "NewsletterSubscription",
    "HeroBanner"
]
