# techhub/schemas/__init__.py

from .validators import FLAG_DEFAULTS
from .product import Product, ProductCreate
from .category import Category, CategoryCreate
from .testimonial import Testimonial, TestimonialCreate
from .newsletter import NewsletterSubscription, NewsletterSubscriptionCreate
from .hero_banner import HeroBanner, HeroBannerCreate
from .landing import LandingPageData, HealthCheck
from .storefront import StorefrontView, HeroContent, ProductCard, TestimonialCard

__all__ = [
    "FLAG_DEFAULTS",
    "Product", "ProductCreate",
    "Category", "CategoryCreate",
    "Testimonial", "TestimonialCreate",
    "NewsletterSubscription", "NewsletterSubscriptionCreate",
    "HeroBanner", "HeroBannerCreate",
    "LandingPageData", "HealthCheck",
    "StorefrontView", "HeroContent", "ProductCard", "TestimonialCard"
]
