from .product_service import product_service
from .category_service import category_service
from .testimonial_service import testimonial_service
from .newsletter_service import newsletter_service
from .hero_banner_service import hero_banner_service
from .landing_service import landing_service
from .storefront_service import storefront_service

__all__ = [
    "product_service",
    "category_service",
    "testimonial_service",
    "newsletter_service",
    "hero_banner_service",
    "landing_service",
    "storefront_service"
]
