from typing import List, Optional, Tuple

from sqlalchemy.orm import sessionmaker

from techhub import schemas
from techhub.core.logger import setup_logger
from techhub.services.landing_service import landing_service

logger = setup_logger("services.storefront")

DISPLAYED_PRODUCTS = 4

DEFAULT_HERO = schemas.HeroContent(
    title="Cutting-Edge Electronics for Every Need",
    subtitle="Latest Tech, Unbeatable Prices",
    description="Discover the newest smartphones, laptops, headphones, and smart home devices. Free shipping on orders over $50!",
    cta_text="Shop Now",
    cta_link="#featured-products",
    background_image="https://images.unsplash.com/photo-1441986300917-64674bd600d8?auto=format&fit=crop&w=2070&q=80",
)

FALLBACK_PRODUCTS = [
    dict(
        name="iPhone 15 Pro Max",
        description="The most advanced iPhone ever with titanium design and Action Button.",
        price=1199.99,
        original_price=1299.99,
        image_url="https://images.unsplash.com/photo-1592750475338-74b7b21085ab?auto=format&fit=crop&w=400&q=80",
        category="Smartphones",
        is_new=True,
        stock_quantity=15,
    ),
    dict(
        name="MacBook Pro M3",
        description="Supercharged for pros with the M3 chip for incredible performance.",
        price=1999.99,
        original_price=None,
        image_url="https://images.unsplash.com/photo-1517336714731-489689fd1ca8?auto=format&fit=crop&w=400&q=80",
        category="Laptops",
        is_new=False,
        stock_quantity=8,
    ),
    dict(
        name="Sony WH-1000XM5",
        description="Industry-leading noise canceling with premium sound quality.",
        price=399.99,
        original_price=449.99,
        image_url="https://images.unsplash.com/photo-1484704849700-f032a568e944?auto=format&fit=crop&w=400&q=80",
        category="Headphones",
        is_new=False,
        stock_quantity=25,
    ),
    dict(
        name='Samsung 85" Neo QLED 8K',
        description="Experience stunning 8K resolution with Quantum Matrix Technology.",
        price=2499.99,
        original_price=2999.99,
        image_url="https://images.unsplash.com/photo-1593359677879-a4bb92f829d1?auto=format&fit=crop&w=400&q=80",
        category="TVs",
        is_new=True,
        stock_quantity=5,
    ),
]

FALLBACK_TESTIMONIALS = [
    schemas.TestimonialCard(
        customer_name="Sarah Johnson",
        customer_avatar="https://images.unsplash.com/photo-1494790108755-2616b9dc1c04?auto=format&fit=crop&w=150&q=80",
        rating=5,
        review_text="Amazing experience! Got my iPhone 15 Pro with lightning-fast delivery. The customer service was exceptional, and the price beat every other store I checked.",
    ),
    schemas.TestimonialCard(
        customer_name="Michael Chen",
        customer_avatar="https://images.unsplash.com/photo-1472099645785-5658abf4ff4e?auto=format&fit=crop&w=150&q=80",
        rating=5,
        review_text="Purchased a MacBook Pro M3 and couldn't be happier. The setup service was fantastic, and they even helped transfer all my data.",
    ),
    schemas.TestimonialCard(
        customer_name="Emily Rodriguez",
        customer_avatar="https://images.unsplash.com/photo-1438761681033-6461ffad8d80?auto=format&fit=crop&w=150&q=80",
        rating=5,
        review_text="The best electronics store I've ever shopped at! Great prices, authentic products, and their warranty service is top-notch.",
    ),
    schemas.TestimonialCard(
        customer_name="David Thompson",
        customer_avatar="https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?auto=format&fit=crop&w=150&q=80",
        rating=5,
        review_text="Incredible selection of products and unbeatable customer support. When my headphones had an issue, they replaced them immediately.",
    ),
]


def discount_percentage(price: float, original_price: Optional[float]) -> Optional[int]:
    """Whole-percent markdown from original_price, or None when there is no discount."""
    if not original_price or original_price <= price:
        return None
    return int(round((original_price - price) / original_price * 100))


def _product_card(product) -> schemas.ProductCard:
    if isinstance(product, dict):
        fields = product
    else:
        fields = product.model_dump()
    return schemas.ProductCard(
        **{key: value for key, value in fields.items() if key in schemas.ProductCard.model_fields},
        discount_percentage=discount_percentage(fields["price"], fields.get("original_price")),
    )


class StorefrontService:
    def load_landing_page(self, session_factory: sessionmaker) -> schemas.LandingPageData:
        """
        The aggregate landing page read, or the all-empty structure if it fails.
        Never raises.
        """
        return self._load(session_factory)[0]

    def _load(self, session_factory: sessionmaker) -> Tuple[schemas.LandingPageData, bool]:
        try:
            return landing_service.get_landing_page_data(session_factory), False
        except Exception as e:
            logger.error(f"Landing page data unavailable, serving empty page: {str(e)}", exc_info=True)
            return schemas.LandingPageData.empty(), True

    def build_storefront(self, data: schemas.LandingPageData, degraded: bool = False) -> schemas.StorefrontView:
        if data.hero_banner is not None:
            hero = schemas.HeroContent(**data.hero_banner.model_dump(include=set(schemas.HeroContent.model_fields)))
        else:
            hero = DEFAULT_HERO

        if data.featured_products:
            products: List = data.featured_products[:DISPLAYED_PRODUCTS]
        else:
            products = FALLBACK_PRODUCTS

        if data.testimonials:
            testimonials = [
                schemas.TestimonialCard(**t.model_dump(include=set(schemas.TestimonialCard.model_fields)))
                for t in data.testimonials
            ]
        else:
            testimonials = list(FALLBACK_TESTIMONIALS)

        return schemas.StorefrontView(
            hero=hero,
            products=[_product_card(p) for p in products],
            new_products=[_product_card(p) for p in data.new_products],
            categories=[c.name for c in data.categories],
            testimonials=testimonials,
            degraded=degraded,
        )

    def get_storefront(self, session_factory: sessionmaker) -> schemas.StorefrontView:
        data, degraded = self._load(session_factory)
        return self.build_storefront(data, degraded=degraded)

storefront_service = StorefrontService()
