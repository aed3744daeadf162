from datetime import datetime, timedelta
from decimal import Decimal

from techhub import models

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def add_product(db, minutes=0, **overrides):
    fields = dict(
        name="Galaxy S24",
        description="Flagship phone",
        price=Decimal("799.99"),
        original_price=None,
        image_url="https://img.techhub.shop/s24.jpg",
        category="Smartphones",
        is_featured=False,
        is_new=False,
        stock_quantity=10,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        updated_at=BASE_TIME + timedelta(minutes=minutes),
    )
    fields.update(overrides)
    product = models.Product(**fields)
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


def add_testimonial(db, minutes=0, **overrides):
    fields = dict(
        customer_name="Jane Doe",
        customer_avatar=None,
        rating=5,
        review_text="Fast shipping, great prices.",
        product_id=None,
        is_featured=True,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
    fields.update(overrides)
    testimonial = models.Testimonial(**fields)
    db.add(testimonial)
    db.commit()
    db.refresh(testimonial)
    return testimonial


def add_category(db, name, slug=None, minutes=0):
    category = models.Category(
        name=name,
        slug=slug or name.lower().replace(" ", "-"),
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def add_hero_banner(db, minutes=0, **overrides):
    fields = dict(
        title="Summer Sale",
        subtitle="Best Deals",
        description="Up to 30% off headphones",
        cta_text="Shop Now",
        cta_link="/shop",
        background_image="https://img.techhub.shop/banner.jpg",
        is_active=True,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        updated_at=BASE_TIME + timedelta(minutes=minutes),
    )
    fields.update(overrides)
    banner = models.HeroBanner(**fields)
    db.add(banner)
    db.commit()
    db.refresh(banner)
    return banner
