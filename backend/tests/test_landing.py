import pytest
from sqlalchemy.exc import OperationalError

from techhub import schemas
from techhub.services import landing_service, storefront_service
from techhub.services.storefront_service import discount_percentage, FALLBACK_PRODUCTS, DEFAULT_HERO

from factories import add_category, add_hero_banner, add_product, add_testimonial


def test_empty_store_gives_empty_landing_page(session_factory):
    data = landing_service.get_landing_page_data(session_factory)

    assert data.hero_banner is None
    assert data.featured_products == []
    assert data.new_products == []
    assert data.categories == []
    assert data.testimonials == []
    assert data.model_dump(by_alias=True) == {
        "heroBanner": None,
        "featuredProducts": [],
        "newProducts": [],
        "categories": [],
        "testimonials": [],
    }


def test_landing_page_sections_are_capped(db, session_factory):
    for i in range(10):
        add_product(db, minutes=i, name=f"featured-{i}", is_featured=True)
    for i in range(6):
        add_product(db, minutes=i, name=f"new-{i}", is_new=True)
    for i in range(9):
        add_testimonial(db, minutes=i, customer_name=f"customer-{i}")

    data = landing_service.get_landing_page_data(session_factory)

    assert len(data.featured_products) == 8
    assert len(data.new_products) == 4
    assert len(data.testimonials) == 6
    assert data.featured_products[0].name == "featured-9"
    assert data.new_products[0].name == "new-5"


def test_landing_page_contents(db, session_factory):
    add_category(db, "Wearables")
    add_category(db, "Audio")
    banner = add_hero_banner(db)
    add_hero_banner(db, minutes=30, is_active=False)
    add_product(db, name="Laptop", is_featured=True, price=999.99, original_price=1199.99)
    add_product(db, name="Phone", is_new=True)
    add_testimonial(db, minutes=1, customer_name="older-five", rating=5)
    add_testimonial(db, minutes=2, customer_name="newer-three", rating=3)

    data = landing_service.get_landing_page_data(session_factory)

    assert data.hero_banner.id == banner.id
    assert [p.name for p in data.featured_products] == ["Laptop"]
    assert data.featured_products[0].price == 999.99
    assert isinstance(data.featured_products[0].original_price, float)
    assert [p.name for p in data.new_products] == ["Phone"]
    assert [c.name for c in data.categories] == ["Audio", "Wearables"]
    # newest first here, not best rated
    assert [t.customer_name for t in data.testimonials] == ["newer-three", "older-five"]


def test_landing_page_fails_as_a_whole(broken_session_factory):
    with pytest.raises(OperationalError):
        landing_service.get_landing_page_data(broken_session_factory)


def test_load_landing_page_falls_back_to_empty(broken_session_factory):
    data = storefront_service.load_landing_page(broken_session_factory)
    assert data == schemas.LandingPageData.empty()


def test_storefront_uses_sample_content_when_store_is_down(broken_session_factory):
    view = storefront_service.get_storefront(broken_session_factory)

    assert view.degraded is True
    assert view.hero == DEFAULT_HERO
    assert [p.name for p in view.products] == [p["name"] for p in FALLBACK_PRODUCTS]
    assert len(view.testimonials) == 4
    assert view.new_products == []
    assert view.categories == []


def test_storefront_prefers_real_content(db, session_factory):
    add_hero_banner(db, title="Spring Launch")
    for i in range(6):
        add_product(db, minutes=i, name=f"p{i}", is_featured=True, price=80, original_price=100)
    add_testimonial(db, customer_name="Real Customer", rating=4)
    add_category(db, "Audio")

    view = storefront_service.get_storefront(session_factory)

    assert view.degraded is False
    assert view.hero.title == "Spring Launch"
    assert [p.name for p in view.products] == ["p5", "p4", "p3", "p2"]
    assert view.products[0].discount_percentage == 20
    assert [t.customer_name for t in view.testimonials] == ["Real Customer"]
    assert view.categories == ["Audio"]


def test_storefront_on_empty_store_is_not_degraded(session_factory):
    view = storefront_service.get_storefront(session_factory)
    assert view.degraded is False
    assert view.hero == DEFAULT_HERO
    assert len(view.products) == len(FALLBACK_PRODUCTS)


@pytest.mark.parametrize("price,original,expected", [
    (1199.99, 1299.99, 8),
    (399.99, 449.99, 11),
    (1999.99, None, None),
    (100.0, 100.0, None),
    (120.0, 100.0, None),
])
def test_discount_percentage(price, original, expected):
    assert discount_percentage(price, original) == expected
