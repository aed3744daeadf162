from factories import add_hero_banner

PRODUCT = {
    "name": "AirPods Pro",
    "description": "Noise cancelling earbuds",
    "price": 123.456789,
    "original_price": 279.0,
    "image_url": "https://img.techhub.shop/airpods.jpg",
    "category": "Audio",
    "is_featured": True,
    "stock_quantity": 12,
}


def test_healthcheck(client):
    response = client.get("/api/v1/healthcheck")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["timestamp"]


def test_create_and_read_products(client):
    response = client.post("/api/v1/products/", json=PRODUCT)
    assert response.status_code == 200
    created = response.json()
    assert created["price"] == 123.46
    assert created["is_new"] is False

    featured = client.get("/api/v1/products/featured").json()
    assert [p["id"] for p in featured] == [created["id"]]
    assert client.get("/api/v1/products/new").json() == []

    by_category = client.get("/api/v1/products/by-category", params={"category": "Audio"}).json()
    assert len(by_category) == 1
    assert client.get("/api/v1/products/by-category", params={"category": "audio"}).json() == []


def test_invalid_product_is_422(client):
    response = client.post("/api/v1/products/", json={**PRODUCT, "price": 0})
    assert response.status_code == 422


def test_duplicate_category_slug_is_409(client):
    category = {"name": "Audio", "description": None, "slug": "audio", "image_url": None}
    assert client.post("/api/v1/categories/", json=category).status_code == 200

    response = client.post("/api/v1/categories/", json={**category, "name": "Sound"})
    assert response.status_code == 409
    assert "already exists" in response.json()["detail"]

    assert [c["name"] for c in client.get("/api/v1/categories/").json()] == ["Audio"]


def test_newsletter_flow(client):
    response = client.post("/api/v1/newsletter/subscriptions", json={"email": "a@x.com"})
    assert response.status_code == 200
    assert response.json()["is_active"] is True

    again = client.post("/api/v1/newsletter/subscriptions", json={"email": "a@x.com"})
    assert again.status_code == 409

    subscribers = client.get("/api/v1/newsletter/subscribers").json()
    assert [s["email"] for s in subscribers] == ["a@x.com"]


def test_invalid_email_is_422(client):
    response = client.post("/api/v1/newsletter/subscriptions", json={"email": "nope"})
    assert response.status_code == 422


def test_testimonial_rating_bounds(client):
    testimonial = {
        "customer_name": "Priya",
        "customer_avatar": None,
        "rating": 6,
        "review_text": "Great",
        "product_id": None,
        "is_featured": True,
    }
    assert client.post("/api/v1/testimonials/", json=testimonial).status_code == 422

    response = client.post("/api/v1/testimonials/", json={**testimonial, "rating": 5})
    assert response.status_code == 200
    assert [t["customer_name"] for t in client.get("/api/v1/testimonials/featured").json()] == ["Priya"]


def test_active_hero_banner(client):
    assert client.get("/api/v1/hero-banners/active").json() is None

    banner = {
        "title": "New arrivals",
        "subtitle": "Fresh tech",
        "description": "See what just landed",
        "cta_text": "Explore",
        "cta_link": "#new",
        "background_image": "https://img.techhub.shop/new.jpg",
    }
    created = client.post("/api/v1/hero-banners/", json=banner).json()
    assert created["is_active"] is True

    assert client.get("/api/v1/hero-banners/active").json()["id"] == created["id"]


def test_landing_page_keys(client, db):
    add_hero_banner(db)
    body = client.get("/api/v1/landing").json()

    assert set(body) == {"heroBanner", "featuredProducts", "newProducts", "categories", "testimonials"}
    assert body["heroBanner"]["title"] == "Summer Sale"


def test_store_down_is_503(broken_client):
    response = broken_client.get("/api/v1/categories/")
    assert response.status_code == 503
    assert response.json() == {"detail": "Store unavailable"}

    assert broken_client.get("/api/v1/landing").status_code == 503


def test_storefront_survives_store_outage(broken_client):
    response = broken_client.get("/api/v1/storefront")
    assert response.status_code == 200
    body = response.json()
    assert body["degraded"] is True
    assert len(body["products"]) == 4


def test_oversized_price_is_422_not_503(client):
    response = client.post("/api/v1/products/", json={**PRODUCT, "price": 10**12})
    assert response.status_code == 422


def test_string_rating_is_422(client):
    response = client.post("/api/v1/testimonials/", json={
        "customer_name": "Priya",
        "customer_avatar": None,
        "rating": "5",
        "review_text": "Great",
        "product_id": None,
    })
    assert response.status_code == 422
