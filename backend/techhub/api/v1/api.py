from fastapi import APIRouter
from techhub.api.v1.endpoints import (
    categories,
    health,
    hero_banners,
    landing,
    newsletter,
    products,
    testimonials,
)

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(landing.router, tags=["landing"])
api_router.include_router(products.router, prefix="/products", tags=["products"])
api_router.include_router(testimonials.router, prefix="/testimonials", tags=["testimonials"])
api_router.include_router(newsletter.router, prefix="/newsletter", tags=["newsletter"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(hero_banners.router, prefix="/hero-banners", tags=["hero-banners"])
