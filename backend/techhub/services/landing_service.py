from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict

from sqlalchemy.orm import Session, sessionmaker

from techhub import schemas
from techhub.core.config import settings
from techhub.core.logger import setup_logger
from techhub.services.category_service import category_service
from techhub.services.hero_banner_service import hero_banner_service
from techhub.services.product_service import product_service
from techhub.services.testimonial_service import testimonial_service

logger = setup_logger("services.landing")

FEATURED_PRODUCTS_LIMIT = 8
NEW_PRODUCTS_LIMIT = 4
TESTIMONIALS_LIMIT = 6


def _hero_banner(db: Session):
    banner = hero_banner_service.get_active(db)
    return schemas.HeroBanner.model_validate(banner) if banner else None


def _featured_products(db: Session):
    return product_service.get_featured(db, limit=FEATURED_PRODUCTS_LIMIT)


def _new_products(db: Session):
    return product_service.get_new(db, limit=NEW_PRODUCTS_LIMIT)


def _categories(db: Session):
    return [schemas.Category.model_validate(c) for c in category_service.get_all(db)]


def _testimonials(db: Session):
    testimonials = testimonial_service.get_featured(db, limit=TESTIMONIALS_LIMIT, by_rating=False)
    return [schemas.Testimonial.model_validate(t) for t in testimonials]


LANDING_READS: Dict[str, Callable[[Session], object]] = {
    "hero_banner": _hero_banner,
    "featured_products": _featured_products,
    "new_products": _new_products,
    "categories": _categories,
    "testimonials": _testimonials,
}


class LandingService:
    def __init__(self, max_workers: int = settings.LANDING_FANOUT_WORKERS):
        self.max_workers = max_workers

    def get_landing_page_data(self, session_factory: sessionmaker) -> schemas.LandingPageData:
        """
        Run the five landing page reads concurrently and join them.

        Each read gets its own session from session_factory. The join is
        all-or-nothing: the first failing read's exception propagates and no
        partial result is returned.
        """
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="landing") as executor:
            futures = {
                key: executor.submit(self._run_read, session_factory, read)
                for key, read in LANDING_READS.items()
            }
            try:
                results = {key: future.result() for key, future in futures.items()}
            except Exception as e:
                logger.error(f"Failed to fetch landing page data: {str(e)}", exc_info=True)
                raise
        return schemas.LandingPageData(**results)

    @staticmethod
    def _run_read(session_factory: sessionmaker, read: Callable[[Session], object]):
        with session_factory() as db:
            return read(db)

landing_service = LandingService()
