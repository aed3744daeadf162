from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
from techhub import models, schemas
from techhub.core.logger import setup_logger
from techhub.models.base import utcnow

logger = setup_logger("services.hero_banners")

class HeroBannerService:
    def get_active(self, db: Session) -> Optional[models.HeroBanner]:
        """The most recently updated active banner, or None."""
        try:
            return (
                db.query(models.HeroBanner)
                .filter(models.HeroBanner.is_active.is_(True))
                .order_by(
                    models.HeroBanner.updated_at.desc(),
                    models.HeroBanner.created_at.desc(),
                    models.HeroBanner.id.desc()
                )
                .first()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to get active hero banner: {str(e)}", exc_info=True)
            raise

    def create(self, db: Session, banner: schemas.HeroBannerCreate) -> models.HeroBanner:
        now = utcnow()
        db_banner = models.HeroBanner(**banner.model_dump(), created_at=now, updated_at=now)
        try:
            db.add(db_banner)
            db.commit()
            db.refresh(db_banner)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Hero banner creation failed: {str(e)}", exc_info=True)
            raise
        logger.info(f"Created hero banner {db_banner.id} (active={db_banner.is_active})")
        return db_banner

hero_banner_service = HeroBannerService()
