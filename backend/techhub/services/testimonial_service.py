from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from techhub import models, schemas
from techhub.core.logger import setup_logger

logger = setup_logger("services.testimonials")

class TestimonialService:
    def get_featured(
            self, db: Session,
            limit: Optional[int] = None,
            by_rating: bool = True
    ) -> List[models.Testimonial]:
        """
        Featured testimonials, best rated first unless by_rating is off, then newest.
        """
        order = [models.Testimonial.created_at.desc(), models.Testimonial.id.desc()]
        if by_rating:
            order.insert(0, models.Testimonial.rating.desc())
        try:
            query = (
                db.query(models.Testimonial)
                .filter(models.Testimonial.is_featured.is_(True))
                .order_by(*order)
            )
            if limit is not None:
                query = query.limit(limit)
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Featured testimonials fetch failed: {str(e)}", exc_info=True)
            raise

    def create(self, db: Session, testimonial: schemas.TestimonialCreate) -> models.Testimonial:
        # product_id is advisory only, no existence check
        db_testimonial = models.Testimonial(**testimonial.model_dump())
        try:
            db.add(db_testimonial)
            db.commit()
            db.refresh(db_testimonial)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Testimonial creation failed: {str(e)}", exc_info=True)
            raise
        logger.info(f"Created testimonial {db_testimonial.id} from {db_testimonial.customer_name}")
        return db_testimonial

testimonial_service = TestimonialService()
