from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from techhub import models, schemas
from techhub.core.exceptions import ConflictError
from techhub.core.logger import setup_logger

logger = setup_logger("services.categories")

class CategoryService:
    def get_by_slug(self, db: Session, slug: str) -> Optional[models.Category]:
        return db.query(models.Category).filter(models.Category.slug == slug).first()

    def get_all(self, db: Session) -> List[models.Category]:
        try:
            return db.query(models.Category).order_by(models.Category.name.asc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch categories: {str(e)}", exc_info=True)
            raise

    def create(self, db: Session, category: schemas.CategoryCreate) -> models.Category:
        """
        Insert a category whose slug is not taken yet.

        The slug is stored exactly as given. A second category with the same
        slug raises ConflictError, whether it is caught by the lookup or by the
        unique constraint when two requests race.
        """
        conflict = f"Category with slug '{category.slug}' already exists"
        try:
            if self.get_by_slug(db, category.slug):
                raise ConflictError(conflict)
            db_category = models.Category(**category.model_dump())
            db.add(db_category)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError(conflict)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Category creation failed: {str(e)}", exc_info=True)
            raise
        db.refresh(db_category)
        logger.info(f"Created category {db_category.id} ({db_category.slug})")
        return db_category

category_service = CategoryService()
