from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from techhub import models, schemas
from techhub.core.logger import setup_logger
from techhub.models.base import utcnow

logger = setup_logger("services.products")

class ProductService:
    """
    Products are returned as schemas.Product so NUMERIC prices leave the
    service as plain floats.
    """

    def get_featured(self, db: Session, limit: Optional[int] = None) -> List[schemas.Product]:
        try:
            query = (
                db.query(models.Product)
                .filter(models.Product.is_featured.is_(True))
                .order_by(models.Product.created_at.desc(), models.Product.id.desc())
            )
            if limit is not None:
                query = query.limit(limit)
            return [self._to_schema(product) for product in query.all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch featured products: {str(e)}", exc_info=True)
            raise

    def get_new(self, db: Session, limit: Optional[int] = None) -> List[schemas.Product]:
        try:
            query = (
                db.query(models.Product)
                .filter(models.Product.is_new.is_(True))
                .order_by(models.Product.created_at.desc(), models.Product.id.desc())
            )
            if limit is not None:
                query = query.limit(limit)
            return [self._to_schema(product) for product in query.all()]
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch new products: {str(e)}", exc_info=True)
            raise

    def get_by_category(self, db: Session, category: str) -> List[schemas.Product]:
        # Exact, case-sensitive match on the free-text category
        try:
            products = (
                db.query(models.Product)
                .filter(models.Product.category == category)
                .order_by(models.Product.id)
                .all()
            )
            return [self._to_schema(product) for product in products]
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch products for category {category!r}: {str(e)}", exc_info=True)
            raise

    def create(self, db: Session, product: schemas.ProductCreate) -> schemas.Product:
        now = utcnow()
        db_product = models.Product(**product.model_dump(), created_at=now, updated_at=now)
        try:
            db.add(db_product)
            db.commit()
            db.refresh(db_product)
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Product creation failed: {str(e)}", exc_info=True)
            raise
        logger.info(f"Created product {db_product.id} ({db_product.name})")
        return self._to_schema(db_product)

    @staticmethod
    def _to_schema(product: models.Product) -> schemas.Product:
        return schemas.Product.model_validate(product)

product_service = ProductService()
