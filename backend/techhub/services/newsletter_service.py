from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from techhub import models, schemas
from techhub.core.exceptions import ConflictError
from techhub.core.logger import setup_logger
from techhub.models.base import utcnow

logger = setup_logger("services.newsletter")

class NewsletterService:
    def get_active_subscribers(self, db: Session) -> List[models.NewsletterSubscription]:
        try:
            return (
                db.query(models.NewsletterSubscription)
                .filter(models.NewsletterSubscription.is_active.is_(True))
                .order_by(models.NewsletterSubscription.subscribed_at.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch newsletter subscribers: {str(e)}", exc_info=True)
            raise

    def subscribe(
            self, db: Session, subscription: schemas.NewsletterSubscriptionCreate
    ) -> models.NewsletterSubscription:
        """
        Subscribe an email, reactivating its row if it was unsubscribed.

        Reactivation is a single conditional UPDATE and a fresh subscription is a
        plain INSERT guarded by the unique email constraint, so two concurrent
        calls for the same address can never produce two rows: the loser gets
        ConflictError just like a repeat subscribe of an active address.
        """
        email = subscription.email
        now = utcnow()
        table = models.NewsletterSubscription
        try:
            reactivated = db.execute(
                update(table)
                .where(table.email == email, table.is_active.is_(False))
                .values(is_active=True, subscribed_at=now)
                .execution_options(synchronize_session=False)
            )
            if reactivated.rowcount == 1:
                db.commit()
                db_subscription = (
                    db.query(table)
                    .filter(table.email == email)
                    .populate_existing()
                    .one()
                )
                logger.info(f"Reactivated newsletter subscription {db_subscription.id}")
                return db_subscription

            db_subscription = table(email=email, is_active=True, subscribed_at=now)
            db.add(db_subscription)
            db.commit()
        except IntegrityError:
            db.rollback()
            raise ConflictError("Email is already subscribed to newsletter")
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Newsletter subscription failed: {str(e)}", exc_info=True)
            raise
        db.refresh(db_subscription)
        logger.info(f"Created newsletter subscription {db_subscription.id}")
        return db_subscription

newsletter_service = NewsletterService()
