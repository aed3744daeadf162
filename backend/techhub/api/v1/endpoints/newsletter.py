from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from techhub import schemas
from techhub.core.exceptions import ConflictError
from techhub.services import newsletter_service
from techhub.api import deps

router = APIRouter()

@router.post("/subscriptions", response_model=schemas.NewsletterSubscription)
def create_newsletter_subscription(
    subscription_in: schemas.NewsletterSubscriptionCreate,
    db: Session = Depends(deps.get_db)
):
    """
    Subscribe an email. An unsubscribed address is reactivated in place;
    an active one is rejected with 409.
    """
    try:
        return newsletter_service.subscribe(db, subscription=subscription_in)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)

@router.get("/subscribers", response_model=List[schemas.NewsletterSubscription])
def read_newsletter_subscribers(db: Session = Depends(deps.get_db)):
    return newsletter_service.get_active_subscribers(db)
