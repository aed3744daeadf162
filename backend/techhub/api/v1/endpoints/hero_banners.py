from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import Optional
from techhub import schemas
from techhub.services import hero_banner_service
from techhub.api import deps

router = APIRouter()

@router.get("/active", response_model=Optional[schemas.HeroBanner])
def read_active_hero_banner(db: Session = Depends(deps.get_db)):
    return hero_banner_service.get_active(db)

@router.post("/", response_model=schemas.HeroBanner)
def create_hero_banner(banner_in: schemas.HeroBannerCreate, db: Session = Depends(deps.get_db)):
    return hero_banner_service.create(db, banner=banner_in)
