from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from techhub import schemas
from techhub.services import testimonial_service
from techhub.api import deps

router = APIRouter()

@router.get("/featured", response_model=List[schemas.Testimonial])
def read_featured_testimonials(db: Session = Depends(deps.get_db)):
    return testimonial_service.get_featured(db)

@router.post("/", response_model=schemas.Testimonial)
def create_testimonial(testimonial_in: schemas.TestimonialCreate, db: Session = Depends(deps.get_db)):
    return testimonial_service.create(db, testimonial=testimonial_in)
