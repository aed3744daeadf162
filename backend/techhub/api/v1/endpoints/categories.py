from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from techhub import schemas
from techhub.core.exceptions import ConflictError
from techhub.services import category_service
from techhub.api import deps

router = APIRouter()

@router.get("/", response_model=List[schemas.Category])
def read_categories(db: Session = Depends(deps.get_db)):
    return category_service.get_all(db)

@router.post("/", response_model=schemas.Category)
def create_category(category_in: schemas.CategoryCreate, db: Session = Depends(deps.get_db)):
    try:
        return category_service.create(db, category=category_in)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=e.message)
