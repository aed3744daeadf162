from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from techhub import schemas
from techhub.services import product_service
from techhub.api import deps

router = APIRouter()

@router.get("/featured", response_model=List[schemas.Product])
def read_featured_products(db: Session = Depends(deps.get_db)):
    return product_service.get_featured(db)

@router.get("/new", response_model=List[schemas.Product])
def read_new_products(db: Session = Depends(deps.get_db)):
    return product_service.get_new(db)

@router.get("/by-category", response_model=List[schemas.Product])
def read_products_by_category(category: str, db: Session = Depends(deps.get_db)):
    """
    Products whose category equals `category` exactly (case-sensitive).
    """
    return product_service.get_by_category(db, category=category)

@router.post("/", response_model=schemas.Product)
def create_product(product_in: schemas.ProductCreate, db: Session = Depends(deps.get_db)):
    return product_service.create(db, product=product_in)
