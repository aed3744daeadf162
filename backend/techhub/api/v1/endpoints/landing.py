from fastapi import APIRouter, Depends
from sqlalchemy.orm import sessionmaker
from techhub import schemas
from techhub.services import landing_service, storefront_service
from techhub.api import deps

router = APIRouter()

@router.get("/landing", response_model=schemas.LandingPageData)
def read_landing_page_data(session_factory: sessionmaker = Depends(deps.get_session_factory)):
    """
    Everything the landing page needs in one call. Fails as a whole if any
    of the underlying reads fails.
    """
    return landing_service.get_landing_page_data(session_factory)

@router.get("/storefront", response_model=schemas.StorefrontView)
def read_storefront(session_factory: sessionmaker = Depends(deps.get_session_factory)):
    """
    Landing page view model with sample content in empty sections. Always
    renders, even when the store is unreachable.
    """
    return storefront_service.get_storefront(session_factory)
