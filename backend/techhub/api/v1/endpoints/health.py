from datetime import datetime, timezone

from fastapi import APIRouter

from techhub import schemas

router = APIRouter()

@router.get("/healthcheck", response_model=schemas.HealthCheck)
def healthcheck():
    return schemas.HealthCheck(status="ok", timestamp=datetime.now(timezone.utc))
