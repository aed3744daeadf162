from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from techhub.api.v1.api import api_router
from techhub.core.config import settings
from techhub.core.logger import setup_logger
from techhub.database.database import init_db

logger = setup_logger("main")

app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# Storefront is public, allow any origin by default
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")

@app.exception_handler(SQLAlchemyError)
async def store_unavailable_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Store unavailable while handling {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=503, content={"detail": "Store unavailable"})

@app.on_event("startup")
async def on_startup():
    logger.info("Starting application, ensuring database tables exist...")
    init_db()
    logger.info(f"Database ready, serving on port {settings.SERVER_PORT}")

@app.on_event("shutdown")
async def on_shutdown():
    logger.info("Shutting down application...")
