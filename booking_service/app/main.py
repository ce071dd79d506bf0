import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.core.logging_config import setup_logging
from shared.exception_handler import setup_exception_handlers
from shared.wrappers.response_wrapper import JsonResponseMiddleware

from .models import bookings, customers, responsibles, spaces  # noqa: F401  (register tables)
from .router import (
    bookings_router,
    calendar_router,
    customers_router,
    dashboard_router,
    records_router,
    responsibles_router,
    spaces_router,
    visits_router,
)

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_NAME)

# Create all tables
Base.metadata.create_all(bind=engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(JsonResponseMiddleware)
setup_exception_handlers(app)

# Include routers
app.include_router(bookings_router.router)
app.include_router(visits_router.router)
app.include_router(records_router.router)
app.include_router(customers_router.router)
app.include_router(spaces_router.router)
app.include_router(responsibles_router.router)
app.include_router(calendar_router.router)
app.include_router(dashboard_router.router)
app.include_router(dashboard_router.values_router)


@app.get("/health")
def health():
    return {"status": "ok"}


logger.info("%s ready", settings.APP_NAME)
