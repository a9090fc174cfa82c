"""
Demo Bank API — FastAPI Application.

This is the entry point for the application.
All routers and exception handlers are registered here.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from demo_bank.config import get_settings
from demo_bank.logging_config import setup_logging
from demo_bank.models import Base
from demo_bank.models.base import engine, SessionLocal
from demo_bank.seed import seed_demo_data
from demo_bank.api.errors import register_exception_handlers
from demo_bank.api.health import router as health_router
from demo_bank.api.auth import router as auth_router
from demo_bank.api.accounts import router as accounts_router
from demo_bank.api.transactions import router as transactions_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging, create the ledger tables and seed the demo user."""
    logger = setup_logging(settings.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO_DATA:
        with SessionLocal() as db:
            if seed_demo_data(db):
                logger.info("Demo credentials: demo@bank.com / password123")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    description="A demo banking API with accounts, transactions and transfers",
    lifespan=lifespan,
)

register_exception_handlers(app)

# Register routers
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(accounts_router)
app.include_router(transactions_router)


def run():
    """Serve the API with uvicorn (the demo-bank console script)."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
