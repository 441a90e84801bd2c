"""
Bank Ledger FastAPI application.

This is the entry point for the application.
All routers are registered here.
"""

from fastapi import FastAPI

from bank_ledger.config import get_settings
from bank_ledger.logging_config import setup_logging
from bank_ledger.api.health import router as health_router
from bank_ledger.api.banks import router as banks_router
from bank_ledger.api.accounts import router as accounts_router
from bank_ledger.api.transactions import router as transactions_router

settings = get_settings()

setup_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Banks, accounts and fee-bearing money movements",
)

# Register routers
app.include_router(health_router)
app.include_router(banks_router)
app.include_router(accounts_router)
app.include_router(transactions_router)


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "bank_ledger.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    run()
