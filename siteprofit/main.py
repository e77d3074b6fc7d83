# siteprofit/main.py
# -----------------------------------------------------------------------------
# FastAPI entrypoint
# - uvicorn siteprofit.main:app
# -----------------------------------------------------------------------------
from fastapi import FastAPI

from siteprofit.core.config import settings
from siteprofit.core.logging import setup_logging
from siteprofit.routers import calculator

setup_logging(settings)

app = FastAPI(title=settings.APP_NAME)

app.include_router(calculator.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
