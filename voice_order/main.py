"""Main FastAPI application."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from voice_order.api import carts, health, menu, orders
from voice_order.core.config import settings
from voice_order.core.dependencies import get_order_engine
from voice_order.core.logging import setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    # Fail fast on a broken vocabulary file
    get_order_engine()
    yield


app = FastAPI(
    title=settings.app_name,
    description="Korean voice ordering assistant: utterance to cart delta",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router, tags=["health"])
app.include_router(orders.router, tags=["orders"])
app.include_router(carts.router, tags=["carts"])
app.include_router(menu.router, tags=["menu"])


def run() -> None:
    """Run the API server."""
    import uvicorn

    uvicorn.run("voice_order.main:app", host=settings.host, port=settings.port)
