import logging
import sys

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from grubdash.config import Settings, settings as default_settings
from grubdash.errors import ChainError
from grubdash.metrics import get_metrics_bytes, get_metrics_content_type, requests_rejected_total
from grubdash.models import Dish, Order
from grubdash.routes import dishes, orders
from grubdash.seed import load_records
from grubdash.store import MemoryStore

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stdout,
    )


async def chain_error_handler(request: Request, exc: ChainError) -> JSONResponse:
    requests_rejected_total.labels(status_code=str(exc.status_code)).inc()
    logger.info("Rejected %s %s (%d): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 405:
        message = f"{request.method} not allowed for {request.url.path}"
    elif exc.status_code == 404:
        message = f"Path not found: {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)


def create_app(
    settings: Settings | None = None,
    dish_store: MemoryStore | None = None,
    order_store: MemoryStore | None = None,
) -> FastAPI:
    settings = settings or default_settings
    if dish_store is None:
        seed = load_records(settings.seed_dishes_file, Dish) if settings.seed_dishes_file else []
        dish_store = MemoryStore(seed)
    if order_store is None:
        seed = load_records(settings.seed_orders_file, Order) if settings.seed_orders_file else []
        order_store = MemoryStore(seed)

    app = FastAPI(title=settings.app_title)
    app.state.dish_store = dish_store
    app.state.order_store = order_store
    app.add_exception_handler(ChainError, chain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.include_router(dishes.router)
    app.include_router(orders.router)

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.get("/metrics")
    async def metrics() -> Response:
        """Prometheus scrape endpoint."""
        return Response(
            content=get_metrics_bytes(),
            media_type=get_metrics_content_type(),
        )

    return app


configure_logging(default_settings.log_level)
app = create_app()
