from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from init_db import init_database
from api import products, menus, tables, table_groups, orders
from config.app_config import LOG_DIR, LOG_LEVEL
from constants import ServerConfig
from utils.logging_utils import set_logging_context, clear_logging_context
import logging
from logging.handlers import RotatingFileHandler
import sys
import uuid

logger = logging.getLogger(__name__)


def configure_logging():
    """
    Configure root logging with a rotating file handler and a console handler.

    Safe to call more than once; handlers are only installed the first time.
    """
    root_logger = logging.getLogger()
    if any(getattr(handler, '_kitchenpos', False) for handler in root_logger.handlers):
        return

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / "kitchenpos.log"

    log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    # File handler with rotation (10MB per file, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(log_formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)

    for handler in (file_handler, console_handler):
        handler._kitchenpos = True
        root_logger.addHandler(handler)
    root_logger.setLevel(LOG_LEVEL)

    logger.info(f"Logging initialized: {log_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    configure_logging()
    init_database()
    logger.info("Kitchen POS API started")
    yield
    logger.info("Kitchen POS API stopped")


app = FastAPI(
    title="Kitchen POS API",
    description="Products, menus, order tables, table groups and orders",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log line emitted while serving a request with its id and path."""
    set_logging_context(request_id=uuid.uuid4().hex[:12], path=request.url.path)
    try:
        return await call_next(request)
    finally:
        clear_logging_context()


# Include API routers
app.include_router(products.router, prefix="/api", tags=["products"])
app.include_router(menus.router, prefix="/api", tags=["menus"])
app.include_router(tables.router, prefix="/api", tags=["tables"])
app.include_router(table_groups.router, prefix="/api", tags=["table-groups"])
app.include_router(orders.router, prefix="/api", tags=["orders"])


@app.get("/api/health")
def health():
    """Liveness probe"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    logger.info(f"Starting Kitchen POS on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
