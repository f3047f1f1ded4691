import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.adapters.sqlite.migrator import apply_migrations
from src.api.deps import get_settings
from src.app_shell.config import validate_ops_rules
from src.rules.loader import load_rules

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules, validate ops and migrate on startup (fail-fast)
    try:
        rules = load_rules(settings.rules_path)
        validate_ops_rules(rules, settings.data_dir)
        apply_migrations(settings.db_path, settings.migrations_dir)
        logger.info("Rules v%s loaded from %s", rules.project.rules_version, settings.rules_path)
    except Exception:
        logger.critical("Startup checks failed", exc_info=True)
        sys.exit(1)

    yield


app = FastAPI(
    title="Invoice Actions API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import invoices  # noqa: E402

app.include_router(invoices.router, prefix="/dashboard/invoices", tags=["Invoices"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
