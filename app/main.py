import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.dependencies import build_evaluator
from app.routers import api
from smb_security_copilot import get_runtime_version


def create_app() -> FastAPI:
    # Respect runtime env overrides (tests, packaged launcher, temporary runs).
    get_settings.cache_clear()
    build_evaluator.cache_clear()
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Vendor override loads eagerly so an unreadable file fails startup.
    catalog_path = settings.affiliate_catalog_path
    build_evaluator(str(catalog_path) if catalog_path else "")

    app = FastAPI(title=settings.app_name)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins or ["http://127.0.0.1", "http://localhost"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(api.router)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    @app.get("/api/health")
    def api_health():
        return {"status": "ok", "version": get_runtime_version()}

    return app


app = create_app()
