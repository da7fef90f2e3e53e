"""
Auth backend — application entry point.
"""

from __future__ import annotations

import logging
import pathlib
import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from api.routes import router as misc_router
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import Database
from mail.routes import router as contact_router
from mail.sendgrid import SendGridClient

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx", "aiosqlite", "asyncio"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="Auth Backend",
        version="1.0.0",
        description="User registration, JWT login, profile lookup and a contact-mail relay.",
    )
    app.state.settings = settings
    app.state.db = None
    app.state.mailer = None

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(misc_router)
    app.include_router(auth_router)
    app.include_router(contact_router)

    pdf_dir = pathlib.Path(settings.pdf_dir)
    if pdf_dir.is_dir():
        app.mount("/pdf", StaticFiles(directory=str(pdf_dir)), name="pdf")
    else:
        logger.warning("PDF directory %s not found — /pdf will return 404.", pdf_dir)

    @app.on_event("startup")
    async def on_startup():
        if not settings.signing_configured:
            logger.warning("SECRET_KEY is not set. JWT routes will fail without it.")

        if settings.database_configured:
            db = Database(settings.database_url, echo=settings.debug)
            await db.create_schema()
            app.state.db = db
            logger.info("Credential store ready.")
        else:
            logger.warning("DATABASE_URL not set — skipping database connection.")

        app.state.mailer = SendGridClient(
            settings.sendgrid_api_key,
            settings.mail_from,
            base_url=settings.sendgrid_base_url,
        )
        if not settings.sendgrid_api_key:
            logger.warning("SENDGRID_API_KEY not set — /api/contact/send will fail.")

        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        if app.state.mailer is not None:
            await app.state.mailer.aclose()
        if app.state.db is not None:
            await app.state.db.dispose()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
