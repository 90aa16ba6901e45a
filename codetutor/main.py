"""Code Tutor API: FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from codetutor.auth.routes import router as auth_router
from codetutor.config.cors import configure_cors
from codetutor.config.settings import Settings
from codetutor.context import AppContext, get_context
from codetutor.conversations.routes import router as conversations_router
from codetutor.db.client import Database
from codetutor.guidance.routes import router as guidance_router
from codetutor.llm.client import CompletionProvider, build_provider
from codetutor.messages.routes import router as messages_router
from codetutor.middleware.error_handler import register_error_handlers
from codetutor.middleware.request_id import RequestIDMiddleware

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, provider: CompletionProvider | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctx = AppContext(
        settings=settings,
        database=Database(settings.DATABASE_PATH),
        provider=provider or build_provider(settings),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        ctx.database.init_schema()
        logger.info("Code Tutor API ready (env=%s, provider=%s)", settings.ENVIRONMENT, settings.LLM_PROVIDER)
        yield
        ctx.database.dispose()

    app = FastAPI(
        title="Code Tutor API",
        description=(
            "Multi-tenant tutoring sessions with AI guidance.\n\n"
            "## Features\n"
            "- JWT authentication\n"
            "- Conversation and message storage with ownership enforcement\n"
            "- Level-aware tutoring prompts, hints and opening tips\n"
            "- Graceful fallback when the AI provider is out of quota\n\n"
            "## Authentication\n"
            "All `/api/*` endpoints except register and login require "
            "`Authorization: Bearer <token>`."
        ),
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Health", "description": "Health check endpoints"},
            {"name": "Auth", "description": "Authentication: register, login, current user"},
            {"name": "Conversations", "description": "CRUD operations for conversations"},
            {"name": "Messages", "description": "Append and list conversation turns"},
            {"name": "AI", "description": "Tutoring tips, guidance and session export"},
        ],
    )
    app.state.ctx = ctx

    # --- Middleware ---
    app.add_middleware(RequestIDMiddleware)
    configure_cors(app, settings)

    # --- Error handlers ---
    register_error_handlers(app)

    # --- Routes ---
    app.include_router(auth_router)
    app.include_router(conversations_router)
    app.include_router(messages_router)
    app.include_router(guidance_router)

    @app.get("/health", tags=["Health"], summary="Health check", description="Returns OK and whether the database is initialized.")
    async def health_check(ctx: AppContext = Depends(get_context)):
        return {"status": "ok", "dbReady": ctx.database.ready}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = app.state.ctx.settings
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
