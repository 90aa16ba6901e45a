"""Process-wide collaborators, built once in ``create_app`` and injected per request."""

from collections.abc import Iterator
from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from codetutor.config.settings import Settings
from codetutor.db.client import Database
from codetutor.llm.client import CompletionProvider


@dataclass
class AppContext:
    settings: Settings
    database: Database
    provider: CompletionProvider


def get_context(request: Request) -> AppContext:
    return request.app.state.ctx


def get_settings(ctx: AppContext = Depends(get_context)) -> Settings:
    return ctx.settings


def get_db(ctx: AppContext = Depends(get_context)) -> Iterator[Session]:
    with ctx.database.session() as session:
        yield session
