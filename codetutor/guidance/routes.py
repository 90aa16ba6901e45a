"""AI tutoring endpoints: level catalog, opening tips, guidance turns, completion export."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from codetutor.auth.dependencies import CurrentUser, get_current_user
from codetutor.context import AppContext, get_context, get_db
from codetutor.db.models import ROLE_ASSISTANT, ROLE_USER
from codetutor.guidance.completion import build_completion_record
from codetutor.guidance.orchestrator import GuidanceOrchestrator, TutoringSession
from codetutor.guidance.schemas import (
    CompletionRecord,
    CompletionRequest,
    GuidanceRequest,
    GuidanceResponse,
    LevelOut,
    TipsResponse,
)
from codetutor.llm.prompts import LEVELS
from codetutor.messages.service import append_message, list_messages

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ai", tags=["AI"])


def get_orchestrator(ctx: AppContext = Depends(get_context)) -> GuidanceOrchestrator:
    return GuidanceOrchestrator(ctx.provider, ctx.settings)


@router.get("/levels", response_model=list[LevelOut], summary="List tutoring levels")
async def levels(user: CurrentUser = Depends(get_current_user)):
    return [LevelOut.model_validate(level) for level in LEVELS.values()]


@router.post("/tips/{level}", response_model=TipsResponse, summary="Opening tips for a level", description="Always succeeds; canned tips are served when the AI provider fails.")
async def tips(
    level: str,
    user: CurrentUser = Depends(get_current_user),
    orchestrator: GuidanceOrchestrator = Depends(get_orchestrator),
):
    result = await orchestrator.initial_tips(TutoringSession(level=level))
    return TipsResponse(tips=result.text)


@router.post("/guidance", response_model=GuidanceResponse, summary="Guidance on a submission", description="Level-aware coaching for the learner's latest message. With conversationId, both turns are stored on that conversation.")
async def guidance(
    body: GuidanceRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
    orchestrator: GuidanceOrchestrator = Depends(get_orchestrator),
):
    if body.conversation_history is not None:
        history = [turn.model_dump() for turn in body.conversation_history]
    elif body.conversation_id is not None:
        history = [{"role": m.role, "content": m.content} for m in list_messages(db, user.id, body.conversation_id)]
    else:
        history = []

    if body.conversation_id is not None:
        append_message(db, user.id, body.conversation_id, ROLE_USER, body.user_message)

    session = TutoringSession(level=body.level, hint_count=body.hint_count)
    # ProviderError propagates here, so no assistant turn is stored for a failed call
    result = await orchestrator.guide(session, body.user_message, history, is_hint=body.is_hint)

    if body.conversation_id is not None:
        append_message(db, user.id, body.conversation_id, ROLE_ASSISTANT, result.text)

    return GuidanceResponse(guidance=result.text, hint_count=result.hint_count, degraded=result.degraded)


@router.post("/complete", response_model=CompletionRecord, summary="Export a finished session", description="Package transcript, hint count and feedback into a record for the client to keep. Nothing is stored.")
async def complete(body: CompletionRequest, user: CurrentUser = Depends(get_current_user)):
    record = build_completion_record(
        body.level,
        [turn.model_dump() for turn in body.conversation_history],
        body.hint_count,
        body.feedback,
    )
    logger.info("User %s completed level %s with %d hints", user.id, body.level, body.hint_count)
    return record
