"""Message endpoints: append and list turns of a conversation."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from codetutor.auth.dependencies import CurrentUser, get_current_user
from codetutor.context import get_db
from codetutor.conversations.service import parse_conversation_id
from codetutor.messages.schemas import AppendMessageRequest, MessageOut
from codetutor.messages.service import append_message, list_messages

router = APIRouter(prefix="/api/messages", tags=["Messages"])


@router.post("/{conversation_id}", status_code=201, response_model=MessageOut, summary="Append a message", description="Append a user or assistant turn to an owned conversation.")
async def append(
    conversation_id: str,
    body: AppendMessageRequest,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return append_message(db, user.id, parse_conversation_id(conversation_id), body.role, body.content)


@router.get("/{conversation_id}", response_model=list[MessageOut], summary="List messages", description="All messages of an owned conversation, oldest first.")
async def list_all(
    conversation_id: str,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return list_messages(db, user.id, parse_conversation_id(conversation_id))
