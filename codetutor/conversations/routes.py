"""Conversation CRUD endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from codetutor.auth.dependencies import CurrentUser, get_current_user
from codetutor.context import get_db
from codetutor.conversations.schemas import ConversationDetail, ConversationOut, CreateConversationRequest
from codetutor.conversations.service import (
    create_conversation,
    delete_conversation,
    get_conversation,
    list_conversations,
    parse_conversation_id,
)
from codetutor.messages.schemas import MessageOut
from codetutor.utils.validators import MessageResponse

router = APIRouter(prefix="/api/conversations", tags=["Conversations"])


@router.post("", status_code=201, response_model=ConversationOut, summary="Create a conversation", description="Create a new conversation; the title defaults to \"New Chat\".")
async def create(
    body: CreateConversationRequest | None = None,
    user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return create_conversation(db, user.id, body.title if body else None)


@router.get("", response_model=list[ConversationOut], summary="List conversations", description="The authenticated user's conversations, most recently active first.")
async def list_all(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return list_conversations(db, user.id)


@router.get("/{conversation_id}", response_model=ConversationDetail, summary="Get a conversation", description="A single conversation with its full message history.")
async def get(conversation_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    conv, messages = get_conversation(db, user.id, parse_conversation_id(conversation_id))
    return ConversationDetail(
        **ConversationOut.model_validate(conv).model_dump(),
        messages=[MessageOut.model_validate(m) for m in messages],
    )


@router.delete("/{conversation_id}", response_model=MessageResponse, summary="Delete a conversation", description="Permanently delete a conversation and all its messages.")
async def delete(conversation_id: str, user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    delete_conversation(db, user.id, parse_conversation_id(conversation_id))
    return MessageResponse(message="Conversation deleted")
