"""Data access layer for conversations and their messages."""

from datetime import timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from codetutor.db.models import Conversation, Message, utcnow


def create(db: Session, user_id: int, title: str) -> Conversation:
    now = utcnow()
    conv = Conversation(user_id=user_id, title=title, created_at=now, updated_at=now)
    db.add(conv)
    db.commit()
    return conv


def list_by_user(db: Session, user_id: int) -> list[Conversation]:
    stmt = (
        select(Conversation)
        .where(Conversation.user_id == user_id)
        .order_by(Conversation.updated_at.desc(), Conversation.id.desc())
    )
    return list(db.scalars(stmt))


def get_owned(db: Session, conversation_id: int, user_id: int) -> Conversation | None:
    stmt = select(Conversation).where(
        Conversation.id == conversation_id,
        Conversation.user_id == user_id,
    )
    return db.scalar(stmt)


def list_messages(db: Session, conversation_id: int) -> list[Message]:
    stmt = (
        select(Message)
        .where(Message.conversation_id == conversation_id)
        .order_by(Message.created_at, Message.id)
    )
    return list(db.scalars(stmt))


def add_message(db: Session, conv: Conversation, role: str, content: str) -> Message:
    """Insert a message and advance the conversation's ``updated_at`` in one commit."""
    now = utcnow()
    # updated_at and message timestamps must move forward even when the clock has not
    if now <= conv.updated_at:
        now = conv.updated_at + timedelta(microseconds=1)
    msg = Message(conversation_id=conv.id, role=role, content=content, created_at=now)
    db.add(msg)
    conv.updated_at = now
    db.commit()
    return msg


def delete(db: Session, conv: Conversation) -> None:
    db.delete(conv)
    db.commit()
