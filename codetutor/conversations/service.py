"""Business logic for conversations with ownership verification."""

from sqlalchemy.orm import Session

from codetutor.conversations import repository
from codetutor.db.models import DEFAULT_CONVERSATION_TITLE, Conversation, Message
from codetutor.errors import NotFound

CONVERSATION_NOT_FOUND = "Conversation not found"


def parse_conversation_id(raw: str) -> int:
    """Path ids that are not integers name no conversation, so they are not found."""
    try:
        conversation_id = int(raw)
    except ValueError:
        raise NotFound(CONVERSATION_NOT_FOUND) from None
    # SQLite rowids are positive signed 64-bit integers
    if not 0 < conversation_id < 2**63:
        raise NotFound(CONVERSATION_NOT_FOUND)
    return conversation_id


def authorize_ownership(db: Session, user_id: int, conversation_id: int) -> Conversation:
    """Return the conversation if ``user_id`` owns it.

    A conversation that does not exist and one owned by somebody else raise the
    same ``NotFound``, so callers cannot discover other users' ids.
    """
    conv = repository.get_owned(db, conversation_id, user_id)
    if conv is None:
        raise NotFound(CONVERSATION_NOT_FOUND)
    return conv


def create_conversation(db: Session, user_id: int, title: str | None = None) -> Conversation:
    title = (title or "").strip() or DEFAULT_CONVERSATION_TITLE
    return repository.create(db, user_id, title)


def list_conversations(db: Session, user_id: int) -> list[Conversation]:
    return repository.list_by_user(db, user_id)


def get_conversation(db: Session, user_id: int, conversation_id: int) -> tuple[Conversation, list[Message]]:
    conv = authorize_ownership(db, user_id, conversation_id)
    return conv, repository.list_messages(db, conv.id)


def delete_conversation(db: Session, user_id: int, conversation_id: int) -> None:
    conv = authorize_ownership(db, user_id, conversation_id)
    repository.delete(db, conv)
