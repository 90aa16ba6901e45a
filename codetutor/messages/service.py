"""Message business logic: append-only turns on owned conversations."""

import logging

from sqlalchemy.orm import Session

from codetutor.conversations import repository
from codetutor.conversations.service import authorize_ownership
from codetutor.db.models import VALID_ROLES, Message
from codetutor.errors import ValidationError

logger = logging.getLogger(__name__)


def append_message(db: Session, user_id: int, conversation_id: int, role: str | None, content: str | None) -> Message:
    """Append a turn to a conversation the user owns and bump its ``updated_at``."""
    conv = authorize_ownership(db, user_id, conversation_id)
    if not role or not content:
        raise ValidationError("Role and content required")
    if role not in VALID_ROLES:
        raise ValidationError(f"Invalid role: {role}")
    msg = repository.add_message(db, conv, role, content)
    logger.debug("Appended %s message %s to conversation %s", role, msg.id, conv.id)
    return msg


def list_messages(db: Session, user_id: int, conversation_id: int) -> list[Message]:
    conv = authorize_ownership(db, user_id, conversation_id)
    return repository.list_messages(db, conv.id)
