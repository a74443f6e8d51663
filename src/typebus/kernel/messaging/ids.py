"""Message identifier generation."""

from __future__ import annotations

import uuid_utils

MESSAGE_ID_PREFIX = "msg-"


def new_message_id() -> str:
    """Return a new unique, time-ordered message id (``msg-<uuid7>``)."""
    return f"{MESSAGE_ID_PREFIX}{uuid_utils.uuid7()}"


__all__ = ["MESSAGE_ID_PREFIX", "new_message_id"]
