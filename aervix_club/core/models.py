"""Data models for the club's stored records.

The models are implemented using :mod:`pydantic` so that they provide
runtime validation and convenient serialisation to and from dictionaries.
Stored documents use camelCase keys (``userId``, ``profileImage``...) while
the Python attributes are snake_case; both spellings are accepted on input.

References between records are plain string identifiers. Nothing here checks
that a referenced user or task actually exists.
"""

from __future__ import annotations

import time
import uuid
from typing import NewType

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

UserId = NewType("UserId", str)
TaskId = NewType("TaskId", str)
CommentId = NewType("CommentId", str)
MessageId = NewType("MessageId", str)


def new_id() -> str:
    """Return a random identifier that is safe under rapid successive calls."""
    return uuid.uuid4().hex


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class Record(BaseModel):
    """Base for stored records: camelCase on disk, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Serialise to the stored (camelCase) representation."""
        return self.model_dump(by_alias=True, exclude_none=True)


class User(Record):
    """A registered club member.

    Attributes
    ----------
    id:
        Unique identifier. Defaults to a random UUID4 hex string.
    name:
        Display name, also usable as a login identifier.
    department:
        Free-form department or course name.
    email:
        Contact address, also usable as a login identifier.
    password:
        Stored and compared in plain text.
    profile_image:
        Optional encoded image (typically a data URL).

    """

    id: UserId = Field(default_factory=new_id)
    name: str
    department: str = ""
    email: str
    password: str | None = None
    profile_image: str | None = None


class Comment(Record):
    """A comment embedded in exactly one :class:`BoardTask`."""

    id: CommentId = Field(default_factory=new_id)
    user_id: UserId
    user_name: str
    user_profile: str | None = None
    text: str
    timestamp: int = Field(default_factory=now_ms)


class BoardTask(Record):
    """A project logged by a member against one catalogue board."""

    id: TaskId = Field(default_factory=new_id)
    user_id: UserId
    user_name: str = ""
    user_profile: str | None = None
    board_id: str
    task_name: str
    code_used: str = ""
    reference_url: str = ""
    circuit_design_image: str | None = None
    timestamp: int = Field(default_factory=now_ms)
    comments: list[Comment] = Field(default_factory=list)


class Message(Record):
    """A direct message between two members."""

    id: MessageId = Field(default_factory=new_id)
    from_user_id: UserId
    from_user_name: str = ""
    to_user_id: UserId
    text: str
    timestamp: int = Field(default_factory=now_ms)

    def involves(self, user_id: str) -> bool:
        return user_id in (self.from_user_id, self.to_user_id)
