"""Collection-oriented persistence for users, tasks and messages."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

from pydantic import ValidationError

from .backend import KeyValueBackend
from .models import BoardTask, Comment, Message, Record, User

log = logging.getLogger("aervix.storage")

USERS_KEY = "users"
TASKS_PREFIX = "tasks:"
MESSAGES_KEY = "messages"

R = TypeVar("R", bound=Record)


def tasks_key(user_id: str) -> str:
    """Key of the task partition owned by ``user_id``."""
    return f"{TASKS_PREFIX}{user_id}"


class ClubStorage:
    """Read and write whole collections on a :class:`KeyValueBackend`.

    Three logical collections are kept: ``users``, one ``tasks:<userId>``
    partition per task owner, and a global ``messages`` list. Every mutation
    loads one collection, changes it and writes it back in full.

    Reads never raise. A key that was never written, or whose stored value
    is not a JSON list, reads as an empty collection. Individual entries that
    do not validate are skipped on read but written back untouched, so one
    damaged record never costs the rest of its collection.
    No referential checks are made between collections.
    """

    def __init__(self, backend: KeyValueBackend) -> None:
        self.backend = backend

    # ------------------------------------------------------------------
    # Internal helpers
    def _load(self, key: str) -> list[Any]:
        raw = self.backend.get_item(key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError:
            log.warning("Collection %r is not valid JSON; treating as empty", key)
            return []
        if not isinstance(data, list):
            log.warning("Collection %r is not a list; treating as empty", key)
            return []
        return data

    def _read(self, key: str, model: type[R]) -> list[R]:
        records: list[R] = []
        for index, item in enumerate(self._load(key)):
            try:
                records.append(model.model_validate(item))
            except ValidationError as exc:
                log.warning(
                    "Skipping entry %d of %r (%d validation errors)",
                    index,
                    key,
                    exc.error_count(),
                )
        return records

    def _write(self, key: str, documents: list[Any]) -> None:
        self.backend.set_item(key, json.dumps(documents, ensure_ascii=False))

    @staticmethod
    def _index_of(documents: list[Any], record_id: str) -> int | None:
        return next(
            (
                i
                for i, doc in enumerate(documents)
                if isinstance(doc, dict) and doc.get("id") == record_id
            ),
            None,
        )

    # ------------------------------------------------------------------
    # Users
    def list_users(self) -> list[User]:
        """Return every registered user in stored order."""
        return self._read(USERS_KEY, User)

    def upsert_user(self, user: User) -> None:
        """Replace the user with the same id in place, or append ``user``."""
        documents = self._load(USERS_KEY)
        index = self._index_of(documents, user.id)
        if index is None:
            documents.append(user.to_document())
        else:
            documents[index] = user.to_document()
        self._write(USERS_KEY, documents)

    # ------------------------------------------------------------------
    # Tasks
    def list_tasks_for_owner(self, user_id: str) -> list[BoardTask]:
        """Return the task partition of ``user_id``."""
        return self._read(tasks_key(user_id), BoardTask)

    def append_task(self, user_id: str, task: BoardTask) -> None:
        """Append ``task`` to the partition of ``user_id``."""
        documents = self._load(tasks_key(user_id))
        documents.append(task.to_document())
        self._write(tasks_key(user_id), documents)

    def list_all_tasks(self) -> list[BoardTask]:
        """Return tasks from every partition, newest first.

        This scans every key in the backend; there is no index.
        """
        all_tasks: list[BoardTask] = []
        for key in self.backend.keys():
            if key.startswith(TASKS_PREFIX):
                all_tasks.extend(self._read(key, BoardTask))
        all_tasks.sort(key=lambda t: t.timestamp, reverse=True)
        return all_tasks

    def add_comment(self, owner_id: str, task_id: str, comment: Comment) -> bool:
        """Append ``comment`` to task ``task_id`` in the partition of ``owner_id``.

        Returns ``False`` and leaves the partition untouched when the task is
        not found or its stored entry cannot be read.
        """
        documents = self._load(tasks_key(owner_id))
        index = self._index_of(documents, task_id)
        if index is None:
            log.debug("Task %s not found for owner %s; comment dropped", task_id, owner_id)
            return False
        try:
            task = BoardTask.model_validate(documents[index])
        except ValidationError:
            log.warning("Task %s of owner %s is unreadable; comment dropped", task_id, owner_id)
            return False
        task.comments.append(comment)
        documents[index] = task.to_document()
        self._write(tasks_key(owner_id), documents)
        return True

    # ------------------------------------------------------------------
    # Messages
    def list_messages_for(self, user_id: str) -> list[Message]:
        """Return messages sent or received by ``user_id``, oldest first."""
        messages = [m for m in self._read(MESSAGES_KEY, Message) if m.involves(user_id)]
        messages.sort(key=lambda m: m.timestamp)
        return messages

    def send_message(self, message: Message) -> None:
        """Append ``message`` to the global message collection."""
        documents = self._load(MESSAGES_KEY)
        documents.append(message.to_document())
        self._write(MESSAGES_KEY, documents)
