"""Member-facing club operations built on :class:`ClubStorage`.

The storage layer performs no validation. This module owns the policies the
screens rely on: which registration fields are required, how a login is
matched, and which messages make up a conversation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.models import BoardTask, Comment, Message, User, now_ms
from ..core.storage import ClubStorage
from ..data.boards import get_board

log = logging.getLogger("aervix.club")


class ClubService:
    """Registration, project logging, comments and messaging."""

    def __init__(self, storage: ClubStorage, clock: Callable[[], int] = now_ms) -> None:
        self.storage = storage
        self.clock = clock

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------
    def register(
        self,
        name: str,
        department: str,
        email: str,
        password: str,
        profile_image: str | None = None,
    ) -> tuple[User | None, str | None]:
        if not (name.strip() and email.strip() and password.strip()):
            return None, "Please fill all fields"
        user = User(
            name=name,
            department=department,
            email=email,
            password=password,
            profile_image=profile_image or None,
        )
        self.storage.upsert_user(user)
        log.info("Registered user %s (%s)", user.name, user.id)
        return user, None

    def login(self, name_or_email: str, password: str) -> User | None:
        """Return the first user whose name or email and password match."""
        return next(
            (
                u
                for u in self.storage.list_users()
                if name_or_email in (u.name, u.email) and u.password == password
            ),
            None,
        )

    def update_profile_image(self, user: User, image: str | None) -> User:
        updated = user.model_copy(update={"profile_image": image or None})
        self.storage.upsert_user(updated)
        return updated

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------
    def submit_task(
        self,
        user: User,
        board_id: str,
        task_name: str,
        code_used: str,
        reference_url: str,
        circuit_design_image: str | None = None,
    ) -> tuple[BoardTask | None, str | None]:
        if get_board(board_id) is None:
            return None, "Unknown board"
        if not task_name.strip():
            return None, "Task name is required"
        task = BoardTask(
            user_id=user.id,
            user_name=user.name,
            user_profile=user.profile_image,
            board_id=board_id,
            task_name=task_name,
            code_used=code_used,
            reference_url=reference_url,
            circuit_design_image=circuit_design_image or None,
            timestamp=self.clock(),
        )
        self.storage.append_task(user.id, task)
        return task, None

    def tasks_for(self, user: User) -> list[BoardTask]:
        return self.storage.list_tasks_for_owner(user.id)

    def community_feed(self) -> list[BoardTask]:
        return self.storage.list_all_tasks()

    def comment_on(self, user: User, task: BoardTask, text: str) -> Comment | None:
        """Add a comment to ``task``; ``None`` if blank or the task is gone."""
        if not text.strip():
            return None
        comment = Comment(
            user_id=user.id,
            user_name=user.name,
            user_profile=user.profile_image,
            text=text,
            timestamp=self.clock(),
        )
        if not self.storage.add_comment(task.user_id, task.id, comment):
            return None
        return comment

    # ------------------------------------------------------------------
    # People & messaging
    # ------------------------------------------------------------------
    def search_people(self, query: str, exclude_user_id: str | None = None) -> list[User]:
        q = query.lower()
        return [
            u
            for u in self.storage.list_users()
            if u.id != exclude_user_id
            and (q in u.name.lower() or q in u.department.lower())
        ]

    def directory(self, exclude_user_id: str) -> list[User]:
        return [u for u in self.storage.list_users() if u.id != exclude_user_id]

    def send_message(self, sender: User, recipient: User, text: str) -> Message | None:
        if not text.strip():
            return None
        message = Message(
            from_user_id=sender.id,
            from_user_name=sender.name,
            to_user_id=recipient.id,
            text=text,
            timestamp=self.clock(),
        )
        self.storage.send_message(message)
        return message

    def inbox(self, user: User) -> list[Message]:
        return self.storage.list_messages_for(user.id)

    def conversation(self, user: User, other: User) -> list[Message]:
        """Messages exchanged between exactly ``user`` and ``other``, oldest first."""
        pair = {user.id, other.id}
        return [m for m in self.inbox(user) if {m.from_user_id, m.to_user_id} == pair]
