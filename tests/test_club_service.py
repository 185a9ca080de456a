from aervix_club.core.backend import MemoryBackend
from aervix_club.core.models import User
from aervix_club.core.storage import ClubStorage
from aervix_club.services.club import ClubService


def make_service():
    ticks = iter(range(1000, 100000, 10))
    return ClubService(ClubStorage(MemoryBackend()), clock=lambda: next(ticks))


def test_register_and_login_flow():
    svc = make_service()
    alice, err = svc.register("Alice", "EEE", "alice@example.com", "pw1")
    assert err is None and alice is not None
    assert svc.storage.list_users() == [alice]

    # name or email both work, password must match
    assert svc.login("Alice", "pw1").id == alice.id
    assert svc.login("alice@example.com", "pw1").id == alice.id
    assert svc.login("Alice", "wrong") is None
    assert svc.login("nobody", "pw1") is None


def test_register_requires_fields():
    svc = make_service()
    assert svc.register("", "EEE", "a@x", "pw") == (None, "Please fill all fields")
    assert svc.register("A", "EEE", "  ", "pw") == (None, "Please fill all fields")
    assert svc.register("A", "EEE", "a@x", "") == (None, "Please fill all fields")
    assert svc.storage.list_users() == []


def test_login_first_match_wins():
    svc = make_service()
    first, _ = svc.register("Sam", "CSE", "sam1@x", "pw")
    svc.register("Sam", "ECE", "sam2@x", "pw")
    assert svc.login("Sam", "pw").id == first.id


def test_update_profile_image_keeps_position():
    svc = make_service()
    a, _ = svc.register("A", "X", "a@x", "pw")
    b, _ = svc.register("B", "Y", "b@x", "pw")
    updated = svc.update_profile_image(a, "data:image/png;base64,AAA")

    users = svc.storage.list_users()
    assert [u.id for u in users] == [a.id, b.id]
    assert users[0].profile_image == updated.profile_image
    assert a.profile_image is None  # original object untouched


def test_submit_task_and_feed():
    svc = make_service()
    a, _ = svc.register("A", "X", "a@x", "pw")
    b, _ = svc.register("B", "Y", "b@x", "pw")

    t1, err = svc.submit_task(a, "uno", "Blink", "void loop(){}", "https://example.com")
    assert err is None
    t2, _ = svc.submit_task(b, "mega", "Servo", "", "")

    assert [t.id for t in svc.tasks_for(a)] == [t1.id]
    assert [t.id for t in svc.community_feed()] == [t2.id, t1.id]
    assert t1.user_name == "A"


def test_submit_task_rejects_bad_input():
    svc = make_service()
    a, _ = svc.register("A", "X", "a@x", "pw")
    assert svc.submit_task(a, "esp32", "Wifi", "", "") == (None, "Unknown board")
    assert svc.submit_task(a, "uno", "  ", "", "") == (None, "Task name is required")
    assert svc.tasks_for(a) == []


def test_comment_on_task():
    svc = make_service()
    a, _ = svc.register("A", "X", "a@x", "pw")
    b, _ = svc.register("B", "Y", "b@x", "pw")
    task, _ = svc.submit_task(a, "nano", "LED", "", "")

    assert svc.comment_on(b, task, "   ") is None
    c1 = svc.comment_on(b, task, "Nice wiring")
    c2 = svc.comment_on(a, task, "Thanks!")

    stored = svc.community_feed()[0]
    assert [c.id for c in stored.comments] == [c1.id, c2.id]
    assert stored.comments[0].user_name == "B"


def test_comment_on_missing_task():
    svc = make_service()
    a, _ = svc.register("A", "X", "a@x", "pw")
    task, _ = svc.submit_task(a, "nano", "LED", "", "")
    ghost = task.model_copy(update={"id": "gone"})
    assert svc.comment_on(a, ghost, "hello?") is None
    assert svc.tasks_for(a)[0].comments == []


def test_messages_and_conversation():
    svc = make_service()
    a, _ = svc.register("A", "X", "a@x", "pw")
    b, _ = svc.register("B", "Y", "b@x", "pw")
    c, _ = svc.register("C", "Z", "c@x", "pw")

    m1 = svc.send_message(a, b, "hi b")
    m2 = svc.send_message(b, a, "hi a")
    m3 = svc.send_message(a, c, "hi c")
    assert svc.send_message(a, b, "") is None

    assert [m.id for m in svc.inbox(a)] == [m1.id, m2.id, m3.id]
    assert [m.id for m in svc.conversation(a, b)] == [m1.id, m2.id]
    assert [m.id for m in svc.conversation(c, a)] == [m3.id]
    assert svc.conversation(b, c) == []


def test_search_people_and_directory():
    svc = make_service()
    me, _ = svc.register("Maya", "Mechatronics", "maya@x", "pw")
    svc.register("Ravi", "Electronics", "ravi@x", "pw")
    svc.register("Tom", "Civil", "tom@x", "pw")

    names = [u.name for u in svc.search_people("TRON", exclude_user_id=me.id)]
    assert names == ["Ravi"]
    assert [u.name for u in svc.search_people("", exclude_user_id=me.id)] == ["Ravi", "Tom"]
    assert [u.name for u in svc.search_people("maya")] == ["Maya"]
    assert me not in svc.directory(me.id)
    assert len(svc.directory(me.id)) == 2


def test_user_ids_are_unique_when_registered_rapidly():
    svc = make_service()
    users = [svc.register(f"U{i}", "D", f"u{i}@x", "pw")[0] for i in range(50)]
    assert len({u.id for u in users}) == 50
    assert isinstance(users[0], User)
