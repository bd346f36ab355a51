import asyncio

import pytest

from src.domain.entities.comment import CommentDraft
from src.domain.exceptions import UsernameTakenError
from src.domain.value_objects import DiscussionId, Operation, UserId, Username
from src.infrastructure.persistence.memory_repositories import (
    InMemoryCommentRepository,
    InMemoryDiscussionRepository,
    InMemoryStore,
    InMemoryUserRepository,
)
from tests.factories import TickingClock, make_comment, make_discussion, store_comment


@pytest.fixture()
def store():
    return InMemoryStore(clock=TickingClock())


@pytest.mark.asyncio
async def test_user_ids_are_sequential_and_names_unique(store):
    users = InMemoryUserRepository(store)

    alice = await users.add(Username("alice"), "hash")
    bob = await users.add(Username("bob"), "hash")

    assert (alice.id.value, bob.id.value) == (1, 2)
    assert await users.get_by_username(Username("bob")) == bob
    assert await users.get_by_id(UserId(3)) is None
    with pytest.raises(UsernameTakenError):
        await users.add(Username("alice"), "other")
    assert await users.count() == 2


@pytest.mark.asyncio
async def test_discussions_newest_first_with_id_tiebreak(store):
    repo = InMemoryDiscussionRepository(store)
    store.discussions[1] = make_discussion(1, seconds=0)
    store.discussions[2] = make_discussion(2, seconds=5)
    store.discussions[3] = make_discussion(3, seconds=5)

    listed = await repo.list_newest_first()

    assert [d.id.value for d in listed] == [3, 2, 1]


@pytest.mark.asyncio
async def test_discussion_carries_current_username(store):
    await InMemoryUserRepository(store).add(Username("alice"), "hash")
    repo = InMemoryDiscussionRepository(store)

    created = await repo.add(UserId(1), 12.5)
    fetched = await repo.get_by_id(DiscussionId(created.id.value))

    assert fetched.username == "alice"
    assert fetched.start_number == 12.5


@pytest.mark.asyncio
async def test_comments_listed_in_creation_order(store):
    repo = InMemoryCommentRepository(store)
    # Same timestamp: id decides
    store_comment(store, make_comment(3, seconds=10))
    store_comment(store, make_comment(2, seconds=10))
    store_comment(store, make_comment(1, seconds=20))
    store_comment(store, make_comment(4, discussion_id=2, seconds=0))

    assert [c.id.value for c in await repo.list_all()] == [4, 2, 3, 1]
    assert [c.id.value for c in await repo.list_by_discussion(DiscussionId(1))] == [2, 3, 1]
    assert await repo.list_by_discussion(DiscussionId(9)) == []


@pytest.mark.asyncio
async def test_comment_add_stores_result_and_username(store):
    await InMemoryUserRepository(store).add(Username("carol"), "hash")
    repo = InMemoryCommentRepository(store)
    draft = CommentDraft(
        discussion_id=DiscussionId(1),
        parent_id=None,
        user_id=UserId(1),
        operation=Operation.MULTIPLY,
        operand=4.0,
    )

    comment = await repo.add(draft, 40.0)

    assert comment.id.value == 1
    assert comment.result == 40.0
    assert comment.username == "carol"
    assert await repo.count() == 1


@pytest.mark.asyncio
async def test_concurrent_adds_get_distinct_ids(store):
    repo = InMemoryCommentRepository(store)
    draft = CommentDraft(
        discussion_id=DiscussionId(1),
        parent_id=None,
        user_id=UserId(1),
        operation=Operation.ADD,
        operand=1.0,
    )

    comments = await asyncio.gather(*(repo.add(draft, 1.0) for _ in range(10)))

    assert sorted(c.id.value for c in comments) == list(range(1, 11))


@pytest.mark.asyncio
async def test_malformed_comment_rows_are_skipped_on_list(store):
    repo = InMemoryCommentRepository(store)
    store_comment(store, make_comment(1))
    store_comment(store, make_comment(2, operation="MOD"))
    store_comment(store, make_comment(3, parent_id=1))

    listed = await repo.list_all()

    assert [c.id.value for c in listed] == [1, 3]
    assert all(isinstance(c.operation, Operation) for c in listed)
    assert [c.id.value for c in await repo.list_by_discussion(DiscussionId(1))] == [1, 3]


@pytest.mark.asyncio
async def test_legacy_string_operations_are_read_as_enum(store):
    store_comment(store, make_comment(1, operation="DIVIDE"))

    [comment] = await InMemoryCommentRepository(store).list_all()

    assert comment.operation is Operation.DIVIDE
