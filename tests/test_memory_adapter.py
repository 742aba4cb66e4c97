from concurrent.futures import ThreadPoolExecutor
import asyncio

from app.adapters.memory_adapter import InMemoryBlogPostAdapter


async def test_empty_store_lists_nothing(store):
    assert await store.list_blog_posts() == []


async def test_ids_start_at_one_and_increase(store):
    first = await store.create_blog_post("Title 1", "Text 1")
    second = await store.create_blog_post("Title 2", "Text 2")
    assert (first.id, second.id) == (1, 2)

    posts = await store.list_blog_posts()
    assert [(p.id, p.title, p.text) for p in posts] == [
        (1, "Title 1", "Text 1"),
        (2, "Title 2", "Text 2"),
    ]


async def test_deleted_ids_are_not_reused(store):
    await store.create_blog_post("a", "a")
    second = await store.create_blog_post("b", "b")
    assert await store.delete_blog_post(second.id) is True

    third = await store.create_blog_post("c", "c")
    assert third.id == 3


async def test_delete_missing_returns_false(store):
    assert await store.delete_blog_post(1) is False


async def test_update_changes_only_text(store):
    post = await store.create_blog_post("Title", "old")
    updated = await store.update_blog_post(post.id, "new")

    assert updated.id == post.id
    assert updated.title == "Title"
    assert updated.text == "new"
    assert (await store.get_blog_post(post.id)).text == "new"


async def test_update_missing_returns_none(store):
    assert await store.update_blog_post(99, "x") is None


async def test_returned_records_do_not_alias_stored_state(store):
    post = await store.create_blog_post("Title", "Text")
    post.text = "mutated outside"

    fetched = await store.get_blog_post(post.id)
    fetched.title = "also mutated"

    stored = await store.get_blog_post(post.id)
    assert (stored.title, stored.text) == ("Title", "Text")


async def test_clear_keeps_id_counter(store):
    await store.create_blog_post("a", "a")
    await store.create_blog_post("b", "b")
    await store.clear()

    assert await store.list_blog_posts() == []
    assert (await store.create_blog_post("c", "c")).id == 3


async def test_seeded_store_starts_with_sample_posts():
    store = InMemoryBlogPostAdapter(seed_sample_posts=True)
    posts = await store.list_blog_posts()

    assert [(p.id, p.title, p.text) for p in posts] == [
        (1, "Title 1", "Text 1"),
        (2, "Title 2", "Text 2"),
    ]
    assert (await store.create_blog_post("Title 3", "Text 3")).id == 3


def test_concurrent_creates_get_unique_ids():
    store = InMemoryBlogPostAdapter()

    def create(i):
        return asyncio.run(store.create_blog_post(f"Title {i}", f"Text {i}")).id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(create, range(200)))

    assert sorted(ids) == list(range(1, 201))
    assert len(asyncio.run(store.list_blog_posts())) == 200
