"""Unit tests for the ArticleService."""

from datetime import datetime, timedelta, timezone

import pytest

from blog.application.schemas import ArticleCreate, ArticleUpdate
from blog.application.services import ArticleService
from blog.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from tests.fakes import FakeArticleRepository


@pytest.fixture
def service() -> ArticleService:
    return ArticleService(FakeArticleRepository())


@pytest.mark.asyncio
async def test_create_article(service: ArticleService):
    data = ArticleCreate(title="Test Article", content="Some content")
    article = await service.create_article(data)
    assert article.id is not None
    assert article.title == "Test Article"
    assert article.slug == "test-article"
    assert article.is_published is False


@pytest.mark.asyncio
async def test_same_title_gets_numbered_slugs_in_creation_order(service: ArticleService):
    slugs = [
        (await service.create_article(ArticleCreate(title="Same Title", content="x"))).slug
        for _ in range(3)
    ]
    assert slugs == ["same-title", "same-title-1", "same-title-2"]


@pytest.mark.asyncio
async def test_get_article_not_found(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.get_article(999)


@pytest.mark.asyncio
async def test_get_article_by_slug_or_numeric_id(service: ArticleService):
    created = await service.create_article(
        ArticleCreate(title="Lookup", content="c", is_published=True)
    )
    assert (await service.get_article("lookup")).id == created.id
    assert (await service.get_article("LOOKUP ")).id == created.id
    assert (await service.get_article(str(created.id))).id == created.id
    assert (await service.get_article(created.id)).slug == "lookup"


@pytest.mark.asyncio
async def test_numeric_slug_wins_over_id(service: ArticleService):
    first = await service.create_article(ArticleCreate(title="First", content="c", is_published=True))
    numeric = await service.create_article(
        ArticleCreate(title=str(first.id), content="c", is_published=True)
    )
    assert (await service.get_article(str(first.id))).id == numeric.id


@pytest.mark.asyncio
async def test_drafts_hidden_unless_requested(service: ArticleService):
    draft = await service.create_article(ArticleCreate(title="Draft", content="c"))
    with pytest.raises(EntityNotFoundError):
        await service.get_article(draft.slug)
    assert (await service.get_article(draft.slug, include_unpublished=True)).id == draft.id


@pytest.mark.asyncio
async def test_list_articles(service: ArticleService):
    await service.create_article(ArticleCreate(title="A1", content="C1", is_published=True))
    await service.create_article(ArticleCreate(title="A2", content="C2", is_published=True))
    page = await service.list_articles()
    assert len(page.items) == 2
    assert page.total == 2


@pytest.mark.asyncio
async def test_list_articles_public_sees_only_published(service: ArticleService):
    await service.create_article(ArticleCreate(title="Live", content="c", is_published=True))
    await service.create_article(ArticleCreate(title="Hidden", content="c"))

    public = await service.list_articles(published=False)
    assert [a.title for a in public.items] == ["Live"]

    drafts = await service.list_articles(published=False, include_unpublished=True)
    assert [a.title for a in drafts.items] == ["Hidden"]

    everything = await service.list_articles(include_unpublished=True)
    assert everything.total == 2


@pytest.mark.asyncio
async def test_list_articles_search_and_ordering(service: ArticleService):
    now = datetime.now(timezone.utc)
    await service.create_article(
        ArticleCreate(title="Old python", content="c", is_published=True, published_date=now - timedelta(days=2))
    )
    await service.create_article(
        ArticleCreate(title="New", content="all about Python", is_published=True, published_date=now - timedelta(days=1))
    )
    await service.create_article(ArticleCreate(title="Other", content="rust", is_published=True))

    page = await service.list_articles(search="  PYTHON ")
    assert [a.title for a in page.items] == ["New", "Old python"]


@pytest.mark.asyncio
async def test_list_articles_clamps_paging(service: ArticleService):
    for i in range(3):
        await service.create_article(ArticleCreate(title=f"P{i}", content="c", is_published=True))

    page = await service.list_articles(page=0, limit=1000)
    assert page.page == 1
    assert page.limit == 100

    second = await service.list_articles(page=2, limit=2)
    assert len(second.items) == 1
    assert second.total_pages == 2
    assert second.has_previous is True
    assert second.has_more is False


@pytest.mark.asyncio
async def test_update_article(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="Old", content="Old content"))
    updated = await service.update_article(created.id, ArticleUpdate(title="New"))
    assert updated.title == "New"
    assert updated.slug == "new"
    assert updated.content == "Old content"


@pytest.mark.asyncio
async def test_update_without_title_change_keeps_slug(service: ArticleService):
    await service.create_article(ArticleCreate(title="Same Title", content="a"))
    second = await service.create_article(ArticleCreate(title="Same Title", content="b"))
    assert second.slug == "same-title-1"

    updated = await service.update_article(second.id, ArticleUpdate(content="edited", is_published=True))
    assert updated.slug == "same-title-1"

    retitled_same = await service.update_article(second.id, ArticleUpdate(title="Same Title"))
    assert retitled_same.slug == "same-title-1"


@pytest.mark.asyncio
async def test_update_bumps_updated_at(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="T", content="c"))
    first = await service.update_article(created.id, ArticleUpdate(content="c2"))
    second = await service.update_article(created.id, ArticleUpdate(content="c3"))
    assert created.created_at <= created.updated_at < first.updated_at < second.updated_at


@pytest.mark.asyncio
async def test_update_with_null_published_date_resets_to_now(service: ArticleService):
    past = datetime(2020, 1, 1, tzinfo=timezone.utc)
    created = await service.create_article(ArticleCreate(title="T", content="c", published_date=past))
    assert created.published_date == past

    kept = await service.update_article(created.id, ArticleUpdate(content="x"))
    assert kept.published_date == past

    reset = await service.update_article(created.id, ArticleUpdate(published_date=None))
    assert reset.published_date > past


@pytest.mark.asyncio
async def test_delete_article(service: ArticleService):
    created = await service.create_article(ArticleCreate(title="Delete Me", content="..."))
    deleted = await service.delete_article(created.slug)
    assert deleted.id == created.id
    with pytest.raises(EntityNotFoundError):
        await service.get_article(created.id, include_unpublished=True)


@pytest.mark.asyncio
async def test_delete_missing_article(service: ArticleService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_article("nope")


@pytest.mark.asyncio
async def test_store_slug_conflict_propagates():
    repo = FakeArticleRepository()
    service = ArticleService(repo)
    await service.create_article(ArticleCreate(title="Race", content="c"))

    async def _slug_always_free(slug, exclude_id=None):
        return False

    repo.slug_exists = _slug_always_free

    with pytest.raises(DuplicateEntityError):
        await service.create_article(ArticleCreate(title="Race", content="again"))
    assert await repo.count() == 1
