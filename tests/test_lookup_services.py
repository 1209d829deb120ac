"""Behaviour shared by every cached lookup service.

Each test runs once per entity kind: category, manufacturer and product
templates plus review types.
"""

from unittest.mock import AsyncMock

import pytest

from catalog.core.events import EntityEventType
from catalog.core.exceptions import InvalidArgumentError
from catalog.domain.review_type import ReviewType
from catalog.domain.templates import CategoryTemplate, ManufacturerTemplate, ProductTemplate
from catalog.services.review_type import ReviewTypeService
from catalog.services.templates import (
    CategoryTemplateService,
    ManufacturerTemplateService,
    ProductTemplateService,
)


def _category(display_order):
    return CategoryTemplate(
        name=f"Category {display_order}", view_path="CategoryTemplate.Grid", display_order=display_order
    )


def _manufacturer(display_order):
    return ManufacturerTemplate(
        name=f"Manufacturer {display_order}",
        view_path="ManufacturerTemplate.Grid",
        display_order=display_order,
    )


def _product(display_order):
    return ProductTemplate(
        name=f"Product {display_order}",
        view_path="ProductTemplate.Simple",
        display_order=display_order,
        ignored_product_types="10",
    )


def _review_type(display_order):
    return ReviewType(
        name=f"Quality {display_order}", description="How good is it", display_order=display_order
    )


KINDS = [
    pytest.param((CategoryTemplateService, _category), id="category_template"),
    pytest.param((ManufacturerTemplateService, _manufacturer), id="manufacturer_template"),
    pytest.param((ProductTemplateService, _product), id="product_template"),
    pytest.param((ReviewTypeService, _review_type), id="review_type"),
]


@pytest.fixture(params=KINDS)
def kind(request, db_session, cache, events):
    service_class, make = request.param
    return service_class(db_session, cache, events), make


async def test_get_by_id_zero_never_queries(kind):
    service, _ = kind
    service._repo = AsyncMock(wraps=service._repo)

    assert await service.get_by_id(0) is None
    service._repo.get_by_id.assert_not_awaited()


async def test_get_by_id_returns_stored_or_none(kind):
    service, make = kind
    entity = make(1)
    await service.insert(entity)

    assert entity.id
    assert await service.get_by_id(entity.id) is entity
    assert await service.get_by_id(entity.id + 100) is None


async def test_get_all_orders_by_display_order_then_id(kind):
    service, make = kind
    inserted = [make(20), make(10), make(10)]
    for entity in inserted:
        await service.insert(entity)
    ids = [e.id for e in inserted]

    result = await service.get_all()

    assert [e.id for e in result] == [ids[1], ids[2], ids[0]]
    assert [e.display_order for e in result] == [10, 10, 20]


async def test_get_all_is_served_from_cache(kind):
    service, make = kind
    await service.insert(make(1))

    first = await service.get_all()
    service._repo = AsyncMock(wraps=service._repo)
    second = await service.get_all()

    assert second is first
    service._repo.all.assert_not_awaited()
    assert service.all_cache_key in service._cache


async def test_writes_invalidate_cached_list(kind):
    service, make = kind
    first = make(5)
    await service.insert(first)
    assert [e.id for e in await service.get_all()] == [first.id]

    second = make(1)
    await service.insert(second)
    assert [e.id for e in await service.get_all()] == [second.id, first.id]

    first.display_order = 0
    await service.update(first)
    assert [e.id for e in await service.get_all()] == [first.id, second.id]

    await service.delete(second)
    assert [e.id for e in await service.get_all()] == [first.id]


@pytest.mark.parametrize("operation", ["insert", "update", "delete"])
async def test_none_is_rejected_before_any_side_effect(kind, recorder, operation):
    service, make = kind
    await service.insert(make(1))
    await service.get_all()
    recorder.clear()
    service._repo = AsyncMock(wraps=service._repo)

    with pytest.raises(InvalidArgumentError) as exc_info:
        await getattr(service, operation)(None)

    assert exc_info.value.status_code == 400
    assert recorder.events == []
    assert service.all_cache_key in service._cache
    service._repo.insert.assert_not_awaited()
    service._repo.update.assert_not_awaited()
    service._repo.delete.assert_not_awaited()


async def test_each_write_publishes_exactly_one_event(kind, recorder):
    service, make = kind
    entity = make(1)

    await service.insert(entity)
    await service.update(entity)
    await service.delete(entity)

    assert [(e.event_type, e.entity) for e in recorder.events] == [
        (EntityEventType.INSERTED, entity),
        (EntityEventType.UPDATED, entity),
        (EntityEventType.DELETED, entity),
    ]


async def test_insert_event_sees_persisted_identity(kind, events):
    service, make = kind
    ids = []
    events.subscribe(lambda event: ids.append(event.entity.id))

    await service.insert(make(1))

    assert ids and ids[0] > 0


@pytest.mark.parametrize("operation", ["insert", "update", "delete"])
async def test_failed_persist_publishes_nothing(kind, recorder, operation):
    service, make = kind
    await service.get_all()
    service._repo = AsyncMock(wraps=service._repo)
    getattr(service._repo, operation).side_effect = RuntimeError("database unavailable")

    with pytest.raises(RuntimeError, match="database unavailable"):
        await getattr(service, operation)(make(1))

    assert recorder.events == []
    assert service.all_cache_key in service._cache


async def test_invalid_argument_names_the_entity(db_session, cache, events):
    service = CategoryTemplateService(db_session, cache, events)

    with pytest.raises(InvalidArgumentError) as exc_info:
        await service.insert(None)

    assert exc_info.value.argument == "category_template"
