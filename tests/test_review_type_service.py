"""Tests for product review ↔ review type mappings."""

import pytest
import pytest_asyncio

from catalog.core.events import EntityEventType
from catalog.core.exceptions import InvalidArgumentError
from catalog.domain.review_type import ProductReviewReviewTypeMapping, ReviewType
from catalog.services.cache_keys import PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL
from catalog.services.review_type import ReviewTypeService


@pytest.fixture
def service(db_session, cache, events):
    return ReviewTypeService(db_session, cache, events)


@pytest_asyncio.fixture
async def review_type(service, recorder):
    review_type = ReviewType(name="Delivery", description="Was it on time", display_order=1)
    await service.insert(review_type)
    recorder.clear()
    return review_type


def _mapping(product_review_id, review_type, rating=4):
    return ProductReviewReviewTypeMapping(
        product_review_id=product_review_id, review_type_id=review_type.id, rating=rating
    )


async def test_inserted_mapping_is_returned_for_its_parent_only(service, review_type):
    mapping = _mapping(5, review_type)
    await service.insert_mapping(mapping)

    assert await service.get_mappings_by_product_review_id(5) == [mapping]
    assert await service.get_mappings_by_product_review_id(6) == []


async def test_mappings_are_ordered_by_id(service, review_type):
    inserted = [_mapping(5, review_type, rating=r) for r in (1, 2, 3)]
    await service.insert_mapping(_mapping(9, review_type))
    for mapping in inserted:
        await service.insert_mapping(mapping)

    result = await service.get_mappings_by_product_review_id(5)

    assert [m.id for m in result] == sorted(m.id for m in inserted)
    assert all(m.product_review_id == 5 for m in result)


async def test_each_parent_gets_its_own_cache_entry(service, review_type, cache):
    await service.insert_mapping(_mapping(5, review_type))

    # populate the other parent first; it must not leak into parent 5
    assert await service.get_mappings_by_product_review_id(6) == []
    assert len(await service.get_mappings_by_product_review_id(5)) == 1

    assert PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL.create(5) in cache
    assert PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL.create(6) in cache


async def test_insert_mapping_invalidates_cached_parent(service, review_type):
    assert await service.get_mappings_by_product_review_id(5) == []

    await service.insert_mapping(_mapping(5, review_type))

    assert len(await service.get_mappings_by_product_review_id(5)) == 1


async def test_insert_mapping_publishes_inserted(service, review_type, recorder):
    mapping = _mapping(5, review_type)
    await service.insert_mapping(mapping)

    assert [(e.event_type, e.entity) for e in recorder.events] == [
        (EntityEventType.INSERTED, mapping)
    ]


async def test_insert_mapping_rejects_none(service, review_type, recorder, cache):
    await service.get_mappings_by_product_review_id(5)

    with pytest.raises(InvalidArgumentError):
        await service.insert_mapping(None)

    assert recorder.events == []
    assert PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL.create(5) in cache


def test_mappings_expose_no_update_or_delete(service):
    assert not hasattr(service, "update_mapping")
    assert not hasattr(service, "delete_mapping")


async def test_deleting_review_type_drops_cached_mappings(service, review_type, cache):
    await service.insert_mapping(_mapping(5, review_type))
    await service.get_mappings_by_product_review_id(5)

    await service.delete(review_type)

    assert PRODUCT_REVIEW_REVIEW_TYPE_MAPPINGS_ALL.create(5) not in cache
    assert await service.get_mappings_by_product_review_id(5) == []
