import asyncio

from autothumbs.services.category_tree import resolve_subtree_ids
from conftest import FakeCatalog, make_category


def test_leaf_category_resolves_to_itself():
    catalog = FakeCatalog(categories=[make_category(5)])

    assert asyncio.run(resolve_subtree_ids(make_category(5), catalog)) == {5}


def test_subtree_includes_every_descendant(shoes_catalog):
    shoes = shoes_catalog.categories[5]

    ids = asyncio.run(resolve_subtree_ids(shoes, shoes_catalog))

    assert ids == {5, 6, 7, 8}
    # sibling and ancestor stay out
    assert 4 not in ids
    assert 1 not in ids


def test_each_call_builds_a_fresh_set(shoes_catalog):
    first = asyncio.run(resolve_subtree_ids(shoes_catalog.categories[6], shoes_catalog))
    second = asyncio.run(resolve_subtree_ids(shoes_catalog.categories[7], shoes_catalog))

    assert first == {6}
    assert second == {7, 8}


def test_failed_children_read_counts_as_no_children(shoes_catalog):
    shoes_catalog.failing_parents.add(5)

    ids = asyncio.run(resolve_subtree_ids(shoes_catalog.categories[5], shoes_catalog))

    assert ids == {5}


def test_failure_below_the_start_keeps_the_partial_tree(shoes_catalog):
    shoes_catalog.failing_parents.add(7)

    ids = asyncio.run(resolve_subtree_ids(shoes_catalog.categories[5], shoes_catalog))

    assert ids == {5, 6, 7}


def test_malformed_children_data_is_ignored(shoes_catalog):
    shoes_catalog.malformed_parents[5] = {"error": "bad response"}

    ids = asyncio.run(resolve_subtree_ids(shoes_catalog.categories[5], shoes_catalog))

    assert ids == {5}


def test_cyclic_parent_chain_terminates():
    catalog = FakeCatalog()
    catalog.malformed_parents[5] = [make_category(6, parent_id=5)]
    catalog.malformed_parents[6] = [make_category(5, parent_id=6)]

    ids = asyncio.run(resolve_subtree_ids(make_category(5), catalog))

    assert ids == {5, 6}
