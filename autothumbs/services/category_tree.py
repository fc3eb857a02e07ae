# autothumbs/services/category_tree.py
import logging
from typing import List, Set
from ..models.category import Category

logger = logging.getLogger(__name__)

async def resolve_subtree_ids(start: Category, catalog) -> Set[int]:
    """Return the id of ``start`` and of every category below it.

    Children are read one level at a time through ``catalog.get_children``.
    A failed or malformed read counts as "no children" for that node, so the
    walk always yields at least ``{start.category_id}``.
    """
    visited = {start.category_id}
    pending: List[int] = [start.category_id]

    while pending:
        parent_id = pending.pop()
        for child in await _read_children(catalog, parent_id):
            if child.category_id in visited:
                logger.warning(
                    f"Category {child.category_id} reached twice below {start.category_id}, "
                    "skipping (cyclic parent chain?)"
                )
                continue
            visited.add(child.category_id)
            pending.append(child.category_id)

    return visited

async def _read_children(catalog, parent_id: int) -> List[Category]:
    try:
        children = await catalog.get_children(parent_id)
    except Exception as e:
        logger.warning(f"Could not read children of category {parent_id}: {e}")
        return []

    if not isinstance(children, (list, tuple)):
        logger.warning(
            f"Unexpected children data for category {parent_id}: {type(children).__name__}"
        )
        return []

    return list(children)
