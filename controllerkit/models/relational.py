"""
Relational model adapter.

Relational models address rows through ``where`` clauses rather than
``*_by_id`` helpers. The adapter presents such a model through the
``Model`` protocol used by CrudController; pair it with the ``int_id``
identifier strategy.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..controller.base import resolve

logger = logging.getLogger("controllerkit.models.relational")


class RelationalModelAdapter:
    """
    ``Model`` protocol over a relational-style model.

    The wrapped model is expected to offer:
        find_all(where=..., attributes=...)
        find_by_pk(pk)
        create(values)
        update(values, where=..., returning=True) -> (count, rows)
        destroy(where=...)

    Each call may be sync or async.

    Args:
        model: Wrapped relational model
        pk: Primary key column name
    """

    def __init__(self, model: Any, *, pk: str = "id"):
        self.model = model
        self.pk = pk

    def __bool__(self) -> bool:
        return self.model is not None

    async def find(self, query: Mapping[str, Any], fields: str = "") -> Sequence[Any]:
        kwargs: dict[str, Any] = {"where": dict(query)}
        if fields:
            kwargs["attributes"] = fields.split()
        return await resolve(self.model.find_all(**kwargs))

    async def create(self, data: Any) -> Any:
        return await resolve(self.model.create(data))

    async def find_by_id(self, item_id: Any) -> Optional[Any]:
        return await resolve(self.model.find_by_pk(item_id))

    async def update_by_id(self, item_id: Any, data: Any) -> Any:
        result = await resolve(
            self.model.update(data, where={self.pk: item_id}, returning=True)
        )
        # Backends without RETURNING answer with the affected count only
        rows = result[1] if len(result) > 1 else []
        if not rows:
            logger.debug("Update of %s=%r returned no rows", self.pk, item_id)
            return None

        row = rows[0]
        return getattr(row, "data_values", row)

    async def remove_by_id(self, item_id: Any) -> Any:
        return await resolve(self.model.destroy(where={self.pk: item_id}))
