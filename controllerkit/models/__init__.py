"""
Model adapters.

CrudController speaks the ``Model`` protocol (find, create, find_by_id,
update_by_id, remove_by_id). Document-store models usually fit it as-is;
the adapters here bridge the ones that do not.
"""

from .relational import RelationalModelAdapter

__all__ = [
    "RelationalModelAdapter",
]
