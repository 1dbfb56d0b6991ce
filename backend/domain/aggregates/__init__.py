"""
Domain Aggregates

Aggregates are clusters of domain objects that can be treated as a single unit.
The aggregate root is the only member of the aggregate that outside objects
are allowed to hold references to.

- Menu: owns its MenuLine entries
- TableGroup: owns the membership of its order tables (as an id list)
"""

from .menu import Menu, MenuLine
from .table_group import TableGroup

__all__ = ["Menu", "MenuLine", "TableGroup"]
