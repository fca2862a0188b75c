"""Core systems for the table UI."""

from table_ui.core.table_adapter import TableAdapter, TableSnapshot, UICardInfo

__all__ = [
    "TableAdapter",
    "TableSnapshot",
    "UICardInfo",
]
