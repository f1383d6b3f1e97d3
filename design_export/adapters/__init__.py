"""Export adapter abstraction and registry."""

from design_export.adapters.lib import (
    ExportAdapter,
    ExportContext,
    get_adapter,
    list_adapters,
    plain_number,
    register_adapter,
    stable_id,
)

__all__ = [
    "ExportAdapter",
    "ExportContext",
    "get_adapter",
    "list_adapters",
    "plain_number",
    "register_adapter",
    "stable_id",
]
