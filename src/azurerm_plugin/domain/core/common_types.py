# src/azurerm_plugin/domain/core/common_types.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional


def normalize_location(location: str) -> str:
    """Normalize an Azure location, e.g. "West Europe" -> "westeurope"."""
    return location.replace(" ", "").lower()


def normalize_location_nilable(location: Optional[str]) -> str:
    if location is None:
        return ""
    return normalize_location(location)


@dataclass(frozen=True)
class Tags:
    """Resource tags, converted between configuration maps and SDK payloads."""
    items: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, str]:
        return self.items.copy()

    @classmethod
    def expand(cls, data: Optional[Mapping[str, Any]]) -> Tags:
        """Build tags from a local configuration map, stringifying values."""
        if not data:
            return cls()
        return cls(items={str(k): "" if v is None else str(v) for k, v in data.items()})

    @classmethod
    def flatten(cls, data: Optional[Mapping[str, Optional[str]]]) -> Tags:
        """Build tags from an SDK response, where values may be None."""
        if not data:
            return cls()
        return cls(items={k: v or "" for k, v in data.items()})

    def to_azure_format(self) -> Dict[str, str]:
        """Convert tags to the Azure SDK payload format."""
        return self.items.copy()

