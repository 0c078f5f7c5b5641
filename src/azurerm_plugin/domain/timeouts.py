"""Per-operation timeouts and deadlines."""
import time
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from azurerm_plugin.domain.core.exceptions import OperationTimeoutError

MINUTE = 60


class ResourceTimeouts(BaseModel):
    """Independent time budgets, in seconds, for each operation type."""

    create: float = Field(30 * MINUTE, description="Create timeout in seconds")
    read: float = Field(5 * MINUTE, description="Read timeout in seconds")
    update: float = Field(30 * MINUTE, description="Update timeout in seconds")
    delete: float = Field(30 * MINUTE, description="Delete timeout in seconds")

    @field_validator('create', 'read', 'update', 'delete')
    @classmethod
    def validate_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Timeout must be positive")
        return v

    def merged(self, overrides: Optional[dict]) -> "ResourceTimeouts":
        """Return a copy with any non-empty overrides applied."""
        if not overrides:
            return self
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return ResourceTimeouts(**data)


class Deadline:
    """A caller-supplied time budget for one operation.

    ``remaining()`` is passed to every SDK call made during the operation as
    its ``timeout``, so the whole operation is bounded by the budget.
    """

    def __init__(self, operation: str, timeout: float, clock=time.monotonic):
        self.operation = operation
        self.timeout = timeout
        self._clock = clock
        self._expires_at = clock() + timeout

    @classmethod
    def for_create_update(cls, timeouts: ResourceTimeouts, is_new: bool) -> "Deadline":
        if is_new:
            return cls("create", timeouts.create)
        return cls("update", timeouts.update)

    @classmethod
    def for_read(cls, timeouts: ResourceTimeouts) -> "Deadline":
        return cls("read", timeouts.read)

    @classmethod
    def for_delete(cls, timeouts: ResourceTimeouts) -> "Deadline":
        return cls("delete", timeouts.delete)

    def remaining(self) -> float:
        left = self._expires_at - self._clock()
        if left <= 0:
            raise OperationTimeoutError(self.operation, self.timeout)
        return left

