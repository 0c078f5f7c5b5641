"""Tests for operation timeouts and deadlines."""

import pytest
from pydantic import ValidationError

from azurerm_plugin.domain.core.exceptions import OperationTimeoutError
from azurerm_plugin.domain.timeouts import MINUTE, Deadline, ResourceTimeouts


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.mark.unit
class TestResourceTimeouts:

    def test_defaults(self):
        timeouts = ResourceTimeouts()
        assert timeouts.create == 30 * MINUTE
        assert timeouts.read == 5 * MINUTE
        assert timeouts.update == 30 * MINUTE
        assert timeouts.delete == 30 * MINUTE

    def test_rejects_non_positive(self):
        with pytest.raises(ValidationError):
            ResourceTimeouts(read=0)

    def test_merged(self):
        merged = ResourceTimeouts().merged({"read": 60, "delete": None})
        assert merged.read == 60
        assert merged.delete == 30 * MINUTE

    def test_merged_without_overrides(self):
        timeouts = ResourceTimeouts()
        assert timeouts.merged(None) is timeouts


@pytest.mark.unit
class TestDeadline:

    def test_remaining_counts_down(self):
        clock = FakeClock()
        deadline = Deadline("read", 30, clock=clock)

        clock.now += 10
        assert deadline.remaining() == 20

    def test_expired_deadline_raises(self):
        clock = FakeClock()
        deadline = Deadline("delete", 30, clock=clock)

        clock.now += 30
        with pytest.raises(OperationTimeoutError, match="delete timed out after 30 seconds"):
            deadline.remaining()

    def test_create_and_update_use_their_own_budgets(self):
        timeouts = ResourceTimeouts(create=100, update=200)

        create = Deadline.for_create_update(timeouts, is_new=True)
        update = Deadline.for_create_update(timeouts, is_new=False)

        assert (create.operation, create.timeout) == ("create", 100)
        assert (update.operation, update.timeout) == ("update", 200)

    def test_read_and_delete(self):
        timeouts = ResourceTimeouts(read=7, delete=9)
        assert Deadline.for_read(timeouts).timeout == 7
        assert Deadline.for_delete(timeouts).timeout == 9
