"""Unit tests for the undo history stack."""
import pytest

from imperialcalc.model.history import HistoryStack, Snapshot


class TestHistoryStack:
    def test_pops_newest_first(self):
        history = HistoryStack()
        history.push(Snapshot("", ""))
        history.push(Snapshot("5", ""))
        assert len(history) == 2
        assert history.pop() == Snapshot("5", "")
        assert history.pop() == Snapshot("", "")
        assert history.pop() is None
        assert not history

    def test_bounded_stack_drops_oldest(self):
        history = HistoryStack(max_depth=2)
        for primary in ("1", "12", "123"):
            history.push(Snapshot(primary, ""))
        assert len(history) == 2
        assert history.pop().primary == "123"
        assert history.pop().primary == "12"
        assert history.pop() is None

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            HistoryStack(max_depth=0)

    def test_snapshots_are_immutable(self):
        snapshot = Snapshot("5′", "")
        with pytest.raises(AttributeError):
            snapshot.primary = "6′"
