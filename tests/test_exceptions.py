"""Tests for duckdog.exceptions module."""

import pytest

from duckdog.exceptions import (
    GameError,
    InvalidConfigError,
    MatchStateError,
    TaskQueueError,
    TaskQueueStalledError,
    UnknownKindError,
)
from i18n import get_locale, set_locale


@pytest.fixture(autouse=True)
def _reset_locale():
    original = get_locale()
    yield
    set_locale(original)


# ==================== GameError base ====================

class TestGameError:
    def test_basic(self):
        e = GameError("test")
        assert e.message == "test"
        assert e.details == {}
        assert str(e) == "test"

    def test_with_details(self):
        e = GameError("boom", {"turn": 3})
        assert e.details == {"turn": 3}
        assert str(e) == "boom | Details: {'turn': 3}"

    def test_default_message_localized(self):
        set_locale("en_US")
        assert GameError().message == "Game error"
        set_locale("zh_CN")
        assert GameError().message == "游戏错误"


# ==================== Subclasses ====================

class TestTaskQueueErrors:
    def test_state_in_details(self):
        e = TaskQueueError(state="running")
        assert e.state == "running"
        assert e.details == {"state": "running"}
        assert isinstance(e, GameError)

    def test_stalled(self):
        e = TaskQueueStalledError(timeout=1.5, completed=2, total=5)
        assert (e.timeout, e.completed, e.total) == (1.5, 2, 5)
        assert e.details == {"timeout": 1.5, "completed": 2, "total": 5}
        assert isinstance(e, TaskQueueError)


class TestOtherErrors:
    def test_unknown_kind(self):
        e = UnknownKindError(kind_id="cat")
        assert e.details == {"kind_id": "cat"}

    def test_invalid_config(self):
        e = InvalidConfigError(errors=["max_turns must be positive, got 0"])
        assert e.errors == ["max_turns must be positive, got 0"]
        assert "max_turns" in str(e)

    def test_invalid_config_without_errors(self):
        e = InvalidConfigError()
        assert e.errors == []
        assert e.details == {}

    def test_match_state(self):
        set_locale("en_US")
        e = MatchStateError(state="finished")
        assert e.message == "Invalid match state"
        assert e.state == "finished"

    @pytest.mark.parametrize(
        "exc_cls",
        [TaskQueueError, TaskQueueStalledError, UnknownKindError, InvalidConfigError, MatchStateError],
    )
    def test_catchable_as_game_error(self, exc_cls):
        with pytest.raises(GameError):
            raise exc_cls()
