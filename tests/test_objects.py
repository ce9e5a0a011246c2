"""objectsモジュールのテスト。"""

import logging

import pytest

from pytoolkit_optional.exceptions import NullPointerException
from pytoolkit_optional.objects import require_non_null


class TestRequireNonNull:
    """require_non_null関数のテストクラス。"""

    def test_returns_value_unchanged(self) -> None:
        """Noneでない値はそのまま返る。"""
        value = {"key": 1}

        assert require_non_null(value) is value

    def test_falsy_values_pass(self) -> None:
        """偽と評価される値も検証を通過する。"""
        assert require_non_null(0) == 0
        assert require_non_null("") == ""
        assert require_non_null(False) is False

    def test_none_raises(self) -> None:
        """Noneを渡すとNullPointerExceptionが発生する。"""
        with pytest.raises(NullPointerException) as exc_info:
            require_non_null(None)

        assert exc_info.value.message is None
        assert str(exc_info.value) == ""

    def test_none_raises_with_message(self) -> None:
        """メッセージを指定すると例外に付与される。"""
        with pytest.raises(NullPointerException, match="callback is required"):
            require_non_null(None, "callback is required")

    def test_none_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Noneを受け取った場合にDEBUGログが出力される。"""
        with caplog.at_level(logging.DEBUG, logger="pytoolkit_optional.objects"):
            with pytest.raises(NullPointerException):
                require_non_null(None, "value")

        assert any("received None" in r.getMessage() for r in caplog.records)
