"""Tests for ContextVar-based scan configuration.

Validates thread isolation, context manager behavior, and how scanners and
rule builders read the active config.
"""

from threading import Thread

import pytest

from lexis import (
    Rule,
    ScanConfig,
    Scanner,
    Separator,
    default_rules,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.strict_rules is False
        assert config.default_rules is None

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.strict_rules = True  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ScanConfig.from_dict({"strict_rules": True, "unknown_key": "ignored"})
        assert config.strict_rules is True
        assert config.default_rules is None

    def test_from_dict_freezes_rule_list(self) -> None:
        space = Rule.mono("space", Separator.ALL)
        config = ScanConfig.from_dict({"default_rules": [space]})
        assert config.default_rules == (space,)

    def test_from_empty_dict(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        """Reset config after each test."""
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(strict_rules=True))
        assert get_scan_config().strict_rules is True

    def test_reset(self) -> None:
        set_scan_config(ScanConfig(strict_rules=True))
        reset_scan_config()
        assert get_scan_config().strict_rules is False

    def test_set_config_changes_scanner_defaults(self) -> None:
        space = Rule.mono("space", Separator.ALL)
        set_scan_config(ScanConfig(default_rules=(space,)))
        assert Scanner().rules == (space,)
        reset_scan_config()
        assert Scanner().rules == default_rules()


class TestContextManager:
    """Test scan_config_context()."""

    def test_restores_previous(self) -> None:
        with scan_config_context(ScanConfig(strict_rules=True)):
            assert get_scan_config().strict_rules is True
        assert get_scan_config().strict_rules is False

    def test_nested(self) -> None:
        with scan_config_context(ScanConfig(strict_rules=True)):
            with scan_config_context(ScanConfig(strict_rules=False)):
                assert get_scan_config().strict_rules is False
            assert get_scan_config().strict_rules is True

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(strict_rules=True)):
                raise RuntimeError("boom")
        assert get_scan_config().strict_rules is False


class TestThreadIsolation:
    """Config set in one thread is invisible to others."""

    def test_threads_have_independent_config(self) -> None:
        seen: dict[str, bool] = {}

        def strict_worker() -> None:
            set_scan_config(ScanConfig(strict_rules=True))
            seen["strict"] = get_scan_config().strict_rules

        def plain_worker() -> None:
            seen["plain"] = get_scan_config().strict_rules

        t1 = Thread(target=strict_worker)
        t1.start()
        t1.join()
        t2 = Thread(target=plain_worker)
        t2.start()
        t2.join()

        assert seen == {"strict": True, "plain": False}
        assert get_scan_config().strict_rules is False
