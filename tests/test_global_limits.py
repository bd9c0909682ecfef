from core.global_limits import DEFAULT_LIMITS, GlobalLimits
from linklist.sl_model import StringList


def test_default_limits_are_unbounded():
    assert DEFAULT_LIMITS.default_max_size == 0
    assert DEFAULT_LIMITS.resolve(None) == 0


def test_resolve_prefers_explicit_bound():
    limits = GlobalLimits(default_max_size=8)
    assert limits.resolve(None) == 8
    assert limits.resolve(3) == 3
    assert limits.resolve(0) == 0


def test_invalid_values_are_clamped(caplog):
    limits = GlobalLimits()
    limits.set_default_max_size(-1)
    assert limits.default_max_size == 0
    assert limits.resolve(-5) == 0
    assert "Invalid max_size '-5'" in caplog.text


def test_set_default_max_size():
    limits = GlobalLimits()
    limits.set_default_max_size(16)
    assert limits.default_max_size == 16


def test_changing_a_default_only_affects_later_unset_lists():
    limits = GlobalLimits()
    before = StringList(limits=limits)

    limits.set_default_max_size(1)
    after = StringList(limits=limits)
    explicit = StringList(0, limits=limits)

    assert before.max_size == 0
    assert after.max_size == 1
    assert explicit.max_size == 0
    assert DEFAULT_LIMITS.default_max_size == 0
