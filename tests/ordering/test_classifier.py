import re

import pytest

from prop_ordering.ordering import FieldDescriptor, NameClassifier
from prop_ordering.ordering.classifier import CallbackMode

PREFIXES = ("on", "set", "update", "handle", "render")


@pytest.fixture
def prefix_cls():
    return NameClassifier.with_prefixes({"id", "key", "ref", "name", "type"}, PREFIXES)


@pytest.mark.parametrize("name", ["onClick", "setPage", "updateValue", "handleSubmit", "renderRow", "rowCallback", "clickHandler"])
def test_prefix_mode_callbacks(prefix_cls, name):
    assert prefix_cls.is_callback(name)


@pytest.mark.parametrize("name", ["on", "one", "settings", "online", "rendering", "variant", "handler", "set"])
def test_prefix_mode_non_callbacks(prefix_cls, name):
    assert not prefix_cls.is_callback(name)


def test_later_prefix_can_still_match():
    cls = NameClassifier.with_prefixes((), ("on", "only"))
    # "on" does not match ("l" is lowercase), "only" does
    assert cls.is_callback("onlyFans")
    assert cls.is_callback("onLoad")
    assert not cls.is_callback("onlyfans")


def test_pattern_mode_has_no_implicit_suffixes():
    cls = NameClassifier.with_patterns((), ["^on[A-Z]"])
    assert cls.mode is CallbackMode.PATTERNS
    assert cls.is_callback("onClick")
    assert not cls.is_callback("rowCallback")
    assert not cls.is_callback("setPage")


def test_pattern_mode_searches_anywhere():
    cls = NameClassifier.with_patterns((), ["Callback$", "Handler"])
    assert cls.is_callback("rowCallback")
    assert cls.is_callback("clickHandlerFn")


def test_invalid_pattern_raises_re_error():
    with pytest.raises(re.error):
        NameClassifier.with_patterns((), ["(unclosed"])


def test_modes_are_exclusive():
    with pytest.raises(ValueError):
        NameClassifier(mode=CallbackMode.PREFIXES, callback_patterns=(re.compile("x"),))
    with pytest.raises(ValueError):
        NameClassifier(mode=CallbackMode.PATTERNS, callback_prefixes=("on",))


def test_reserved(prefix_cls):
    assert prefix_cls.is_reserved("id")
    assert prefix_cls.is_reserved("type")
    assert not prefix_cls.is_reserved("Id")
    assert not prefix_cls.is_reserved("className")


def test_shorthand_like():
    defaulted = FieldDescriptor("a", (0, 1), has_default_or_optional=True)
    bare_attr = FieldDescriptor("b", (0, 1), has_explicit_value=False)
    plain = FieldDescriptor("c", (0, 1))
    assert NameClassifier.is_shorthand_like(defaulted)
    assert NameClassifier.is_shorthand_like(bare_attr)
    assert not NameClassifier.is_shorthand_like(plain)
