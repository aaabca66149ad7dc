from prop_ordering.ordering import (
    Comparator,
    FieldDescriptor,
    FieldKind,
    FixStyle,
    NameClassifier,
    OrderingEngine,
    OrderingPolicy,
    Placement,
    is_ordered,
    moved_positions,
    sort_order,
    synthesize,
)
from prop_ordering.adapters.range_edits import RangeEditor


def fields_of(text, names, sep=", ", rest_at=None, defaults=()):
    """Descriptors for ``names`` laid out in ``text`` (entries must be unique substrings)."""
    out = []
    for i, entry in enumerate(names):
        start = text.index(entry)
        rest = i == rest_at
        out.append(FieldDescriptor(
            name=None if rest else entry.split(" ")[0],
            source_range=(start, start + len(entry)),
            kind=FieldKind.REST if rest else FieldKind.NAMED,
            has_default_or_optional=entry.split(" ")[0] in defaults,
        ))
    return out


def render_from(text):
    return lambda d: text[d.start:d.end]


def apply(text, edits):
    ed = RangeEditor(text)
    assert ed.add_fix(edits)
    return ed.apply_edits()[0]


CLASSIFIER = NameClassifier.with_prefixes({"id", "key"}, ("on",))


def test_is_ordered_adjacent_scan():
    cmp = Comparator(OrderingPolicy(classifier=CLASSIFIER))
    ok = [FieldDescriptor(n, (0, 1)) for n in ("id", "a", "b", "onX")]
    bad = [FieldDescriptor(n, (0, 1)) for n in ("a", "id", "b")]
    assert is_ordered(ok, cmp)
    assert not is_ordered(bad, cmp)
    assert is_ordered([], cmp)


def test_sort_order_is_a_permutation_and_stable():
    cmp = Comparator(OrderingPolicy(classifier=CLASSIFIER, sort_alphabetically=False))
    fields = [FieldDescriptor(n, (i, i + 1)) for i, n in enumerate(["onA", "x", "id", "y", "onB"])]
    order = sort_order(fields, cmp)
    assert order == (2, 1, 3, 0, 4)
    assert sorted(order) == list(range(len(fields)))


def test_moved_positions_compare_identity_not_value():
    # two distinct entries with the same name swap places
    assert moved_positions((1, 0, 2)) == [0, 1]
    assert moved_positions((0, 1, 2)) == []


def test_joined_patch_single_edit():
    text = "f({ c, a = 1, b })"
    fields = fields_of(text, ["c", "a = 1", "b"])
    order = (1, 2, 0)
    edits = synthesize(fields, order, render_from(text), FixStyle.JOINED)
    assert len(edits) == 1
    assert edits[0].range.start_char == text.index("c")
    assert apply(text, edits) == "f({ a = 1, b, c })"


def test_positional_patch_touches_only_moved_entries():
    text = "<X b a c d />"
    fields = fields_of(text, [" b", " a", " c", " d"])
    edits = synthesize(fields, (1, 0, 2, 3), render_from(text), FixStyle.POSITIONAL)
    assert len(edits) == 2
    assert apply(text, edits) == "<X a b c d />"


def test_identity_order_gives_no_edits():
    text = "{ a, b }"
    fields = fields_of(text, ["a", "b"])
    assert synthesize(fields, (0, 1), render_from(text), FixStyle.JOINED) == []
    assert synthesize(fields, (0, 1), render_from(text), FixStyle.POSITIONAL) == []


def test_engine_rest_pinned_last():
    text = "({ ...rest, zed, alpha })"
    fields = fields_of(text, ["...rest", "zed", "alpha"], rest_at=0)
    engine = OrderingEngine(OrderingPolicy(classifier=CLASSIFIER), FixStyle.JOINED)
    edits = engine.analyze(fields, render_from(text))
    assert apply(text, edits) == "({ alpha, zed, ...rest })"


def test_engine_idempotent():
    text = "({ onClick, id, disabled = false, variant })"
    fields = fields_of(text, ["onClick", "id", "disabled = false", "variant"], defaults={"disabled"})
    policy = OrderingPolicy(
        classifier=NameClassifier.with_prefixes({"id"}, ("on",)),
        shorthand=Placement.LAST,
    )
    engine = OrderingEngine(policy, FixStyle.JOINED)
    fixed = apply(text, engine.analyze(fields, render_from(text)))
    assert fixed == "({ id, variant, disabled = false, onClick })"

    again = fields_of(fixed, ["onClick", "id", "disabled = false", "variant"], defaults={"disabled"})
    again.sort(key=lambda d: d.start)
    assert engine.analyze(again, render_from(fixed)) is None


def test_engine_ignores_unnamed_entries_without_moving_them():
    text = "{ [k]: v, b, a }"
    fields = [
        FieldDescriptor(None, (2, 8)),
        FieldDescriptor("b", (10, 11)),
        FieldDescriptor("a", (13, 14)),
    ]
    engine = OrderingEngine(OrderingPolicy(classifier=CLASSIFIER), FixStyle.POSITIONAL)
    edits = engine.analyze(fields, render_from(text))
    assert apply(text, edits) == "{ [k]: v, a, b }"
