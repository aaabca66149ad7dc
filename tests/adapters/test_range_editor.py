import pytest

from prop_ordering.adapters.range_edits import Edit, RangeEditor, TextRange, merge_edits


def test_multiple_fixes_reverse_order_and_stats():
    text = "abcdef\n123456\nXYZ\n"
    ed = RangeEditor(text)

    # Replace 'cde' with 'C' (shorter)
    assert ed.add_fix([Edit.replace(2, 5, "C")])
    # Insert prefix at BOF
    assert ed.add_fix([Edit.replace(0, 0, ">>> ")])
    # Delete '456\n'
    start_del = text.index("456")
    assert ed.add_fix([Edit.replace(start_del, start_del + len("456\n"), "")])

    result, stats = ed.apply_edits()

    assert result == ">>> abCf\n123XYZ\n"
    assert stats["edits_applied"] == 3
    # len('cde') + len('456\n')
    assert stats["chars_removed"] == 7
    # len('C') + len('>>> ')
    assert stats["chars_added"] == 5


def test_overlapping_fix_first_wins():
    text = "hello world"
    ed = RangeEditor(text)

    assert ed.add_fix([Edit.replace(0, 5, "hi")])
    assert not ed.add_fix([Edit.replace(0, 4, "")])

    result, stats = ed.apply_edits()
    assert result == "hi world"
    assert stats["edits_applied"] == 1


def test_fix_is_accepted_atomically():
    text = "a b c d"
    ed = RangeEditor(text)
    assert ed.add_fix([Edit.replace(2, 3, "B")])
    # second edit of this fix overlaps: nothing of it is applied
    assert not ed.add_fix([Edit.replace(0, 1, "A"), Edit.replace(2, 5, "X")])
    assert ed.apply_edits()[0] == "a B c d"


def test_multi_edit_fix_carries_text_between_edits():
    text = "<X b a c />"
    merged = merge_edits(text, [Edit.replace(5, 6, "b"), Edit.replace(3, 4, "a")])
    assert merged.range == TextRange(3, 6)
    assert merged.replacement == "a b"


def test_merge_rejects_overlap_and_empty():
    with pytest.raises(ValueError):
        merge_edits("abcdef", [Edit.replace(0, 3, "x"), Edit.replace(2, 4, "y")])
    with pytest.raises(ValueError):
        merge_edits("abcdef", [])


def test_unicode_offsets_are_characters():
    text = "ключ = 1; b"
    ed = RangeEditor(text)
    ed.add_fix([Edit.replace(0, 4, "key")])
    assert ed.apply_edits()[0] == "key = 1; b"


def test_out_of_bounds_edit_raises():
    ed = RangeEditor("abc")
    ed.add_fix([Edit.replace(1, 10, "x")])
    assert ed.validate_edits()
    with pytest.raises(ValueError):
        ed.apply_edits()


def test_text_range():
    with pytest.raises(ValueError):
        TextRange(5, 2)
    r = TextRange(2, 6)
    assert r.length == 4
    assert r.overlaps(TextRange(5, 9))
    assert not r.overlaps(TextRange(6, 9))


def test_no_edits_returns_original():
    result, stats = RangeEditor("same").apply_edits()
    assert result == "same"
    assert stats == {"edits_applied": 0, "chars_removed": 0, "chars_added": 0}
