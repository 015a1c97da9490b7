import pytest

from ftselect.selection import Direction, Item, Selection, WindowTooSmall


def values(selection):
    return [item.value for item in selection]


def test_items_are_shown_last_value_first():
    sel = Selection(["a", "b", "c"])
    assert values(sel) == ["c", "b", "a"]
    assert len(sel) == 3


def test_cursor_starts_on_first_shown_item():
    sel = Selection(["a", "b", "c"])
    assert sel.cursor.value == "c"


def test_empty_values_rejected():
    with pytest.raises(ValueError):
        Selection([])


def test_item_length_is_value_length():
    assert len(Item("hello")) == len("hello")


def test_vertical_moves_wrap():
    sel = Selection(["a", "b", "c"])
    sel.move(Direction.DOWN)
    assert sel.cursor.value == "b"
    sel.move(Direction.UP)
    sel.move(Direction.UP)
    assert sel.cursor.value == "a"
    sel.move(Direction.DOWN)
    assert sel.cursor.value == "c"


def test_toggle_selects_and_advances():
    sel = Selection(["a", "b", "c"])
    sel.toggle()
    assert sel.cursor.value == "b"
    sel.toggle()
    assert sel.selected_values() == ["c", "b"]
    assert sel.result() == "c b"


def test_toggle_twice_deselects():
    sel = Selection(["a", "b"])
    sel.toggle()
    sel.move(Direction.UP)
    sel.toggle()
    assert sel.selected_values() == []
    assert sel.result() == ""


def test_toggle_on_last_wraps_to_first():
    sel = Selection(["a", "b"])
    sel.move(Direction.DOWN)
    sel.toggle()
    assert sel.cursor.value == "b"
    assert sel.selected_values() == ["a"]


def test_layout_invariants():
    sel = Selection(["one", "two", "three", "four", "five"])
    sel.layout(2, 80)
    items = list(sel)
    for item in items:
        assert 0 <= item.y < 2
        assert item.x + len(item) <= 80
    for first, second in zip(items, items[1:]):
        if second.y == 0:
            assert second.x > first.x + len(first) - 1
        else:
            assert second.x == first.x
            assert second.y == first.y + 1


def test_single_row_layout_places_items_left_to_right():
    sel = Selection(["a", "b", "c"])
    sel.layout(1, 80)
    xs = [item.x for item in sel]
    assert xs == sorted(xs)
    assert all(item.y == 0 for item in sel)


def test_layout_too_narrow_raises():
    sel = Selection(["abcdef"])
    with pytest.raises(WindowTooSmall):
        sel.layout(10, 3)


def test_layout_without_rows_raises():
    sel = Selection(["a"])
    with pytest.raises(WindowTooSmall):
        sel.layout(0, 80)


def test_horizontal_moves_stay_on_row():
    sel = Selection(["a", "b", "c", "d"])
    sel.layout(2, 80)
    assert sel.cursor.value == "d"
    sel.move(Direction.RIGHT)
    assert sel.cursor.value == "b"
    assert sel.cursor.y == 0
    sel.move(Direction.RIGHT)
    assert sel.cursor.value == "d"
    sel.move(Direction.LEFT)
    assert sel.cursor.value == "b"


def test_horizontal_move_alone_on_row_stays():
    sel = Selection(["a", "b", "c"])
    sel.layout(3, 80)
    sel.move(Direction.RIGHT)
    assert sel.cursor.value == "c"


def test_delete_moves_cursor_to_next():
    sel = Selection(["a", "b", "c"])
    assert sel.delete() is True
    assert values(sel) == ["b", "a"]
    assert sel.cursor.value == "b"


def test_delete_last_wraps_cursor():
    sel = Selection(["a", "b", "c"])
    sel.move(Direction.UP)
    assert sel.delete() is True
    assert values(sel) == ["c", "b"]
    assert sel.cursor.value == "c"


def test_delete_only_item_empties():
    sel = Selection(["a"])
    assert sel.delete() is False
    assert len(sel) == 0


def test_backspace_removes_previous():
    sel = Selection(["a", "b", "c"])
    sel.move(Direction.DOWN)
    assert sel.backspace() is True
    assert values(sel) == ["b", "a"]
    assert sel.cursor.value == "b"


def test_backspace_at_first_removes_last():
    sel = Selection(["a", "b", "c"])
    assert sel.backspace() is True
    assert values(sel) == ["c", "b"]
    assert sel.cursor.value == "c"


def test_backspace_only_item_empties():
    sel = Selection(["a"])
    assert sel.backspace() is False
    assert len(sel) == 0


def test_delete_relayouts_with_last_window():
    sel = Selection(["a", "b", "c"])
    sel.layout(2, 80)
    sel.delete()
    assert [item.y for item in sel] == [0, 1]
    assert all(item.x == 0 for item in sel)


def test_selection_kept_after_delete():
    sel = Selection(["a", "b", "c"])
    sel.toggle()
    sel.toggle()
    sel.delete()
    assert sel.selected_values() == ["c", "b"]