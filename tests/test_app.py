import pytest

from typistconsole.app import Menu, MenuAction, Rect, centered_rect, main


def test_move_down_clamps_at_last_option():
    menu = Menu()
    for _ in range(5):
        menu.move_down()
    assert menu.selected == len(menu.options) - 1


def test_move_up_clamps_at_first_option():
    menu = Menu()
    menu.move_down()
    menu.move_up()
    menu.move_up()
    assert menu.selected == 0


@pytest.mark.parametrize(
    "key, action",
    [
        ("1", MenuAction.PRACTICE),
        ("2", MenuAction.PROGRESS),
        ("3", MenuAction.QUIT),
        ("KEY_ESCAPE", MenuAction.QUIT),
    ],
)
def test_direct_keys(key, action):
    assert Menu().handle_key(key) is action


@pytest.mark.parametrize(
    "downs, action",
    [(0, MenuAction.PRACTICE), (1, MenuAction.PROGRESS), (2, MenuAction.QUIT)],
)
def test_enter_uses_selection(downs, action):
    menu = Menu()
    for _ in range(downs):
        assert menu.handle_key("KEY_DOWN") is None
    assert menu.handle_key("KEY_ENTER") is action


def test_arrow_keys_change_selection():
    menu = Menu()
    menu.handle_key("KEY_DOWN")
    menu.handle_key("KEY_DOWN")
    menu.handle_key("KEY_UP")
    assert menu.selected == 1


def test_unknown_key_does_nothing():
    menu = Menu(selected=1)
    assert menu.handle_key("x") is None
    assert menu.selected == 1


@pytest.mark.parametrize("px, py", [(50, 20), (30, 70), (10, 10), (0, 0)])
def test_centered_rect_stays_inside(px, py):
    outer = Rect(3, 4, 120, 40)
    inner = centered_rect(px, py, outer)
    assert outer.x <= inner.x
    assert outer.y <= inner.y
    assert inner.x + inner.width <= outer.x + outer.width
    assert inner.y + inner.height <= outer.y + outer.height


def test_centered_rect_is_symmetric():
    outer = Rect(0, 0, 100, 50)
    inner = centered_rect(50, 20, outer)
    assert inner.width == 50
    left = inner.x - outer.x
    right = outer.x + outer.width - (inner.x + inner.width)
    assert left == right


def test_centered_rect_full_size_is_identity():
    outer = Rect(2, 5, 80, 24)
    assert centered_rect(100, 100, outer) == outer


def test_centered_rect_rejects_bad_percent():
    with pytest.raises(ValueError):
        centered_rect(150, 20, Rect(0, 0, 80, 24))


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "typistconsole" in capsys.readouterr().out