import pytest

from neoframe.keyboard import Key, KeyboardManager, key_text


@pytest.mark.parametrize(
    "key, expected",
    [
        (" ", ("Space", True)),
        ("<", ("lt", True)),
        ("\\", ("Bslash", True)),
        ("|", ("Bar", True)),
        ("\n", ("CR", True)),
        (Key.BACKSPACE, ("BS", True)),
        (Key.ENTER, ("CR", True)),
        (Key.ESCAPE, ("Esc", True)),
        (Key.DELETE, ("Del", True)),
        (Key.ARROW_LEFT, ("Left", True)),
        (Key.F12, ("F12", True)),
        (Key.PAGE_DOWN, ("PageDown", True)),
    ],
)
def test_key_text_special(key, expected):
    assert key_text(key) == expected


@pytest.mark.parametrize("character", ["a", "Z", "7", "é"])
def test_key_text_plain_character(character):
    assert key_text(character) == (character, False)


@pytest.mark.parametrize("key", [Key.SHIFT, Key.CONTROL, Key.ALT, Key.SUPER, Key.CAPS_LOCK])
def test_modifier_keys_have_no_text(key):
    assert key_text(key) is None


def test_plain_character_is_sent_unbracketed():
    sent = []
    manager = KeyboardManager(sent.append, ignore_logo=False)
    assert manager.handle_key_press("q") == "q"
    assert sent == ["q"]


def test_special_key_is_bracketed():
    sent = []
    manager = KeyboardManager(sent.append, ignore_logo=False)
    manager.handle_key_press(Key.ESCAPE)
    assert sent == ["<Esc>"]


def test_control_modifier():
    sent = []
    manager = KeyboardManager(sent.append, ignore_logo=False)
    manager.set_modifiers(shift=False, ctrl=True, alt=False, logo=False)
    manager.handle_key_press("a")
    assert sent == ["<C-a>"]


def test_modifier_order():
    manager = KeyboardManager(lambda _: None, ignore_logo=False)
    manager.set_modifiers(shift=True, ctrl=True, alt=True, logo=True)
    assert manager.format_keybinding(False, "x") == "<S-C-M-D-x>"


def test_logo_ignored_still_brackets():
    manager = KeyboardManager(lambda _: None, ignore_logo=True)
    manager.set_modifiers(shift=False, ctrl=False, alt=False, logo=True)
    result = manager.format_keybinding(False, "x")
    assert "D-" not in result
    assert result.startswith("<") and result.endswith(">")
    assert "x" in result


def test_unbound_key_sends_nothing():
    sent = []
    manager = KeyboardManager(sent.append, ignore_logo=False)
    assert manager.handle_key_press(Key.SHIFT) is None
    assert sent == []


def test_modifiers_cleared():
    manager = KeyboardManager(lambda _: None, ignore_logo=False)
    manager.set_modifiers(shift=True, ctrl=True, alt=True, logo=True)
    manager.set_modifiers(shift=False, ctrl=False, alt=False, logo=False)
    assert manager.format_keybinding(False, "k") == "k"
    assert (manager.shift, manager.ctrl, manager.alt, manager.logo) == (
        False,
        False,
        False,
        False,
    )