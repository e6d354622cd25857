from erdtree.ansi import truncate

RED_BOLD = "\x1b[1;31m"
RESET = "\x1b[0m"


def test_truncate_preserves_style():
    control = f"{RED_BOLD}Hello{RESET}"
    base = f"{RED_BOLD}Hello World{RESET}!!!"
    assert truncate(base, 5) == control


def test_truncate_plain_text():
    assert truncate("Hello World", 5) == "Hello"


def test_truncate_longer_than_text_returns_whole():
    base = f"{RED_BOLD}Hi{RESET}"
    assert truncate(base, 50) == base


def test_truncate_after_closed_sequence_adds_no_reset():
    base = f"{RED_BOLD}Hi{RESET} there"
    assert truncate(base, 4) == f"{RED_BOLD}Hi{RESET} t"


def test_truncate_visible_length_invariant():
    base = f"{RED_BOLD}abcdef{RESET}ghij"
    for n in range(1, 10):
        out = truncate(base, n)
        visible = out.replace(RED_BOLD, "").replace(RESET, "")
        assert len(visible) == n