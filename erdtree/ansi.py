"""Truncation of strings that carry ANSI colour and style escape sequences."""

_ESC = "\x1b"
_RESET = "\x1b[0m"


def truncate(text, new_len):
    """Return ``text`` cut to ``new_len`` visible characters, keeping escape sequences intact.

    Only colour/style sequences (those terminated by ``m``) are understood. If the
    cut leaves a style sequence open, a reset sequence is appended.
    """
    open_sequence = False
    pieces = []
    char_count = 0
    chars = iter(text)

    for ch in chars:
        pieces.append(ch)

        if ch == _ESC:
            terminated = False
            for code in chars:
                pieces.append(code)
                if code == "m":
                    open_sequence = not open_sequence
                    terminated = True
                    break
            if terminated:
                continue

        char_count += 1
        if char_count == new_len:
            break

    if open_sequence:
        pieces.append(_RESET)

    return "".join(pieces)