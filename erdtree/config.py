"""Locating and parsing the ``.erdtreerc`` configuration file."""

import os
from pathlib import Path

ERDTREE_CONFIG_TOML = ".erdtree.toml"
ERDTREE_TOML_PATH = "ERDTREE_TOML_PATH"

ERDTREE_CONFIG_NAME = ".erdtreerc"
ERDTREE_CONFIG_PATH = "ERDTREE_CONFIG_PATH"

ERDTREE_DIR = "erdtree"

CONFIG_DIR = ".config"
HOME = "HOME"
XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
APPDATA = "APPDATA"


def _read(path):
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError, ValueError):
        return None


def _first_readable(paths):
    for path in paths:
        content = _read(path)
        if content is not None:
            return content
    return None


def _candidates(environ):
    config_path = environ.get(ERDTREE_CONFIG_PATH)
    if config_path:
        yield Path(config_path)

    if os.name == "nt":
        app_data = environ.get(APPDATA)
        if app_data:
            yield Path(app_data) / ERDTREE_DIR / ERDTREE_CONFIG_NAME
        return

    xdg = environ.get(XDG_CONFIG_HOME)
    if xdg:
        yield Path(xdg) / ERDTREE_DIR / ERDTREE_CONFIG_NAME
        yield Path(xdg) / ERDTREE_CONFIG_NAME

    home = environ.get(HOME)
    if home:
        yield Path(home) / CONFIG_DIR / ERDTREE_DIR / ERDTREE_CONFIG_NAME
        yield Path(home) / ERDTREE_CONFIG_NAME


def read_rc_config(environ=None):
    """Read ``.erdtreerc`` and return it prefixed with ``"--\\n"``, or ``None``.

    Locations are tried in order: ``$ERDTREE_CONFIG_PATH``,
    ``$XDG_CONFIG_HOME/erdtree/.erdtreerc``, ``$XDG_CONFIG_HOME/.erdtreerc``,
    ``$HOME/.config/erdtree/.erdtreerc`` and ``$HOME/.erdtreerc``; on Windows,
    ``$ERDTREE_CONFIG_PATH`` then ``%APPDATA%/erdtree/.erdtreerc``.
    """
    if environ is None:
        environ = os.environ
    content = _first_readable(_candidates(environ))
    if content is None:
        return None
    return f"--\n{content}"


def parse_rc(config):
    """Split a config into argument tokens, dropping lines that start with ``#``."""
    tokens = []
    for line in config.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line.lstrip().startswith("#"):
            continue
        tokens.extend(line.split())
    return tokens