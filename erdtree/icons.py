"""Mapping of files to icons, plain or painted with ANSI colours."""

import os
import stat

_RESET = "\x1b[0m"

_DEFAULT_ICON = (66, "\uf15b")

# Icons for special file types; they take on the colour of their file.
_FILE_TYPE_ICONS = {
    "dir": "\uf413",
    "symlink": "\uf482",
}

# Icons for specially named files; they take on the colour of their file.
_FILE_NAME_ICONS = {
    ".Trash": "\uf1f8",
    ".atom": "\ue764",
    ".bashprofile": "\ue615",
    ".bashrc": "\uf489",
    ".git": "\uf1d3",
    ".gitattributes": "\uf1d3",
    ".gitconfig": "\uf1d3",
    ".github": "\uf408",
    ".gitignore": "\uf1d3",
    ".gitmodules": "\uf1d3",
    ".rvm": "\ue21e",
    ".vimrc": "\ue62b",
    ".vscode": "\ue70c",
    ".zshrc": "\uf489",
    "Cargo.lock": "\ue7a8",
    "bin": "\ue5fc",
    "config": "\ue5fc",
    "docker-compose.yml": "\uf308",
    "Dockerfile": "\uf308",
    ".DS_Store": "\uf179",
    "gitignore_global": "\uf1d3",
    "go.mod": "\ue626",
    "go.sum": "\ue626",
    "gradle": "\ue256",
    "gruntfile.coffee": "\ue611",
    "gruntfile.js": "\ue611",
    "gruntfile.ls": "\ue611",
    "gulpfile.coffee": "\ue610",
    "gulpfile.js": "\ue610",
    "gulpfile.ls": "\ue610",
    "hidden": "\uf023",
    "include": "\ue5fc",
    "lib": "\uf121",
    "license": "\ue60a",
    "LICENSE": "\ue60a",
    "licence": "\ue60a",
    "LICENCE": "\ue60a",
    "localized": "\uf179",
    "Makefile": "\uf489",
    "node_modules": "\ue718",
    "npmignore": "\ue71e",
    "PKGBUILD": "\uf303",
    "rubydoc": "\ue73b",
    "yarn.lock": "\ue718",
}

# File extension -> (8-bit colour code, icon).
_EXT_ICONS = {
    "ai": (185, "\ue7b4"),
    "awk": (59, "\ue795"),
    "bash": (113, "\ue795"),
    "bat": (154, "\ue615"),
    "bmp": (140, "\ue60d"),
    "cbl": (25, "\u2699"),
    "c++": (204, "\ue61d"),
    "c": (75, "\ue61e"),
    "cc": (204, "\ue61d"),
    "cfg": (231, "\ue7a3"),
    "cljc": (107, "\ue768"),
    "clj": (107, "\ue768"),
    "cljd": (67, "\ue76a"),
    "cljs": (67, "\ue76a"),
    "cmake": (66, "\ue615"),
    "cob": (25, "\u2699"),
    "cobol": (25, "\u2699"),
    "coffee": (185, "\ue61b"),
    "conf": (66, "\ue615"),
    "config.ru": (52, "\ue791"),
    "cp": (67, "\ue61d"),
    "cpp": (67, "\ue61d"),
    "cpy": (25, "\u2699"),
    "cr": (16, "\ue24f"),
    "cs": (58, "\U000f031b"),
    "csh": (59, "\ue795"),
    "cson": (185, "\ue60b"),
    "css": (39, "\ue749"),
    "csv": (113, "\U000f0219"),
    "cxx": (67, "\ue61d"),
    "dart": (25, "\ue798"),
    "db": (188, "\ue706"),
    "d": (64, "\ue7af"),
    "desktop": (60, "\uf108"),
    "diff": (59, "\ue728"),
    "doc": (25, "\U000f022c"),
    "drl": (217, "\ue28c"),
    "dropbox": (27, "\ue707"),
    "dump": (188, "\ue706"),
    "edn": (67, "\ue76a"),
    "eex": (140, "\ue62d"),
    "ejs": (185, "\ue60e"),
    "elm": (67, "\ue62c"),
    "epp": (255, "\ue631"),
    "erb": (52, "\ue60e"),
    "erl": (132, "\ue7b1"),
    "ex": (140, "\ue62d"),
    "exs": (140, "\ue62d"),
    "f#": (67, "\ue7a7"),
    "fish": (59, "\ue795"),
    "fnl": (230, "\U0001f31c"),
    "fs": (67, "\ue7a7"),
    "fsi": (67, "\ue7a7"),
    "fsscript": (67, "\ue7a7"),
    "fsx": (67, "\ue7a7"),
    "GNUmakefile": (66, "\ue779"),
    "gd": (66, "\ue615"),
    "gemspec": (52, "\ue791"),
    "gif": (140, "\ue60d"),
    "git": (202, "\ue702"),
    "glb": (215, "\uf1b2"),
    "go": (67, "\ue627"),
    "godot": (66, "\ue7a3"),
    "gql": (199, "\uf20e"),
    "graphql": (199, "\uf20e"),
    "haml": (188, "\ue60e"),
    "hbs": (208, "\ue60f"),
    "h": (140, "\uf0fd"),
    "heex": (140, "\ue62d"),
    "hh": (140, "\uf0fd"),
    "hpp": (140, "\uf0fd"),
    "hrl": (132, "\ue7b1"),
    "hs": (140, "\ue61f"),
    "htm": (166, "\ue60e"),
    "html": (202, "\ue736"),
    "hxx": (140, "\uf0fd"),
    "ico": (185, "\ue60d"),
    "import": (231, "\uf0c6"),
    "ini": (66, "\ue615"),
    "java": (167, "\ue738"),
    "jl": (133, "\ue624"),
    "jpeg": (140, "\ue60d"),
    "jpg": (140, "\ue60d"),
    "js": (185, "\ue60c"),
    "json5": (185, "\U000f0626"),
    "json": (185, "\ue60b"),
    "jsx": (67, "\ue625"),
    "ksh": (59, "\ue795"),
    "kt": (99, "\ue634"),
    "kts": (99, "\ue634"),
    "leex": (140, "\ue62d"),
    "less": (60, "\ue614"),
    "lhs": (140, "\ue61f"),
    "license": (185, "\ue60a"),
    "licence": (185, "\ue60a"),
    "lock": (250, "\uf13e"),
    "log": (255, "\U000f0331"),
    "lua": (74, "\ue620"),
    "luau": (74, "\ue620"),
    "makefile": (66, "\ue779"),
    "markdown": (67, "\ue609"),
    "Makefile": (66, "\ue779"),
    "material": (132, "\U000f0509"),
    "md": (255, "\uf48a"),
    "mdx": (67, "\uf48a"),
    "mint": (108, "\U000f032a"),
    "mjs": (221, "\ue60c"),
    "mk": (66, "\ue779"),
    "ml": (173, "\u03bb"),
    "mli": (173, "\u03bb"),
    "mo": (99, "\u221e"),
    "mustache": (173, "\ue60f"),
    "nim": (220, "\ue677"),
    "nix": (110, "\uf313"),
    "opus": (208, "\U000f0223"),
    "otf": (231, "\uf031"),
    "pck": (66, "\uf487"),
    "pdf": (124, "\U000f0226"),
    "php": (140, "\ue608"),
    "pl": (67, "\ue769"),
    "pm": (67, "\ue769"),
    "png": (140, "\ue60d"),
    "pp": (255, "\ue631"),
    "ppt": (167, "\U000f0227"),
    "prisma": (255, "\ue684"),
    "pro": (179, "\ue7a1"),
    "ps1": (69, "\U000f0a0a"),
    "psb": (67, "\ue7b8"),
    "psd1": (105, "\U000f0a0a"),
    "psd": (67, "\ue7b8"),
    "psm1": (105, "\U000f0a0a"),
    "pyc": (67, "\ue606"),
    "py": (61, "\ue606"),
    "pyd": (67, "\ue606"),
    "pyo": (67, "\ue606"),
    "query": (154, "\ue21c"),
    "rake": (52, "\ue791"),
    "rb": (52, "\ue791"),
    "r": (65, "\U000f07d4"),
    "rlib": (180, "\ue7a8"),
    "rmd": (67, "\ue609"),
    "rproj": (65, "\U000f07d4"),
    "rs": (180, "\ue7a8"),
    "rss": (215, "\ue619"),
    "sass": (204, "\ue603"),
    "sbt": (167, "\ue737"),
    "scala": (167, "\ue737"),
    "scm": (16, "\U000f0627"),
    "scss": (204, "\ue603"),
    "sh": (59, "\ue795"),
    "sig": (173, "\u03bb"),
    "slim": (166, "\ue60e"),
    "sln": (98, "\ue70c"),
    "sml": (173, "\u03bb"),
    "sol": (67, "\U000f07bb"),
    "sql": (188, "\ue706"),
    "sqlite3": (188, "\ue706"),
    "sqlite": (188, "\ue706"),
    "styl": (107, "\ue600"),
    "sublime": (98, "\ue7aa"),
    "suo": (98, "\ue70c"),
    "sv": (29, "\U000f035b"),
    "svelte": (202, "\uf260"),
    "svg": (215, "\U000f0721"),
    "svh": (29, "\U000f035b"),
    "swift": (173, "\ue755"),
    "tbc": (67, "\U000f06d3"),
    "t": (67, "\ue769"),
    "tcl": (67, "\U000f06d3"),
    "terminal": (71, "\uf489"),
    "test.js": (173, "\ue60c"),
    "tex": (58, "\U000f0669"),
    "tf": (57, "\ue2a6"),
    "tfvars": (57, "\uf15b"),
    "toml": (66, "\ue615"),
    "tres": (185, "\ue706"),
    "ts": (67, "\ue628"),
    "tscn": (140, "\U000f0381"),
    "tsx": (67, "\ue7ba"),
    "twig": (107, "\ue61c"),
    "txt": (113, "\U000f0219"),
    "vala": (5, "\ue69e"),
    "v": (29, "\U000f035b"),
    "vh": (29, "\U000f035b"),
    "vhd": (29, "\U000f035b"),
    "vhdl": (29, "\U000f035b"),
    "vim": (29, "\ue62b"),
    "vue": (107, "\U000f0844"),
    "wasm": (99, "\ue6a1"),
    "webmanifest": (221, "\ue60b"),
    "webpack": (67, "\U000f072b"),
    "webp": (140, "\ue60d"),
    "xcplayground": (173, "\ue755"),
    "xls": (23, "\U000f021b"),
    "xml": (173, "\U000f05c0"),
    "xul": (173, "\ue745"),
    "yaml": (66, "\ue615"),
    "yml": (66, "\ue615"),
    "zig": (208, "\uf0e7"),
    "zsh": (113, "\ue795"),
}


def icon_from_ext(ext):
    """Return ``(colour_code, icon)`` for a file extension, or ``None``."""
    if ext is None:
        return None
    return _EXT_ICONS.get(ext)


def icon_from_file_type(is_dir, is_symlink):
    """Return the icon for a directory or symlink, or ``None`` for other types."""
    if is_dir:
        return _FILE_TYPE_ICONS["dir"]
    if is_symlink:
        return _FILE_TYPE_ICONS["symlink"]
    return None


def icon_from_file_name(name):
    """Return the icon associated with a specially named file, or ``None``."""
    return _FILE_NAME_ICONS.get(name)


def default_icon():
    """Return the fallback ``(colour_code, icon)``."""
    return _DEFAULT_ICON


def paint_fixed(code, text):
    """Paint ``text`` with the 8-bit foreground colour ``code``."""
    return f"\x1b[38;5;{code}m{text}{_RESET}"


def _paint_bold(foreground, text):
    if isinstance(foreground, int):
        params = f"38;5;{foreground}"
    else:
        params = foreground
    return f"\x1b[1;{params}m{text}{_RESET}"


def _file_name(path):
    text = os.fspath(path)
    stripped = text.rstrip("/" + os.sep) or text
    return os.path.basename(stripped) or stripped


def _extension(path):
    name = _file_name(path)
    if name == "..":
        return None
    idx = name.rfind(".")
    if idx <= 0:
        return None
    return name[idx + 1:]


def _file_type(path):
    """``(is_dir, is_symlink)`` of the entry itself, or ``None`` if it cannot be read."""
    try:
        mode = os.lstat(path).st_mode
    except (OSError, ValueError):
        return None
    return stat.S_ISDIR(mode), stat.S_ISLNK(mode)


def _extension_for(path, link_target, file_type):
    is_symlink = file_type is not None and file_type[1]
    if link_target is not None and is_symlink:
        return _extension(link_target)
    return _extension(path)


def compute(path, link_target):
    """Return a plain icon for ``path``.

    Precedence is file type, then extension (of ``link_target`` when ``path`` is a
    symlink and a target is given), then file name, then the default icon.
    """
    file_type = _file_type(path)
    if file_type is not None:
        icon = icon_from_file_type(*file_type)
        if icon is not None:
            return icon

    found = icon_from_ext(_extension_for(path, link_target, file_type))
    if found is not None:
        return found[1]

    icon = icon_from_file_name(_file_name(path))
    if icon is not None:
        return icon

    return default_icon()[1]


def compute_with_color(path, link_target, foreground):
    """Return a coloured icon for ``path``; see :func:`compute` for precedence.

    Icons chosen by file type or file name are painted bold in ``foreground``
    (an SGR colour parameter string such as ``"31"``, or an 8-bit colour code);
    they are left plain when ``foreground`` is ``None``. Extension and default
    icons use their own fixed colours.
    """

    def paint(icon):
        if foreground is None:
            return icon
        return _paint_bold(foreground, icon)

    file_type = _file_type(path)
    if file_type is not None:
        icon = icon_from_file_type(*file_type)
        if icon is not None:
            return paint(icon)

    found = icon_from_ext(_extension_for(path, link_target, file_type))
    if found is not None:
        return paint_fixed(*found)

    icon = icon_from_file_name(_file_name(path))
    if icon is not None:
        return paint(icon)

    return paint_fixed(*default_icon())