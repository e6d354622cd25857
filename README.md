# erdtree

Building blocks for a filesystem and disk usage tree: ways of measuring
file size, binary and SI unit prefixes, Unix permission strings, file
metadata helpers, file icons and loading of the `.erdtreerc` configuration
file.

The package depends only on the Python standard library.

## Modules

| Module                | Purpose                                                                  |
|-----------------------|--------------------------------------------------------------------------|
| `erdtree.ansi`        | `truncate`: cut ANSI-styled strings without breaking their escape codes  |
| `erdtree.options`     | Enums `Coloring`, `DirOrder`, `EntryType`, `Layout`, `SortType`, `TimeStamp`, `TimeFormat` |
| `erdtree.units`       | `PrefixKind`, `BinPrefix` (KiB, MiB, …) and `SiPrefix` (KB, MB, …)       |
| `erdtree.file_size`   | `ByteMetric`, `BlockMetric`, `LineMetric`, `WordMetric`, `DiskUsage`, `empty_file_size` |
| `erdtree.permissions` | `FileMode`, `FileType`, `Permissions`: symbolic and octal notation       |
| `erdtree.fsmeta`      | `Inode`, `symlink_target`, `owner`, `owner_and_group`, `has_xattrs`      |
| `erdtree.icons`       | Icons chosen by file type, extension or file name, plain or coloured     |
| `erdtree.config`      | `read_rc_config` and `parse_rc` for the `.erdtreerc` file                |

## Examples

Permissions in symbolic and octal notation:

```python
from erdtree.permissions import FileMode

mode = FileMode.from_mode(0o100644)
str(mode)           # ".rw-r--r--"
mode.octal()        # "644"
mode.with_xattrs()  # ".rw-r--r--@"
```

An unknown file type in the mode raises `erdtree.permissions.PermissionsError`.

Byte sizes, plain or human readable:

```python
from erdtree.file_size import ByteMetric
from erdtree.units import PrefixKind

str(ByteMetric(1024, human_readable=True))                         # "1.0 KiB"
str(ByteMetric(1000, human_readable=True, prefix_kind=PrefixKind.SI))  # "1.0 KB"
str(ByteMetric(100))                                               # "100 B"
```

`LineMetric.from_path` and `WordMetric.from_path` count lines and words of a
UTF-8 file and return `None` when the file cannot be read or is not UTF-8.
`ByteMetric.logical`, `ByteMetric.physical` and `BlockMetric.from_stat` take
an `os.stat` result. All metrics support `+=`.

Truncating a styled string keeps its styling intact:

```python
from erdtree.ansi import truncate

truncate("\x1b[1;31mHello World\x1b[0m!!!", 5)  # "\x1b[1;31mHello\x1b[0m"
```

Icons by extension, with their 8-bit colour:

```python
from erdtree.icons import icon_from_ext, paint_fixed

code, icon = icon_from_ext("rs")   # (180, "\ue7a8")
paint_fixed(code, icon)            # "\x1b[38;5;180m\ue7a8\x1b[0m"
```

`compute(path, link_target)` and `compute_with_color(path, link_target, foreground)`
pick an icon for a path on disk by file type, then extension, then file name,
then a default.

Timestamp kinds accept their aliases:

```python
from erdtree.options import TimeStamp

TimeStamp.parse("mtime")  # TimeStamp.MOD
```

Reading and splitting an `.erdtreerc` file into argument tokens:

```python
import os
from erdtree.config import read_rc_config, parse_rc

parse_rc("# defaults\n--human\n--level 2\n")  # ["--human", "--level", "2"]

text = read_rc_config(os.environ)  # "--\n<contents>" or None
```

`read_rc_config` looks in `$ERDTREE_CONFIG_PATH`,
`$XDG_CONFIG_HOME/erdtree/.erdtreerc`, `$XDG_CONFIG_HOME/.erdtreerc`,
`$HOME/.config/erdtree/.erdtreerc` and `$HOME/.erdtreerc`, in that order; on
Windows, `$ERDTREE_CONFIG_PATH` then `%APPDATA%/erdtree/.erdtreerc`.

## What this package does not do

It provides no `erd` command and no command-line parser. It does not walk
directories, build or render a tree, filter entries by regex or glob, or
show a progress indicator. It does not read `.erdtree.toml` files; only the
`.erdtreerc` format is handled. Those pieces are left to the program that
uses these modules.