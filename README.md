# rtfsplit

Split a large paged RTF report into several smaller RTF files. Each output
file holds a fixed number of pages and begins with the original document
header, so it can be opened on its own.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Command line

```
rtfsplit --target report.rtf --dest out_dir --pagesize 50
```

- `-t`, `--target`: the RTF file to split (required).
- `-d`, `--dest`: the output directory (required). It is created if it does
  not exist.
- `-p`, `--pagesize`: the number of pages in each part. The default is 10.

The parts are named `<stem>_part_0001.rtf`, `<stem>_part_0002.rtf`, and so
on, where `<stem>` is the target's file name without its extension. Existing
files of the same name are overwritten.

If the target does not exist, is a directory, or the page size is less than
1, the command prints `Error: ...` to standard error and exits with status 1.

## How a file is split

The layout is chosen from the file's contents (`rtfsplit.detect.is_report5`):
a file in which a `\field` control word appears before the fifth `\trowd` is
treated as a field-numbered table report; any other file as a generic report.

- **Field-numbered table reports** (`rtfsplit.report5.Report5Divider`). The
  header is everything before the first `\trowd`. Pages are split at each
  `\page`, up to the next closing brace. Every `{\field ...}` group in a part
  is replaced by the page number shown in its `\fldrslt` result, so each part
  keeps the original numbering. Each part is closed with `}}`.
- **Generic reports** (`rtfsplit.report.ReportDivider`). The header is
  everything before the first `\sectd`. Pages are split at explicit
  `{\page\par}` breaks or, when the file has none, at section breaks
  (`\sect\sectd`). A leading section break is dropped from the first page of
  each part, and with explicit breaks the last `{\page\par}` of a part is
  removed, so that no part starts or ends with a blank page. Each part is
  closed with `}`.

The file is scanned as bytes; it is not parsed as a full RTF document.

## Library use

```python
from rtfsplit.divider import RTFDivider

paths = RTFDivider("report.rtf", pagesize=50).divide("out_dir")
```

`RTFDivider(target, pagesize=10)` reads the file at once. It raises
`FileNotFoundError` if the target does not exist, `IsADirectoryError` if it
is a directory, and `ValueError` if the page size is less than 1.
`divide(dest)` writes the parts and returns their paths in order.
`Report5Divider` and `ReportDivider` can also be used directly, with
`(filename, data, pagesize)`, where `filename` is the stem for the part names.

`rtfsplit.field.handle_field(data)` parses a field group at the start of
`data` and returns a `Field` with the page number it displays (or `None`) and
the offset of its closing brace.

### Listing RTF outputs

Listings, tables and figures are recognised by the first letter of a file
name ending in `rtf`: `l`/`L`, `t`/`T` or `f`/`F`. Other files and
subdirectories are ignored.

```python
from rtfsplit.listing import list_rtf, list_rtf_json

for rtf in list_rtf("outputs"):
    print(rtf.name, rtf.kind, rtf.size, rtf.modified_at)

print(list_rtf_json("outputs"))
```

`list_rtf` returns `RtfFile` records (name, size in bytes, `Kind`, and
modification time in whole seconds since the epoch), sorted by kind: figures
first, then listings, then tables. `list_rtf_json` returns the same list as a
compact JSON array, with the kind written as `"Figure"`, `"Listing"` or
`"Table"`.

## Limitations

- The command splits one file at a time; there is no option to split every
  file in a directory.
- Listing a directory is available from Python only; there is no command for
  it.