"""File I/O.

``open()`` returns a file object; the ``with`` statement closes it when the
block ends, even if the block raises. The mode decides what happens to an
existing file:

::

    "r"   read (default)         fails if the file is missing
    "w"   write                  truncates an existing file
    "a"   append                 writes after the existing content
    "x"   exclusive create       fails if the file exists

Every lesson here writes into the run's scratch directory (``ctx.workdir``),
so the examples can use plain names such as ``file.txt`` and ``data.csv``.
"""

from __future__ import annotations

import csv
from pathlib import Path

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson


def write_lines(path: Path, lines: list[str]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")


def read_rows(path: Path) -> list[dict[str, str]]:
    """Read a CSV file with a header row into a list of dicts."""
    with open(path, newline="", encoding="utf-8") as f:
        return list(csv.DictReader(f))


@register_lesson(Topic.FILE_IO, "write_and_read", expected=[
    "Hello, file!",
    "Second line",
    "25",
])
def demo_write_and_read(ctx: LessonContext) -> None:
    """Write a file, then read the whole content back."""
    path = ctx.path("file.txt")
    with open(path, "w", encoding="utf-8") as f:
        f.write("Hello, file!\n")
        f.write("Second line\n")

    with open(path, encoding="utf-8") as f:
        content = f.read()
    print(content, end="")
    print(len(content))


@register_lesson(Topic.FILE_IO, "append_and_iterate", expected=[
    "1 first",
    "2 second",
    "['first\\n', 'second\\n']",
])
def demo_append_and_iterate(ctx: LessonContext) -> None:
    """Mode ``"a"`` appends; iterating over a file yields one line at a time."""
    out = ctx.path("output.txt")
    write_lines(out, ["first"])
    with open(out, "a", encoding="utf-8") as f:
        f.write("second\n")

    with open(out, encoding="utf-8") as f:
        for number, line in enumerate(f, start=1):
            print(number, line.strip())

    with open(out, encoding="utf-8") as f:
        print(f.readlines())


@register_lesson(Topic.FILE_IO, "csv_files", expected=[
    "['name', 'age']",
    "['Alice', '30']",
    "['Bob', '25']",
    "Alice is 30",
    "Bob is 25",
])
def demo_csv_files(ctx: LessonContext) -> None:
    """The ``csv`` module reads and writes comma-separated rows."""
    data = ctx.path("data.csv")
    rows = [["name", "age"], ["Alice", "30"], ["Bob", "25"]]
    with open(data, "w", newline="", encoding="utf-8") as f:
        csv.writer(f).writerows(rows)

    with open(data, newline="", encoding="utf-8") as f:
        for row in csv.reader(f):
            print(row)

    for record in read_rows(data):
        print(f"{record['name']} is {record['age']}")


@register_lesson(Topic.FILE_IO, "pathlib", expected=[
    "False",
    "True notes.txt .txt",
    "pathlib is handy",
    "False",
    "missing.txt does not exist",
])
def demo_pathlib(ctx: LessonContext) -> None:
    """``pathlib.Path`` wraps a file path with handy methods."""
    path = ctx.path("notes.txt")
    path.unlink(missing_ok=True)
    print(path.exists())

    path.write_text("pathlib is handy\n", encoding="utf-8")
    print(path.exists(), path.name, path.suffix)
    print(path.read_text(encoding="utf-8").strip())

    path.unlink()
    print(path.exists())

    try:
        with open(ctx.path("missing.txt"), encoding="utf-8") as f:
            f.read()
    except FileNotFoundError:
        print("missing.txt does not exist")
