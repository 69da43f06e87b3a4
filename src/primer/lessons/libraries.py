"""Working with the Standard Library.

Python ships "batteries included": dates, randomness, JSON, specialised
containers and file-system helpers are all one ``import`` away. Third-party
packages are installed with ``pip`` and imported the same way.
"""

from __future__ import annotations

import json
import os
import random
import statistics
from collections import Counter, defaultdict, deque, namedtuple
from datetime import date, datetime, timedelta

from primer.core.context import LessonContext
from primer.registry import Topic, register_lesson

Point = namedtuple("Point", ["x", "y"])


@register_lesson(Topic.LIBRARIES, "datetime", expected=[
    "2024-02-14",
    "Monday, 15 January 2024",
    "2024-01-15T09:30:00",
    "345",
    "today: ...",
])
def demo_datetime(ctx: LessonContext) -> None:
    """``datetime`` handles calendar dates, timestamps and differences between them."""
    start = date(2024, 1, 15)
    print(start + timedelta(days=30))
    print(start.strftime("%A, %d %B %Y"))
    print(datetime(2024, 1, 15, 9, 30).isoformat())
    print((date(2024, 12, 25) - start).days)
    print("today:", date.today())


@register_lesson(Topic.LIBRARIES, "random", expected=[
    "rolled ...",
    "True",
    "same seed, same sequence: True",
    "True",
])
def demo_random(ctx: LessonContext) -> None:
    """``random`` draws pseudo-random numbers; a seed makes them repeatable."""
    rng = random.Random(ctx.seed)
    roll = rng.randint(1, 6)
    print("rolled", roll)
    print(1 <= roll <= 6)

    first = [rng.random() for _ in range(3)]
    replay = random.Random(ctx.seed)
    replay.randint(1, 6)
    second = [replay.random() for _ in range(3)]
    print("same seed, same sequence:", first == second)

    deck = list(range(10))
    rng.shuffle(deck)
    print(sorted(deck) == list(range(10)))


@register_lesson(Topic.LIBRARIES, "json", expected=[
    '{"name": "Alice", "languages": ["Python", "SQL"], "active": true}',
    "Python",
    '{"a": 2, "b": 1}',
    "[1, null]",
])
def demo_json(ctx: LessonContext) -> None:
    """``json`` converts between Python objects and JSON text."""
    data = {"name": "Alice", "languages": ["Python", "SQL"], "active": True}
    text = json.dumps(data)
    print(text)

    loaded = json.loads(text)
    print(loaded["languages"][0])
    print(json.dumps({"b": 1, "a": 2}, sort_keys=True))
    print(json.dumps([1, None]))


@register_lesson(Topic.LIBRARIES, "collections", expected=[
    "[('i', 4), ('s', 4)]",
    "{'a': ['apple', 'avocado'], 'b': ['banana']}",
    "Point(x=1, y=2) 3",
    "deque([0, 1, 2])",
])
def demo_collections(ctx: LessonContext) -> None:
    """``collections`` adds counters, default dicts, named tuples and deques."""
    counts = Counter("mississippi")
    print(counts.most_common(2))

    groups: defaultdict[str, list[str]] = defaultdict(list)
    for word in ["apple", "avocado", "banana"]:
        groups[word[0]].append(word)
    print(dict(groups))

    p = Point(1, 2)
    print(p, p.x + p.y)

    queue = deque([1, 2, 3])
    queue.appendleft(0)
    queue.pop()
    print(queue)


@register_lesson(Topic.LIBRARIES, "os_and_statistics", expected=[
    "['data', 'reports', '2024.csv']",
    "2024.csv .csv",
    "True",
    "2.5 2.5",
])
def demo_os_and_statistics(ctx: LessonContext) -> None:
    """``os.path`` builds portable paths; ``statistics`` summarises numbers."""
    path = os.path.join("data", "reports", "2024.csv")
    print(path.split(os.sep))
    print(os.path.basename(path), os.path.splitext(path)[1])
    print(os.path.isdir(ctx.workdir))

    values = [1, 2, 3, 4]
    print(statistics.mean(values), statistics.median(values))
