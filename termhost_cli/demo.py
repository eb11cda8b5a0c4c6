# termhost_cli/demo.py

"""
Counter demo: a bordered box with a title, a counter and some help text.

There is no key handling here; ``run_demo`` bumps the counter itself and
prints the retained tree after every commit.
"""

from typing import Callable

from termhost import RGBA, Surface, create_element as h
from termhost.root import RootLifecycleManager


def counter_color(count: int) -> str:
    if count > 0:
        return "#00ff00"
    if count < 0:
        return "#ff4444"
    return "#ffffff"


def build_counter(count: int):
    return h("group", {"id": "counter-group", "key": "counter"},
        h("text", {"id": "counter", "content": str(count), "fg": counter_color(count)}),
    )


def build_app(count: int):
    return h("box", {
            "id": "main-box",
            "x": 50,
            "y": 3,
            "width": 50,
            "height": 20,
            "backgroundColor": RGBA.from_ints(10, 20, 40, 255),
            "borderColor": RGBA.from_ints(100, 10, 255, 255),
            "borderStyle": "double",
        },
        h("group", {"id": "group1", "width": 50},
            h("text", {"id": "t1", "content": "Hello termhost!", "fg": "hotpink",
                       "borderStyle": "double"}),
            h("text", {"id": "t2", "content": "termhost + reconciler", "fg": "#64b5f6"}),
            build_counter(count),
        ),
        h("group", {"id": "instructions-group"},
            h("text", {"id": "instr1", "content": "up/+ : Increment", "fg": "#bbbbbb"}),
            h("text", {"id": "instr2", "content": "down/- : Decrement", "fg": "#bbbbbb"}),
            h("text", {"id": "instr3", "content": "R : Reset", "fg": "#bbbbbb"}),
        ),
    )


def run_demo(steps: int = 3, echo: Callable[[str], None] = print,
             manager: RootLifecycleManager = None) -> int:
    """Mounts the demo, increments the counter ``steps`` times, unmounts. Returns the final count."""
    manager = manager or RootLifecycleManager()
    surface = Surface(background_color=RGBA.from_ints(10, 15, 35, 255))

    count = 0
    manager.mount(build_app(count), surface)
    echo(surface.outline())
    for _ in range(steps):
        count += 1
        manager.update(build_app(count))
        echo("")
        echo(surface.outline())
    manager.unmount()
    return count
