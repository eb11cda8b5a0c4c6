# tests/helpers.py
from typing import Any, Callable, List, Tuple


def recorder() -> Tuple[Callable[[Any], None], List[Any]]:
    """Returns a plain function handler and the list it records into."""
    calls: List[Any] = []

    def handler(value):
        calls.append(value)

    return handler, calls


def snapshot(instance):
    """Observable state of a renderable, minus tree links and signal plumbing."""
    skip = {"_signals", "_parent_ref", "_children", "subscriptions"}
    return {name: value for name, value in vars(instance).items() if name not in skip}
