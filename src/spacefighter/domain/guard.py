"""Per-object locking with compare-and-swap commits.

Operations open a :func:`transaction` over every object they touch.  The
transaction takes each object's re-entrant lock in a fixed order (kind,
then id) so two operations over overlapping objects cannot deadlock, and
records the version each object had on entry.  Writes are staged, not
applied: on a clean exit the versions are compared again and, only if none
moved, all staged writes land together and every written object's version
is bumped.  If the body raises, nothing is written.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack, contextmanager
from typing import Any

from .errors import ConcurrentModification
from .models import Player, SpaceFighter

Guarded = Player | SpaceFighter


def _lock_order(obj: Guarded) -> tuple[str, int]:
    return (type(obj).__name__, int(obj.id))


class Transaction:
    """Staged writes over a locked set of objects."""

    def __init__(self, objects: list[Guarded]) -> None:
        self._objects = objects
        self._versions = {id(obj): obj.version for obj in objects}
        self._staged: dict[int, tuple[Guarded, dict[str, Any]]] = {}

    def stage(self, obj: Guarded, **changes: Any) -> None:
        """Queue attribute writes for ``obj``; applied on commit."""

        if id(obj) not in self._versions:
            raise ValueError(f"{type(obj).__name__} {obj.id} is not part of this transaction")
        _, pending = self._staged.setdefault(id(obj), (obj, {}))
        pending.update(changes)

    def commit(self) -> None:
        for obj in self._objects:
            if obj.version != self._versions[id(obj)]:
                raise ConcurrentModification(
                    f"{type(obj).__name__} changed during the operation",
                    {"id": int(obj.id), "expected": self._versions[id(obj)], "found": obj.version},
                )
        for obj, changes in self._staged.values():
            for name, value in changes.items():
                setattr(obj, name, value)
            obj.version += 1


@contextmanager
def transaction(*objects: Guarded) -> Iterator[Transaction]:
    """Lock ``objects``, yield a :class:`Transaction`, commit on success."""

    unique = list({id(obj): obj for obj in objects}.values())
    ordered = sorted(unique, key=_lock_order)
    with ExitStack() as stack:
        for obj in ordered:
            stack.enter_context(obj.lock)
        txn = Transaction(ordered)
        yield txn
        txn.commit()
