"""Runs of characters sharing a bidi type, kept in a circular linked list."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from bidikit.types import NO_BRACKET, SENTINEL, BidiType, is_isolate


@dataclass(eq=False)
class Run:
    """A stretch of text with one bidi type, level and bracket type."""

    type: BidiType = BidiType.SENTINEL
    pos: int = 0
    length: int = 0
    level: int = 0
    isolate_level: int = 0
    bracket_type: int = NO_BRACKET
    prev: Run | None = field(default=None, repr=False)
    next: Run | None = field(default=None, repr=False)
    prev_isolate: Run | None = field(default=None, repr=False)
    next_isolate: Run | None = field(default=None, repr=False)


def _unlink(node: Run) -> None:
    node.prev.next = node.next
    node.next.prev = node.prev


class RunList:
    """A circular doubly linked list of runs around a sentinel node."""

    def __init__(self) -> None:
        self.sentinel = Run(
            type=BidiType.SENTINEL, pos=SENTINEL, length=SENTINEL, level=SENTINEL
        )
        self.sentinel.next = self.sentinel
        self.sentinel.prev = self.sentinel

    def __iter__(self) -> Iterator[Run]:
        node = self.sentinel.next
        while node.type is not BidiType.SENTINEL:
            following = node.next
            yield node
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def append(self, run: Run) -> None:
        """Insert a run at the end of the list."""
        tail = self.sentinel.prev
        run.prev = tail
        tail.next = run
        run.next = self.sentinel
        self.sentinel.prev = run

    def _clear(self) -> None:
        self.sentinel.next = self.sentinel
        self.sentinel.prev = self.sentinel

    def shadow(self, over: RunList, preserve_length: bool) -> None:
        """Overlay the runs of ``over`` on this list, consuming ``over``.

        The first run here must not start after the first run of ``over``,
        and the last run here must not end before the last run of ``over``.
        Parts of runs covered by a run of ``over`` are cut away or dropped.
        """
        self.validate()
        over.validate()

        p = self.sentinel
        pos = 0
        q = over.sentinel.next
        while q.type is not BidiType.SENTINEL:
            if not q.length or q.pos < pos:
                q = q.next
                continue
            pos = q.pos
            while p.next.type is not BidiType.SENTINEL and p.next.pos <= pos:
                p = p.next
            # p is the run that q is inserted into.
            pos2 = pos + q.length
            r = p
            while r.next.type is not BidiType.SENTINEL and r.next.pos < pos2:
                r = r.next
            if preserve_length:
                r.length += q.length
            # r is the last run that q affects.
            if p is r:
                if p.pos + p.length > pos2:
                    r = Run(
                        type=p.type,
                        pos=pos2,
                        length=p.pos + p.length - pos2,
                        level=p.level,
                        isolate_level=p.isolate_level,
                    )
                    p.next.prev = r
                    r.next = p.next
                else:
                    r = r.next
                if p.pos + p.length >= pos:
                    if p.pos < pos:
                        p.length = pos - p.pos
                    else:
                        p = p.prev
            else:
                if p.pos + p.length >= pos:
                    if p.pos < pos:
                        p.length = pos - p.pos
                    else:
                        p = p.prev
                if r.pos + r.length > pos2:
                    r.length = r.pos + r.length - pos2
                    r.pos = pos2
                else:
                    r = r.next

            inserted = q
            q = q.prev
            _unlink(inserted)
            p.next = inserted
            inserted.prev = p
            inserted.next = r
            r.prev = inserted
            q = q.next

        over._clear()
        self.validate()

    def validate(self) -> None:
        """Check the list's links, raising ValueError if they are broken."""
        head = self.sentinel
        if head.type is not BidiType.SENTINEL:
            raise ValueError("run list has no sentinel")
        if head.next is None or head.next.prev is not head:
            raise ValueError("run list head is broken")
        node = head.next
        while node.type is not BidiType.SENTINEL:
            if node.next is None or node.next.prev is not node:
                raise ValueError(f"run list broken at position {node.pos}")
            node = node.next
        if node is not head:
            raise ValueError("run list does not close on its sentinel")


def encode_bidi_types(
    bidi_types: Sequence[BidiType],
    bracket_types: Sequence[int] | None = None,
) -> RunList:
    """Group consecutive equal bidi types into runs.

    Brackets and isolate marks always get runs of their own.
    """
    if bracket_types is not None and len(bracket_types) != len(bidi_types):
        raise ValueError("bracket types must match bidi types in length")

    runs = RunList()
    last: Run | None = None
    for i, char_type in enumerate(bidi_types):
        bracket = bracket_types[i] if bracket_types is not None else NO_BRACKET
        if (
            last is None
            or char_type is not last.type
            or bracket != NO_BRACKET
            or last.bracket_type != NO_BRACKET
            or is_isolate(char_type)
        ):
            if last is not None:
                last.length = i - last.pos
            last = Run(type=char_type, pos=i, bracket_type=bracket)
            runs.append(last)
    if last is not None:
        last.length = len(bidi_types) - last.pos
    runs.validate()
    return runs