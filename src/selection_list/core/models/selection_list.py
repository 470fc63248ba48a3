"""
Module: selection_list

Purpose:
    Provides the SelectionList dataclass - an immutable ordered sequence
    with exactly one selected element. Stored as a zipper: the elements
    before the selection (nearest first), the selection itself, and the
    elements after it. Every operation returns a new value.

Key Functions:
    - SelectionList.from_list(selected, rest): Build with selection first
    - SelectionList.to_list(): Flatten to a plain list
    - SelectionList.next() / previous() / goto(n): Move the selection
    - SelectionList.map(f) / indexed_map(f) / selected_map(f): Transform
    - SelectionList.update_selected(f) / update_n(n, f): Targeted updates
    - map2(f, a, b) / and_map(list_f, items): Pairwise combination

Dependencies:
    - dataclasses (std)
    - logging (std)
    - typing (std)

Used By:
    - core.utils.serialization
    - selection_list (public API)

Zip Contract:
    map2 and and_map combine the two lists part by part (before with
    before, selected with selected, after with after). When the parts
    differ in length the shorter one wins and the surplus elements are
    dropped. Unless both lists have their selection at index 0 this can
    misalign their flattened orders. Pass strict=True to get a
    ShapeMismatchError instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")


class ShapeMismatchError(ValueError):
    """Raised by strict zips when two lists do not line up part by part."""

    def __init__(self, message: str, before: tuple[int, int], after: tuple[int, int]):
        super().__init__(message)
        self.before = before
        self.after = after


@dataclass(frozen=True)
class SelectionList(Generic[T]):
    """
    Ordered sequence with exactly one selected element (immutable zipper).

    The flattened order is ``reversed(before) + (selected,) + after``.
    It is the only externally visible order: indices, iteration and
    ``to_list()`` all use it.

    Attributes:
        before: Elements before the selection, nearest to it first
        selected: The selected element
        after: Elements after the selection, in forward order

    Invariants:
        - Exactly one element is selected
        - length == len(before) + 1 + len(after), never zero
        - before/after are tuples, never shared with caller-owned lists

    Example:
        >>> items = SelectionList.from_list(2, [3, 4])
        >>> items.to_list()
        [2, 3, 4]
        >>> items.next().selected
        3
        >>> items.goto(10).selected_index
        2
    """

    before: tuple[T, ...]
    selected: T
    after: tuple[T, ...]

    def __post_init__(self) -> None:
        """Copy before/after into tuples."""
        object.__setattr__(self, "before", tuple(self.before))
        object.__setattr__(self, "after", tuple(self.after))

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_list(cls, selected: T, rest: Iterable[T] = ()) -> SelectionList[T]:
        """
        Create a list whose first element is selected.

        Args:
            selected: Element to select (becomes index 0)
            rest: Elements following the selection, may be empty

        Returns:
            SelectionList with an empty ``before``
        """
        return cls(before=(), selected=selected, after=tuple(rest))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SelectionList[Any]:
        """
        Deserialize from dictionary.

        ``before`` is read in flattened (natural) order.
        Use core.utils.serialization for validated loading.

        Args:
            data: Dict with "before", "selected" and "after" keys

        Returns:
            SelectionList instance
        """
        return cls(
            before=tuple(reversed(data.get("before", []))),
            selected=data["selected"],
            after=tuple(data.get("after", [])),
        )

    # ─────────────────────────────────────────────────────────────────────────
    # Query Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def length(self) -> int:
        """Number of elements, always >= 1."""
        return len(self.before) + 1 + len(self.after)

    @property
    def selected_index(self) -> int:
        """0-based position of the selection in flattened order."""
        return len(self.before)

    @property
    def is_first(self) -> bool:
        """True when previous() would be a no-op."""
        return not self.before

    @property
    def is_last(self) -> bool:
        """True when next() would be a no-op."""
        return not self.after

    def to_list(self) -> list[T]:
        """
        Flatten to a plain list in flattened order.

        Returns:
            New list: reversed(before) + [selected] + after
        """
        return [*reversed(self.before), self.selected, *self.after]

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[T]:
        yield from reversed(self.before)
        yield self.selected
        yield from self.after

    # ─────────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────────

    def next(self) -> SelectionList[T]:
        """
        Move the selection one position forward.

        Returns:
            New SelectionList, or self unchanged when already last
        """
        if not self.after:
            return self
        return type(self)(
            before=(self.selected, *self.before),
            selected=self.after[0],
            after=self.after[1:],
        )

    def previous(self) -> SelectionList[T]:
        """
        Move the selection one position backward.

        Returns:
            New SelectionList, or self unchanged when already first
        """
        if not self.before:
            return self
        return type(self)(
            before=self.before[1:],
            selected=self.before[0],
            after=(self.selected, *self.after),
        )

    def goto(self, index: int) -> SelectionList[T]:
        """
        Move the selection to ``index``, clamped to the list bounds.

        Walks one step at a time with next()/previous() until the target
        is reached or the cursor hits an end. A negative index lands on 0,
        an index past the end lands on the last element. Takes at most
        ``length`` steps.

        Args:
            index: Target position in flattened order

        Returns:
            New SelectionList, or self if the selection does not move
        """
        if index < 0 or index >= self.length:
            logger.debug(f"goto({index}) outside 0..{self.length - 1}, clamping")

        current = self
        while True:
            position = current.selected_index
            if position == index:
                return current
            if position < index and current.after:
                current = current.next()
            elif position > max(0, index):
                current = current.previous()
            else:
                return current

    def select(self, predicate: Callable[[T], bool]) -> SelectionList[T]:
        """
        Move the selection to the first element matching ``predicate``.

        Args:
            predicate: Test applied in flattened order

        Returns:
            New SelectionList, or self if nothing matches
        """
        for index, value in enumerate(self):
            if predicate(value):
                return self.goto(index)
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # Mapping
    # ─────────────────────────────────────────────────────────────────────────

    def map(self, func: Callable[[T], U]) -> SelectionList[U]:
        """Apply ``func`` to every element, keeping shape and selection."""
        return type(self)(
            before=tuple(func(value) for value in self.before),
            selected=func(self.selected),
            after=tuple(func(value) for value in self.after),
        )

    def indexed_map(self, func: Callable[[int, T], U]) -> SelectionList[U]:
        """
        Apply ``func(index, value)`` to every element.

        Indices follow flattened order: ``before`` gets 0..k-1 (the element
        nearest the selection gets k-1), the selection gets k, ``after``
        gets k+1 onwards.

        Args:
            func: Called with (flattened index, element)

        Returns:
            New SelectionList with the same shape
        """
        k = len(self.before)
        return type(self)(
            before=tuple(func(k - 1 - i, value) for i, value in enumerate(self.before)),
            selected=func(k, self.selected),
            after=tuple(func(k + 1 + i, value) for i, value in enumerate(self.after)),
        )

    def selected_map(self, func: Callable[[bool, T], U]) -> SelectionList[U]:
        """
        Apply ``func(is_selected, value)`` to every element.

        Only the selected element receives True.
        """
        return type(self)(
            before=tuple(func(False, value) for value in self.before),
            selected=func(True, self.selected),
            after=tuple(func(False, value) for value in self.after),
        )

    def update_selected(self, func: Callable[[T], T]) -> SelectionList[T]:
        """Apply ``func`` to the selected element only."""
        return type(self)(
            before=self.before,
            selected=func(self.selected),
            after=self.after,
        )

    def update_n(self, index: int, func: Callable[[T], T]) -> SelectionList[T]:
        """
        Apply ``func`` to the element at flattened ``index`` only.

        Args:
            index: Position in flattened order
            func: Replacement function for that element

        Returns:
            New SelectionList, or self when index is out of range
        """
        k = len(self.before)
        if index < 0 or index >= self.length:
            return self
        if index == k:
            return self.update_selected(func)
        if index < k:
            slot = k - 1 - index
            before = self.before
            return type(self)(
                before=(*before[:slot], func(before[slot]), *before[slot + 1:]),
                selected=self.selected,
                after=self.after,
            )
        slot = index - k - 1
        after = self.after
        return type(self)(
            before=self.before,
            selected=self.selected,
            after=(*after[:slot], func(after[slot]), *after[slot + 1:]),
        )

    def map2(
        self,
        func: Callable[[T, U], V],
        other: SelectionList[U],
        *,
        strict: bool = False,
    ) -> SelectionList[V]:
        """Method form of map2(func, self, other). See module docstring."""
        return map2(func, self, other, strict=strict)

    def and_map(
        self,
        funcs: SelectionList[Callable[[T], U]],
        *,
        strict: bool = False,
    ) -> SelectionList[U]:
        """Method form of and_map(funcs, self). See module docstring."""
        return and_map(funcs, self, strict=strict)

    # ─────────────────────────────────────────────────────────────────────────
    # Serialization
    # ─────────────────────────────────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize to dictionary.

        ``before`` is written in flattened (natural) order so the dict
        reads left to right like to_list().

        Returns:
            Dict with "before", "selected" and "after" keys
        """
        return {
            "before": list(reversed(self.before)),
            "selected": self.selected,
            "after": list(self.after),
        }

    def __repr__(self) -> str:
        """Flattened order with the selection in brackets."""
        parts = [repr(value) for value in reversed(self.before)]
        parts.append(f"[{self.selected!r}]")
        parts.extend(repr(value) for value in self.after)
        return f"SelectionList({', '.join(parts)})"


# ─────────────────────────────────────────────────────────────────────────────
# Pairwise Combination
# ─────────────────────────────────────────────────────────────────────────────

def map2(
    func: Callable[[T, U], V],
    first: SelectionList[T],
    second: SelectionList[U],
    *,
    strict: bool = False,
) -> SelectionList[V]:
    """
    Combine two selection lists element by element.

    Zips before with before, selected with selected and after with after.

    **IMPORTANT:** With strict=False (the default) each part is truncated
    to the shorter of the two, silently dropping elements. The flattened
    orders of the inputs only line up when both selections sit at the
    same index and the lists have the same length.

    Args:
        func: Called with (element of first, element of second)
        first: Left-hand list
        second: Right-hand list
        strict: Raise instead of truncating when the parts differ in length

    Returns:
        New SelectionList of combined values

    Raises:
        ShapeMismatchError: If strict=True and the shapes differ
    """
    before_lengths = (len(first.before), len(second.before))
    after_lengths = (len(first.after), len(second.after))
    if before_lengths[0] != before_lengths[1] or after_lengths[0] != after_lengths[1]:
        if strict:
            raise ShapeMismatchError(
                f"Cannot zip selection lists of different shape: "
                f"before {before_lengths[0]} vs {before_lengths[1]}, "
                f"after {after_lengths[0]} vs {after_lengths[1]}",
                before=before_lengths,
                after=after_lengths,
            )
        dropped = (
            abs(before_lengths[0] - before_lengths[1])
            + abs(after_lengths[0] - after_lengths[1])
        )
        logger.debug(
            f"map2 truncated {dropped} element(s): "
            f"before {before_lengths}, after {after_lengths}"
        )

    return type(first)(
        before=tuple(func(a, b) for a, b in zip(first.before, second.before)),
        selected=func(first.selected, second.selected),
        after=tuple(func(a, b) for a, b in zip(first.after, second.after)),
    )


def and_map(
    funcs: SelectionList[Callable[[T], U]],
    items: SelectionList[T],
    *,
    strict: bool = False,
) -> SelectionList[U]:
    """
    Apply a selection list of functions to a selection list of values.

    Chains to spread a curried function over several lists::

        labels = and_map(names.map(lambda n: lambda a: f"{n} ({a})"), ages)

    Same truncation contract as map2.
    """
    return map2(lambda f, value: f(value), funcs, items, strict=strict)


# ─────────────────────────────────────────────────────────────────────────────
# Function Forms
# ─────────────────────────────────────────────────────────────────────────────

def from_list(selected: T, rest: Iterable[T] = ()) -> SelectionList[T]:
    """Create a list whose first element is selected."""
    return SelectionList.from_list(selected, rest)


def to_list(items: SelectionList[T]) -> list[T]:
    return items.to_list()


def length(items: SelectionList[Any]) -> int:
    return items.length


def selected_index(items: SelectionList[Any]) -> int:
    return items.selected_index


def select_next(items: SelectionList[T]) -> SelectionList[T]:
    """Move the selection forward one position (no-op at the end)."""
    return items.next()


def select_previous(items: SelectionList[T]) -> SelectionList[T]:
    """Move the selection back one position (no-op at the start)."""
    return items.previous()


def goto(index: int, items: SelectionList[T]) -> SelectionList[T]:
    """Move the selection to ``index``, clamped to the list bounds."""
    return items.goto(index)


def map_items(func: Callable[[T], U], items: SelectionList[T]) -> SelectionList[U]:
    return items.map(func)


def indexed_map(func: Callable[[int, T], U], items: SelectionList[T]) -> SelectionList[U]:
    return items.indexed_map(func)


def selected_map(func: Callable[[bool, T], U], items: SelectionList[T]) -> SelectionList[U]:
    return items.selected_map(func)


def update_selected(func: Callable[[T], T], items: SelectionList[T]) -> SelectionList[T]:
    return items.update_selected(func)


def update_n(index: int, func: Callable[[T], T], items: SelectionList[T]) -> SelectionList[T]:
    """Apply ``func`` at ``index``; out-of-range indices are a no-op."""
    return items.update_n(index, func)


def from_sequence(values: Sequence[T], index: int = 0) -> SelectionList[T]:
    """
    Build from a non-empty sequence and select ``index`` (clamped).

    Raises:
        ValueError: If values is empty
    """
    if not values:
        raise ValueError("Cannot build a SelectionList from an empty sequence")
    return SelectionList.from_list(values[0], values[1:]).goto(index)
