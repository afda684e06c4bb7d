"""Small generic helpers: clamping, safe indexing, set diffs, ancestor walks."""
from dataclasses import dataclass
from typing import (Any, Callable, FrozenSet, Generic, Hashable, Iterable, List,
                    Optional, Sequence, TypeVar)

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def clamped(value, lower, upper):
    """Value limited to the closed range [lower, upper]."""
    if lower > upper:
        raise ValueError(f"Invalid range: {lower} > {upper}")
    return min(max(value, lower), upper)


def safe_get(sequence: Sequence[T], index: int) -> Optional[T]:
    """Element at index if it is within bounds, otherwise None."""
    if 0 <= index < len(sequence):
        return sequence[index]
    return None


@dataclass(frozen=True)
class DiffResult(Generic[H]):
    """
    Result of diffing two collections.

    Sets, so the original order of items is not kept.
    """
    unique_to_first: FrozenSet[H]
    unique_to_second: FrozenSet[H]
    contained_in_both: FrozenSet[H]

    @property
    def contained_in_first(self) -> FrozenSet[H]:
        return self.unique_to_first | self.contained_in_both

    @property
    def contained_in_second(self) -> FrozenSet[H]:
        return self.unique_to_second | self.contained_in_both


def diff(first: Iterable[H], second: Iterable[H]) -> DiffResult[H]:
    """
    Diff two collections.

        >>> diff([1, 2], [2, 3]).unique_to_first
        frozenset({1})
    """
    first_set = frozenset(first)
    second_set = frozenset(second)
    return DiffResult(
        unique_to_first=first_set - second_set,
        unique_to_second=second_set - first_set,
        contained_in_both=first_set & second_set,
    )


def hierarchy(node: Any, parent: Callable[[Any], Any] = lambda n: getattr(n, "parent", None)) -> List[Any]:
    """
    The node followed by all of its ancestors, nearest first.

    Args:
        node: Starting node
        parent: Returns a node's parent, or None at the root

    Returns:
        List starting with node and ending with the root
    """
    ancestors = [node]
    current = parent(node)
    while current is not None:
        ancestors.append(current)
        current = parent(current)
    return ancestors
