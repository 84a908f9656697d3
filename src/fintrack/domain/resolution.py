"""Pure lookup resolution.

Decides what to do with the rows a lookup produced without touching the
terminal. Interactive disambiguation is left to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Optional, Sequence, TypeVar

T = TypeVar("T")


class ResolutionKind(Enum):
    MATCH = "match"
    NONE = "none"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class Resolution(Generic[T]):
    """Outcome of resolving a candidate list.

    ``match`` is set only for MATCH; ``candidates`` holds every row for
    AMBIGUOUS so the caller can offer a choice.
    """

    kind: ResolutionKind
    match: Optional[T] = None
    candidates: tuple[T, ...] = field(default_factory=tuple)


def resolve_candidates(candidates: Sequence[T]) -> Resolution[T]:
    """Classify candidates as a single match, no match, or ambiguous."""
    if len(candidates) == 1:
        return Resolution(kind=ResolutionKind.MATCH, match=candidates[0])
    if not candidates:
        return Resolution(kind=ResolutionKind.NONE)
    return Resolution(kind=ResolutionKind.AMBIGUOUS, candidates=tuple(candidates))


def build_choices(
    candidates: Sequence[T],
    label: Callable[[T], str],
    key: Callable[[T], str] = lambda item: getattr(item, "id"),
) -> dict[str, T]:
    """Map display labels to candidates, keeping the candidate order.

    Labels that collide get the candidate key appended, e.g.
    ``"Checking (abcdefgh)"``, so every choice stays selectable.

    Args:
        candidates: Rows to offer
        label: Display label for a row
        key: Unique key used to disambiguate colliding labels

    Returns:
        Ordered mapping of unique label to row
    """
    labels = [label(item) for item in candidates]
    choices: dict[str, T] = {}
    for text, item in zip(labels, candidates):
        if labels.count(text) > 1:
            text = f"{text} ({key(item)})"
        choices[text] = item
    return choices
