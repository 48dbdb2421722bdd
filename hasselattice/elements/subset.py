from typing import Any, Iterable, Tuple

from hasselattice.elements.element_set import ElementSet


def canonical_label(members: Iterable[str]) -> str:
    """Members sorted lexicographically, joined by commas, wrapped in braces."""
    return "{" + ",".join(sorted(members)) + "}"


class Subset:
    __slots__ = ("bitmask", "elements")

    def __init__(self, bitmask: int, elements: ElementSet):
        """
        Subset of an ElementSet stored as a bitmask: bit j set means the
        element at position j is a member.
        """
        if bitmask < 0 or bitmask > elements.full_mask:
            raise ValueError(
                f"Bitmask {bitmask} out of range for {len(elements)} elements"
            )
        self.bitmask: int = bitmask
        self.elements: ElementSet = elements

    @property
    def members(self) -> Tuple[str, ...]:
        """Member labels in input order."""
        return self.elements.members(self.bitmask)

    @property
    def is_full(self) -> bool:
        return self.bitmask == self.elements.full_mask

    def missing_indices(self) -> Tuple[int, ...]:
        """Positions of the elements not in this subset."""
        return tuple(j for j in range(len(self.elements)) if not self.bitmask & (1 << j))

    def with_element(self, index: int) -> "Subset":
        return Subset(self.bitmask | (1 << index), self.elements)

    def label(self) -> str:
        return canonical_label(self.members)

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Subset):
            return self.bitmask == other.bitmask and self.elements == other.elements
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.bitmask)

    def __str__(self) -> str:
        return self.label()

    def __repr__(self) -> str:
        return f"Subset({self.label()})"
