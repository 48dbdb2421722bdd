from typing import Iterable, Iterator, Tuple

from hasselattice.errors import InvalidInput

DEFAULT_DELIMITER = ","


class ElementSet:
    __slots__ = ("labels",)

    def __init__(self, labels: Iterable[str]):
        """
        Ordered sequence of element labels. The position of a label is its bit
        position in every Subset built over this set.

        Labels are kept exactly as given: no de-duplication, no trimming. Two
        identical labels occupy two distinct bit positions.
        """
        self.labels: Tuple[str, ...] = tuple(labels)
        for label in self.labels:
            if not isinstance(label, str):
                raise InvalidInput(
                    f"Element labels must be strings, got {type(label).__name__}"
                )

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ElementSet):
            return self.labels == other.labels
        if isinstance(other, (tuple, list)):
            return self.labels == tuple(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.labels)

    def __repr__(self) -> str:
        return f"ElementSet({list(self.labels)!r})"

    @property
    def full_mask(self) -> int:
        """Bitmask with every element present."""
        return (1 << len(self.labels)) - 1

    @property
    def subset_count(self) -> int:
        return 1 << len(self.labels)

    def members(self, bitmask: int) -> Tuple[str, ...]:
        """Labels whose bit is set in ``bitmask``, in input order."""
        return tuple(
            label for j, label in enumerate(self.labels) if bitmask & (1 << j)
        )


def parse_elements(text: str, delimiter: str = DEFAULT_DELIMITER) -> ElementSet:
    """
    Split user text into an ElementSet.

    The split is raw: ``"a, b"`` yields the labels ``"a"`` and ``" b"``.
    Blank text is rejected rather than turned into a single empty label.

    Raises:
        InvalidInput: if ``text`` is blank or ``delimiter`` is empty.
    """
    if not delimiter:
        raise InvalidInput("Delimiter must not be empty")
    if text is None or not text.strip():
        raise InvalidInput("No elements given. Enter a comma-separated list, e.g. 'a,b,c'.")
    return ElementSet(text.split(delimiter))
