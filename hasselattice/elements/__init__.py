from hasselattice.elements.element_set import ElementSet, parse_elements
from hasselattice.elements.subset import Subset

__all__ = ["ElementSet", "Subset", "parse_elements"]
