from ._lib import kin, traversal
from ._lib.location import InvalidSibling, Location, location
from ._lib.tree import (
    InvalidArgument, InvalidChild, InvariantViolation, RoseTreeError, Tree,
    build, unfold,
)
from ._lib.zipper import (
    InvalidFocus, InvalidNext, InvalidPath, InvalidPrev, Zipper,
    from_locations, wrap,
)

__all__ = [
    'InvalidArgument', 'InvalidChild', 'InvalidFocus', 'InvalidNext',
    'InvalidPath', 'InvalidPrev', 'InvalidSibling', 'InvariantViolation',
    'Location', 'RoseTreeError', 'Tree', 'Zipper', 'build', 'from_locations',
    'kin', 'location', 'traversal', 'unfold', 'wrap',
]
