"""Protocol definitions for the parser package.

Contains structural typing protocols that define interfaces for
parser components, so plain functions and predicate objects can be
mixed freely.
"""

from typing import Protocol

from htmlsieve.parser.extractor import Element


class Predicate(Protocol):
    """Protocol defining the interface for element predicates.

    Implementations should:
    - Be pure: same element, same answer, no side effects
    - Keep no state shared between calls
    """

    def __call__(self, element: Element) -> bool:
        """Test a single element.

        Args:
            element: The element descriptor to test.

        Returns:
            True if the element should be kept.

        """
        ...
