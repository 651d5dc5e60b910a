"""Per-segment motion constraint assignment."""

from __future__ import annotations

from collections.abc import Sequence

from autopath.path.models import PathConstraints


class ConstraintAssigner:
    """Pair each segment of a path group with a :class:`PathConstraints`.

    Segment ``i`` gets ``constraints[i]``; once the supplied list runs out,
    every remaining segment reuses the last entry.  ``[fast, slow]`` therefore
    drives the first segment fast and everything after it slow.
    """

    def assign(
        self,
        constraints: Sequence[PathConstraints],
        segment_count: int,
    ) -> list[PathConstraints]:
        """Return exactly *segment_count* constraints.

        Raises:
            ValueError: If *constraints* is empty or *segment_count* is negative.
        """
        if not constraints:
            raise ValueError("At least one PathConstraints is required")
        if segment_count < 0:
            raise ValueError(f"segment_count must be >= 0, got {segment_count}")

        last = len(constraints) - 1
        return [constraints[min(i, last)] for i in range(segment_count)]
