"""Path and branch coverage tracking for circuit execution."""

from __future__ import annotations

from collections import Counter


class CoverageTracker:
    """Collects the distinct execution paths taken through a program.

    A path is the sequence of branches taken. Each entry records the branch
    id, how many times that branch had been reached so far on the current
    path, and the outcome of its condition.
    """

    def __init__(self) -> None:
        self._paths: set[tuple[tuple[int, int, bool], ...]] = set()
        self._visit_counter: Counter[int] = Counter()
        self._current_path: list[tuple[int, int, bool]] = []

    def __copy__(self) -> CoverageTracker:
        clone = CoverageTracker()
        clone._paths = set(self._paths)
        clone._visit_counter = Counter(self._visit_counter)
        clone._current_path = list(self._current_path)
        return clone

    def record_branch(self, meta_elem_id: int, branch_cond: bool) -> None:
        """Append a branch outcome to the current path."""
        self._visit_counter[meta_elem_id] += 1
        self._current_path.append(
            (meta_elem_id, self._visit_counter[meta_elem_id], bool(branch_cond))
        )

    def record_path(self) -> None:
        """Store the current path among the paths seen so far."""
        self._paths.add(tuple(self._current_path))

    def clear(self) -> None:
        """Forget every recorded path and the current path."""
        self.clear_current_path()
        self._paths.clear()

    def clear_current_path(self) -> None:
        """Reset only the current path and its visit counters."""
        self._visit_counter.clear()
        self._current_path.clear()

    def coverage_count(self) -> int:
        """Number of distinct paths recorded."""
        return len(self._paths)