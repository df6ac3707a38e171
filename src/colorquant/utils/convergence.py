"""
Convergence criteria for the k-means trainer.

Lloyd's iteration stops once assignments stop moving; the iteration cap is
enforced by the training loop itself.
"""

from typing import Dict, Any
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion


class ChangeInAssignments(ConvergenceCriterion):
    """Convergence based on fraction of points that change clusters.

    With the default ``max_change_fraction=0`` the run converges only when no
    point changes cluster between consecutive iterations.
    """

    def __init__(self, max_change_fraction: float = 0.0):
        """
        Args:
            max_change_fraction: Largest fraction of changed points still
                                 counted as stable
        """
        super().__init__()
        if max_change_fraction < 0:
            raise ValueError(f"max_change_fraction must be >= 0, got {max_change_fraction}")
        self.max_change_fraction = max_change_fraction
        self._prev_assignments = None

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if assignments have stabilized."""
        assignments = current_state['assignments']

        if isinstance(assignments, Tensor):
            current_assignments = assignments
        else:
            # AssignmentMatrix object
            current_assignments = assignments.get_hard()

        if self._prev_assignments is None:
            self._prev_assignments = current_assignments.clone()
            return False

        n_changed = (current_assignments != self._prev_assignments).sum().item()
        n_total = len(current_assignments)
        change_fraction = n_changed / n_total if n_total else 0.0

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed,
            'change_fraction': change_fraction
        })

        converged = change_fraction <= self.max_change_fraction

        self._prev_assignments = current_assignments.clone()

        return converged

    def reset(self):
        """Forget previous assignments."""
        super().reset()
        self._prev_assignments = None
