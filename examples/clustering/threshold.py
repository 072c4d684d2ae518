from typing import List, Sequence

from clustering import Algorithm


class Threshold(Algorithm):
    """Splits points at a fixed cut-off."""

    def __init__(self, cutoff: float):
        self.cutoff = cutoff

    def fit(self, points: Sequence[float]) -> List[int]:
        return [int(p >= self.cutoff) for p in points]

    class Factory(Algorithm):
        """Picks the cut-off from the data: the midpoint of its range."""

        def fit(self, points: Sequence[float]) -> List[int]:
            return Threshold((min(points) + max(points)) / 2).fit(points)
