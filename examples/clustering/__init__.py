from abc import ABC, abstractmethod
from typing import List, Sequence


class Algorithm(ABC):
    """A clustering algorithm over one-dimensional points."""

    @abstractmethod
    def fit(self, points: Sequence[float]) -> List[int]:
        ...
