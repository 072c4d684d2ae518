from typing import List, Sequence

from clustering import Algorithm
from registrar import implementation


@implementation(aliases=["km", "Lloyd"])
class KMeans(Algorithm):
    def __init__(self, k: int = 2, iterations: int = 10):
        self.k = k
        self.iterations = iterations

    def fit(self, points: Sequence[float]) -> List[int]:
        ordered = sorted(points)
        centers = [ordered[i * (len(ordered) - 1) // max(self.k - 1, 1)] for i in range(self.k)]
        labels: List[int] = []
        for _ in range(self.iterations):
            labels = [min(range(self.k), key=lambda c: abs(p - centers[c])) for p in points]
            for c in range(self.k):
                members = [p for p, label in zip(points, labels) if label == c]
                if members:
                    centers[c] = sum(members) / len(members)
        return labels
