from typing import List, Tuple
from dataclasses import dataclass

@dataclass
class ChartData:
    """Data structure for chart rendering"""
    values: List[float]
    max_value: float
    min_value: float
    color: Tuple[int, int, int]
    title: str

    def update(self, values):
        self.values = list(values)
        if self.values:
            self.max_value = max(self.values)
            self.min_value = min(self.values)
