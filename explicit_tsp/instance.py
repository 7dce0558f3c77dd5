# explicit_tsp/instance.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import numpy as np

from .entries import EntryStore


@dataclass
class Instance:
    distances: np.ndarray  # (n, n)
    name: Optional[str] = None
    comment: Optional[str] = None
    coordinates: Optional[np.ndarray] = None  # (n, 2), display only
    entries: EntryStore = field(default_factory=EntryStore)

    @property
    def dimension(self) -> int:
        return int(self.distances.shape[0])

    @property
    def edge_weight_format(self) -> Optional[str]:
        return self.entries.get_text("EDGE_WEIGHT_FORMAT")

    def summary(self) -> Dict[str, Any]:
        """JSON-friendly description, used by the CLI."""
        return {
            "name": self.name,
            "comment": self.comment,
            "dimension": self.dimension,
            "edge_weight_format": self.edge_weight_format,
            "has_coordinates": self.coordinates is not None,
            "symmetric": bool(np.array_equal(self.distances, self.distances.T)),
        }
