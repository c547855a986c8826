from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from gdlogit.model.params import ModelParams


# (epoch, loop, cost); loop is None for batch gradient descent
CostRecord = Tuple[int, Optional[int], float]


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult（FROZEN）

    Outcome of one completed training run:
    - params: trained parameters (a copy, safe to keep)
    - model_path: where they were persisted
    - history: every logged cost record, in order
    - metrics: epochs_run / final_cost / converged / timings
    """
    params: ModelParams
    model_path: Path
    history: List[CostRecord] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)
