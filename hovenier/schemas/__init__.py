from .offerte_v1 import OfferteCalculateInputV1, OfferteOutputV1
from .project_v1 import (
    LeerfeedbackInputV1,
    LeerfeedbackOutputV1,
    MachineGebruikV1,
    NacalculatieOutputV1,
    PlanningOutputV1,
    UrenRegistratieV1,
    VoorcalculatieInputV1,
    VoorcalculatieOutputV1,
)

__all__ = [
    "OfferteCalculateInputV1",
    "OfferteOutputV1",
    "LeerfeedbackInputV1",
    "LeerfeedbackOutputV1",
    "MachineGebruikV1",
    "NacalculatieOutputV1",
    "PlanningOutputV1",
    "UrenRegistratieV1",
    "VoorcalculatieInputV1",
    "VoorcalculatieOutputV1",
]
