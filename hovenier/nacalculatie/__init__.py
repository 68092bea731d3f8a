from .deviation import (
    DeviationThresholds,
    calculate_nacalculatie,
    deviation_percentage,
    get_deviation_status,
)
from .insights import generate_insights
from .leerfeedback import analyze_nacalculaties
from .models import (
    MachineGebruik,
    NacalculatieInsight,
    NacalculatieResult,
    ScopeAfwijking,
    UrenRegistratie,
)

__all__ = [
    "DeviationThresholds",
    "MachineGebruik",
    "NacalculatieInsight",
    "NacalculatieResult",
    "ScopeAfwijking",
    "UrenRegistratie",
    "analyze_nacalculaties",
    "calculate_nacalculatie",
    "deviation_percentage",
    "generate_insights",
    "get_deviation_status",
]
