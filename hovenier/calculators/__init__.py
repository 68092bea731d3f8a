"""
Calculators per scope. Importeren van dit package registreert ze allemaal.
"""

from . import (  # noqa: F401
    bemesting,
    bestrating,
    bomen,
    borders,
    borders_onderhoud,
    gazonanalyse,
    gras,
    gras_onderhoud,
    grondwerk,
    heggen,
    houtwerk,
    mollenbestrijding,
    overig,
    reiniging,
    specials,
    water_elektra,
)
from .base import calculate_scope, calculator_registry, register

__all__ = ["calculate_scope", "calculator_registry", "register"]
