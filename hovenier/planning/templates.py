from __future__ import annotations

from typing import Dict, Tuple

DEFAULT_TAKEN: Tuple[str, ...] = ("Werkzaamheden uitvoeren",)

# Vaste taaknamen per scope; uren worden gelijk over de taken verdeeld
TAKEN_TEMPLATES: Dict[str, Tuple[str, ...]] = {
    # aanleg
    "grondwerk": ("Ontgraven", "Grond afvoeren", "Onderbouw voorbereiden"),
    "bestrating": ("Fundering leggen", "Bestraten", "Aftrillen/afwerken"),
    "borders": ("Grond voorbereiden", "Beplanting plaatsen", "Afwerking aanbrengen"),
    "gras": ("Ondergrond voorbereiden", "Gras zaaien/leggen", "Afwerken"),
    "houtwerk": ("Fundering maken", "Houtwerk monteren", "Afwerking"),
    "water_elektra": ("Sleuven graven", "Bekabeling leggen", "Armaturen plaatsen"),
    "specials": ("Voorbereiding", "Installatie", "Afwerking"),
    # onderhoud
    "gras_onderhoud": ("Maaien", "Kanten steken", "Afvoeren"),
    "borders_onderhoud": ("Onkruid verwijderen", "Snoeien", "Afvoeren"),
    "heggen": ("Snoeien", "Afvoeren snoeisel"),
    "bomen": ("Snoeien", "Afvoeren"),
    "overig": ("Diverse werkzaamheden",),
    "reiniging": ("Reinigen", "Afvoeren"),
    "bemesting": ("Bemesten",),
    "gazonanalyse": ("Gazon beoordelen", "Gazon herstellen"),
    "mollenbestrijding": ("Klemmen plaatsen", "Controlebezoeken"),
}


def taken_for_scope(scope: str) -> Tuple[str, ...]:
    return TAKEN_TEMPLATES.get(scope, DEFAULT_TAKEN)
