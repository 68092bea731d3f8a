from __future__ import annotations

from enum import Enum


class Scope(str, Enum):
    # aanleg
    GRONDWERK = "grondwerk"
    BESTRATING = "bestrating"
    BORDERS = "borders"
    GRAS = "gras"
    HOUTWERK = "houtwerk"
    WATER_ELEKTRA = "water_elektra"
    SPECIALS = "specials"
    # onderhoud
    GRAS_ONDERHOUD = "gras_onderhoud"
    BORDERS_ONDERHOUD = "borders_onderhoud"
    HEGGEN = "heggen"
    BOMEN = "bomen"
    OVERIG = "overig"
    REINIGING = "reiniging"
    BEMESTING = "bemesting"
    GAZONANALYSE = "gazonanalyse"
    MOLLENBESTRIJDING = "mollenbestrijding"


# Vaste volgorde voor planning/rapportage (enum-volgorde)
SCOPE_ORDER = {s.value: i for i, s in enumerate(Scope)}


class OfferteType(str, Enum):
    AANLEG = "aanleg"
    ONDERHOUD = "onderhoud"


class RegelType(str, Enum):
    MATERIAAL = "materiaal"
    ARBEID = "arbeid"
    MACHINE = "machine"


class FactorCategorie(str, Enum):
    """
    Categorieën uit de correctiefactor-tabel.
    De eerste vijf zijn de generieke correcties (vaste volgorde),
    de rest zijn scope-specifieke categorische multipliers.
    """

    BEREIKBAARHEID = "bereikbaarheid"
    ACHTERSTALLIGHEID = "achterstalligheid"
    COMPLEXITEIT = "complexiteit"
    INTENSITEIT = "intensiteit"
    SNIJWERK = "snijwerk"
    HAAGSOORT = "haagsoort"
    ONDERGROND = "ondergrond"
    BOOMHOOGTE = "boomhoogte"
    TERRASTYPE = "terrastype"
    VEILIGHEID = "veiligheid"
    FREQUENTIEKORTING = "frequentiekorting"


class Bereikbaarheid(str, Enum):
    GOED = "goed"
    BEPERKT = "beperkt"
    SLECHT = "slecht"


class Achterstalligheid(str, Enum):
    LAAG = "laag"
    GEMIDDELD = "gemiddeld"
    HOOG = "hoog"


class Complexiteit(str, Enum):
    LAAG = "laag"
    GEMIDDELD = "gemiddeld"
    HOOG = "hoog"


class Intensiteit(str, Enum):
    WEINIG = "weinig"
    GEMIDDELD = "gemiddeld"
    VEEL = "veel"


class Snijwerk(str, Enum):
    LAAG = "laag"
    GEMIDDELD = "gemiddeld"
    HOOG = "hoog"


class Diepte(str, Enum):
    LICHT = "licht"
    STANDAARD = "standaard"
    ZWAAR = "zwaar"


class BestratingSoort(str, Enum):
    TEGELS = "tegels"
    KLINKERS = "klinkers"
    NATUURSTEEN = "natuursteen"


class FunderingProfiel(str, Enum):
    """Opbouw van de fundering onder bestrating (licht naar zwaar belast)."""

    PAD = "pad"
    OPRIT = "oprit"
    TERREIN = "terrein"


class BorderAfwerking(str, Enum):
    GEEN = "geen"
    SCHORS = "schors"
    GRIND = "grind"


class GrasType(str, Enum):
    ZAAIEN = "zaaien"
    GRASZODEN = "graszoden"


class HoutwerkType(str, Enum):
    SCHUTTING = "schutting"
    VLONDER = "vlonder"
    PERGOLA = "pergola"


class Fundering(str, Enum):
    STANDAARD = "standaard"
    ZWAAR = "zwaar"


class SpecialType(str, Enum):
    JACUZZI = "jacuzzi"
    SAUNA = "sauna"
    PREFAB = "prefab"


class SnoeiType(str, Enum):
    """Heg: welke zijden worden geknipt."""

    ZIJKANTEN = "zijkanten"
    BOVENKANT = "bovenkant"
    BEIDE = "beide"


class HaagSoort(str, Enum):
    LIGUSTER = "liguster"
    BEUK = "beuk"
    TAXUS = "taxus"
    CONIFEER = "conifeer"
    BUXUS = "buxus"


class HegOndergrond(str, Enum):
    GRAS = "gras"
    BESTRATING = "bestrating"
    BORDER = "border"


class BorderSnoei(str, Enum):
    GEEN = "geen"
    LICHT = "licht"
    ZWAAR = "zwaar"


class BoomSnoei(str, Enum):
    LICHT = "licht"
    ZWAAR = "zwaar"


class BoomHoogte(str, Enum):
    LAAG = "laag"
    MIDDEL = "middel"
    HOOG = "hoog"
    ZEER_HOOG = "zeer_hoog"


class BoomInspectie(str, Enum):
    GEEN = "geen"
    VISUEEL = "visueel"
    GECERTIFICEERD = "gecertificeerd"


class TerrasType(str, Enum):
    KERAMISCH = "keramisch"
    BETON = "beton"
    KLINKERS = "klinkers"
    NATUURSTEEN = "natuursteen"
    HOUT = "hout"


class BladruimenType(str, Enum):
    EENMALIG = "eenmalig"
    SEIZOEN = "seizoen"


class OnkruidMethode(str, Enum):
    HANDMATIG = "handmatig"
    BRANDEN = "branden"
    HEET_WATER = "heet_water"
    CHEMISCH = "chemisch"


class BemestingType(str, Enum):
    BASIS = "basis"
    PREMIUM = "premium"
    BIO = "bio"


class MollenPakket(str, Enum):
    BASIS = "basis"
    PREMIUM = "premium"
    PREMIUM_PLUS = "premium_plus"


class DeviationStatus(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


class InsightType(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


class TaakStatus(str, Enum):
    GEPLAND = "gepland"
    GESTART = "gestart"
    AFGEROND = "afgerond"


class Betrouwbaarheid(str, Enum):
    LAAG = "laag"
    GEMIDDELD = "gemiddeld"
    HOOG = "hoog"
