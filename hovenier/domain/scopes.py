"""
Scope-invoer als gesloten tagged union.

Elke variant draagt alleen de velden die voor die scope betekenis hebben.
Optioneel deelwerk (terras reinigen, drainage, ...) is een Optional sub-model:
"aan" betekent dat de maat er is, "uit" is None. Een variant met aanwezig=True
kan niet worden aangemaakt zonder positieve verplichte maten.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, ClassVar, List, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    condecimal,
    conint,
    model_validator,
)

from .enums import (
    BemestingType,
    BestratingSoort,
    BladruimenType,
    BoomHoogte,
    BoomInspectie,
    BoomSnoei,
    BorderAfwerking,
    BorderSnoei,
    Diepte,
    Fundering,
    FunderingProfiel,
    GrasType,
    HaagSoort,
    HegOndergrond,
    HoutwerkType,
    Intensiteit,
    MollenPakket,
    OnkruidMethode,
    Scope,
    SnoeiType,
    SpecialType,
    Snijwerk,
    TerrasType,
)
from .errors import ScopeValidationError

NonNegDecimal = condecimal(ge=0)
PositiveDecimal = condecimal(gt=0)
Frequentie = conint(ge=1, le=12)


class _Part(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class ScopeInputBase(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    aanwezig: bool = True

    # velden die > 0 moeten zijn zodra de scope aanwezig is
    required_positive: ClassVar[Tuple[str, ...]] = ()

    @property
    def scope_key(self) -> Scope:
        return Scope(getattr(self, "scope"))

    def _missing(self) -> List[str]:
        missing: List[str] = []
        for name in self.required_positive:
            value = getattr(self, name)
            if value is None or value <= 0:
                missing.append(name)
        return missing

    @model_validator(mode="after")
    def check_presence_rule(self) -> "ScopeInputBase":
        if not self.aanwezig:
            return self
        missing = self._missing()
        if missing:
            raise ValueError(
                f"{getattr(self, 'scope', '?')}: verplicht en > 0 bij aanwezige scope: {', '.join(missing)}"
            )
        return self


# -----------------------------
# Aanleg
# -----------------------------


class GrondwerkInput(ScopeInputBase):
    scope: Literal["grondwerk"] = "grondwerk"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    diepte: Diepte = Diepte.STANDAARD
    afvoer_grond: bool = False

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)


class Onderbouw(_Part):
    """Verplichte opbouw onder bestrating."""

    laag: Literal["zandbed", "puinbed"] = "zandbed"
    dikte_cm: PositiveDecimal = Decimal("5")  # type: ignore
    opsluitbanden: bool = False


class BestratingZone(_Part):
    profiel: FunderingProfiel
    oppervlakte: PositiveDecimal  # type: ignore


class BestratingInput(ScopeInputBase):
    scope: Literal["bestrating"] = "bestrating"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    soort: BestratingSoort = BestratingSoort.TEGELS
    snijwerk: Snijwerk = Snijwerk.LAAG
    onderbouw: Optional[Onderbouw] = None
    fundering: Optional[FunderingProfiel] = None
    zones: Tuple[BestratingZone, ...] = ()

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)

    def _missing(self) -> List[str]:
        missing = super()._missing()
        if self.onderbouw is None:
            missing.append("onderbouw")
        return missing


class BordersInput(ScopeInputBase):
    scope: Literal["borders"] = "borders"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    intensiteit: Intensiteit = Intensiteit.GEMIDDELD
    afwerking: BorderAfwerking = BorderAfwerking.GEEN
    bodemverbetering: bool = False

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)


class GrasInput(ScopeInputBase):
    scope: Literal["gras"] = "gras"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    type: GrasType = GrasType.ZAAIEN
    kunstgras: bool = False
    drainage_meters: Optional[PositiveDecimal] = None  # type: ignore
    opsluitbanden_meters: Optional[PositiveDecimal] = None  # type: ignore

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)


class HoutwerkInput(ScopeInputBase):
    """afmeting: meters (schutting), m² (vlonder) of aantal (pergola)."""

    scope: Literal["houtwerk"] = "houtwerk"
    type: HoutwerkType = HoutwerkType.SCHUTTING
    afmeting: NonNegDecimal = Decimal("0")  # type: ignore
    fundering: Fundering = Fundering.STANDAARD

    required_positive: ClassVar[Tuple[str, ...]] = ("afmeting",)


class WaterElektraInput(ScopeInputBase):
    scope: Literal["water_elektra"] = "water_elektra"
    aantal_punten: conint(ge=0) = 0  # type: ignore
    sleuven_nodig: bool = True

    required_positive: ClassVar[Tuple[str, ...]] = ("aantal_punten",)


class SpecialItem(_Part):
    type: SpecialType
    omschrijving: Optional[str] = None


class SpecialsInput(ScopeInputBase):
    scope: Literal["specials"] = "specials"
    items: Tuple[SpecialItem, ...] = ()

    def _missing(self) -> List[str]:
        return [] if self.items else ["items"]


# -----------------------------
# Onderhoud
# -----------------------------


class GrasOnderhoudInput(ScopeInputBase):
    scope: Literal["gras_onderhoud"] = "gras_onderhoud"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    maaien: bool = False
    kanten_steken: bool = False
    verticuteren: bool = False

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)


class BordersOnderhoudInput(ScopeInputBase):
    scope: Literal["borders_onderhoud"] = "borders_onderhoud"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    intensiteit: Intensiteit = Intensiteit.GEMIDDELD
    onkruid_verwijderen: bool = True
    snoei: BorderSnoei = BorderSnoei.GEEN

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)


class HeggenInput(ScopeInputBase):
    """Volume = lengte x hoogte x breedte; alle drie verplicht."""

    scope: Literal["heggen"] = "heggen"
    lengte: NonNegDecimal = Decimal("0")  # type: ignore
    hoogte: NonNegDecimal = Decimal("0")  # type: ignore
    breedte: NonNegDecimal = Decimal("0")  # type: ignore
    snoei: SnoeiType = SnoeiType.BEIDE
    afvoer_snoeisel: bool = False
    haagsoort: Optional[HaagSoort] = None
    ondergrond: Optional[HegOndergrond] = None
    frequentie: Frequentie = 1  # type: ignore
    hoogwerker_nodig: bool = False

    required_positive: ClassVar[Tuple[str, ...]] = ("lengte", "hoogte", "breedte")


class BomenInput(ScopeInputBase):
    scope: Literal["bomen"] = "bomen"
    aantal: conint(ge=0) = 0  # type: ignore
    snoei: BoomSnoei = BoomSnoei.LICHT
    hoogteklasse: BoomHoogte = BoomHoogte.LAAG
    hoogte_m: Optional[PositiveDecimal] = None  # type: ignore
    nabij_straat: bool = False
    nabij_gebouw: bool = False
    nabij_kabels: bool = False
    inspectie: BoomInspectie = BoomInspectie.GEEN
    afvoer: bool = False
    kroondiameter_m: Optional[PositiveDecimal] = None  # type: ignore

    required_positive: ClassVar[Tuple[str, ...]] = ("aantal",)


class OverigInput(ScopeInputBase):
    scope: Literal["overig"] = "overig"
    bladruimen: bool = False
    terras_oppervlakte: Optional[PositiveDecimal] = None  # type: ignore
    onkruid_bestrating_oppervlakte: Optional[PositiveDecimal] = None  # type: ignore
    afwateringspunten: Optional[conint(gt=0)] = None  # type: ignore
    overig_uren: Optional[PositiveDecimal] = None  # type: ignore
    notities: Optional[str] = None


class TerrasReiniging(_Part):
    oppervlakte: PositiveDecimal  # type: ignore
    type: Optional[TerrasType] = None


class Bladruimen(_Part):
    oppervlakte: PositiveDecimal  # type: ignore
    type: BladruimenType = BladruimenType.EENMALIG


class OnkruidBestrating(_Part):
    oppervlakte: PositiveDecimal  # type: ignore
    methode: OnkruidMethode = OnkruidMethode.HANDMATIG


class AlgReiniging(_Part):
    oppervlakte: PositiveDecimal  # type: ignore


class ReinigingInput(ScopeInputBase):
    scope: Literal["reiniging"] = "reiniging"
    terras: Optional[TerrasReiniging] = None
    bladruimen: Optional[Bladruimen] = None
    onkruid: Optional[OnkruidBestrating] = None
    algen: Optional[AlgReiniging] = None


class BemestingInput(ScopeInputBase):
    scope: Literal["bemesting"] = "bemesting"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    type: BemestingType = BemestingType.BASIS
    frequentie: Frequentie = 1  # type: ignore
    kalkbehandeling: bool = False
    grondanalyse: bool = False

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)


class KalePlekken(_Part):
    # None = schatting (10 % van het gazon)
    oppervlakte: Optional[PositiveDecimal] = None  # type: ignore


class GazonanalyseInput(ScopeInputBase):
    scope: Literal["gazonanalyse"] = "gazonanalyse"
    oppervlakte: NonNegDecimal = Decimal("0")  # type: ignore
    verticuteren: bool = False
    doorzaaien: bool = False
    nieuwe_grasmat: bool = False
    plaggen: bool = False
    kale_plekken: Optional[KalePlekken] = None
    bekalken: bool = False
    drainage: bool = False

    required_positive: ClassVar[Tuple[str, ...]] = ("oppervlakte",)


class MollenbestrijdingInput(ScopeInputBase):
    scope: Literal["mollenbestrijding"] = "mollenbestrijding"
    pakket: MollenPakket = MollenPakket.BASIS
    gazonherstel_m2: Optional[PositiveDecimal] = None  # type: ignore
    preventief_gaas_m2: Optional[PositiveDecimal] = None  # type: ignore
    terugkeer_check: bool = False


ScopeInput = Annotated[
    Union[
        GrondwerkInput,
        BestratingInput,
        BordersInput,
        GrasInput,
        HoutwerkInput,
        WaterElektraInput,
        SpecialsInput,
        GrasOnderhoudInput,
        BordersOnderhoudInput,
        HeggenInput,
        BomenInput,
        OverigInput,
        ReinigingInput,
        BemestingInput,
        GazonanalyseInput,
        MollenbestrijdingInput,
    ],
    Field(discriminator="scope"),
]

_scope_adapter: TypeAdapter[Any] = TypeAdapter(ScopeInput)


def parse_scope(data: Any) -> ScopeInputBase:
    """
    Dict (bv. uit API of opgeslagen offerte) -> getypte scope-variant.
    Ongeldige invoer wordt hier al geweigerd, niet pas tijdens de berekening.
    """
    try:
        return _scope_adapter.validate_python(data)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise ScopeValidationError(f"invalid scope input ({exc.error_count()} errors)", errors=errors) from exc
