from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List

from hovenier.engine.context import ScopeResult
from hovenier.engine.rounding import round2, round_to_quarter

from .formatter import format_number


# -----------------------------
# Public contract
# -----------------------------


class BreakdownKind(str, Enum):
    STEP = "STEP"
    WARNING = "WARNING"
    META = "META"


_CODE_RE = re.compile(r"^[A-Z][A-Z0-9_]{2,63}$")  # e.g. LABOR, FACTOR, HEG_HOOGTE_TOESLAG


def _validate_code(code: str) -> str:
    code = str(code).strip()
    if not _CODE_RE.match(code):
        raise ValueError(f"invalid breakdown code '{code}'. Expected UPPER_SNAKE (3-64 chars), e.g. LABOR")
    return code


def _validate_message(message: str) -> str:
    msg = str(message).strip()
    if not msg:
        raise ValueError("breakdown message must be non-empty")
    # render-safe voor UI/Excel
    if "\n" in msg or "\r" in msg or "\t" in msg:
        raise ValueError("breakdown message may not contain newlines or tabs")
    if len(msg) > 240:
        raise ValueError("breakdown message too long (max 240 chars)")
    return msg


@dataclass(frozen=True)
class BreakdownEntry:
    seq: int
    kind: BreakdownKind
    code: str
    message: str


@dataclass
class Breakdown:
    """
    Uitleg per scope: welke normuren, welke factoren, welke toeslagen.
    Itereren geeft de gerenderde strings.
    """

    _entries: List[BreakdownEntry] = field(default_factory=list)

    @property
    def entries(self) -> List[BreakdownEntry]:
        return list(self._entries)

    def as_strings(self) -> List[str]:
        return BreakdownBuilder().build(self)

    def __iter__(self) -> Iterator[str]:
        return iter(self.as_strings())

    def __len__(self) -> int:
        return len(self._entries)

    def add_step(self, code: str, message: str) -> None:
        self._append(BreakdownKind.STEP, code, message)

    def add_warning(self, code: str, message: str) -> None:
        self._append(BreakdownKind.WARNING, code, message)

    def add_meta(self, code: str, message: str) -> None:
        self._append(BreakdownKind.META, code, message)

    def _append(self, kind: BreakdownKind, code: str, message: str) -> None:
        self._entries.append(
            BreakdownEntry(
                seq=len(self._entries) + 1,
                kind=kind,
                code=_validate_code(code),
                message=_validate_message(message),
            )
        )


# -----------------------------
# Render / Output builder
# -----------------------------


class BreakdownBuilder:
    def build(self, breakdown: Breakdown) -> List[str]:
        if not isinstance(breakdown, Breakdown):
            raise TypeError("BreakdownBuilder.build expects a Breakdown instance")
        return [self._render(e) for e in sorted(breakdown.entries, key=lambda e: e.seq)]

    def _render(self, e: BreakdownEntry) -> str:
        if e.kind == BreakdownKind.WARNING:
            return f"WARNING: {e.message}"
        if e.kind == BreakdownKind.META:
            return f"META: {e.message}"
        return e.message


def build_scope_breakdown(result: ScopeResult) -> Breakdown:
    """Normuur x hoeveelheid, daarna elke factor met zijn delta, per arbeidspost."""
    bd = Breakdown()
    for item in result.labor:
        bd.add_step(
            "LABOR",
            f"{item.omschrijving}: {format_number(round2(item.hoeveelheid))} {item.eenheid} x "
            f"{format_number(item.normuur_per_eenheid)} = {format_number(round2(item.basis_uren))} uur",
        )
        for f in item.factoren:
            bd.add_step("FACTOR", f"x {f.describe()}")
        bd.add_step("LABOR_TOTAL", f"= {format_number(round_to_quarter(item.uren))} uur (kwartier)")

    for note in result.notes:
        bd.add_warning(note.code, note.message)

    bd.add_meta("SCOPE_HOURS", f"{result.scope.value}: {format_number(result.rounded_hours)} uur totaal")
    return bd

