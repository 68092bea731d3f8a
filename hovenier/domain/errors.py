from __future__ import annotations

from typing import Any, Dict, List, Optional


class HovenierError(Exception):
    """Basis voor alle verwachte engine-fouten."""

    code: str = "HOVENIER_ERROR"

    def __init__(self, message: str, meta: Optional[Dict[str, Any]] = None):
        self.message = str(message)
        self.meta = meta or {}
        super().__init__(f"{self.code}: {self.message}")


class ScopeValidationError(HovenierError):
    """
    Scope-invoer die niet geconstrueerd mag worden
    (bv. heg met breedte 0 terwijl de scope aanwezig is).
    """

    code = "SCOPE_INVALID"

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.errors = errors or []
        super().__init__(message, meta={"errors": self.errors})


class ReferenceDataError(HovenierError):
    """Referentietabel (normuren/correctiefactoren/producten) is ongeldig."""

    code = "REFERENCE_INVALID"


class UnknownScopeError(HovenierError):
    code = "SCOPE_UNKNOWN"
