from .contracts import ActualsLog, ReferenceSource, ResultStore
from .memory import InMemoryStore

__all__ = ["ActualsLog", "InMemoryStore", "ReferenceSource", "ResultStore"]
