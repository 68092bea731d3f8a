from .loader import get_reference_data, load_reference_data
from .models import Normuur, Product, ReferenceData, build_reference

__all__ = [
    "Normuur",
    "Product",
    "ReferenceData",
    "build_reference",
    "get_reference_data",
    "load_reference_data",
]
