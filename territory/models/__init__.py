# territory/models/__init__.py

# Order follows the hierarchy (parents first).
from .section import Section
from .locality import Locality
from .circuit import Circuit
from .school import School
from .table import Table
from .citizen import Citizen

__all__ = [
    "Section",
    "Locality",
    "Circuit",
    "School",
    "Table",
    "Citizen",
]
