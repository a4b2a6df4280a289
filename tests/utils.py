# tests/utils.py
from measura.core.quantity import Quantity
from measura.core.unit import Unit


def make_storage_quantity(name: str = "computer storage") -> Quantity:
    """byte/kB/MB/GB with ratios 1, 1e3, 1e6, 1e9."""
    q = Quantity(name, Unit.identity("byte", "byte"), "Amount of digital information.")
    q.add_unit(Unit.linear("kilobyte", "kB", 1e3))
    q.add_unit(Unit.linear("megabyte", "MB", 1e6))
    q.add_unit(Unit.linear("gigabyte", "GB", 1e9))
    return q
