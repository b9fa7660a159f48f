from .manager import RentalManager
from .pricing import calculate_rental_cost, rental_days
from .store import DataStore, EntityKind

__all__ = ["DataStore", "EntityKind", "RentalManager", "calculate_rental_cost", "rental_days"]
