from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional

from rental_desk.models import Customer, Rental, RentalStatus, Vehicle, VehicleType


class EntityKind(str, Enum):
    VEHICLE = "vehicle"
    CUSTOMER = "customer"
    RENTAL = "rental"


class DataStore:
    """In-memory system of record. Holds no business rules."""

    def __init__(self) -> None:
        self.vehicles: Dict[int, Vehicle] = {}
        self.customers: Dict[int, Customer] = {}
        self.rentals: Dict[int, Rental] = {}

    def _collection(self, kind: EntityKind) -> Dict[int, object]:
        if kind == EntityKind.VEHICLE:
            return self.vehicles
        if kind == EntityKind.CUSTOMER:
            return self.customers
        return self.rentals

    def next_identifier(self, kind: EntityKind) -> int:
        return max(self._collection(kind), default=0) + 1

    def seed_sample_data(self) -> None:
        vehicles = [
            Vehicle(id=1, make="Toyota", model="Corolla", licensePlate="ABC-1234",
                    dailyRate=Decimal("35.00"), vehicleType=VehicleType.CAR),
            Vehicle(id=2, make="Ford", model="F-150", licensePlate="TRK-5678",
                    dailyRate=Decimal("50.00"), vehicleType=VehicleType.TRUCK),
            Vehicle(id=3, make="Honda", model="CR-V", licensePlate="SUV-9012",
                    dailyRate=Decimal("45.00"), vehicleType=VehicleType.SUV),
        ]
        for vehicle in vehicles:
            self.insert_vehicle(vehicle)

        self.insert_customer(
            Customer(id=101, firstName="John", lastName="Doe",
                     email="john.doe@example.com", phone="555-0101")
        )
        self.insert_customer(
            Customer(id=102, firstName="Jane", lastName="Smith",
                     email="jane.smith@example.com", phone="555-0102")
        )

        # one closed rental on the Corolla, one still running on the CR-V
        self.insert_rental(
            Rental(id=1, vehicleId=1, customerId=101,
                   startDate=date(2024, 1, 10), endDate=date(2024, 1, 13),
                   totalCost=Decimal("105.00"), status=RentalStatus.RETURNED)
        )
        self.insert_rental(
            Rental(id=2, vehicleId=3, customerId=102,
                   startDate=date(2024, 1, 15), endDate=date(2024, 1, 20),
                   totalCost=Decimal("225.00"))
        )
        self.vehicles[3].available = False

    def insert_vehicle(self, vehicle: Vehicle) -> Vehicle:
        self.vehicles[vehicle.id] = vehicle
        return vehicle

    def insert_customer(self, customer: Customer) -> Customer:
        self.customers[customer.id] = customer
        return customer

    def insert_rental(self, rental: Rental) -> Rental:
        self.rentals[rental.id] = rental
        return rental

    def get_vehicle(self, vehicle_id: int) -> Optional[Vehicle]:
        return self.vehicles.get(vehicle_id)

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self.customers.get(customer_id)

    def get_rental(self, rental_id: int) -> Optional[Rental]:
        return self.rentals.get(rental_id)
