from __future__ import annotations

import logging
import threading
from datetime import date, datetime, timezone
from typing import List, Optional

from rental_desk.exceptions import (
    CustomerNotFoundError,
    InvalidStateError,
    RentalNotFoundError,
    VehicleNotFoundError,
    VehicleUnavailableError,
)
from rental_desk.models import Customer, Rental, RentalStatus, Vehicle

from .pricing import calculate_rental_cost, validate_date_range
from .store import DataStore, EntityKind

logger = logging.getLogger(__name__)


class RentalManager:
    """Business rules over a :class:`DataStore`.

    The manager is the only writer of the store. Each operation holds one
    coarse lock for its whole read-check-write sequence, so two callers can
    never both pass the availability check for the same vehicle.

    Lookups that miss raise a :class:`~rental_desk.exceptions.NotFoundError`
    subclass; none of them return ``None``.
    """

    def __init__(self, store: DataStore) -> None:
        self.store = store
        self._lock = threading.RLock()

    # vehicles

    def list_vehicles(self) -> List[Vehicle]:
        with self._lock:
            return list(self.store.vehicles.values())

    def find_available_vehicles(self) -> List[Vehicle]:
        with self._lock:
            return [v for v in self.store.vehicles.values() if v.available]

    def get_vehicle(self, vehicle_id: int) -> Vehicle:
        with self._lock:
            vehicle = self.store.get_vehicle(vehicle_id)
            if not vehicle:
                raise VehicleNotFoundError(vehicle_id)
            return vehicle

    def add_vehicle(self, vehicle: Vehicle) -> Vehicle:
        """Store a new vehicle under a fresh id, available for rent.

        Any id or availability on the input is ignored.
        """
        with self._lock:
            vehicle_id = self.store.next_identifier(EntityKind.VEHICLE)
            created = vehicle.model_copy(update={"id": vehicle_id, "available": True})
            self.store.insert_vehicle(created)
            logger.info("Added vehicle %s (%s %s)", vehicle_id, created.make, created.model)
            return created

    # customers

    def list_customers(self) -> List[Customer]:
        with self._lock:
            return list(self.store.customers.values())

    def find_customer_by_id(self, customer_id: int) -> Customer:
        with self._lock:
            customer = self.store.get_customer(customer_id)
            if not customer:
                raise CustomerNotFoundError(customer_id)
            return customer

    def add_customer(self, customer: Customer) -> Customer:
        with self._lock:
            customer_id = self.store.next_identifier(EntityKind.CUSTOMER)
            created = customer.model_copy(update={"id": customer_id})
            self.store.insert_customer(created)
            logger.info("Added customer %s (%s)", customer_id, created.email)
            return created

    def customer_history(self, customer_id: int) -> List[Rental]:
        with self._lock:
            self.find_customer_by_id(customer_id)
            return [r for r in self.store.rentals.values() if r.customerId == customer_id]

    # rentals

    def rent_vehicle(
        self,
        vehicle_id: int,
        customer_id: int,
        start_date: date,
        end_date: date,
    ) -> Rental:
        with self._lock:
            vehicle = self.store.get_vehicle(vehicle_id)
            if not vehicle:
                logger.warning("Rent rejected: vehicle %s not found", vehicle_id)
                raise VehicleNotFoundError(vehicle_id)
            customer = self.store.get_customer(customer_id)
            if not customer:
                logger.warning("Rent rejected: customer %s not found", customer_id)
                raise CustomerNotFoundError(customer_id)
            if not vehicle.available:
                logger.warning("Rent rejected: vehicle %s is not available", vehicle_id)
                raise VehicleUnavailableError(vehicle_id)
            validate_date_range(start_date, end_date)

            # nothing below may fail half way: all checks have passed
            rental_id = self.store.next_identifier(EntityKind.RENTAL)
            cost = calculate_rental_cost(vehicle.dailyRate, start_date, end_date)
            rental = Rental(
                id=rental_id,
                vehicleId=vehicle.id,
                customerId=customer.id,
                startDate=start_date,
                endDate=end_date,
                totalCost=cost,
            )
            vehicle.available = False
            self.store.insert_rental(rental)
            logger.info(
                "Rental %s created: vehicle %s to customer %s for %s",
                rental_id, vehicle_id, customer_id, cost,
            )
            return rental

    def return_vehicle(self, rental_id: int) -> Rental:
        """Close a rental and put its vehicle back on the lot.

        Returning an already returned rental is a no-op, not an error; it never
        frees a vehicle that a later rental holds.
        """
        with self._lock:
            rental = self.store.get_rental(rental_id)
            if not rental:
                logger.warning("Return rejected: rental %s not found", rental_id)
                raise RentalNotFoundError(rental_id)
            vehicle = self.store.get_vehicle(rental.vehicleId)
            if not vehicle:
                logger.warning(
                    "Return rejected: rental %s references missing vehicle %s",
                    rental_id, rental.vehicleId,
                )
                raise InvalidStateError(
                    f"Error: vehicle {rental.vehicleId} of rental {rental_id} no longer exists"
                )
            if rental.status == RentalStatus.RETURNED:
                return rental
            vehicle.available = True
            rental.status = RentalStatus.RETURNED
            rental.returnedAt = datetime.now(timezone.utc)
            logger.info("Rental %s returned, vehicle %s available", rental_id, vehicle.id)
            return rental

    def get_rental_details(self, rental_id: int) -> Rental:
        with self._lock:
            rental = self.store.get_rental(rental_id)
            if not rental:
                raise RentalNotFoundError(rental_id)
            return rental

    def list_rentals(self, status: Optional[RentalStatus] = None) -> List[Rental]:
        with self._lock:
            rentals = list(self.store.rentals.values())
            if status is not None:
                rentals = [r for r in rentals if r.status == status]
            return rentals
