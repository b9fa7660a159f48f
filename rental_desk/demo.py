"""Walk through the rental desk with the built-in sample data.

Run with `python -m rental_desk`.
"""
import argparse
from datetime import date
from typing import Iterable, List, Optional

from rental_desk.config import configure_logging, settings
from rental_desk.exceptions import RentalDeskError
from rental_desk.models import Customer, Rental, Vehicle
from rental_desk.services import DataStore, RentalManager


def format_vehicle(vehicle: Vehicle) -> str:
    state = "available" if vehicle.available else "rented"
    return (
        f"#{vehicle.id} {vehicle.make} {vehicle.model} ({vehicle.vehicleType.value}) "
        f"plate {vehicle.licensePlate}, ${vehicle.dailyRate}/day, {state}"
    )


def format_customer(customer: Customer) -> str:
    return f"#{customer.id} {customer.fullName} <{customer.email}> {customer.phone}"


def format_rental(rental: Rental) -> str:
    return (
        f"Rental #{rental.id}: vehicle {rental.vehicleId}, customer {rental.customerId}, "
        f"{rental.startDate.isoformat()} to {rental.endDate.isoformat()}, "
        f"total ${rental.totalCost} [{rental.status.value}]"
    )


def print_section(title: str, lines: Iterable[str]) -> None:
    print(f"\n== {title}")
    for line in lines:
        print(f"  {line}")


def run_demo(manager: RentalManager) -> List[str]:
    """Run the fixed demonstration sequence, returning the error messages it printed."""
    errors: List[str] = []

    print_section("Available vehicles", map(format_vehicle, manager.find_available_vehicles()))

    rental = manager.rent_vehicle(1, 101, date(2024, 2, 1), date(2024, 2, 5))
    print_section("New rental", [format_rental(rental)])
    print_section("Rental details", [format_rental(manager.get_rental_details(rental.id))])

    try:
        manager.rent_vehicle(1, 102, date(2024, 2, 2), date(2024, 2, 3))
    except RentalDeskError as exc:
        errors.append(exc.message)
        print_section("Second rental of vehicle 1", [exc.message])

    try:
        manager.rent_vehicle(999, 101, date(2024, 2, 2), date(2024, 2, 3))
    except RentalDeskError as exc:
        errors.append(exc.message)
        print_section("Rental of unknown vehicle", [exc.message])

    manager.return_vehicle(rental.id)
    print_section("After return", map(format_vehicle, manager.find_available_vehicles()))

    print_section("All rentals", map(format_rental, manager.list_rentals()))

    try:
        print_section("Customer 101", [format_customer(manager.find_customer_by_id(101))])
    except RentalDeskError as exc:
        errors.append(exc.message)
        print_section("Customer 101", [exc.message])

    print_section("All customers", map(format_customer, manager.list_customers()))
    return errors


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Rental desk demonstration")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    store = DataStore()
    store.seed_sample_data()
    run_demo(RentalManager(store))


if __name__ == "__main__":
    main()
