"""Command-line helper that talks to the rental desk HTTP API."""
import argparse
import json
import sys
from typing import Any, Dict, List, Optional

import requests

from rental_desk.config import settings
from rental_desk.models import VehicleType


def print_response(resp: requests.Response) -> None:
    print(f"HTTP {resp.status_code}\n")
    try:
        payload = resp.json()
        print(json.dumps(payload, indent=2))
    except ValueError:
        print(resp.text)


def send(method: str, base_url: str, path: str, *, params: Optional[Dict[str, Any]] = None, body: Optional[Dict[str, Any]] = None):
    headers = {"Content-Type": "application/json"}
    url = base_url.rstrip("/") + path
    resp = requests.request(method, url, headers=headers, params=params, json=body)
    print_response(resp)
    if not resp.ok:
        sys.exit(1)
    return resp.json()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Front-desk client for the rental desk backend")
    parser.add_argument("--host", default=settings.API_URL, help="Backend base URL")
    sub = parser.add_subparsers(dest="command", required=True)

    vehicles = sub.add_parser("vehicles", help="List vehicles")
    vehicles.add_argument("--available", action="store_true", help="Only vehicles on the lot")

    add_vehicle = sub.add_parser("add-vehicle", help="Register a new vehicle")
    add_vehicle.add_argument("--make", required=True)
    add_vehicle.add_argument("--model", required=True)
    add_vehicle.add_argument("--plate", required=True, help="License plate")
    add_vehicle.add_argument("--rate", required=True, help="Daily rate, e.g. 35.00")
    add_vehicle.add_argument("--type", choices=[t.value for t in VehicleType], default=VehicleType.CAR.value)

    sub.add_parser("customers", help="List customers")

    customer = sub.add_parser("customer", help="Show one customer")
    customer.add_argument("--id", type=int, required=True)

    add_customer = sub.add_parser("add-customer", help="Register a new customer")
    add_customer.add_argument("--first-name", required=True)
    add_customer.add_argument("--last-name", required=True)
    add_customer.add_argument("--email", required=True)
    add_customer.add_argument("--phone", required=True)

    history = sub.add_parser("history", help="Rentals of one customer")
    history.add_argument("--customer", type=int, required=True)

    rent = sub.add_parser("rent", help="Rent a vehicle to a customer")
    rent.add_argument("--vehicle", type=int, required=True)
    rent.add_argument("--customer", type=int, required=True)
    rent.add_argument("--start", required=True, help="Start date, YYYY-MM-DD")
    rent.add_argument("--end", required=True, help="End date, YYYY-MM-DD")

    ret = sub.add_parser("return", help="Return the vehicle of a rental")
    ret.add_argument("--rental", type=int, required=True)

    rentals = sub.add_parser("rentals", help="List rentals")
    rentals.add_argument("--status", choices=["Active", "Returned"])

    rental = sub.add_parser("rental", help="Show one rental")
    rental.add_argument("--id", type=int, required=True)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    host = args.host

    if args.command == "vehicles":
        send("GET", host, "/vehicles", params={"available": "true"} if args.available else None)
    elif args.command == "add-vehicle":
        send(
            "POST",
            host,
            "/vehicles",
            body={
                "make": args.make,
                "model": args.model,
                "licensePlate": args.plate,
                "dailyRate": args.rate,
                "vehicleType": args.type,
            },
        )
    elif args.command == "customers":
        send("GET", host, "/customers")
    elif args.command == "customer":
        send("GET", host, f"/customers/{args.id}")
    elif args.command == "add-customer":
        send(
            "POST",
            host,
            "/customers",
            body={
                "firstName": args.first_name,
                "lastName": args.last_name,
                "email": args.email,
                "phone": args.phone,
            },
        )
    elif args.command == "history":
        send("GET", host, f"/customers/{args.customer}/rentals")
    elif args.command == "rent":
        send(
            "POST",
            host,
            "/rentals",
            body={
                "vehicleId": args.vehicle,
                "customerId": args.customer,
                "startDate": args.start,
                "endDate": args.end,
            },
        )
    elif args.command == "return":
        send("POST", host, f"/rentals/{args.rental}/return")
    elif args.command == "rentals":
        send("GET", host, "/rentals", params={"status": args.status} if args.status else None)
    elif args.command == "rental":
        send("GET", host, f"/rentals/{args.id}")
    else:
        parser.error("Unsupported command")


if __name__ == "__main__":
    main()
