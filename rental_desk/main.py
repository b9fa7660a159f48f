import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rental_desk.config import Settings, configure_logging, settings
from rental_desk.exceptions import InvalidDateRangeError, InvalidStateError, NotFoundError
from rental_desk.models import (
    Customer,
    CustomerCreate,
    Rental,
    RentalStatus,
    RentVehicleRequest,
    Vehicle,
    VehicleCreate,
)
from rental_desk.services import DataStore, RentalManager

logger = logging.getLogger(__name__)


def get_manager(request: Request) -> RentalManager:
    return request.app.state.manager


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def invalid_state_handler(request: Request, exc: InvalidStateError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": exc.message})


async def invalid_date_range_handler(request: Request, exc: InvalidDateRangeError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": exc.message})


def create_app(
    manager: Optional[RentalManager] = None,
    app_settings: Optional[Settings] = None,
) -> FastAPI:
    app_settings = app_settings or settings
    if manager is None:
        store = DataStore()
        if app_settings.SEED_SAMPLE_DATA:
            store.seed_sample_data()
        manager = RentalManager(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Rental desk starting with %d vehicles, %d customers, %d rentals",
            len(manager.store.vehicles),
            len(manager.store.customers),
            len(manager.store.rentals),
        )
        yield
        logger.info("Rental desk shutting down")

    app = FastAPI(title=app_settings.API_TITLE, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.manager = manager
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(InvalidStateError, invalid_state_handler)
    app.add_exception_handler(InvalidDateRangeError, invalid_date_range_handler)

    @app.get("/vehicles", response_model=List[Vehicle])
    def list_vehicles(available: bool = False, manager: RentalManager = Depends(get_manager)):
        if available:
            return manager.find_available_vehicles()
        return manager.list_vehicles()

    @app.post("/vehicles", response_model=Vehicle, status_code=201)
    def add_vehicle(payload: VehicleCreate, manager: RentalManager = Depends(get_manager)):
        return manager.add_vehicle(payload.to_vehicle())

    @app.get("/vehicles/{vehicle_id}", response_model=Vehicle)
    def get_vehicle(vehicle_id: int, manager: RentalManager = Depends(get_manager)):
        return manager.get_vehicle(vehicle_id)

    @app.get("/customers", response_model=List[Customer])
    def list_customers(manager: RentalManager = Depends(get_manager)):
        return manager.list_customers()

    @app.post("/customers", response_model=Customer, status_code=201)
    def add_customer(payload: CustomerCreate, manager: RentalManager = Depends(get_manager)):
        return manager.add_customer(payload.to_customer())

    @app.get("/customers/{customer_id}", response_model=Customer)
    def get_customer(customer_id: int, manager: RentalManager = Depends(get_manager)):
        return manager.find_customer_by_id(customer_id)

    @app.get("/customers/{customer_id}/rentals", response_model=List[Rental])
    def customer_history(customer_id: int, manager: RentalManager = Depends(get_manager)):
        return manager.customer_history(customer_id)

    @app.get("/rentals", response_model=List[Rental])
    def list_rentals(
        status: Optional[RentalStatus] = None,
        manager: RentalManager = Depends(get_manager),
    ):
        return manager.list_rentals(status)

    @app.post("/rentals", response_model=Rental, status_code=201)
    def rent_vehicle(payload: RentVehicleRequest, manager: RentalManager = Depends(get_manager)):
        return manager.rent_vehicle(
            payload.vehicleId, payload.customerId, payload.startDate, payload.endDate
        )

    @app.get("/rentals/{rental_id}", response_model=Rental)
    def get_rental(rental_id: int, manager: RentalManager = Depends(get_manager)):
        return manager.get_rental_details(rental_id)

    @app.post("/rentals/{rental_id}/return", response_model=Rental)
    def return_vehicle(rental_id: int, manager: RentalManager = Depends(get_manager)):
        return manager.return_vehicle(rental_id)

    return app


if __name__ == "__main__":
    import uvicorn

    configure_logging(settings.LOG_LEVEL)
    uvicorn.run(create_app(), host=settings.HOST, port=settings.PORT)
