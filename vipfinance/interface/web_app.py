"""Mini README: FastAPI REST interface for the finance dashboard.

Structure:
    * create_application - application factory wiring routes to the services.
    * _register_collection_routes - CRUD routes for one record collection.

Routes mirror the mock API the dashboard front end talks to:
``/api/<collection>[/<id>]`` for records, ``/api/fieldWorkerSalaries`` for
the salary grid and ``/api/summary`` for chart data. Domain errors map to
HTTP status codes: unknown ids to 404, bad input to 400 and storage failures
to 503. The module avoids postponed annotations because FastAPI reads the
per-collection payload model from the route signature at runtime.
"""

from contextlib import contextmanager
from datetime import date
from typing import Any, Dict, Iterator, Optional, Type

from fastapi import FastAPI, HTTPException, Response
from fastapi.responses import JSONResponse

from ..errors import NotFoundError, PersistenceError
from ..logging_utils import get_logger
from ..records import COLLECTIONS, RecordStore
from ..salaries import SalaryTable, add_worker, set_amount, table_summary
from ..services import DashboardServices, build_services
from .schemas import (
    PAYLOAD_MODELS,
    CellPayload,
    SalaryTablePayload,
    WorkerPayload,
    FormPayload,
)

LOGGER = get_logger(__name__)


@contextmanager
def _domain_errors() -> Iterator[None]:
    """Translate domain exceptions raised inside a handler into HTTP errors."""

    try:
        yield
    except NotFoundError as error:
        raise HTTPException(status_code=404, detail=str(error)) from error
    except PersistenceError as error:
        raise HTTPException(status_code=503, detail=str(error)) from error
    except ValueError as error:
        raise HTTPException(status_code=400, detail=str(error)) from error


def _register_collection_routes(
    app: FastAPI,
    store: RecordStore,
    collection: str,
    payload_model: Type[FormPayload],
) -> None:
    """Attach list/create/update/delete routes for ``collection``."""

    path = f"/api/{collection}"

    async def list_records() -> JSONResponse:
        records = store.list_for_display(collection)
        LOGGER.debug("Returning %s %s records", len(records), collection)
        return JSONResponse(records)

    async def create_record(payload: payload_model) -> JSONResponse:  # type: ignore[valid-type]
        with _domain_errors():
            record = store.create(collection, payload.as_fields())
        return JSONResponse(record, status_code=201)

    async def update_record(record_id: str, payload: payload_model) -> JSONResponse:  # type: ignore[valid-type]
        with _domain_errors():
            record = store.update(collection, record_id, payload.as_fields())
        return JSONResponse(record)

    async def delete_record(record_id: str) -> Response:
        with _domain_errors():
            store.delete(collection, record_id)
        return Response(status_code=204)

    app.add_api_route(path, list_records, methods=["GET"], name=f"list_{collection}")
    app.add_api_route(path, create_record, methods=["POST"], name=f"create_{collection}")
    app.add_api_route(f"{path}/{{record_id}}", update_record, methods=["PUT"], name=f"update_{collection}")
    app.add_api_route(f"{path}/{{record_id}}", delete_record, methods=["DELETE"], name=f"delete_{collection}")


def create_application(services: Optional[DashboardServices] = None) -> FastAPI:
    """Create the FastAPI application with routes and dependencies."""

    app = FastAPI(title="VIP Finance Dashboard API", version="1.0.0")
    services = services or build_services()
    store, grid, summary = services.store, services.grid, services.summary

    for collection in COLLECTIONS:
        _register_collection_routes(app, store, collection, PAYLOAD_MODELS[collection])

    @app.get("/api/status")
    async def status() -> JSONResponse:
        """Report the storage backend and record counts."""

        counts = {collection: len(store.list(collection)) for collection in COLLECTIONS}
        return JSONResponse({"storage": store.backend_metadata(), "records": counts})

    @app.get("/api/fieldWorkerSalaries")
    async def salary_document() -> JSONResponse:
        """Return every saved salary table keyed by year and month."""

        with _domain_errors():
            document = grid.load_document()
        return JSONResponse(document)

    @app.put("/api/fieldWorkerSalaries")
    async def replace_salary_document(document: Dict[str, Dict[str, Dict[str, Any]]]) -> JSONResponse:
        """Replace the whole salary document (last write wins)."""

        with _domain_errors():
            stored = grid.replace_document(document)
        return JSONResponse(stored)

    @app.get("/api/fieldWorkerSalaries/{year}/{month}")
    async def salary_table(year: int, month: int) -> JSONResponse:
        """Return one month's grid with row, column and grand totals."""

        with _domain_errors():
            table = grid.get_table(year, month)
        return JSONResponse(table_summary(table))

    @app.put("/api/fieldWorkerSalaries/{year}/{month}")
    async def save_salary_table(year: int, month: int, payload: SalaryTablePayload) -> JSONResponse:
        """Save a month's grid wholesale."""

        with _domain_errors():
            table = SalaryTable.from_document(year, month, payload.model_dump())
            grid.save(table)
        LOGGER.info("Salary table %s-%02d saved via API", year, month)
        return JSONResponse(table_summary(table))

    @app.post("/api/fieldWorkerSalaries/{year}/{month}/workers")
    async def add_salary_worker(year: int, month: int, payload: WorkerPayload) -> JSONResponse:
        """Add a worker to the month's roster and save the grid."""

        with _domain_errors():
            table = add_worker(grid.get_table(year, month), payload.name)
            grid.save(table)
        return JSONResponse(table_summary(table), status_code=201)

    @app.patch("/api/fieldWorkerSalaries/{year}/{month}/cells")
    async def set_salary_cell(year: int, month: int, payload: CellPayload) -> JSONResponse:
        """Set one worker's amount for one day and save the grid."""

        with _domain_errors():
            table = set_amount(grid.get_table(year, month), payload.date, payload.worker, payload.amount)
            grid.save(table)
        return JSONResponse(table_summary(table))

    @app.get("/api/summary")
    async def dashboard_summary(year: Optional[int] = None, month: Optional[int] = None) -> JSONResponse:
        """Return the figures behind the dashboard charts."""

        today = date.today()
        with _domain_errors():
            payload = summary.snapshot(
                today.year if year is None else year,
                today.month if month is None else month,
            )
        return JSONResponse(payload)

    return app
