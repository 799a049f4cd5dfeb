"""Service wiring — one store per collection, services built on top."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from bindery_estimator.database.connection import JsonFileConnection
from bindery_estimator.database.models import (
    Customer,
    Job,
    Quote,
    RunListItem,
)
from bindery_estimator.database.repository import JsonRepository
from bindery_estimator.database.schema import collection_path
from bindery_estimator.services.customer_service import CustomerService
from bindery_estimator.services.job_service import JobService
from bindery_estimator.services.quote_service import QuoteService
from bindery_estimator.services.run_list_service import RunListService


@dataclass
class Services:
    customers: CustomerService
    quotes: QuoteService
    jobs: JobService
    run_list: RunListService
    data_dir: Path


def open_repository(data_dir: str | Path, model: type) -> JsonRepository:
    """Repository over ``model``'s JSON file inside ``data_dir``."""
    return JsonRepository(
        JsonFileConnection(collection_path(data_dir, model)), model
    )


def build_services(
    data_dir: Optional[str | Path] = None,
    strict_status: Optional[bool] = None,
) -> Services:
    """Construct every service over a shared set of stores.

    Services that read another entity type (quotes read customers, jobs
    read quotes, the run list reads jobs) share the same repository
    instance, so all of them see one in-memory copy of each file.
    Unspecified arguments fall back to ``Config``.
    """
    from bindery_estimator.config import Config

    data_dir = Path(data_dir) if data_dir is not None else Config.DATA_DIR
    if strict_status is None:
        strict_status = Config.STRICT_STATUS_TRANSITIONS

    customers = open_repository(data_dir, Customer)
    quotes = open_repository(data_dir, Quote)
    jobs = open_repository(data_dir, Job)
    run_list = open_repository(data_dir, RunListItem)

    return Services(
        customers=CustomerService(customers),
        quotes=QuoteService(quotes, customers, strict_status=strict_status),
        jobs=JobService(jobs, quotes, strict_status=strict_status),
        run_list=RunListService(run_list, jobs, strict_status=strict_status),
        data_dir=data_dir,
    )
