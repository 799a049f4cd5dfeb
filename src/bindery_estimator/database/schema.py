"""Persisted record layout: collection files and field-name mapping.

Each collection is one JSON array. Records use camelCase keys so files
written here stay readable by earlier tooling that shares the data
directory. There is no schema version field; a format change needs an
out-of-band migration.
"""

from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any, TypeVar

from bindery_estimator.utils.constants import (
    CUSTOMERS_FILE,
    JOBS_FILE,
    QUOTES_FILE,
    RUN_LIST_FILE,
)

from .models import Customer, Job, QuantityOption, Quote, RunListItem

T = TypeVar("T")

COLLECTION_FILES = {
    Customer: CUSTOMERS_FILE,
    Quote: QUOTES_FILE,
    Job: JOBS_FILE,
    RunListItem: RUN_LIST_FILE,
}

# Keys that do not follow plain snake_case -> camelCase
_KEY_OVERRIDES = {
    "customer_po": "customerPO",
}

# List fields holding nested records
_NESTED = {
    (Quote, "quantity_options"): QuantityOption,
}


def to_camel(name: str) -> str:
    if name in _KEY_OVERRIDES:
        return _KEY_OVERRIDES[name]
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def collection_path(data_dir: str | Path, model: type) -> Path:
    """Path of the JSON file backing ``model`` inside ``data_dir``."""
    return Path(data_dir) / COLLECTION_FILES[model]


def to_record(obj: Any) -> dict:
    """Serialize a model instance into a JSON-ready dict.

    Optional fields that are unset (None) are left out entirely rather
    than written as null.
    """
    record = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if value is None:
            continue
        if isinstance(value, list):
            value = [to_record(v) if is_dataclass(v) else v for v in value]
        record[to_camel(f.name)] = value
    return record


def from_record(model: type[T], record: dict) -> T:
    """Build a model instance from a stored dict; unknown keys are ignored."""
    kwargs = {}
    for f in fields(model):
        key = to_camel(f.name)
        if key not in record:
            continue
        value = record[key]
        nested = _NESTED.get((model, f.name))
        if nested is not None and value is not None:
            value = [from_record(nested, v) for v in value]
        elif isinstance(value, list):
            value = list(value)
        kwargs[f.name] = value
    return model(**kwargs)
