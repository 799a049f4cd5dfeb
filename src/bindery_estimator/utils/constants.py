"""Application-wide constants."""

APP_NAME = "Bindery Estimator"
APP_VERSION = "1.0.0"

# Quote statuses
QUOTE_STATUSES = ["draft", "sent", "accepted", "declined"]

# Job statuses
JOB_STATUSES = ["pending", "in_progress", "complete", "on_hold", "cancelled"]

# Jobs in these statuses drop off the active list
JOB_CLOSED_STATUSES = ["complete", "cancelled"]

# Run list statuses
RUN_LIST_STATUSES = ["planned", "in", "hold", "complete"]

# ── Guarded transitions (strict status mode only) ────────────────
# Keys are the current status, values the statuses it may move to.
QUOTE_TRANSITIONS = {
    "draft": ["sent"],
    "sent": ["accepted", "declined", "draft"],
    "accepted": [],
    "declined": ["draft"],
}

JOB_TRANSITIONS = {
    "pending": ["in_progress", "on_hold", "cancelled"],
    "in_progress": ["complete", "on_hold", "cancelled"],
    "on_hold": ["pending", "in_progress", "cancelled"],
    "complete": ["in_progress"],
    "cancelled": [],
}

RUN_LIST_TRANSITIONS = {
    "planned": ["in", "hold", "complete"],
    "in": ["hold", "complete"],
    "hold": ["planned", "in", "complete"],
    "complete": [],
}

# Persisted collections (one JSON array file each)
CUSTOMERS_FILE = "customers.json"
QUOTES_FILE = "quotes.json"
JOBS_FILE = "jobs.json"
RUN_LIST_FILE = "runList.json"

# Quote / job number format: YYMM-NNNN
NUMBER_SEQUENCE_WIDTH = 4
