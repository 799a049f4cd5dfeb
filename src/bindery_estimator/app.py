"""Application entry point — wires the stores and services, prints a summary."""

import argparse
import logging
import sys

from bindery_estimator.config import Config
from bindery_estimator.services.container import Services, build_services
from bindery_estimator.utils.constants import APP_NAME, APP_VERSION

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str | None = None):
    """Set up root logging once for scripts and the entry point."""
    level = (level or Config.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO),
                        format=_LOG_FORMAT)


def summarize(services: Services) -> dict:
    """Record counts per collection plus open work."""
    return {
        "customers": len(services.customers.get_all()),
        "quotes": len(services.quotes.get_all()),
        "jobs": len(services.jobs.get_all()),
        "active_jobs": len(services.jobs.find_active_jobs()),
        "run_list": len(services.run_list.get_all()),
        "active_run_list": len(services.run_list.find_active()),
    }


def main(argv: list[str] | None = None) -> int:
    """Launch the Bindery Estimator."""
    parser = argparse.ArgumentParser(prog="bindery-estimator",
                                     description=APP_NAME)
    parser.add_argument("--data-dir", help="Directory holding the JSON files")
    parser.add_argument("--log-level", help="Logging level (default INFO)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    services = build_services(args.data_dir)

    print(f"{APP_NAME} {APP_VERSION} initialized")
    print(f"Data directory: {services.data_dir}")
    for name, count in summarize(services).items():
        print(f"{name.replace('_', ' ').title()}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
