"""Status label checks shared by the quote, job and run list services."""

from bindery_estimator.errors import InvalidArgumentError, InvalidStateError


def check_status_change(
    entity: str,
    current: str,
    new: str,
    allowed: dict[str, list[str]],
    strict: bool = False,
):
    """Reject unknown statuses always, and disallowed moves in strict mode.

    Outside strict mode any known status may overwrite any other, so
    callers can correct a mislabelled record directly.
    """
    if new not in allowed:
        raise InvalidArgumentError(
            f"Unknown {entity} status '{new}'. "
            f"Expected one of: {', '.join(allowed)}"
        )
    if strict and new != current and new not in allowed.get(current, []):
        raise InvalidStateError(
            f"Cannot move {entity} from '{current}' to '{new}'"
        )
