"""Exceptions raised by cubegeom."""

from __future__ import annotations

import logging


class InvalidArgument(ValueError):
    """A contract violation: a missing, non-finite or out-of-range argument.

    Subclasses ``ValueError`` so callers that already guard geometry calls
    with ``except ValueError`` keep working.
    """


def invalid(logger: logging.Logger, message: str, *args) -> InvalidArgument:
    """Log ``message`` at error level on ``logger`` and return the exception.

    Usage::

        raise invalid(logger, "side length must be positive: %r", side)
    """

    logger.error(message, *args)
    return InvalidArgument(message % args if args else message)


__all__ = ["InvalidArgument", "invalid"]
