"""Mini README: Core package initializer for Budgeter.

Budgeter keeps a personal bank balance, named spending budgets and the
transactions recorded against them consistent with one another. The ledger
itself lives in ``budgeter.ledger``; this module only re-exports the logging
helper so callers can share the package's log formatting.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
