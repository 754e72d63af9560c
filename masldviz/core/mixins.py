"""
Mixins shared by the resolver, the loaders and the session.

These mixins provide reusable logging and error bookkeeping that can be
composed into the artifact-handling classes.
"""

import time
import logging
from typing import Any, Dict, List, Optional

from tqdm import tqdm


class LoggingMixin:
    """Mixin for consistent logging across components."""

    def __init__(self, *args, verbose: bool = False, **kwargs):
        self.verbose = verbose
        self.logger = logging.getLogger(self.__class__.__name__)
        super().__init__(*args, **kwargs)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def log(self, message: str, level: str = "info") -> None:
        """Log a message, echoing it to stdout in verbose mode."""
        getattr(self.logger, level.lower())(f"[{self.name}] {message}")
        if self.verbose:
            print(f"[{self.name}] {message}")

    def log_progress(self, iterable, desc: str = "Processing", total: Optional[int] = None):
        """Create a progress bar for an iterable."""
        if self.verbose:
            return tqdm(iterable, desc=f"[{self.name}] {desc}", total=total)
        return iterable


class ErrorHandlingMixin:
    """Mixin that records artifact errors instead of failing the page."""

    def __init__(self, *args, fail_fast: bool = False, **kwargs):
        self.fail_fast = fail_fast
        self.errors: List[Dict[str, Any]] = []
        super().__init__(*args, **kwargs)

    def handle_error(self, error: Exception, context: str = "") -> None:
        """Record *error*; re-raise it when ``fail_fast`` is set."""
        error_info = {
            'error': error,
            'context': context,
            'component': self.__class__.__name__,
            'timestamp': time.time(),
        }
        self.errors.append(error_info)

        if hasattr(self, 'log'):
            self.log(f"Error in {context}: {error}", level="warning")

        if self.fail_fast:
            raise error

    def get_errors(self) -> list:
        """Get all errors recorded so far."""
        return self.errors

    def clear_errors(self) -> None:
        """Clear the error list."""
        self.errors.clear()
