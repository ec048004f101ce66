"""In-memory holder for the generated report."""

import logging
import threading
from collections.abc import Sequence
from pathlib import Path

from econ_dashboard.errors import ReportWriteError
from econ_dashboard.models.market_data import ReportRow
from econ_dashboard.ui.html_exporter import render_report, write_report


logger = logging.getLogger(__name__)


class ReportHolder:
    """Renders the report from resolved rows, one regeneration at a time.

    Callers always get a complete document from a single generation. When
    persist_path is set, each regeneration is also written to that file.
    """

    def __init__(
        self,
        rows: Sequence[ReportRow],
        persist_path: Path | None = None,
        escape_values: bool = False,
    ) -> None:
        self.rows = tuple(rows)
        self.persist_path = persist_path
        self.escape_values = escape_values
        self._lock = threading.Lock()
        self._generation = 0

    @property
    def generation(self) -> int:
        """Number of completed regenerations."""
        return self._generation

    def regenerate(self) -> str:
        """
        Render the report from the held rows.

        Raises:
            ReportWriteError: The mirror file could not be written.
        """
        with self._lock:
            document = render_report(self.rows, self.escape_values)
            if self.persist_path is not None:
                try:
                    write_report(document, self.persist_path)
                except OSError as e:
                    raise ReportWriteError(self.persist_path, e) from e
            self._generation += 1
            logger.debug(f"Report regenerated (generation {self._generation})")
            return document
