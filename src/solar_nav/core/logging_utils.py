"""Logging helpers scoped to the solar_nav package."""
from __future__ import annotations

import csv
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence, TextIO

LOGGER_NAMESPACE = "solar_nav"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Configure the ``solar_nav`` logger with a console and optional file handler."""

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)

    # Re-running setup must not stack duplicate handlers
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


def _format_cell(value: object) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (int, float)):
        return f"{value:.10g}"
    if isinstance(value, dict):
        return json.dumps(value, sort_keys=True)
    return str(value)


class _CsvChannel:
    """One CSV file whose rows are held back until ``threshold`` accumulate."""

    def __init__(self, path: Path, header: Sequence[str], threshold: int) -> None:
        self.path = path
        self._fh: TextIO = path.open("w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._fh, lineterminator="\n")
        self._writer.writerow(header)
        self._fh.flush()
        self._pending: list[list[str]] = []
        self._threshold = max(1, threshold)

    def append(self, values: Sequence[object]) -> None:
        self._pending.append([_format_cell(v) for v in values])
        if len(self._pending) >= self._threshold:
            self.flush()

    def flush(self) -> None:
        if self._pending:
            self._writer.writerows(self._pending)
            self._fh.flush()
            self._pending.clear()

    def close(self) -> None:
        if not self._fh.closed:
            self.flush()
            self._fh.close()


def _unique_run_dir(root_dir: Path, run_id: Optional[str]) -> Path:
    """Pick ``root_dir/<id>`` that does not exist yet, suffixing on clashes."""

    base = run_id or datetime.now().strftime("%Y%m%d_%H%M%S") + "_run"
    candidate = root_dir / base
    suffix = 1
    while candidate.exists():
        name = f"{base}_{suffix}" if run_id else f"{base}_{suffix:02d}"
        candidate = root_dir / name
        suffix += 1
    return candidate


class RunLogger:
    """Flight recorder writing per-tick telemetry and navigation events.

    Each run gets its own folder under ``root_dir`` holding
    ``timeseries.csv``, ``events.csv`` and ``meta.json``; ``last_run.txt``
    in ``root_dir`` names the most recent one. Rows are buffered and flushed
    every ``timeseries_flush_threshold`` / ``events_flush_threshold`` rows
    and on :meth:`close`.
    """

    TIMESERIES_HEADER = ("tick", "eye_x", "eye_y", "eye_z", "warping", "progress")
    EVENTS_HEADER = ("tick", "type", "x", "y", "z", "details")

    def __init__(
        self,
        root_dir: str | Path = "data/runs",
        run_id: Optional[str] = None,
        *,
        timeseries_flush_threshold: int = 200,
        events_flush_threshold: int = 50,
    ) -> None:
        self.root_dir = Path(root_dir)
        self.root_dir.mkdir(parents=True, exist_ok=True)
        self.run_dir = _unique_run_dir(self.root_dir, run_id)
        self.run_dir.mkdir(parents=True, exist_ok=False)
        self.run_id = self.run_dir.name
        self.meta_path = self.run_dir / "meta.json"

        self._timeseries = _CsvChannel(
            self.run_dir / "timeseries.csv", self.TIMESERIES_HEADER, timeseries_flush_threshold
        )
        self._events = _CsvChannel(self.run_dir / "events.csv", self.EVENTS_HEADER, events_flush_threshold)

        (self.root_dir / "last_run.txt").write_text(self.run_id, encoding="utf-8")

    @property
    def timeseries_path(self) -> Path:
        return self._timeseries.path

    @property
    def events_path(self) -> Path:
        return self._events.path

    def write_meta(self, meta: dict) -> None:
        self.meta_path.write_text(json.dumps(meta, indent=2, sort_keys=True), encoding="utf-8")

    def log_ts(self, values: Sequence[float]) -> None:
        self._timeseries.append(values)

    def log_event(self, values: Sequence[object]) -> None:
        self._events.append(values)

    def close(self) -> None:
        self._timeseries.close()
        self._events.close()

    def __enter__(self) -> "RunLogger":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


__all__ = ["LOGGER_NAMESPACE", "RunLogger", "setup_logging"]
