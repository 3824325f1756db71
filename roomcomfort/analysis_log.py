"""
Analysis log module for the Room Comfort Monitor.

This module contains the AnalysisLog class which appends one human-readable
line per analysis (and per rejected reading) to a persistent log file, for
later inspection of how each room was classified over time.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .analysis_record import AnalysisRecord
from .config import LOG_FILE_VAR, env_str
from .sensor_reading import SensorReading


class AnalysisLog:
    """
    Append-only text log of analysis cycles.

    The log file and its directory are created on first use, with a header
    describing the line format. Write failures are ignored so that logging
    can never interrupt monitoring.
    """

    DEFAULT_LOG_FILE = Path("logs") / "analysis_log.log"

    # Short codes for the per-parameter status column
    STATUS_CODES = {
        "comfortable": "OK",
        "warning": "WARN",
        "critical": "CRIT",
    }

    def __init__(self, log_file: Optional[Union[str, Path]] = None) -> None:
        """
        Initialize the log.

        Args:
            log_file: Path of the log file. If None, read from the
                      ROOMCOMFORT_LOG_FILE environment variable, falling back
                      to logs/analysis_log.log.
        """
        if log_file is None:
            log_file = env_str(LOG_FILE_VAR, str(self.DEFAULT_LOG_FILE))
        self.log_file = Path(log_file)

    def _ensure_log_file_exists(self) -> None:
        """Create the log directory and file header if needed."""
        self.log_file.parent.mkdir(parents=True, exist_ok=True)

        if not self.log_file.exists():
            with open(self.log_file, 'w', encoding='utf-8') as f:
                f.write("# Room Comfort Analysis Log\n")
                f.write("# Format: [TIMESTAMP] ROOM | OVERALL | T/H/N/L/A | RECOMMENDATIONS | CONFIDENCE\n")
                f.write("# " + "=" * 80 + "\n\n")

    def _append(self, line: str) -> bool:
        try:
            self._ensure_log_file_exists()
            with open(self.log_file, 'a', encoding='utf-8') as f:
                f.write(line)
        except OSError:
            return False
        return True

    def format_record(self, record: AnalysisRecord) -> str:
        """
        Formats one analysis record as a log line.

        Args:
            record: The analysis record to format

        Returns:
            A newline-terminated log line
        """
        analysis = record.analysis
        timestamp_str = record.timestamp.strftime("%Y-%m-%d %H:%M:%S")

        status_str = "/".join(
            self.STATUS_CODES[status] for status in analysis.statuses.as_dict().values()
        )
        recs_str = ", ".join(rec.type for rec in analysis.recommendations) or "None"

        return (
            f"[{timestamp_str}] Room {record.room_id!s:>3} | "
            f"{analysis.overall_status.upper():11s} | "
            f"{status_str:24s} | "
            f"Recs: {recs_str} | "
            f"conf={analysis.confidence:.2f}\n"
        )

    def write(self, record: AnalysisRecord) -> bool:
        """
        Appends an analysis record to the log.

        Returns:
            True if the line was written, False if the file could not be written
        """
        return self._append(self.format_record(record))

    def write_rejected(self, reading: SensorReading, reason: str) -> bool:
        """
        Appends a line for a reading that could not be analyzed.

        Args:
            reading: The rejected reading
            reason: Validation failure message

        Returns:
            True if the line was written, False if the file could not be written
        """
        timestamp_str = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{timestamp_str}] Room {reading.room_id!s:>3} | REJECTED    | {reason}\n"
        return self._append(line)
