"""
Room monitor module for the Room Comfort Monitor.

This module contains the RoomMonitor class, the ingestion loop around the
analysis engine. On every cycle it produces one reading per active room,
analyzes it, records the result, optionally writes it to the analysis log,
and lets the notification dispatcher decide whether to raise an alert.
"""

import time
from datetime import datetime
from typing import Callable, Iterable, Optional

from .analysis_log import AnalysisLog
from .analysis_record import AnalysisRecord
from .config import INTERVAL_SECONDS_VAR, env_float
from .environmental_analyzer import EnvironmentalAnalyzer
from .history import AnalysisHistory
from .notification_dispatcher import NotificationDispatcher
from .room import DEFAULT_ROOMS, Room
from .sensor_reading import InvalidReading, SensorReading
from .simulation import ReadingSimulator


class RoomMonitor:
    """
    Periodic monitoring of a set of rooms.

    Rooms are processed independently: a reading rejected for one room is
    logged and skipped without affecting the others. Every record carries the
    reading that produced it.
    """

    DEFAULT_INTERVAL_SECONDS = 5.0

    def __init__(
        self,
        rooms: Iterable[Room] = DEFAULT_ROOMS,
        simulator: Optional[ReadingSimulator] = None,
        analyzer: Optional[EnvironmentalAnalyzer] = None,
        dispatcher: Optional[NotificationDispatcher] = None,
        history: Optional[AnalysisHistory] = None,
        analysis_log: Optional[AnalysisLog] = None,
        interval_seconds: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep
    ) -> None:
        """
        Initialize the monitor.

        Args:
            rooms: Rooms to monitor; inactive rooms are skipped
            simulator: Source of readings. Defaults to a new ReadingSimulator.
            analyzer: Analysis engine. Defaults to the rule-based analyzer.
            dispatcher: Notification dispatcher. Defaults to a new dispatcher.
            history: Record store. Defaults to a new AnalysisHistory.
            analysis_log: Persistent log; None disables file logging
            interval_seconds: Seconds between cycles. If None, read from
                              ROOMCOMFORT_INTERVAL_SECONDS (default 5).
            sleep: Function used to wait between cycles
        """
        if interval_seconds is None:
            interval_seconds = env_float(
                INTERVAL_SECONDS_VAR, self.DEFAULT_INTERVAL_SECONDS, "RoomMonitor", minimum=0.0
            )
        if interval_seconds < 0:
            raise ValueError(f"interval_seconds must be >= 0, got {interval_seconds}")

        self.rooms = list(rooms)
        self.simulator = simulator or ReadingSimulator()
        self.analyzer = analyzer or EnvironmentalAnalyzer()
        self.dispatcher = dispatcher or NotificationDispatcher()
        self.history = history or AnalysisHistory()
        self.analysis_log = analysis_log
        self.interval_seconds = interval_seconds
        self.sleep = sleep
        self._last_tick: Optional[int] = None

    def process_reading(self, reading: SensorReading) -> Optional[AnalysisRecord]:
        """
        Analyzes one reading and records, logs and dispatches the result.

        Args:
            reading: The reading to process

        Returns:
            The AnalysisRecord, or None if the reading was rejected
        """
        try:
            analysis = self.analyzer.analyze(reading)
        except InvalidReading as e:
            if self.analysis_log is not None:
                self.analysis_log.write_rejected(reading, str(e))
            return None

        record = AnalysisRecord(
            timestamp=datetime.now(),
            reading=reading,
            analysis=analysis,
        )
        self.history.add(record)

        if self.analysis_log is not None:
            self.analysis_log.write(record)

        self.dispatcher.dispatch(record)
        return record

    def run_cycle(self) -> list[AnalysisRecord]:
        """
        Runs one monitoring cycle over all active rooms.

        Returns:
            Records produced in this cycle, in room order
        """
        records = []
        for room in self.rooms:
            if not room.is_active:
                continue

            record = self.process_reading(self.simulator.simulate(room.id))
            if record is not None:
                records.append(record)
        return records

    def run_cycle_for_tick(self, tick: int) -> Optional[list[AnalysisRecord]]:
        """
        Runs one cycle per refresh tick of an external timer.

        Repeated calls with the tick already handled do nothing, so a page
        that re-renders for other reasons does not produce extra readings.

        Args:
            tick: Counter of the external timer

        Returns:
            Records of the new cycle, or None if the tick was already handled
        """
        if tick == self._last_tick:
            return None
        self._last_tick = tick
        return self.run_cycle()

    def run(self, cycles: Optional[int] = None) -> int:
        """
        Runs monitoring cycles, waiting interval_seconds between them.

        Args:
            cycles: Number of cycles to run; None runs until interrupted

        Returns:
            Number of cycles completed
        """
        completed = 0
        while cycles is None or completed < cycles:
            self.run_cycle()
            completed += 1
            if cycles is None or completed < cycles:
                self.sleep(self.interval_seconds)
        return completed
