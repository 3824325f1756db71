"""
Web UI module for the Room Comfort Monitor.

This module provides a Streamlit-based operator console for the analysis
engine. Supports three modes: Manual input (testing), Scenario (demo
situations), and Live mode (simulated rooms refreshed periodically, with
notifications and history).

Run with: streamlit run ui/web_main.py
"""

import sys
from pathlib import Path
from typing import Optional

# Add project root to Python path to enable imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st
from streamlit_autorefresh import st_autorefresh
import pandas as pd

from roomcomfort.analysis_log import AnalysisLog
from roomcomfort.environmental_analysis import EnvironmentalAnalysis
from roomcomfort.environmental_analyzer import EnvironmentalAnalyzer
from roomcomfort.optimal_range import OPTIMAL_RANGES
from roomcomfort.room import DEFAULT_ROOMS
from roomcomfort.room_monitor import RoomMonitor
from roomcomfort.sensor_reading import InvalidReading, SensorReading


STATUS_BADGES = {
    "comfortable": "🟢 comfortable",
    "warning": "🟠 warning",
    "critical": "🔴 critical",
}

PRIORITY_BADGES = {
    "high": "🔴 high",
    "medium": "🟠 medium",
    "low": "🔵 low",
}

SCENARIOS = {
    "Comfortable room": {"temp": 22.0, "hum": 50.0, "noise": 35.0, "light": 350.0, "air": 8.0},
    "Hot and humid": {"temp": 30.0, "hum": 75.0, "noise": 35.0, "light": 350.0, "air": 8.0},
    "Noisy and bright": {"temp": 22.0, "hum": 50.0, "noise": 70.0, "light": 900.0, "air": 8.0},
    "Cold with poor air": {"temp": 15.0, "hum": 50.0, "noise": 35.0, "light": 350.0, "air": 30.0},
    "Dim and dry": {"temp": 21.0, "hum": 35.0, "noise": 40.0, "light": 200.0, "air": 10.0},
}

# Initialize session state for the live monitor
if "room_monitor" not in st.session_state:
    st.session_state.room_monitor = RoomMonitor(analysis_log=AnalysisLog())


def render_analysis(analysis: EnvironmentalAnalysis, reading: Optional[SensorReading] = None) -> None:
    """Shows statuses, text and recommendations of one analysis."""
    st.metric("Overall status", analysis.overall_status.upper())
    st.caption(f"Confidence: {analysis.confidence:.0%}")

    status_rows = []
    values = reading.resolved_values() if reading is not None else {}
    for name, status in analysis.statuses.as_dict().items():
        optimal = OPTIMAL_RANGES[name]
        status_rows.append({
            "Parameter": name.replace("_", " ").title(),
            "Value": f"{values[name]:.1f} {optimal.unit}" if name in values else "",
            "Optimal": f"{optimal.minimum:g}-{optimal.maximum:g} {optimal.unit}",
            "Status": STATUS_BADGES[status],
        })
    st.dataframe(pd.DataFrame(status_rows), use_container_width=True, hide_index=True)

    st.info(analysis.analysis_text)

    if analysis.recommendations:
        st.subheader("Recommendations")
        for rec in analysis.recommendations:
            st.write(f"{PRIORITY_BADGES[rec.priority]} **{rec.type}**: {rec.message}")
    else:
        st.success("No action needed.")

    with st.expander("View analysis JSON"):
        st.json(analysis.to_dict())


def render_single_reading(mode: str) -> None:
    """Manual input and scenario modes: analyze one reading."""
    left_col, right_col = st.columns(2)

    with left_col:
        st.header("Input Parameters")
        if mode == "Manual input":
            temperature = st.slider("Temperature (°C)", min_value=10.0, max_value=40.0, value=22.0, step=0.5)
            humidity = st.slider("Humidity (%)", min_value=0.0, max_value=100.0, value=50.0)
            noise_level = st.slider("Noise (dB)", min_value=0.0, max_value=120.0, value=40.0)
            light_intensity = st.slider("Light (lux)", min_value=0.0, max_value=1500.0, value=300.0, step=10.0)
            air_quality = st.slider("Air quality (μg/m³ PM2.5)", min_value=0.0, max_value=100.0, value=15.0)
        else:
            scenario = st.selectbox("Select scenario", list(SCENARIOS))
            selected = SCENARIOS[scenario]
            temperature = selected["temp"]
            humidity = selected["hum"]
            noise_level = selected["noise"]
            light_intensity = selected["light"]
            air_quality = selected["air"]

            st.caption("Scenario values:")
            st.text(f"Temperature: {temperature} °C")
            st.text(f"Humidity: {humidity} %")
            st.text(f"Noise: {noise_level} dB")
            st.text(f"Light: {light_intensity} lux")
            st.text(f"Air quality: {air_quality} μg/m³")

        reading = SensorReading(
            temperature=temperature,
            humidity=humidity,
            noise_level=noise_level,
            light_intensity=light_intensity,
            air_quality=air_quality,
        )

    with right_col:
        st.header("Analysis")
        try:
            analysis = EnvironmentalAnalyzer().analyze(reading)
        except InvalidReading as e:
            st.error(f"Reading rejected: {e}")
            return
        render_analysis(analysis, reading)


def render_live_mode() -> None:
    """Live mode: simulated rooms, notifications and history."""
    monitor: RoomMonitor = st.session_state.room_monitor
    interval_ms = int(max(monitor.interval_seconds, 1.0) * 1000)
    tick = st_autorefresh(interval=interval_ms, limit=None, key="live_refresh")
    st.sidebar.info(f"🔄 Live mode active: Updates every {interval_ms // 1000} seconds")

    # Widget interactions rerun the page without moving the tick
    monitor.run_cycle_for_tick(tick)

    rooms = [room for room in DEFAULT_ROOMS if room.is_active]
    room_names = {room.id: room.name for room in rooms}
    room_id = st.selectbox("Room", list(room_names), format_func=room_names.get)

    left_col, right_col = st.columns(2)

    with left_col:
        record = monitor.history.latest(room_id)
        st.header(room_names[room_id])
        if record is None:
            st.warning("No analysis yet for this room.")
        else:
            st.caption(f"Reading #{record.reading.reading_id} at {record.reading.timestamp:%H:%M:%S}")
            render_analysis(record.analysis, record.reading)

    with right_col:
        st.header("Notifications")
        notifications = monitor.dispatcher.active_notifications(room_id)
        if notifications:
            if st.button("Mark all as read"):
                monitor.dispatcher.mark_all_as_read(room_id)
                st.rerun()
            for notification in notifications:
                st.error(f"**{notification.title}** ({notification.timestamp:%H:%M:%S})\n\n{notification.message}")
        else:
            st.caption("No unread notifications.")

        st.header("History")
        frame = monitor.history.to_frame(room_id)
        if not frame.empty:
            st.line_chart(frame.set_index("timestamp")[["temperature", "humidity", "noise_level"]])
            st.dataframe(
                frame[["timestamp", "overall_status", "confidence", "recommendations"]].iloc[::-1].head(10),
                use_container_width=True,
                height=300,
            )

        st.subheader("Status counts per room")
        st.dataframe(monitor.history.status_summary(), use_container_width=True)


def main() -> None:
    """
    Main function that runs the Streamlit web interface.

    Sets up the page layout, handles the three modes and renders the
    analysis results.
    """
    st.set_page_config(page_title="Room Comfort Monitor", layout="wide")
    st.title("Room Comfort Monitor")

    mode = st.sidebar.selectbox(
        "Mode",
        ["Manual input", "Scenario", "Live mode"],
        help="Choose mode: Manual input (testing), Scenario (demo), or Live mode (simulated rooms)"
    )

    if mode == "Live mode":
        render_live_mode()
    else:
        render_single_reading(mode)


if __name__ == "__main__":
    main()
