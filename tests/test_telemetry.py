import csv
import json
import logging

from solar_nav.core.config import NavigationCfg
from solar_nav.core.controls import FrameControls
from solar_nav.core.logging_utils import LOGGER_NAMESPACE, RunLogger, setup_logging
from solar_nav.core.simulation import build_world, step_world
from solar_nav.core.telemetry import build_meta, record_tick
from solar_nav.data.solar_system import create_bodies, create_waypoint_catalog


def _fly(tmp_path, ticks: int = 60):
    cfg = NavigationCfg(log_every_ticks=10)
    world = build_world(create_bodies(), create_waypoint_catalog(), cfg=cfg)
    with RunLogger(tmp_path / "runs", run_id="flight") as run_logger:
        run_logger.write_meta(build_meta(world, cfg))
        for _ in range(ticks):
            report = step_world(world, FrameControls(activate_warp=True))
            record_tick(run_logger, world, report, cfg.log_every_ticks)
    return run_logger


def test_run_logger_creates_run_folder_and_marker(tmp_path) -> None:
    run_logger = _fly(tmp_path)
    assert run_logger.run_dir == tmp_path / "runs" / "flight"
    assert (tmp_path / "runs" / "last_run.txt").read_text(encoding="utf-8") == "flight"

    second = RunLogger(tmp_path / "runs", run_id="flight")
    second.close()
    assert second.run_id == "flight_1"


def test_timeseries_rows_follow_log_interval(tmp_path) -> None:
    run_logger = _fly(tmp_path)
    with run_logger.timeseries_path.open(newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert [int(row["tick"]) for row in rows] == [10, 20, 30, 40, 50, 60]
    assert rows[0]["warping"] == "1"
    assert rows[-1]["warping"] == "0"


def test_warp_events_are_recorded_with_details(tmp_path) -> None:
    run_logger = _fly(tmp_path)
    with run_logger.events_path.open(newline="") as fh:
        events = list(csv.DictReader(fh))
    assert [(row["type"], int(row["tick"])) for row in events] == [("warp_start", 1), ("warp_complete", 50)]
    assert json.loads(events[0]["details"]) == {"destination": "Sun"}


def test_meta_lists_bodies_and_waypoints(tmp_path) -> None:
    run_logger = _fly(tmp_path, ticks=1)
    meta = json.loads(run_logger.meta_path.read_text(encoding="utf-8"))
    assert [body["name"] for body in meta["bodies"]] == ["Mercury", "Venus", "Earth", "Mars", "Jupiter"]
    assert meta["waypoints"][0] == {"name": "Sun", "position": [0.0, 0.0, 0.0]}
    assert meta["safety_margin"] == 1.0


def test_setup_logging_does_not_stack_handlers(tmp_path) -> None:
    log_file = tmp_path / "solar_nav.log"
    setup_logging(logging.DEBUG, str(log_file))
    logger = setup_logging(logging.INFO)
    assert logger.name == LOGGER_NAMESPACE
    assert len(logger.handlers) == 1
    logger.handlers.clear()


def test_rows_reach_disk_once_the_flush_threshold_fills(tmp_path) -> None:
    run_logger = RunLogger(tmp_path, run_id="buffered", timeseries_flush_threshold=3)
    run_logger.log_ts([1, 0.5, 0.0, -0.5, False, 0.0])
    run_logger.log_ts([2, 0.5, 0.0, -0.5, True, 0.02])
    assert run_logger.timeseries_path.read_text(encoding="utf-8").splitlines() == [
        ",".join(RunLogger.TIMESERIES_HEADER)
    ]

    run_logger.log_ts([3, 0.5, 0.0, -0.5, True, 0.04])
    lines = run_logger.timeseries_path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == ["1,0.5,0,-0.5,0,0", "2,0.5,0,-0.5,1,0.02", "3,0.5,0,-0.5,1,0.04"]

    run_logger.log_event([3, "collision", 1.0, 0.0, 1.0, {"body": "Mercury"}])
    run_logger.close()
    run_logger.close()
    with run_logger.events_path.open(newline="") as fh:
        events = list(csv.DictReader(fh))
    assert json.loads(events[0]["details"]) == {"body": "Mercury"}
