from solar_nav.analyze_run import (
    collisions_by_body,
    load_events,
    load_timeseries,
    plot_distance,
    plot_track,
    summarize_events,
    warp_durations,
)
from solar_nav.core.logging_utils import RunLogger


def _write_run(tmp_path):
    with RunLogger(tmp_path, run_id="sample") as run_logger:
        run_logger.write_meta(
            {
                "bodies": [{"name": "Mercury", "orbital_distance": 3.0}],
                "waypoints": [{"name": "Sun", "position": [0.0, 0.0, 0.0]}],
            }
        )
        for tick in range(1, 6):
            run_logger.log_ts([tick, float(tick), 0.0, -float(tick), 0, 0.0])
        run_logger.log_event([2, "collision", 3.0, 0.0, 3.0, {"body": "Mercury"}])
        run_logger.log_event([3, "warp_start", 0.0, 0.0, 0.0, {"destination": "Sun"}])
        run_logger.log_event([52, "warp_complete", 0.0, 0.0, 0.0, {"destination": "Sun"}])
    return run_logger


def test_loaders_round_trip_recorder_output(tmp_path) -> None:
    run_logger = _write_run(tmp_path)
    ts = load_timeseries(run_logger.timeseries_path)
    events = load_events(run_logger.events_path)

    assert list(ts["tick"]) == [1.0, 2.0, 3.0, 4.0, 5.0]
    assert list(ts["eye_z"]) == [-1.0, -2.0, -3.0, -4.0, -5.0]
    assert events[0]["details"] == {"body": "Mercury"}
    assert events[0]["position"] == (3.0, 0.0, 3.0)


def test_event_summaries(tmp_path) -> None:
    events = load_events(_write_run(tmp_path).events_path)
    assert summarize_events(events) == {"collision": 1, "warp_start": 1, "warp_complete": 1}
    assert warp_durations(events) == [50]
    assert collisions_by_body(events) == {"Mercury": 1}


def test_plots_are_written(tmp_path) -> None:
    run_logger = _write_run(tmp_path)
    ts = load_timeseries(run_logger.timeseries_path)
    events = load_events(run_logger.events_path)
    fig_dir = tmp_path / "figs"
    fig_dir.mkdir()
    plot_track(fig_dir, ts, {"bodies": [{"orbital_distance": 3.0}], "waypoints": []})
    plot_distance(fig_dir, ts, events)
    assert (fig_dir / "track_xz.png").exists()
    assert (fig_dir / "distance.png").exists()
