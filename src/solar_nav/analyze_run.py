"""Analyze a recorded flight and generate diagnostic figures."""
from __future__ import annotations

import argparse
import csv
import json
from pathlib import Path
from typing import Dict, List

import numpy as np

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


TIMESERIES_FILENAME = "timeseries.csv"
EVENTS_FILENAME = "events.csv"
META_FILENAME = "meta.json"
FIGS_SUBDIR = "figs"
EVENT_TYPES = ("collision", "warp_start", "warp_complete")


def load_timeseries(path: Path) -> Dict[str, np.ndarray]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        columns: Dict[str, List[float]] = {name: [] for name in reader.fieldnames or []}
        for row in reader:
            for key, value in row.items():
                if key is None:
                    continue
                columns.setdefault(key, []).append(float(value))
    return {key: np.asarray(values) for key, values in columns.items()}


def load_events(path: Path) -> List[dict]:
    with path.open("r", newline="") as fh:
        reader = csv.DictReader(fh)
        events: List[dict] = []
        for row in reader:
            if not row:
                continue
            event = {
                "tick": int(float(row["tick"])),
                "type": row["type"],
                "position": (float(row["x"]), float(row["y"]), float(row["z"])),
            }
            details_raw = row.get("details", "")
            if details_raw:
                try:
                    event["details"] = json.loads(details_raw)
                except json.JSONDecodeError:
                    event["details"] = details_raw
            events.append(event)
    return events


def ensure_fig_dir(run_dir: Path) -> Path:
    fig_dir = run_dir / FIGS_SUBDIR
    fig_dir.mkdir(parents=True, exist_ok=True)
    return fig_dir


def summarize_events(events: List[dict]) -> Dict[str, int]:
    summary: Dict[str, int] = {event_type: 0 for event_type in EVENT_TYPES}
    for event in events:
        if event["type"] in summary:
            summary[event["type"]] += 1
    return summary


def warp_durations(events: List[dict]) -> List[int]:
    """Ticks from each warp start to its completion, in recording order."""

    durations: List[int] = []
    started: int | None = None
    for event in events:
        if event["type"] == "warp_start":
            started = event["tick"]
        elif event["type"] == "warp_complete" and started is not None:
            durations.append(event["tick"] - started + 1)
            started = None
    return durations


def collisions_by_body(events: List[dict]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for event in events:
        if event["type"] != "collision":
            continue
        details = event.get("details")
        name = details.get("body", "?") if isinstance(details, dict) else "?"
        counts[name] = counts.get(name, 0) + 1
    return counts


def plot_track(fig_dir: Path, ts: Dict[str, np.ndarray], meta: dict) -> None:
    fig, ax = plt.subplots(figsize=(6, 6))
    theta = np.linspace(0, 2 * np.pi, 256)
    for body in meta.get("bodies", []):
        d = float(body["orbital_distance"])
        ax.plot(d * np.cos(theta), d * np.sin(theta), color="#868e96", lw=0.8, alpha=0.5)
    waypoints = meta.get("waypoints", [])
    if waypoints:
        wx = [wp["position"][0] for wp in waypoints]
        wz = [wp["position"][2] for wp in waypoints]
        ax.scatter(wx, wz, marker="x", color="#fab005", label="Waypoints")
    ax.plot(ts["eye_x"], ts["eye_z"], color="#6bc5c0", lw=1.5, label="Observer")
    ax.scatter([0.0], [0.0], color="#ffa94d", s=60, label="Sun")
    ax.set_aspect("equal", "box")
    ax.set_xlabel("x")
    ax.set_ylabel("z")
    ax.set_title("Flight track (top-down)")
    ax.legend()
    fig.tight_layout()
    fig.savefig(fig_dir / "track_xz.png", dpi=150)
    plt.close(fig)


def plot_distance(fig_dir: Path, ts: Dict[str, np.ndarray], events: List[dict]) -> None:
    fig, ax = plt.subplots(figsize=(7, 4))
    distance = np.sqrt(ts["eye_x"] ** 2 + ts["eye_y"] ** 2 + ts["eye_z"] ** 2)
    ax.plot(ts["tick"], distance, color="#4dabf7")
    styles = {
        "collision": ("#d9480f", "--", "Collision"),
        "warp_start": ("#1864ab", ":", "Warp start"),
        "warp_complete": ("#2b8a3e", "-.", "Warp complete"),
    }
    for event in events:
        style = styles.get(event["type"])
        if style is not None:
            color, linestyle, label = style
            ax.axvline(event["tick"], color=color, linestyle=linestyle, alpha=0.5, label=label)
    handles, labels = ax.get_legend_handles_labels()
    if handles:
        # deduplicate labels
        seen = {}
        unique_handles = []
        unique_labels = []
        for handle, label in zip(handles, labels):
            if label not in seen:
                seen[label] = True
                unique_handles.append(handle)
                unique_labels.append(label)
        ax.legend(unique_handles, unique_labels)
    ax.set_xlabel("tick")
    ax.set_ylabel("distance from origin")
    ax.set_title("Distance from the Sun over time")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(fig_dir / "distance.png", dpi=150)
    plt.close(fig)


def print_summary(
    run_dir: Path,
    event_summary: Dict[str, int],
    durations: List[int],
    collisions: Dict[str, int],
) -> None:
    print(f"Run: {run_dir.name}")
    print(
        " Events:" +
        ",".join(f" {etype}: {count}" for etype, count in event_summary.items())
    )
    if durations:
        print(f" Warp duration: {min(durations)}-{max(durations)} ticks over {len(durations)} warps")
    else:
        print(" Warp duration: no completed warps")
    if collisions:
        print(" Collisions by body:" + ",".join(f" {name}: {n}" for name, n in sorted(collisions.items())))


def main() -> None:
    parser = argparse.ArgumentParser(description="Analyze a recorded flight and create figures.")
    parser.add_argument("run_dir", nargs="?", help="Path to a specific run folder")
    parser.add_argument("--runs-dir", default=str(Path("data") / "runs"), help="Root of recorded runs")
    args = parser.parse_args()

    base_runs_dir = Path(args.runs_dir)
    if args.run_dir:
        run_path = Path(args.run_dir)
        if not run_path.is_dir():
            run_path = base_runs_dir / args.run_dir
    else:
        last_run_file = base_runs_dir / "last_run.txt"
        if not last_run_file.exists():
            parser.error("No run given and last_run.txt is missing.")
        run_id = last_run_file.read_text(encoding="utf-8").strip()
        run_path = base_runs_dir / run_id

    if not run_path.is_dir():
        parser.error(f"Could not find run folder: {run_path}")

    meta_path = run_path / META_FILENAME
    ts_path = run_path / TIMESERIES_FILENAME
    ev_path = run_path / EVENTS_FILENAME

    if not meta_path.exists() or not ts_path.exists() or not ev_path.exists():
        parser.error("Run folder is missing required files (meta/timeseries/events).")

    with meta_path.open("r", encoding="utf-8") as fh:
        meta = json.load(fh)

    ts = load_timeseries(ts_path)
    events = load_events(ev_path)

    if not ts or ts.get("tick", np.array([])).size == 0:
        parser.error("timeseries.csv is empty, nothing to analyze.")

    fig_dir = ensure_fig_dir(run_path)
    plot_track(fig_dir, ts, meta)
    plot_distance(fig_dir, ts, events)

    print_summary(run_path, summarize_events(events), warp_durations(events), collisions_by_body(events))


if __name__ == "__main__":
    main()
