"""
Run shortest-path engines over seeded random graphs and summarise the results.

Reads a YAML experiment file (see experiments/experiments.yml), builds one
random graph per (experiment, seed), answers the same query workload with every
configured engine, and records per-run metrics. Engines can be compared for
agreement through the per-run result checksum.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple
import csv
import hashlib
from concurrent.futures import ProcessPoolExecutor, as_completed
import time

import numpy as np

from algorithms import ShortestPathEngine
from bidirectional_engine import BidirectionalDijkstraEngine
from dijkstra_engine import SimpleDijkstraEngine
from graph_builder import build_random_graph, random_queries


class EngineKind(Enum):
    """
    Available search strategies.

    DIJKSTRA: single-direction label-setting search.
    BIDIRECTIONAL: forward/backward search with the meeting bound.
    """

    DIJKSTRA = "dijkstra"
    BIDIRECTIONAL = "bidirectional"


def make_engine(kind: EngineKind) -> ShortestPathEngine:
    if kind is EngineKind.DIJKSTRA:
        return SimpleDijkstraEngine()
    return BidirectionalDijkstraEngine()


RUN_FIELDS = [
    "experiment",
    "engine",
    "seed",
    "nodes",
    "edges",
    "queries",
    "reachable",
    "unreachable",
    "mean_cost",
    "checksum",
    "duration_sec",
]


EXPERIMENT_KEYS = ("name", "nodes", "out_degree", "max_cost", "queries")


@dataclass(frozen=True)
class ExperimentConfig:
    name: str
    nodes: int
    out_degree: int
    max_cost: int
    queries: int


@dataclass(frozen=True)
class Config:
    seed: int
    seed_count: int
    engines: Sequence[str]
    experiments: Sequence[ExperimentConfig]


def load_config(path: Path) -> Config:
    import yaml  # type: ignore

    data = yaml.safe_load(path.read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Experiment config {path} must be a mapping")

    engines = list(data.get("engines") or [e.value for e in EngineKind])
    for name in engines:
        try:
            EngineKind(name)
        except ValueError:
            known = ", ".join(e.value for e in EngineKind)
            raise ValueError(f"Unknown engine '{name}' (expected one of: {known})") from None

    raw_experiments = data.get("experiments") or []
    if not raw_experiments:
        raise ValueError(f"Experiment config {path} defines no experiments")

    experiments: List[ExperimentConfig] = []
    for index, exp in enumerate(raw_experiments):
        if not isinstance(exp, dict):
            raise ValueError(f"Experiment #{index} must be a mapping")
        label = exp.get("name", f"#{index}")
        for key in EXPERIMENT_KEYS:
            if key not in exp:
                raise ValueError(f"Experiment '{label}' missing '{key}'")
        experiments.append(
            ExperimentConfig(
                name=str(exp["name"]),
                nodes=int(exp["nodes"]),
                out_degree=int(exp["out_degree"]),
                max_cost=int(exp["max_cost"]),
                queries=int(exp["queries"]),
            )
        )

    for exp in experiments:
        if exp.nodes <= 0:
            raise ValueError(f"Experiment '{exp.name}': nodes must be positive")
        if exp.out_degree < 0:
            raise ValueError(f"Experiment '{exp.name}': out_degree must be non-negative")
        if exp.max_cost < 0:
            raise ValueError(f"Experiment '{exp.name}': max_cost must be non-negative")
        if exp.queries <= 0:
            raise ValueError(f"Experiment '{exp.name}': queries must be positive")

    seed_count = int(data.get("seed_count", 1))
    if seed_count <= 0:
        raise ValueError("seed_count must be positive")

    return Config(
        seed=int(data.get("seed", 0)),
        seed_count=seed_count,
        engines=engines,
        experiments=experiments,
    )


def run_experiments(
    config_path: Path,
    runs_csv: Path | None = None,
    aggregates_csv: Path | None = None,
    max_workers: int | None = None,
    use_processes: bool = True,
) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    existing_runs = load_runs_csv(runs_csv) if runs_csv else []
    seen_keys: Set[Tuple[str, str, int]] = {
        (str(r.get("experiment")), str(r.get("engine")), int(r.get("seed"))) for r in existing_runs
    }

    tasks: List[tuple[ExperimentConfig, EngineKind, int]] = []
    for exp in cfg.experiments:
        for engine_name in cfg.engines:
            kind = EngineKind(engine_name)
            for offset in range(cfg.seed_count):
                seed = cfg.seed + offset
                if (exp.name, kind.value, seed) in seen_keys:
                    continue
                tasks.append((exp, kind, seed))

    print(f"[run] queued {len(tasks)} new tasks (existing runs: {len(seen_keys)})")

    new_results: List[Dict[str, object]] = []
    if tasks:
        if use_processes:
            try:
                with ProcessPoolExecutor(max_workers=max_workers) as executor:
                    future_to_task = {
                        executor.submit(_run_task, asdict(exp), kind.value, seed): (exp.name, kind.value, seed)
                        for exp, kind, seed in tasks
                    }
                    for future in as_completed(future_to_task):
                        exp_name, engine_val, seed = future_to_task[future]
                        try:
                            res = future.result()
                            new_results.append(res)
                            if runs_csv:
                                append_run_row(runs_csv, res)
                            print(f"[run] completed experiment={exp_name} engine={engine_val} seed={seed} duration={res['duration_sec']:.3f}s")
                        except Exception as exc:
                            print(f"[run] failed experiment={exp_name} engine={engine_val} seed={seed}: {exc}")
            except (PermissionError, NotImplementedError, OSError) as exc:
                print(f"[run] process pool unavailable ({exc}), falling back to sequential execution")
                use_processes = False
        else:
            print("[run] using sequential execution")

        if not use_processes:
            done = {(str(r["experiment"]), str(r["engine"]), int(r["seed"])) for r in new_results}
            for exp, kind, seed in tasks:
                if (exp.name, kind.value, seed) in done:
                    continue
                res = _run_task(asdict(exp), kind.value, seed)
                new_results.append(res)
                if runs_csv:
                    append_run_row(runs_csv, res)
                print(f"[run] completed experiment={exp.name} engine={kind.value} seed={seed} duration={res['duration_sec']:.3f}s")

    # Process pools complete out of order
    new_results.sort(key=lambda r: (str(r["experiment"]), str(r["engine"]), int(r["seed"])))
    results = existing_runs + new_results

    if aggregates_csv:
        write_aggregates_csv(aggregate_by_engine(results), aggregates_csv)

    elapsed = time.time() - start
    print(f"[run] completed {len(results)} total runs in {elapsed:.2f}s")
    return results


def aggregate_by_engine(results: Iterable[Mapping[str, object]]) -> Dict[Tuple[str, str], Dict[str, float]]:
    """
    Aggregate metrics per (experiment, engine), averaging across seeds.
    """
    grouped: Dict[Tuple[str, str], List[Mapping[str, object]]] = {}
    for res in results:
        key = (str(res["experiment"]), str(res["engine"]))
        grouped.setdefault(key, []).append(res)

    aggregated: Dict[Tuple[str, str], Dict[str, float]] = {}
    for key, rows in grouped.items():
        aggregated[key] = {
            "runs": float(len(rows)),
            "avg_nodes": float(np.mean([float(r["nodes"]) for r in rows])),
            "avg_reachable": float(np.mean([float(r["reachable"]) for r in rows])),
            "avg_mean_cost": float(np.mean([float(r["mean_cost"]) for r in rows])),
            "avg_duration_sec": float(np.mean([float(r["duration_sec"]) for r in rows])),
            "p95_duration_sec": float(np.percentile([float(r["duration_sec"]) for r in rows], 95)),
        }
    return aggregated


def check_agreement(results: Iterable[Mapping[str, object]]) -> List[Tuple[str, int]]:
    """
    Return the (experiment, seed) pairs on which engines reported different results.
    """
    checksums: Dict[Tuple[str, int], Set[str]] = {}
    for res in results:
        key = (str(res["experiment"]), int(res["seed"]))
        checksums.setdefault(key, set()).add(str(res["checksum"]))
    return sorted(key for key, sums in checksums.items() if len(sums) > 1)


def _run_task(exp_dict: Dict[str, object], engine_value: str, seed: int) -> Dict[str, object]:
    start_run = time.time()
    exp = ExperimentConfig(
        name=str(exp_dict["name"]),
        nodes=int(exp_dict["nodes"]),
        out_degree=int(exp_dict["out_degree"]),
        max_cost=int(exp_dict["max_cost"]),
        queries=int(exp_dict["queries"]),
    )
    res = _run_single(exp, EngineKind(engine_value), seed)
    res["duration_sec"] = time.time() - start_run
    return res


def _run_single(exp: ExperimentConfig, kind: EngineKind, seed: int) -> Dict[str, object]:
    graph = build_random_graph(exp.nodes, exp.out_degree, exp.max_cost, seed=seed)
    # Queries use their own stream so they don't depend on the graph draws
    queries = random_queries(exp.nodes, exp.queries, seed=seed + 1)

    engine = make_engine(kind)
    costs: List[Optional[int]] = [engine.shortest_path_cost(graph, s, t) for s, t in queries]
    found = [c for c in costs if c is not None]

    return {
        "experiment": exp.name,
        "engine": kind.value,
        "seed": seed,
        "nodes": graph.num_nodes(),
        "edges": graph.num_edges(),
        "queries": len(queries),
        "reachable": len(found),
        "unreachable": len(costs) - len(found),
        "mean_cost": float(np.mean(found)) if found else 0.0,
        "checksum": result_checksum(costs),
    }


def result_checksum(costs: Sequence[Optional[int]]) -> str:
    """Stable digest of a query result sequence ("-" marks unreachable)."""
    text = ",".join("-" if c is None else str(c) for c in costs)
    return hashlib.sha1(text.encode()).hexdigest()[:16]


def load_runs_csv(path: Path | None) -> List[Dict[str, object]]:
    if path is None or not path.exists():
        return []
    with path.open() as f:
        reader = csv.DictReader(f)
        rows: List[Dict[str, object]] = []
        for row in reader:
            # Normalize numeric fields so aggregation works on resumed runs.
            parsed: Dict[str, object] = dict(row)
            for key in ("seed", "nodes", "edges", "queries", "reachable", "unreachable"):
                if row.get(key, "") != "":
                    parsed[key] = int(row[key])
            for key in ("mean_cost", "duration_sec"):
                if row.get(key, "") != "":
                    parsed[key] = float(row[key])
            rows.append(parsed)
        return rows


def append_run_row(path: Path, res: Mapping[str, object]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    write_header = not path.exists()
    with path.open("a", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RUN_FIELDS)
        if write_header:
            writer.writeheader()
        writer.writerow({key: res.get(key) for key in RUN_FIELDS})


def write_results_csv(results: Iterable[Mapping[str, object]], path: Path) -> None:
    """
    Write per-run results to CSV for downstream analysis.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RUN_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key) for key in RUN_FIELDS})


def write_aggregates_csv(aggregated: Mapping[Tuple[str, str], Mapping[str, float]], path: Path) -> None:
    """
    Write aggregated metrics by (experiment, engine) to CSV.
    """
    fieldnames = [
        "experiment",
        "engine",
        "runs",
        "avg_nodes",
        "avg_reachable",
        "avg_mean_cost",
        "avg_duration_sec",
        "p95_duration_sec",
    ]
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for (experiment, engine), metrics in aggregated.items():
            row: Dict[str, object] = {"experiment": experiment, "engine": engine}
            for key in fieldnames[2:]:
                row[key] = metrics.get(key, 0.0)
            writer.writerow(row)
