#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
views.py — Explorador/visor para JSONs de ./outputs generados por mcsim.py / curs.py

Funciones principales:
- Listar outputs disponibles.
- Cargar el último JSON o uno específico.
- Resumir comparaciones base/adversa y barridos de latencia en tablas pandas.
- Exportar CSVs a ./outputs/derived/.
- (Opcional) Graficar resúmenes básicos con matplotlib (sin estilos explícitos).

Uso rápido:
  python views.py --list
  python views.py --latest
  python views.py --file outputs/run_benchmark_20250101_120000.json
  python views.py --aggregate --export-csv
  python views.py --aggregate --export-csv --plot
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

OUTPUTS_DIR = Path("outputs")
DERIVED_DIR = OUTPUTS_DIR / "derived"


# --------------------------- helpers sin pandas -----------------------------

def list_outputs(outputs_dir: Path = OUTPUTS_DIR) -> List[Path]:
    """Lista JSONs en ./outputs."""
    if not outputs_dir.exists():
        return []
    return sorted(outputs_dir.glob("*.json"))


def load_json(path: Path) -> Dict[str, Any]:
    """Carga JSON en dict."""
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def latest_output(outputs_dir: Path = OUTPUTS_DIR) -> Optional[Path]:
    """Devuelve el JSON más reciente, si existe."""
    files = list_outputs(outputs_dir)
    return files[-1] if files else None


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


# --------------------------- pandas (opcional) ------------------------------

def _try_import_pandas():
    try:
        import pandas as pd  # type: ignore
        return pd
    except ImportError:
        return None


def _try_import_matplotlib():
    try:
        import matplotlib.pyplot as plt  # type: ignore
        return plt
    except ImportError:
        return None


# --------------------------- normalización ---------------------------------

def normalize_comparison(obj: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Una fila por escenario (baseline/adverse) de una comparación."""
    cmp = obj.get("comparison") or {}
    rows: List[Dict[str, Any]] = []
    for scenario in ("baseline", "adverse"):
        rep = cmp.get(scenario)
        if not isinstance(rep, dict):
            continue
        rows.append({
            "scenario": scenario,
            "pattern": rep.get("pattern"),
            "cycles": rep.get("cycles"),
            "retired": rep.get("retired"),
            "accesses": rep.get("accesses"),
            "hits": rep.get("hits"),
            "misses": rep.get("misses"),
            "hit_rate": rep.get("hit_rate"),
            "miss_rate": rep.get("miss_rate"),
            "stall_cycles": rep.get("stall_cycles"),
            "sets": rep.get("sets"),
            "memory_latency": rep.get("memory_latency"),
        })
    return rows


def normalize_per_core(obj: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Una fila por (escenario, núcleo)."""
    cmp = obj.get("comparison") or {}
    rows: List[Dict[str, Any]] = []
    for scenario in ("baseline", "adverse"):
        rep = cmp.get(scenario)
        if not isinstance(rep, dict):
            continue
        for core_id, per in (rep.get("per_core") or {}).items():
            rows.append({"scenario": scenario, "core": int(core_id), **per})
    return rows


def slowdown_of(obj: Dict[str, Any]) -> Optional[float]:
    cmp = obj.get("comparison") or {}
    value = cmp.get("slowdown_percent")
    return float(value) if value is not None else None


def normalize_sweep(obj: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Para resultados de barrido de latencia (clave 'latency_sweep' o 'sweep_results')."""
    sweep = obj.get("latency_sweep") or obj.get("sweep_results") or []
    rows: List[Dict[str, Any]] = []
    for rep in sweep:
        if not isinstance(rep, dict):
            continue
        rows.append({
            "memory_latency": rep.get("memory_latency"),
            "baseline_cycles": rep.get("baseline_cycles"),
            "adverse_cycles": rep.get("adverse_cycles"),
            "baseline_hit_rate": rep.get("baseline_hit_rate"),
            "adverse_hit_rate": rep.get("adverse_hit_rate"),
            "slowdown_percent": rep.get("slowdown_percent"),
        })
    return rows


# --------------------------- impresión simple ------------------------------

def format_comparison_lines(obj: Dict[str, Any]) -> List[str]:
    rows = normalize_comparison(obj)
    lines = ["# ==== COMPARACIÓN (por escenario) ===="]
    if not rows:
        lines.append("(sin datos)")
        lines.append("")
        return lines
    for r in rows:
        try:
            lines.append(f"[{r['scenario']}] patrón={r['pattern']}  ciclos={int(r['cycles'])}  "
                         f"hit_rate={float(r['hit_rate']):.4f}  stall={int(r['stall_cycles'])}")
        except (TypeError, ValueError):
            lines.append(f"[{r.get('scenario')}] (datos parciales)")
    slowdown = slowdown_of(obj)
    if slowdown is not None:
        lines.append(f"slowdown: {slowdown:.2f}%")
    lines.append("")
    return lines


def format_sweep_lines(obj: Dict[str, Any]) -> List[str]:
    rows = normalize_sweep(obj)
    lines = ["# ==== BARRIDO DE LATENCIA ===="]
    if not rows:
        lines.append("(sin datos)")
        lines.append("")
        return lines
    lines.append(" latencia   base      adversa   slowdown")
    for r in rows:
        try:
            lines.append(f"{int(r['memory_latency']):>8}  {int(r['baseline_cycles']):>8}  "
                         f"{int(r['adverse_cycles']):>8}  {float(r['slowdown_percent']):>8.2f}%")
        except (TypeError, ValueError):
            lines.append("(fila parcial)")
    lines.append("")
    return lines


def print_obj_(obj: Dict[str, Any]) -> None:
    for line in format_comparison_lines(obj) + format_sweep_lines(obj):
        print(line)


# --------------------------- agregación con pandas -------------------------

def collect_rows(files: List[Path]) -> Dict[str, List[Dict[str, Any]]]:
    """Aplana todos los JSONs en filas (comparación, por núcleo, barrido)."""
    cmp_rows: List[Dict[str, Any]] = []
    core_rows: List[Dict[str, Any]] = []
    sweep_rows: List[Dict[str, Any]] = []

    for fp in files:
        try:
            obj = load_json(fp)
        except (OSError, ValueError) as exc:
            print(f"[WARN] no se pudo cargar {fp.name}: {exc}")
            continue

        params = obj.get("params") or {}
        tag = {
            "file": fp.name,
            "cores": params.get("NUM_CORES") or params.get("num_cores"),
            "threads": params.get("NUM_THREADS") or params.get("num_threads"),
            "sets": params.get("CACHE_NUM_SETS") or params.get("cache_num_sets"),
            "latency": params.get("MEMORY_LATENCY") or params.get("memory_latency"),
        }
        slowdown = slowdown_of(obj)
        for row in normalize_comparison(obj):
            cmp_rows.append({**tag, **row, "slowdown_percent": slowdown})
        for row in normalize_per_core(obj):
            core_rows.append({**tag, **row})
        for row in normalize_sweep(obj):
            sweep_rows.append({**tag, **row})

    return {"comparison": cmp_rows, "per_core": core_rows, "sweep": sweep_rows}


def aggregate_dir(export_csv: bool = False, plot: bool = False) -> None:
    """
    Carga todos los JSONs de ./outputs y genera DataFrames:
    - comparison_df
    - per_core_df
    - sweep_df

    Exporta CSVs a ./outputs/derived/ si export_csv=True.
    Genera gráficas simples si plot=True (requiere matplotlib).
    """
    pd = _try_import_pandas()
    if pd is None:
        print("[WARN] pandas no disponible. Usa --latest/--file para vista simple.")
        return

    files = list_outputs()
    if not files:
        print("[INFO] No se encontraron JSONs en ./outputs")
        return

    ensure_dir(DERIVED_DIR)
    rows = collect_rows(files)

    comparison_df = pd.DataFrame(rows["comparison"])
    per_core_df = pd.DataFrame(rows["per_core"])
    sweep_df = pd.DataFrame(rows["sweep"])

    if export_csv:
        if not comparison_df.empty:
            comparison_df.to_csv(DERIVED_DIR / "comparison_summary.csv", index=False)
        if not per_core_df.empty:
            per_core_df.to_csv(DERIVED_DIR / "per_core_summary.csv", index=False)
        if not sweep_df.empty:
            sweep_df.to_csv(DERIVED_DIR / "latency_sweep_summary.csv", index=False)
        print(f"[OK] CSVs generados en {DERIVED_DIR.resolve()}")

    if plot:
        plt = _try_import_matplotlib()
        if plt is None:
            print("[WARN] matplotlib no disponible. Omite --plot o instálalo.")
        else:
            # Ciclos por escenario (último archivo por escenario)
            if not comparison_df.empty:
                last_by_scenario = (comparison_df.sort_values("file")
                                    .groupby("scenario", as_index=False).last())
                plt.figure()
                plt.bar(last_by_scenario["scenario"], last_by_scenario["cycles"])
                plt.title("Ciclos totales por escenario")
                plt.xlabel("Escenario")
                plt.ylabel("Ciclos")
                plt.tight_layout()
                out = DERIVED_DIR / "cycles_bar.png"
                plt.savefig(out)
                print(f"[OK] Figura: {out}")

            # Slowdown vs latencia de memoria
            if not sweep_df.empty:
                curve = (sweep_df.groupby("memory_latency", as_index=False)["slowdown_percent"]
                         .mean().sort_values("memory_latency"))
                plt.figure()
                plt.plot(curve["memory_latency"], curve["slowdown_percent"], marker="o")
                plt.title("Slowdown (%) vs latencia de memoria")
                plt.xlabel("Latencia (ciclos)")
                plt.ylabel("Slowdown (%)")
                plt.tight_layout()
                out = DERIVED_DIR / "latency_slowdown.png"
                plt.savefig(out)
                print(f"[OK] Figura: {out}")

    if not comparison_df.empty:
        print("\n# Resumen comparación (últimos 6):")
        cols = ["file", "scenario", "cycles", "hit_rate", "stall_cycles", "slowdown_percent"]
        cols = [c for c in cols if c in comparison_df.columns]
        print(comparison_df[cols].tail(6).to_string(index=False))
    if not sweep_df.empty:
        print("\n# Resumen barrido (últimos 5):")
        cols = ["file", "memory_latency", "baseline_cycles", "adverse_cycles", "slowdown_percent"]
        cols = [c for c in cols if c in sweep_df.columns]
        print(sweep_df[cols].tail(5).to_string(index=False))


# --------------------------- CLI -------------------------------------------

def main() -> None:
    import argparse

    parser = argparse.ArgumentParser(
        prog="views.py",
        description="Herramienta para navegar/visualizar JSONs generados por mcsim.py y curs.py"
    )
    parser.add_argument("--list", action="store_true", help="Listar JSONs en ./outputs")
    parser.add_argument("--latest", action="store_true", help="Cargar y mostrar el JSON más reciente")
    parser.add_argument("--file", type=Path, default=None, help="Cargar un JSON específico")
    parser.add_argument("--aggregate", action="store_true", help="Agrega todos los JSONs (pandas)")
    parser.add_argument("--export-csv", action="store_true", help="Exporta CSVs (requiere --aggregate)")
    parser.add_argument("--plot", action="store_true", help="Genera gráficos básicos (requiere --aggregate)")

    args = parser.parse_args()

    if args.list:
        files = list_outputs()
        if not files:
            print("(no hay JSONs en ./outputs)")
            return
        for f in files:
            print(f.name)
        return

    if args.latest or args.file is not None:
        fp = args.file if args.file is not None else latest_output()
        if fp is None:
            print("(no hay JSONs en ./outputs)")
            return
        if not fp.exists():
            print(f"[ERROR] No existe: {fp}")
            return
        obj = load_json(fp)
        print(f"# Archivo: {fp.name}\n")
        print_obj_(obj)
        return

    if args.aggregate:
        aggregate_dir(export_csv=args.export_csv, plot=args.plot)
        return

    print("Uso:")
    print("  python views.py --list")
    print("  python views.py --latest")
    print("  python views.py --file outputs/<archivo>.json")
    print("  python views.py --aggregate --export-csv [--plot]")


if __name__ == "__main__":
    main()
