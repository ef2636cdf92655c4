#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
curs.py — Interfaz TUI (curses) para mcsim.py

Funciones principales:
  1) Ejecutar: Benchmark secuencial vs conflictivo (JSON) [siempre en ./outputs con timestamp]
  2) Ejecutar: Barrido de latencia de memoria (JSON)
  3) Ejecutar: Pruebas unitarias (unittest)
  4) Explorar resultados (TUI): listar JSONs de ./outputs y ver detalle legible
  5) Exportar CSVs agregados (pandas)
  6) Editor de parámetros
  7) Fallback a modo consola si curses no está disponible

Requisitos:
- mcsim.py y views.py en el mismo directorio.
- Python 3.8+ (en Windows: paquete windows-curses).
"""

from __future__ import annotations

import curses
import json
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import mcsim  # motor/simulador
import views


# ============================================================================
#                          PARÁMETROS EDITABLES (UI)
# ============================================================================

class Params:
    """
    Contenedor de parámetros editables con defaults de mcsim.
    """

    def __init__(self) -> None:
        # Núcleos / hilos
        self.num_cores: int = mcsim.NUM_CORES
        self.num_threads: int = mcsim.NUM_THREADS

        # Carga sintética
        self.instructions: int = mcsim.BENCH_INSTRUCTIONS_PER_THREAD
        self.memory_fraction: float = mcsim.BENCH_MEMORY_FRACTION
        self.working_set: int = mcsim.BENCH_WORKING_SET_LINES

        # Caché / memoria
        self.cache_sets: int = mcsim.BENCH_CACHE_NUM_SETS
        self.memory_latency: int = mcsim.BENCH_MEMORY_LATENCY

        # Salida
        self.outputs_dir: Path = views.OUTPUTS_DIR

    def as_dict(self) -> Dict[str, Any]:
        return {
            "num_cores": self.num_cores,
            "num_threads": self.num_threads,
            "instructions": self.instructions,
            "memory_fraction": self.memory_fraction,
            "working_set": self.working_set,
            "cache_num_sets": self.cache_sets,
            "memory_latency": self.memory_latency,
            "outputs_dir": str(self.outputs_dir.resolve()),
        }


PARAM_ITEMS = [
    ("num_cores", "Número de núcleos (>= 1)", int),
    ("num_threads", "Número de hilos", int),
    ("instructions", "Instrucciones por hilo", int),
    ("memory_fraction", "Fracción de instrucciones de memoria (0..1)", float),
    ("working_set", "Working set secuencial (líneas, 0 = sin tope)", int),
    ("cache_sets", "Conjuntos de L1 (potencia de 2)", int),
    ("memory_latency", "Latencia de memoria (ciclos)", int),
]


def set_param(p: Params, name: str, raw: str) -> None:
    """Convierte y asigna un parámetro; lanza ValueError si es inválido."""
    caster = {n: c for n, _, c in PARAM_ITEMS}[name]
    val = caster(raw)
    if val < 0:
        raise ValueError("Debe ser no negativo.")
    setattr(p, name, val)


def format_params(p: Params) -> str:
    d = p.as_dict()
    lines = ["Parámetros actuales:"]
    for k in ["num_cores", "num_threads", "instructions", "memory_fraction",
              "working_set", "cache_num_sets", "memory_latency"]:
        lines.append(f"  - {k}: {d[k]}")
    return "\n".join(lines)


# ============================================================================
#                           UTILIDADES DE SALIDA
# ============================================================================

def timestamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def write_json(data: Dict[str, Any], outputs_dir: Path, prefix: str) -> Path:
    views.ensure_dir(outputs_dir)
    out = outputs_dir / f"{prefix}_{timestamp()}.json"
    with out.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return out


# ============================================================================
#                             LÓGICA DE EJECUCIÓN
# ============================================================================

def _bench_params(p: Params) -> Dict[str, Any]:
    return {
        "NUM_CORES": p.num_cores,
        "NUM_THREADS": p.num_threads,
        "PIPELINE_WIDTH": mcsim.PIPELINE_WIDTH,
        "INSTRUCTIONS_PER_THREAD": p.instructions,
        "MEMORY_FRACTION": p.memory_fraction,
        "CACHE_NUM_SETS": p.cache_sets,
        "WORKING_SET_LINES": p.working_set,
        "MEMORY_LATENCY": p.memory_latency,
    }


def run_benchmark(p: Params) -> Dict[str, Any]:
    """
    Corre la comparación base/adversa. Los errores de configuración quedan
    registrados en el resultado en vez de abortar la TUI.
    """
    try:
        comparison = mcsim.compare_access_patterns(p.num_cores, p.num_threads, p.instructions,
                                                   p.memory_fraction, p.cache_sets,
                                                   p.working_set, p.memory_latency)
        error = None
    except mcsim.ConfigurationError as exc:
        comparison = {}
        error = f"{type(exc).__name__}: {exc}"

    return {
        "params": _bench_params(p),
        "comparison": comparison,
        "ok": error is None,
        "error": error,
        "generated_at": time.time(),
    }


def run_latency_sweep(p: Params) -> Dict[str, Any]:
    """Barrido de latencia de memoria con los presets de mcsim."""
    try:
        sweep = mcsim.sweep_memory_latency(list(mcsim.BENCH_LATENCY_SWEEP), p.num_cores,
                                           p.num_threads, p.instructions, p.memory_fraction,
                                           p.cache_sets, p.working_set)
        error = None
    except mcsim.ConfigurationError as exc:
        sweep = []
        error = f"{type(exc).__name__}: {exc}"

    return {
        "params": _bench_params(p),
        "sweep_ok": error is None,
        "error": error,
        "sweep_results": sweep,
        "generated_at": time.time(),
    }


# ============================================================================
#                        PRUEBAS UNITARIAS (unittest)
# ============================================================================

def run_unittest_suite(start_dir: str = "tests") -> Dict[str, Any]:
    """
    Descubre y ejecuta pruebas con 'unittest' en ./tests.
    Devuelve resumen estructurado (también si el descubrimiento falla).
    """
    import io
    import unittest

    buf_out = io.StringIO()
    try:
        suite = unittest.TestLoader().discover(start_dir=start_dir, pattern="test_*.py")
    except ImportError as exc:
        return {
            "ok": False,
            "error": f"DiscoveryError: {type(exc).__name__}: {exc}",
            "stdout": "",
            "generated_at": time.time(),
        }

    result = unittest.TextTestRunner(stream=buf_out, verbosity=2).run(suite)
    return {
        "ok": result.wasSuccessful(),
        "summary": {
            "testsRun": result.testsRun,
            "failures": len(result.failures),
            "errors": len(result.errors),
            "skipped": len(result.skipped),
        },
        "failures": [(str(t), str(tb)) for t, tb in result.failures],
        "errors": [(str(t), str(tb)) for t, tb in result.errors],
        "stdout": buf_out.getvalue(),
        "generated_at": time.time(),
    }


# ============================================================================
#                    RENDERIZADORES “human-friendly”
# ============================================================================

def _format_lines_unittest(obj: Dict[str, Any], file_name: str) -> List[str]:
    lines: List[str] = [f"# Archivo: {file_name}  (unittest)", ""]
    summary = obj.get("summary") or {}
    lines.append("# ==== RESUMEN ====")
    lines.append(f"ok           : {obj.get('ok')}")
    if summary:
        for k in ("testsRun", "failures", "errors", "skipped"):
            lines.append(f"{k:<13}: {summary.get(k)}")
    else:
        lines.append(f"error        : {obj.get('error')}")

    for tag in ("failures", "errors"):
        pairs = obj.get(tag) or []
        if not pairs:
            continue
        lines.append(f"\n# ==== {tag.upper()} ====")
        for i, (test_name, tb) in enumerate(pairs, 1):
            lines.append(f"{i:2d}. {test_name}")
            last = (tb or "").strip().splitlines()[-1:]
            if last:
                lines.append(f"    {last[0]}")
    return lines


def format_obj_human(obj: Dict[str, Any], file_name: str) -> List[str]:
    """
    Detalle según el tipo de resultado:
      - unittest   -> _format_lines_unittest
      - benchmark / barrido -> bloques de views
    """
    if "summary" in obj and ("failures" in obj or "errors" in obj):
        return _format_lines_unittest(obj, file_name)

    lines: List[str] = [f"# Archivo: {file_name}", ""]
    if obj.get("error"):
        lines.append(f"[ERROR] {obj['error']}")
        lines.append("")
    if "comparison" in obj:
        lines.extend(views.format_comparison_lines(obj))
    if "sweep_results" in obj or "latency_sweep" in obj:
        lines.extend(views.format_sweep_lines(obj))
    return lines


# ============================================================================
#                             PANDAS / CSV
# ============================================================================

def export_csv_aggregate() -> Tuple[bool, str]:
    """
    Agrega todos los JSONs en ./outputs y exporta CSVs en ./outputs/derived.
    Retorna (ok, mensaje).
    """
    pd = views._try_import_pandas()
    if pd is None:
        return False, "pandas no está disponible. Instale con: pip install pandas"

    files = views.list_outputs()
    if not files:
        return False, "No se encontraron JSONs en ./outputs."

    views.ensure_dir(views.DERIVED_DIR)
    rows = views.collect_rows(files)
    written = 0
    for key, fname in (("comparison", "comparison_summary.csv"),
                       ("per_core", "per_core_summary.csv"),
                       ("sweep", "latency_sweep_summary.csv")):
        if rows[key]:
            pd.DataFrame(rows[key]).to_csv(views.DERIVED_DIR / fname, index=False)
            written += 1
    return True, f"{written} CSVs exportados en {views.DERIVED_DIR.resolve()}"


# ---------------------------- curses widgets --------------------------------

def draw_menu(stdscr: "curses._CursesWindow", title: str, items: List[str], idx: int) -> None:
    stdscr.clear()
    h, w = stdscr.getmaxyx()
    stdscr.addstr(1, 2, title[: w - 4], curses.A_BOLD)
    for i, label in enumerate(items):
        text = f"{'➤ ' if i == idx else '  '}{label}"[: w - 8]
        attr = curses.A_REVERSE if i == idx else curses.A_NORMAL
        stdscr.addstr(3 + i, 4, text, attr)
    stdscr.addstr(h - 2, 2, "↑/↓ mover  Enter seleccionar   q salir", curses.A_DIM)
    stdscr.refresh()


def scrollable_view(stdscr: "curses._CursesWindow", title: str, lines: List[str]) -> None:
    """Vista de texto con scroll (↑/↓, PgUp/PgDn)."""
    top = 0
    while True:
        stdscr.clear()
        h, w = stdscr.getmaxyx()
        usable = h - 5
        stdscr.addstr(1, 2, title[: w - 4], curses.A_BOLD)
        for i, line in enumerate(lines[top:top + usable]):
            stdscr.addstr(3 + i, 4, line[: w - 8])
        stdscr.addstr(h - 2, 2, "↑/↓ scroll  PgUp/PgDn  q volver", curses.A_DIM)
        stdscr.refresh()

        bottom = max(0, len(lines) - usable)
        key = stdscr.getch()
        if key in (27, ord("q")):
            return
        if key in (curses.KEY_DOWN, ord("j")):
            top = min(bottom, top + 1)
        elif key in (curses.KEY_UP, ord("k")):
            top = max(0, top - 1)
        elif key == curses.KEY_NPAGE:
            top = min(bottom, top + usable)
        elif key == curses.KEY_PPAGE:
            top = max(0, top - usable)


def file_selector(stdscr: "curses._CursesWindow", files: List[Path], title: str) -> Optional[Path]:
    """Selector de archivos simple. Devuelve la ruta seleccionada o None."""
    if not files:
        show_message(stdscr, "No hay JSONs en ./outputs")
        return None

    labels = [f.name for f in files] + ["Volver"]
    idx = len(files) - 1  # por defecto el más reciente
    while True:
        draw_menu(stdscr, title, labels, idx)
        key = stdscr.getch()
        if key in (curses.KEY_UP, ord("k")):
            idx = (idx - 1) % len(labels)
        elif key in (curses.KEY_DOWN, ord("j")):
            idx = (idx + 1) % len(labels)
        elif key in (27, ord("q")):
            return None
        elif key in (10, 13):
            return None if idx == len(files) else files[idx]


def show_message(stdscr: "curses._CursesWindow", msg: str, pause: bool = True) -> None:
    h, w = stdscr.getmaxyx()
    for i, ln in enumerate(msg.splitlines()[-3:]):
        stdscr.addstr(h - 6 + i, 2, " " * (w - 4))
        stdscr.addstr(h - 6 + i, 2, ln[: w - 4])
    stdscr.refresh()
    if pause:
        stdscr.addstr(h - 2, 2, "Presiona cualquier tecla para continuar...", curses.A_DIM)
        stdscr.getch()


def prompt_input(stdscr: "curses._CursesWindow", prompt: str, default: str) -> Optional[str]:
    h, w = stdscr.getmaxyx()
    line = f"{prompt} [{default}]: "
    stdscr.addstr(h - 4, 2, " " * (w - 4))
    stdscr.addstr(h - 4, 2, line[: w - 4])
    stdscr.refresh()
    curses.echo()
    try:
        raw = stdscr.getstr(h - 4, 2 + len(line), max(1, w - len(line) - 4))
    except curses.error:
        return None
    finally:
        curses.noecho()
    val = raw.decode("utf-8").strip()
    return default if val == "" else val


# ============================================================================
#                                   TUI
# ============================================================================

MENU_ITEMS = [
    "Editar parámetros",
    "Ejecutar: Benchmark secuencial vs conflictivo (JSON)",
    "Ejecutar: Barrido de latencia (JSON)",
    "Ejecutar: Pruebas unitarias (unittest)",
    "Explorar resultados (TUI)",
    "Exportar CSVs agregados (pandas)",
    "Mostrar parámetros actuales",
    "Salir",
]

RUNNERS = {
    MENU_ITEMS[1]: (run_benchmark, "run_benchmark", "Benchmark"),
    MENU_ITEMS[2]: (run_latency_sweep, "run_latency_sweep", "Barrido de latencia"),
    MENU_ITEMS[3]: (lambda p: run_unittest_suite(), "run_unittest", "unittest"),
}


def edit_params_screen(stdscr: "curses._CursesWindow", p: Params) -> None:
    idx = 0
    items = [f"{name} — {desc}" for name, desc, _ in PARAM_ITEMS] + ["Volver"]
    while True:
        draw_menu(stdscr, "Editar parámetros", items, idx)
        key = stdscr.getch()
        if key in (curses.KEY_UP, ord("k")):
            idx = (idx - 1) % len(items)
        elif key in (curses.KEY_DOWN, ord("j")):
            idx = (idx + 1) % len(items)
        elif key in (27, ord("q")):
            return
        elif key in (10, 13):
            if idx == len(items) - 1:
                return
            name, desc, _ = PARAM_ITEMS[idx]
            new_str = prompt_input(stdscr, f"{name} ({desc})", str(getattr(p, name)))
            if new_str is None:
                continue
            try:
                set_param(p, name, new_str)
                show_message(stdscr, f"OK: {name} = {getattr(p, name)}")
            except ValueError as exc:
                show_message(stdscr, f"Error al asignar {name}: {exc}")


def explore_results_tui(stdscr: "curses._CursesWindow") -> None:
    fp = file_selector(stdscr, views.list_outputs(), "Selecciona un JSON de ./outputs")
    if fp is None:
        return
    try:
        lines = format_obj_human(views.load_json(fp), fp.name)
    except (OSError, ValueError) as exc:
        show_message(stdscr, f"Error al cargar {fp.name}: {exc}")
        return
    scrollable_view(stdscr, "Detalle del resultado", lines)


def tui(stdscr: "curses._CursesWindow") -> None:
    curses.curs_set(0)
    stdscr.timeout(-1)
    p = Params()
    idx = 0

    while True:
        draw_menu(stdscr, "Simulador multinúcleo — Caché + Pipeline", MENU_ITEMS, idx)
        key = stdscr.getch()

        if key in (curses.KEY_UP, ord("k")):
            idx = (idx - 1) % len(MENU_ITEMS)
        elif key in (curses.KEY_DOWN, ord("j")):
            idx = (idx + 1) % len(MENU_ITEMS)
        elif key in (27, ord("q")):
            break
        elif key in (10, 13):
            choice = MENU_ITEMS[idx]

            if choice == "Editar parámetros":
                edit_params_screen(stdscr, p)
            elif choice == "Mostrar parámetros actuales":
                show_message(stdscr, format_params(p))
            elif choice == "Explorar resultados (TUI)":
                explore_results_tui(stdscr)
            elif choice == "Exportar CSVs agregados (pandas)":
                ok, msg = export_csv_aggregate()
                show_message(stdscr, ("OK: " if ok else "WARN: ") + msg)
            elif choice in RUNNERS:
                runner, prefix, label = RUNNERS[choice]
                stdscr.clear()
                stdscr.addstr(2, 2, f"Ejecutando {label} ...")
                stdscr.refresh()
                out = write_json(runner(p), p.outputs_dir, prefix)
                show_message(stdscr, f"Finalizado. JSON: {out}")
            elif choice == "Salir":
                break


# ============================================================================
#                      FALLBACK: MODO INTERACTIVO (SIN CURSES)
# ============================================================================

def prompt_cli(prompt: str, current: str) -> str:
    try:
        s = input(f"{prompt} [{current}]: ").strip()
        return current if s == "" else s
    except (EOFError, KeyboardInterrupt):
        return current


def interactive_cli() -> None:
    p = Params()
    print("=== Modo interactivo (fallback) — Simulador multinúcleo ===\n")

    while True:
        print(format_params(p))
        print("\nOpciones:")
        for i, label in enumerate(MENU_ITEMS[:-2] + ["Salir"], 1):
            print(f"  {i}) {label}")

        try:
            opt = input(f"\nSeleccione opción [1-{len(MENU_ITEMS) - 1}]: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nSalida segura.")
            return

        if opt == "1":
            for name, desc, _ in PARAM_ITEMS:
                try:
                    set_param(p, name, prompt_cli(name, str(getattr(p, name))))
                except ValueError as exc:
                    print(f"Error al actualizar {name}: {exc}")
            print("Parámetros actualizados.\n")

        elif opt in ("2", "3", "4"):
            runner, prefix, label = RUNNERS[MENU_ITEMS[int(opt) - 1]]
            print(f"Ejecutando {label} ...")
            out = write_json(runner(p), p.outputs_dir, prefix)
            print(f"Listo. JSON: {out}\n")

        elif opt == "5":
            fp = views.latest_output()
            if fp is None:
                print("(no hay JSONs en ./outputs)\n")
            else:
                for ln in format_obj_human(views.load_json(fp), fp.name):
                    print(ln)
                print("")

        elif opt == "6":
            ok, msg = export_csv_aggregate()
            print(("OK: " if ok else "WARN: ") + msg + "\n")

        elif opt == "7":
            print("Salida.")
            return
        else:
            print("Opción inválida.\n")


# ============================================================================
#                                PUNTO DE ENTRADA
# ============================================================================

if __name__ == "__main__":
    """
    Levanta TUI con curses. Si curses falla, usa modo interactivo por consola.
    Cada ejecución genera un JSON en ./outputs con timestamp.
    """
    try:
        curses.wrapper(tui)
    except curses.error as exc:
        sys.stderr.write(f"[WARN] Curses no disponible o falló ({type(exc).__name__}: {exc}).\n")
        sys.stderr.write("Entrando a modo interactivo simple...\n\n")
        interactive_cli()
