"""
Punto de arranque simplificado del simulador multinúcleo.

Corre la comparación base (patrón secuencial) vs adversa (patrón conflictivo)
con los parámetros por defecto definidos en ``mcsim.py`` e imprime un resumen
con la desaceleración cuantificada. Basta con ejecutar ``python main.py``.
"""

from __future__ import annotations

import mcsim


def _imprimir_resumen(resultados: dict) -> None:
    """Muestra en consola un resumen legible de la ejecución."""

    parametros = resultados.get("params", {})
    print("# =================== PARÁMETROS UTILIZADOS ===================")
    print(f"NUM_CORES            : {parametros.get('NUM_CORES')}")
    print(f"NUM_THREADS          : {parametros.get('NUM_THREADS')}")
    print(f"PIPELINE_WIDTH       : {parametros.get('PIPELINE_WIDTH')}")
    print(f"INSTR. POR HILO      : {parametros.get('INSTRUCTIONS_PER_THREAD')}")
    print(f"FRACCIÓN MEMORIA     : {parametros.get('MEMORY_FRACTION')}")
    print(f"CONJUNTOS L1         : {parametros.get('CACHE_NUM_SETS')}")
    print(f"WORKING SET (líneas) : {parametros.get('WORKING_SET_LINES')}")
    print(f"LATENCIA MEMORIA     : {parametros.get('MEMORY_LATENCY')}")
    print("")

    for linea in mcsim.format_report(resultados):
        print(linea)

    cmp = resultados.get("comparison", {})
    print("")
    print("# ==================== DESGLOSE POR NÚCLEO =====================")
    for clave in ("baseline", "adverse"):
        rep = cmp.get(clave, {})
        for core_id, per in (rep.get("per_core") or {}).items():
            print(
                f"[{clave}] core={core_id}  "
                f"accesos={per.get('memory_accesses')}  "
                f"hits={per.get('cache_hits')}  "
                f"misses={per.get('cache_misses')}  "
                f"stall={per.get('memory_stall_cycles')}"
            )


def main() -> None:
    """Ejecuta la comparación completa con los parámetros predeterminados."""

    print("Ejecutando benchmark secuencial vs conflictivo…")
    resultados = mcsim.collect_all_results()

    _imprimir_resumen(resultados)


if __name__ == "__main__":
    main()
