# tests/test_mcsim.py
# -*- coding: utf-8 -*-

"""
Suite de pruebas unitarias para mcsim.py

Cubre:
- Caché asociativa (descomposición de dirección, LRU, geometría inválida).
- Memoria y planificador round-robin.
- Métricas (tasas, slowdown, desglose por núcleo).
- Motor de ejecución (temporización exacta, vaciado, invariantes).
- Generador de cargas y benchmark secuencial vs conflictivo.

Ejecución:
  python -m unittest discover -s tests -p "test_*.py" -v
"""

from __future__ import annotations

import unittest
from typing import List

import mcsim


# ============================================================================
# Utilidades de apoyo
# ============================================================================

def _lcg_addresses(seed: int, count: int, span: int) -> List[int]:
    state = seed & 0xFFFFFFFFFFFFFFFF
    out: List[int] = []
    for _ in range(count):
        state = (state * 6364136223846793005 + 1) & 0xFFFFFFFFFFFFFFFF
        out.append((state >> 16) % span)
    return out


def _make_sim(num_cores: int = 1,
              num_threads: int = 1,
              width: int = 4,
              latency: int = 10,
              cache: mcsim.CacheConfig = None) -> mcsim.Simulator:
    return mcsim.Simulator(num_cores, num_threads,
                           cache or mcsim.CacheConfig(256, 64, 2, 1),
                           mcsim.MemoryConfig(access_latency_cycles=latency),
                           width)


class _GlobalSnapshot:
    """Guarda/restaura globals de benchmark de mcsim.py para aislar pruebas."""

    NAMES = ("NUM_CORES", "NUM_THREADS", "BENCH_INSTRUCTIONS_PER_THREAD",
             "BENCH_MEMORY_FRACTION", "BENCH_CACHE_NUM_SETS",
             "BENCH_WORKING_SET_LINES", "BENCH_MEMORY_LATENCY")

    def __init__(self) -> None:
        self.values = {name: getattr(mcsim, name) for name in self.NAMES}

    def restore(self) -> None:
        for name, value in self.values.items():
            setattr(mcsim, name, value)


# ============================================================================
# Caché — geometría, hit/miss y LRU
# ============================================================================

class TestCacheModel(unittest.TestCase):
    """Descomposición de direcciones y reemplazo LRU."""

    def test_num_sets(self) -> None:
        self.assertEqual(mcsim.CacheConfig(256, 32, 2, 1).num_sets, 4)
        self.assertEqual(mcsim.CacheConfig().num_sets, 32)

    def test_hit_after_fill(self) -> None:
        cache = mcsim.Cache(mcsim.CacheConfig(256, 64, 2, 1))
        self.assertIs(cache.access(0), mcsim.CacheAccessResult.MISS)
        self.assertIs(cache.access(0), mcsim.CacheAccessResult.HIT)

    def test_direct_mapped_conflict_evicts(self) -> None:
        # E=1, 4 conjuntos, B=32: 0 y 128 caen en el conjunto 0 con tags distintos.
        cache = mcsim.Cache(mcsim.CacheConfig(128, 32, 1, 1))
        self.assertEqual(cache.num_sets, 4)
        self.assertEqual(cache.set_index_of(0), cache.set_index_of(128))
        self.assertNotEqual(cache.tag_of(0), cache.tag_of(128))
        outcomes = [cache.access(a) for a in (0, 128, 0)]
        self.assertEqual(outcomes, [mcsim.CacheAccessResult.MISS] * 3)

    def test_different_sets_coexist(self) -> None:
        cache = mcsim.Cache(mcsim.CacheConfig(256, 64, 2, 1))
        cache.access(0)
        cache.access(64)
        self.assertNotEqual(cache.set_index_of(0), cache.set_index_of(64))
        self.assertIs(cache.access(0), mcsim.CacheAccessResult.HIT)
        self.assertIs(cache.access(64), mcsim.CacheAccessResult.HIT)

    def test_same_line_offsets_hit(self) -> None:
        cache = mcsim.Cache(mcsim.CacheConfig(256, 64, 2, 1))
        cache.access(64)
        self.assertIs(cache.access(64 + 63), mcsim.CacheAccessResult.HIT)

    def test_lru_order_is_permutation(self) -> None:
        cache = mcsim.Cache(mcsim.CacheConfig(1024, 32, 4, 1))
        ways = list(range(4))
        for addr in _lcg_addresses(1337, 2000, 16 * 1024):
            cache.access(addr)
            for s in range(cache.num_sets):
                self.assertEqual(sorted(cache.lru_order_of(s)), ways)

    def test_evicts_least_recently_touched(self) -> None:
        # Un solo conjunto de 4 vías: línea = tag.
        cache = mcsim.Cache(mcsim.CacheConfig(256, 64, 4, 1))
        self.assertEqual(cache.num_sets, 1)
        for addr in (0, 64, 128, 192):
            self.assertIs(cache.access(addr), mcsim.CacheAccessResult.MISS)
        # Hit intermedio en T1: la víctima pasa a ser T2 (64), no T1.
        self.assertIs(cache.access(0), mcsim.CacheAccessResult.HIT)
        self.assertIs(cache.access(256), mcsim.CacheAccessResult.MISS)
        for addr in (0, 128, 192, 256):
            self.assertIs(cache.access(addr), mcsim.CacheAccessResult.HIT)
        self.assertIs(cache.access(64), mcsim.CacheAccessResult.MISS)

    def test_mru_is_front(self) -> None:
        cache = mcsim.Cache(mcsim.CacheConfig(256, 64, 4, 1))
        cache.access(0)      # vía 3 (LRU inicial)
        cache.access(64)     # vía 2
        order = cache.lru_order_of(0)
        self.assertEqual(order[:2], [2, 3])

    def test_invalid_geometry_rejected(self) -> None:
        bad = [
            mcsim.CacheConfig(192, 32, 2, 1),   # 3 conjuntos
            mcsim.CacheConfig(0, 64, 2, 1),     # 0 conjuntos
            mcsim.CacheConfig(256, 0, 2, 1),    # línea nula
            mcsim.CacheConfig(256, 64, 0, 1),   # sin vías
            mcsim.CacheConfig(64, 64, 2, 1),    # E > líneas
        ]
        for cfg in bad:
            with self.subTest(cfg=cfg):
                with self.assertRaises(mcsim.ConfigurationError):
                    mcsim.Cache(cfg)

    def test_configuration_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(mcsim.ConfigurationError, ValueError))

    def test_report_fields(self) -> None:
        rep = mcsim.Cache(mcsim.CacheConfig(4096, 64, 2, 1)).report()
        self.assertEqual(rep["sets"], 32.0)
        self.assertEqual(rep["capacity_bytes"], 4096.0)


# ============================================================================
# Memoria y planificador
# ============================================================================

class TestMemoryAndScheduler(unittest.TestCase):

    def test_memory_latency(self) -> None:
        self.assertEqual(mcsim.Memory(mcsim.MemoryConfig()).access_latency_cycles(), 100)
        self.assertEqual(mcsim.Memory(mcsim.MemoryConfig(50)).access_latency_cycles(), 50)

    def test_round_robin(self) -> None:
        s = mcsim.Scheduler(2, 4)
        self.assertEqual([s.thread_to_core(t) for t in range(4)], [0, 1, 0, 1])
        self.assertEqual(mcsim.Scheduler(1, 4).thread_to_core(3), 0)

    def test_core_to_thread(self) -> None:
        s = mcsim.Scheduler(2, 2)
        self.assertEqual(s.core_to_thread(0), 0)
        self.assertEqual(s.core_to_thread(1), 1)
        self.assertIsNone(s.core_to_thread(2))

    def test_zero_cores_rejected(self) -> None:
        with self.assertRaises(mcsim.ConfigurationError):
            mcsim.Scheduler(0, 1)


# ============================================================================
# Métricas
# ============================================================================

class TestMetrics(unittest.TestCase):

    def test_rates_without_accesses(self) -> None:
        m = mcsim.Metrics()
        self.assertEqual(m.hit_rate(), 1.0)
        self.assertEqual(m.miss_rate(), 0.0)

    def test_rates_and_stalls(self) -> None:
        m = mcsim.Metrics()
        m.record_access(0, True, 0)
        m.record_access(0, True, 0)
        m.record_access(1, False, 100)
        self.assertEqual(m.total_memory_accesses, 3)
        self.assertAlmostEqual(m.hit_rate(), 2.0 / 3.0)
        self.assertAlmostEqual(m.miss_rate(), 1.0 / 3.0)
        self.assertAlmostEqual(m.hit_rate() + m.miss_rate(), 1.0)
        self.assertEqual(m.memory_stall_cycles, 100)
        self.assertEqual(m.per_core[0].cache_hits, 2)
        self.assertEqual(m.per_core[1].cache_misses, 1)

    def test_stall_cycle_counter(self) -> None:
        m = mcsim.Metrics()
        m.record_stall_cycle(3)
        m.record_stall_cycle(3)
        self.assertEqual(m.memory_stall_cycles, 2)
        self.assertEqual(m.per_core[3].memory_stall_cycles, 2)

    def test_slowdown(self) -> None:
        m = mcsim.Metrics(total_cycles=117)
        self.assertAlmostEqual(m.slowdown_percent(100), 17.0, delta=0.01)
        self.assertEqual(m.slowdown_percent(117), 0.0)
        self.assertEqual(m.slowdown_percent(500), 0.0)
        self.assertEqual(m.slowdown_percent(0), 0.0)

    def test_as_dict(self) -> None:
        m = mcsim.Metrics()
        m.record_access(1, False, 5)
        d = m.as_dict()
        self.assertEqual(d["cache_misses"], 1)
        self.assertEqual(d["per_core"]["1"]["memory_stall_cycles"], 5)


# ============================================================================
# Motor de ejecución
# ============================================================================

class TestSimulatorConstruction(unittest.TestCase):

    def test_zero_cores(self) -> None:
        with self.assertRaises(mcsim.ConfigurationError):
            _make_sim(num_cores=0)

    def test_bad_geometry(self) -> None:
        with self.assertRaises(mcsim.ConfigurationError):
            _make_sim(cache=mcsim.CacheConfig(192, 32, 2, 1))

    def test_zero_width(self) -> None:
        with self.assertRaises(mcsim.ConfigurationError):
            _make_sim(width=0)

    def test_caches_are_private(self) -> None:
        sim = _make_sim(num_cores=2, num_threads=2)
        self.assertIsNot(sim.cache_of(0), sim.cache_of(1))
        sim.cache_of(0).access(0)
        self.assertIs(sim.cache_of(1).access(0), mcsim.CacheAccessResult.MISS)

    def test_empty_workload_zero_steps(self) -> None:
        sim = _make_sim()
        sim.load_workload([])
        self.assertEqual(sim.run_to_completion(), 0)
        self.assertEqual(sim.metrics.total_cycles, 0)


class TestSimulatorTiming(unittest.TestCase):
    """Temporización exacta con duraciones de etapa = 1."""

    def test_single_compute(self) -> None:
        sim = _make_sim()
        sim.load_workload([[mcsim.Instruction.compute(0)]])
        self.assertEqual(sim.run_to_completion(), 7)
        self.assertEqual(sim.metrics.total_cycles, 7)
        self.assertEqual(sim.metrics.total_memory_accesses, 0)

    def test_single_miss(self) -> None:
        sim = _make_sim(latency=10)
        sim.load_workload([[mcsim.Instruction.memory(mcsim.InstructionKind.LOAD, 0x40, 0)]])
        self.assertEqual(sim.run_to_completion(), 19)
        m = sim.metrics
        self.assertEqual((m.cache_hits, m.cache_misses), (0, 1))
        # 10 registrados en el acceso + 10 descontados en Memory.
        self.assertEqual(m.memory_stall_cycles, 20)
        self.assertEqual(m.per_core[0].memory_stall_cycles, 20)

    def test_single_hit(self) -> None:
        sim = _make_sim(latency=10)
        sim.cache_of(0).access(0x40)
        sim.load_workload([[mcsim.Instruction.memory(mcsim.InstructionKind.STORE, 0x40, 0)]])
        self.assertEqual(sim.run_to_completion(), 9)
        self.assertEqual(sim.metrics.cache_hits, 1)
        self.assertEqual(sim.metrics.memory_stall_cycles, 0)

    def test_miss_with_zero_latency(self) -> None:
        sim = _make_sim(latency=0)
        sim.load_workload([[mcsim.Instruction.memory(mcsim.InstructionKind.LOAD, 0, 0)]])
        self.assertEqual(sim.run_to_completion(), 10)
        self.assertEqual(sim.metrics.memory_stall_cycles, 0)

    def test_stage_progression(self) -> None:
        sim = _make_sim()
        sim.load_workload([[mcsim.Instruction.compute(0)]])
        seen = []
        while not sim.is_idle():
            sim.step()
            if sim.in_flight_count(0):
                seen.append(sim.cores[0].pipeline[0].stage)
        expected = [mcsim.PipelineStage.FETCH, mcsim.PipelineStage.FETCH,
                    mcsim.PipelineStage.EXECUTE, mcsim.PipelineStage.EXECUTE,
                    mcsim.PipelineStage.COMMIT, mcsim.PipelineStage.COMMIT]
        self.assertEqual(seen, expected)

    def test_backward_transition_is_defect(self) -> None:
        instr = mcsim.Instruction.compute(0)
        instr.advance_to(mcsim.PipelineStage.COMMIT, 1)
        with self.assertRaises(AssertionError):
            instr.advance_to(mcsim.PipelineStage.EXECUTE, 1)


class TestSimulatorEndToEnd(unittest.TestCase):

    def test_same_address_twice_miss_then_hit(self) -> None:
        sim = _make_sim(width=4, cache=mcsim.CacheConfig(256, 64, 2, 1))
        loads = [mcsim.Instruction.memory(mcsim.InstructionKind.LOAD, 0x80, i) for i in range(2)]
        sim.load_workload([loads])
        sim.run_to_completion()
        self.assertEqual((sim.metrics.cache_misses, sim.metrics.cache_hits), (1, 1))

    def test_repeated_instruction_object_counts_twice(self) -> None:
        sim = _make_sim(width=4, latency=10)
        load = mcsim.Instruction.memory(mcsim.InstructionKind.LOAD, 0x80, 0)
        sim.load_workload([[load] * 2])
        self.assertEqual(sim.run_to_completion(), 19)
        m = sim.metrics
        self.assertEqual(m.total_memory_accesses, 2)
        self.assertEqual((m.cache_misses, m.cache_hits), (1, 1))
        self.assertEqual(sim.retired_count(), 2)
        # El objeto del llamador no se toca.
        self.assertIs(load.stage, mcsim.PipelineStage.FETCH)
        self.assertFalse(load.stalled)

    def test_shared_stream_across_simulators(self) -> None:
        cfg = mcsim.WorkloadConfig(instructions_per_thread=40, memory_fraction=0.5,
                                   access_pattern=mcsim.AccessPattern.CONFLICT_HEAVY,
                                   line_size=64, cache_num_sets=2)
        workload = mcsim.build_workload(1, cfg)

        alone = _make_sim(latency=10)
        alone.load_workload(workload)
        expected = alone.run_to_completion()

        a, b = _make_sim(latency=10), _make_sim(latency=10)
        a.load_workload(workload)
        b.load_workload(workload)
        while not (a.is_idle() and b.is_idle()):
            if not a.is_idle():
                a.step()
            if not b.is_idle():
                b.step()
        self.assertEqual(a.current_cycle, expected)
        self.assertEqual(b.current_cycle, expected)
        self.assertEqual(a.metrics.as_dict(), alone.metrics.as_dict())

    def test_same_address_order_with_width_one(self) -> None:
        sim = _make_sim(width=1)
        loads = [mcsim.Instruction.memory(mcsim.InstructionKind.LOAD, 0x80, i) for i in range(2)]
        sim.load_workload([loads])
        while sim.metrics.total_memory_accesses < 1:
            sim.step()
        self.assertEqual(sim.metrics.cache_misses, 1)
        sim.run_to_completion()
        self.assertEqual(sim.metrics.cache_hits, 1)

    def test_direct_mapped_conflict_through_engine(self) -> None:
        sim = _make_sim(width=1, cache=mcsim.CacheConfig(128, 32, 1, 1))
        stream = [mcsim.Instruction.memory(mcsim.InstructionKind.LOAD, a, i)
                  for i, a in enumerate((0, 128, 0))]
        sim.load_workload([stream])
        sim.run_to_completion()
        self.assertEqual(sim.metrics.cache_misses, 3)
        self.assertEqual(sim.metrics.cache_hits, 0)

    def test_routing_by_thread(self) -> None:
        sim = _make_sim(num_cores=2, num_threads=4)
        cfg = mcsim.WorkloadConfig(instructions_per_thread=5)
        workloads = mcsim.build_workload(4, cfg)
        workloads[1] = workloads[1][:2]
        sim.load_workload(workloads)
        self.assertEqual(sim.pending_count(0), 10)
        self.assertEqual(sim.pending_count(1), 7)

    def test_drains_and_respects_width(self) -> None:
        width = 3
        sim = _make_sim(num_cores=2, num_threads=3, width=width, latency=7)
        cfg = mcsim.WorkloadConfig(instructions_per_thread=150, memory_fraction=0.6,
                                   access_pattern=mcsim.AccessPattern.SEQUENTIAL,
                                   line_size=64, cache_num_sets=2, working_set_lines=6)
        workloads = mcsim.build_workload(3, cfg)
        sim.load_workload(workloads)
        previous = 0
        while not sim.is_idle():
            sim.step()
            self.assertEqual(sim.current_cycle, previous + 1)
            previous = sim.current_cycle
            for core_id in range(sim.num_cores):
                self.assertLessEqual(sim.in_flight_count(core_id), width)
        for core_id in range(sim.num_cores):
            self.assertEqual(sim.pending_count(core_id), 0)
            self.assertEqual(sim.in_flight_count(core_id), 0)
        self.assertEqual(sim.retired_count(), 450)

    def test_in_flight_stays_in_program_order(self) -> None:
        sim = _make_sim(width=4, latency=13)
        cfg = mcsim.WorkloadConfig(instructions_per_thread=120, memory_fraction=0.5,
                                   access_pattern=mcsim.AccessPattern.CONFLICT_HEAVY,
                                   line_size=64, cache_num_sets=2)
        sim.load_workload(mcsim.build_workload(1, cfg))
        while not sim.is_idle():
            sim.step()
            issued = [i.issue_cycle for i in sim.cores[0].pipeline]
            self.assertEqual(issued, sorted(issued))

    def test_accesses_equal_hits_plus_misses(self) -> None:
        sim = _make_sim(num_cores=2, num_threads=2, latency=20)
        cfg = mcsim.WorkloadConfig(instructions_per_thread=300, memory_fraction=0.5,
                                   line_size=64, cache_num_sets=2, working_set_lines=3)
        sim.load_workload(mcsim.build_workload(2, cfg))
        for _ in range(50):
            sim.step()
            m = sim.metrics
            self.assertEqual(m.total_memory_accesses, m.cache_hits + m.cache_misses)
        sim.run_to_completion()
        m = sim.metrics
        self.assertEqual(m.total_memory_accesses, m.cache_hits + m.cache_misses)
        self.assertEqual(m.total_memory_accesses,
                         sum(p.memory_accesses for p in m.per_core.values()))
        self.assertEqual(m.memory_stall_cycles,
                         sum(p.memory_stall_cycles for p in m.per_core.values()))

    def test_deterministic(self) -> None:
        def run() -> dict:
            sim = _make_sim(num_cores=2, num_threads=3, latency=11)
            cfg = mcsim.WorkloadConfig(instructions_per_thread=200, memory_fraction=0.4,
                                       access_pattern=mcsim.AccessPattern.CONFLICT_HEAVY,
                                       line_size=64, cache_num_sets=2)
            sim.load_workload(mcsim.build_workload(3, cfg))
            sim.run_to_completion()
            return sim.metrics.as_dict()

        self.assertEqual(run(), run())


# ============================================================================
# Carga sintética
# ============================================================================

class TestWorkload(unittest.TestCase):

    def test_instruction_count(self) -> None:
        gen = mcsim.WorkloadGenerator(mcsim.WorkloadConfig(instructions_per_thread=10,
                                                           memory_fraction=0.5))
        count = 0
        while gen.next_instruction(0) is not None:
            count += 1
        self.assertEqual(count, 10)
        self.assertEqual(gen.remaining(), 0)

    def test_memory_mix_pattern(self) -> None:
        stream = mcsim.build_workload(1, mcsim.WorkloadConfig(instructions_per_thread=100,
                                                              memory_fraction=0.5))[0]
        kinds = [i.is_memory_op() for i in stream]
        self.assertEqual(kinds, [True] * 50 + [False] * 50)
        self.assertIs(stream[0].kind, mcsim.InstructionKind.STORE)
        self.assertIs(stream[1].kind, mcsim.InstructionKind.LOAD)

    def test_fraction_rounds_half_up(self) -> None:
        stream = mcsim.build_workload(1, mcsim.WorkloadConfig(instructions_per_thread=100,
                                                              memory_fraction=0.125))[0]
        self.assertEqual(sum(i.is_memory_op() for i in stream), 13)

    def test_issue_cycles_sequential(self) -> None:
        stream = mcsim.build_workload(1, mcsim.WorkloadConfig(instructions_per_thread=8))[0]
        self.assertEqual([i.issue_cycle for i in stream], list(range(8)))

    def test_working_set_reuse(self) -> None:
        cfg = mcsim.WorkloadConfig(instructions_per_thread=8, memory_fraction=1.0,
                                   line_size=64, working_set_lines=3)
        addrs = [i.address for i in mcsim.build_workload(1, cfg)[0]]
        self.assertEqual(addrs, [0, 64, 128, 0, 64, 128, 0, 64])

    def test_conflict_addresses_same_set(self) -> None:
        cfg = mcsim.WorkloadConfig(instructions_per_thread=20, memory_fraction=1.0,
                                   access_pattern=mcsim.AccessPattern.CONFLICT_HEAVY,
                                   line_size=64, cache_num_sets=4)
        stream = mcsim.build_workload(1, cfg)[0]
        cache = mcsim.Cache(mcsim.CacheConfig(4 * 64 * 2, 64, 2, 1))
        self.assertTrue(all(i.is_memory_op() for i in stream))
        self.assertEqual({cache.set_index_of(i.address) for i in stream}, {0})
        self.assertEqual(len({i.address for i in stream}), 20)


# ============================================================================
# Benchmark
# ============================================================================

class TestBenchmark(unittest.TestCase):

    def setUp(self) -> None:
        self._snap = _GlobalSnapshot()
        # Parametrización reducida para rapidez
        mcsim.BENCH_INSTRUCTIONS_PER_THREAD = 200
        mcsim.BENCH_MEMORY_LATENCY = 20

    def tearDown(self) -> None:
        self._snap.restore()

    def test_conflicts_slow_down(self) -> None:
        cmp = mcsim.compare_access_patterns(2, 2, 200, 0.5, 32, 64, 20)
        base, adv = cmp["baseline"], cmp["adverse"]
        self.assertEqual(adv["miss_rate"], 1.0)
        self.assertLess(base["miss_rate"], adv["miss_rate"])
        self.assertGreater(adv["cycles"], base["cycles"])
        expected = (adv["cycles"] - base["cycles"]) / base["cycles"] * 100.0
        self.assertAlmostEqual(cmp["slowdown_percent"], expected)

    def test_run_benchmark_fields(self) -> None:
        rep = mcsim.run_benchmark(2, 2, 50, 0.5, mcsim.AccessPattern.SEQUENTIAL, 32, 64, 20)
        for k in ("cycles", "retired", "accesses", "hits", "misses", "hit_rate",
                  "miss_rate", "stall_cycles", "per_core", "sets"):
            self.assertIn(k, rep)
        self.assertEqual(rep["retired"], 100)
        self.assertEqual(set(rep["per_core"].keys()), {"0", "1"})
        self.assertEqual(rep["sets"], 32.0)

    def test_sweep_skips_negative(self) -> None:
        rows = mcsim.sweep_memory_latency([-1, 5, 30], 1, 1, 100, 0.5, 32, 64)
        self.assertEqual([r["memory_latency"] for r in rows], [5.0, 30.0])
        self.assertLessEqual(rows[0]["adverse_cycles"], rows[1]["adverse_cycles"])

    def test_collect_all_results_uses_globals(self) -> None:
        out = mcsim.collect_all_results()
        self.assertEqual(out["params"]["INSTRUCTIONS_PER_THREAD"], 200)
        self.assertEqual(out["comparison"]["baseline"]["retired"], 400)
        lines = mcsim.format_report(out)
        self.assertTrue(any("Slowdown" in ln for ln in lines))

    def test_bad_sets_rejected(self) -> None:
        with self.assertRaises(mcsim.ConfigurationError):
            mcsim.compare_access_patterns(2, 2, 10, 0.5, 3, 6, 20)


# ============================================================================
# Main
# ============================================================================

if __name__ == "__main__":
    unittest.main(verbosity=2)
