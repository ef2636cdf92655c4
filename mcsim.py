#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Simulador multinúcleo — planificación de hilos, cachés privadas y latencia de memoria.

Código único organizado por bloques:
  A. Modelo de núcleo (ciclos, etapas, instrucciones).
  B. Caché asociativa por conjuntos con reemplazo LRU.
  C. Memoria compartida (latencia fija).
  D. Planificador round-robin hilo → núcleo.
  E. Métricas (contadores monótonos + tasas derivadas).
  F. Motor de ejecución ciclo a ciclo.
  G. Generador de cargas sintéticas (política externa e intercambiable).
  H. Benchmark: patrón secuencial vs conflictivo, barrido de latencia.
"""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Deque, Dict, List, Optional, Sequence, Tuple

# ============================================================================
#  PARÁMETROS GLOBALES (Ajustables)
# ============================================================================

# --- Núcleos / hilos ---
NUM_CORES: int = 2
NUM_THREADS: int = 2
PIPELINE_WIDTH: int = 4  # instrucciones en vuelo por núcleo.

# --- Duración base de etapas (ciclos) ---
FETCH_CYCLES: int = 1
EXECUTE_CYCLES: int = 1
COMMIT_CYCLES: int = 1

# --- Caché L1 privada ---
CACHE_SIZE_BYTES: int = 4096
CACHE_LINE_BYTES: int = 64
CACHE_ASSOCIATIVITY: int = 2
CACHE_HIT_LATENCY: int = 1

# --- Memoria compartida ---
MEMORY_LATENCY_CYCLES: int = 100  # penalidad de miss.

# --- Carga sintética ---
INSTRUCTIONS_PER_THREAD: int = 1000
MEMORY_FRACTION: float = 0.4
WORKING_SET_LINES: int = 0  # 0 = sin reutilización.

# --- Benchmark (secuencial vs conflictivo) ---
BENCH_INSTRUCTIONS_PER_THREAD: int = 2000
BENCH_MEMORY_FRACTION: float = 0.5
BENCH_CACHE_NUM_SETS: int = 32
BENCH_WORKING_SET_LINES: int = 64  # 32 sets × 2 vías: cabe completo en L1.
BENCH_MEMORY_LATENCY: int = 45
BENCH_LATENCY_SWEEP: List[int] = [10, 25, 45, 100, 200]

ADDRESS_BITS: int = 64

Cycle = int


class ConfigurationError(ValueError):
    """Configuración inválida detectada al construir (geometría, núcleos, ancho)."""


# ============================================================================
#  UTILIDADES COMUNES
# ============================================================================

def mask_n_bits(value: int, n: int) -> int:
    """
    Aplica máscara de n bits.

    :param value: Entero a recortar.
    :param n: Número de bits.
    :return: Valor en [0, 2^n - 1].
    """
    if n <= 0:
        return 0
    return value & ((1 << n) - 1)


def _is_power_of_two(x: int) -> bool:
    """Retorna True si x es potencia de 2 (>0)."""
    return x > 0 and (x & (x - 1)) == 0


def _round_half_up(x: float) -> int:
    """Redondeo aritmético (0.5 → 1), no el redondeo bancario de round()."""
    return int(math.floor(x + 0.5))


# ============================================================================
#  # A. Modelo de núcleo — etapas e instrucciones
# ============================================================================

class PipelineStage(Enum):
    """
    Etapas del pipeline en orden estricto.

    Cada instrucción ocupa exactamente una etapa; las transiciones solo
    avanzan (FETCH → EXECUTE → MEMORY → COMMIT), nunca retroceden.
    """

    FETCH = auto()
    EXECUTE = auto()
    MEMORY = auto()
    COMMIT = auto()

    def __str__(self) -> str:
        return self.name.capitalize()


class InstructionKind(Enum):
    """Tipo de instrucción (para el modelo de latencia)."""

    COMPUTE = auto()  # Solo ejecuta; no toca memoria.
    LOAD = auto()     # Puede acertar en L1 o fallar hacia memoria.
    STORE = auto()    # Igual que LOAD para efectos de temporización.


@dataclass
class Instruction:
    """
    Instrucción en vuelo.

    :param kind: Tipo (cómputo, carga, almacenamiento).
    :param address: Dirección lógica (64 bits sin signo) para indexar la caché.
    :param issue_cycle: Posición/ciclo lógico de emisión en su hilo.
    :param stage: Etapa actual.
    :param stage_cycles_left: Ciclos restantes en la etapa (0 = lista para avanzar).
    :param stalled: True mientras espera a memoria tras un miss.
    :param stall_cycles_left: Ciclos de espera restantes.
    """
    kind: InstructionKind
    address: int = 0
    issue_cycle: Cycle = 0
    stage: PipelineStage = PipelineStage.FETCH
    stage_cycles_left: int = 1
    stalled: bool = False
    stall_cycles_left: int = 0

    @classmethod
    def compute(cls, issue_cycle: Cycle) -> "Instruction":
        return cls(kind=InstructionKind.COMPUTE, issue_cycle=issue_cycle)

    @classmethod
    def memory(cls, kind: InstructionKind, address: int, issue_cycle: Cycle) -> "Instruction":
        if kind is InstructionKind.COMPUTE:
            raise ValueError("Una instrucción de memoria debe ser LOAD o STORE.")
        return cls(kind=kind, address=mask_n_bits(address, ADDRESS_BITS), issue_cycle=issue_cycle)

    def is_memory_op(self) -> bool:
        return self.kind in (InstructionKind.LOAD, InstructionKind.STORE)

    def advance_to(self, stage: PipelineStage, cycles: int) -> None:
        """Mueve la instrucción a 'stage' (solo hacia adelante) con 'cycles' de duración."""
        assert stage.value > self.stage.value, (
            f"Transición inválida {self.stage} → {stage}."
        )
        self.stage = stage
        self.stage_cycles_left = cycles


# ============================================================================
#  # B. Caché asociativa por conjuntos (LRU)
# ============================================================================

class CacheAccessResult(Enum):
    """Resultado de un acceso a caché."""

    HIT = auto()
    MISS = auto()


@dataclass
class CacheConfig:
    """
    Geometría y temporización de la L1.

    :param size_bytes: Capacidad total C.
    :param line_size: Tamaño de línea B.
    :param associativity: Vías por conjunto E.
    :param hit_latency_cycles: Ciclos en etapa MEMORY tras un hit.
    """
    size_bytes: int = CACHE_SIZE_BYTES
    line_size: int = CACHE_LINE_BYTES
    associativity: int = CACHE_ASSOCIATIVITY
    hit_latency_cycles: int = CACHE_HIT_LATENCY

    @property
    def num_sets(self) -> int:
        if self.line_size <= 0 or self.associativity <= 0:
            return 0
        return (self.size_bytes // self.line_size) // self.associativity

    def validate(self) -> None:
        """Lanza ConfigurationError si C, B y E no producen S = 2^k > 0 conjuntos."""
        if self.line_size <= 0:
            raise ConfigurationError(f"line_size debe ser positivo (recibido {self.line_size}).")
        if self.associativity <= 0:
            raise ConfigurationError(f"associativity debe ser positiva (recibida {self.associativity}).")
        if self.hit_latency_cycles < 0:
            raise ConfigurationError("hit_latency_cycles no puede ser negativo.")
        sets = self.num_sets
        if not _is_power_of_two(sets):
            raise ConfigurationError(
                f"Geometría inválida: C={self.size_bytes}B, B={self.line_size}B, "
                f"E={self.associativity} → {sets} conjuntos (se requiere potencia de 2 > 0)."
            )


@dataclass
class CacheLine:
    """Línea de caché (válido + tag)."""
    valid: bool = False
    tag: int = 0


class CacheSet:
    """
    Conjunto de E vías.

    'lines' es un arreglo fijo indexado por vía; 'lru_order' guarda una
    permutación de los índices de vía, frente = MRU, fondo = LRU (víctima).
    """

    def __init__(self, associativity: int) -> None:
        self.lines: List[CacheLine] = [CacheLine() for _ in range(associativity)]
        self.lru_order: Deque[int] = deque(range(associativity))

    def lookup(self, tag: int) -> Optional[int]:
        """Devuelve la vía válida con 'tag', o None."""
        for way, line in enumerate(self.lines):
            if line.valid and line.tag == tag:
                return way
        return None

    def touch(self, way: int) -> None:
        """Promueve 'way' a MRU."""
        self.lru_order.remove(way)
        self.lru_order.appendleft(way)

    def victim(self) -> int:
        return self.lru_order[-1]

    def allocate(self, tag: int) -> int:
        """Reemplaza la vía LRU con 'tag' y la marca MRU. Retorna la vía usada."""
        way = self.victim()
        line = self.lines[way]
        line.tag = tag
        line.valid = True
        self.touch(way)
        return way


class Cache:
    """
    Caché L1 privada de un núcleo.

    Descomposición de dirección:
      línea    = addr // B
      conjunto = línea mod S
      tag      = línea // S
    """

    def __init__(self, config: CacheConfig) -> None:
        config.validate()
        self.config: CacheConfig = config
        self.sets: List[CacheSet] = [CacheSet(config.associativity) for _ in range(config.num_sets)]
        self._set_bits: int = config.num_sets.bit_length() - 1

    def _set_and_tag(self, address: int) -> Tuple[int, int]:
        line_addr = mask_n_bits(address, ADDRESS_BITS) // self.config.line_size
        set_index = line_addr & (len(self.sets) - 1)
        tag = line_addr >> self._set_bits
        return set_index, tag

    def set_index_of(self, address: int) -> int:
        return self._set_and_tag(address)[0]

    def tag_of(self, address: int) -> int:
        return self._set_and_tag(address)[1]

    def access(self, address: int) -> CacheAccessResult:
        """
        Acceso (lectura o escritura lógica). En miss se asigna la línea
        desalojando la vía LRU del conjunto.
        """
        set_index, tag = self._set_and_tag(address)
        cset = self.sets[set_index]
        way = cset.lookup(tag)
        if way is not None:
            cset.touch(way)
            return CacheAccessResult.HIT
        cset.allocate(tag)
        return CacheAccessResult.MISS

    def lru_order_of(self, set_index: int) -> List[int]:
        """Copia del orden de recencia (MRU primero) del conjunto."""
        return list(self.sets[set_index].lru_order)

    def hit_latency_cycles(self) -> int:
        return self.config.hit_latency_cycles

    @property
    def num_sets(self) -> int:
        return len(self.sets)

    @property
    def line_size(self) -> int:
        return self.config.line_size

    def report(self) -> Dict[str, float]:
        """Geometría de la caché (para serialización)."""
        return {
            "capacity_bytes": float(self.config.size_bytes),
            "line_bytes": float(self.config.line_size),
            "associativity": float(self.config.associativity),
            "sets": float(self.num_sets),
            "hit_latency_cycles": float(self.config.hit_latency_cycles),
        }


# ============================================================================
#  # C. Memoria compartida — latencia fija
# ============================================================================

@dataclass
class MemoryConfig:
    """Latencia de acceso a memoria (penalidad de miss) en ciclos."""
    access_latency_cycles: int = MEMORY_LATENCY_CYCLES


class Memory:
    """Memoria compartida. Solo modela latencia; no almacena datos."""

    def __init__(self, config: MemoryConfig) -> None:
        if config.access_latency_cycles < 0:
            raise ConfigurationError("access_latency_cycles no puede ser negativo.")
        self.config = config

    def access_latency_cycles(self) -> int:
        return self.config.access_latency_cycles


# ============================================================================
#  # D. Planificación — asignación round-robin hilo → núcleo
# ============================================================================

class Scheduler:
    """
    Asignación estática: el hilo T corre en el núcleo T mod N.
    Se evalúa una sola vez al cargar la carga de trabajo (sin migración).
    """

    def __init__(self, num_cores: int, num_threads: int) -> None:
        if num_cores <= 0:
            raise ConfigurationError(f"num_cores debe ser >= 1 (recibido {num_cores}).")
        if num_threads < 0:
            raise ConfigurationError(f"num_threads no puede ser negativo (recibido {num_threads}).")
        self.num_cores = num_cores
        self.num_threads = num_threads

    def thread_to_core(self, thread_id: int) -> int:
        return thread_id % self.num_cores

    def core_to_thread(self, core_id: int) -> Optional[int]:
        """Hilo base del núcleo K (K mod max(1, hilos)); None si K está fuera de rango."""
        if 0 <= core_id < self.num_cores:
            return core_id % max(1, self.num_threads)
        return None


# ============================================================================
#  # E. Métricas — contadores monótonos
# ============================================================================

@dataclass
class PerCoreMetrics:
    """Desglose por núcleo."""
    memory_accesses: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    memory_stall_cycles: int = 0


@dataclass
class Metrics:
    """
    Contadores globales y por núcleo. Solo crecen; el motor escribe,
    la capa de reporte lee.
    """
    total_cycles: int = 0
    total_memory_accesses: int = 0
    cache_hits: int = 0
    cache_misses: int = 0
    memory_stall_cycles: int = 0
    per_core: Dict[int, PerCoreMetrics] = field(default_factory=dict)

    def _core(self, core_id: int) -> PerCoreMetrics:
        return self.per_core.setdefault(core_id, PerCoreMetrics())

    def record_access(self, core_id: int, hit: bool, stall_cycles: int) -> None:
        self.total_memory_accesses += 1
        per = self._core(core_id)
        per.memory_accesses += 1
        if hit:
            self.cache_hits += 1
            per.cache_hits += 1
        else:
            self.cache_misses += 1
            per.cache_misses += 1
        self.memory_stall_cycles += stall_cycles
        per.memory_stall_cycles += stall_cycles

    def record_stall_cycle(self, core_id: int) -> None:
        self.memory_stall_cycles += 1
        self._core(core_id).memory_stall_cycles += 1

    def hit_rate(self) -> float:
        total = self.cache_hits + self.cache_misses
        if total == 0:
            return 1.0
        return self.cache_hits / total

    def miss_rate(self) -> float:
        total = self.cache_hits + self.cache_misses
        if total == 0:
            return 0.0
        return self.cache_misses / total

    def slowdown_vs_ideal(self, ideal_cycles: int) -> float:
        """(real - ideal) / ideal; 0 si ideal es 0 o si real <= ideal."""
        if ideal_cycles <= 0:
            return 0.0
        actual = self.total_cycles
        if actual <= ideal_cycles:
            return 0.0
        return (actual - ideal_cycles) / ideal_cycles

    def slowdown_percent(self, ideal_cycles: int) -> float:
        return self.slowdown_vs_ideal(ideal_cycles) * 100.0

    def as_dict(self) -> Dict[str, object]:
        """Instantánea serializable."""
        return {
            "total_cycles": self.total_cycles,
            "total_memory_accesses": self.total_memory_accesses,
            "cache_hits": self.cache_hits,
            "cache_misses": self.cache_misses,
            "memory_stall_cycles": self.memory_stall_cycles,
            "hit_rate": self.hit_rate(),
            "miss_rate": self.miss_rate(),
            "per_core": {
                str(core_id): {
                    "memory_accesses": per.memory_accesses,
                    "cache_hits": per.cache_hits,
                    "cache_misses": per.cache_misses,
                    "memory_stall_cycles": per.memory_stall_cycles,
                }
                for core_id, per in sorted(self.per_core.items())
            },
        }


# ============================================================================
#  # F. Motor de ejecución — avance ciclo a ciclo
# ============================================================================

@dataclass
class StageCycles:
    """Duración base (ciclos) de FETCH, EXECUTE y COMMIT."""
    fetch_cycles: int = FETCH_CYCLES
    execute_cycles: int = EXECUTE_CYCLES
    commit_cycles: int = COMMIT_CYCLES


class CoreState:
    """
    Estado privado de un núcleo: L1, pipeline en vuelo (<= ancho) y cola
    FIFO de instrucciones pendientes.
    """

    def __init__(self, core_id: int, cache: Cache, pipeline_width: int) -> None:
        self.core_id: int = core_id
        self.cache: Cache = cache
        self.pipeline: List[Instruction] = []
        self.workload: Deque[Instruction] = deque()
        self.pipeline_width: int = pipeline_width
        self.retired_instrs: int = 0

    def is_idle(self) -> bool:
        return not self.workload and not self.pipeline


class Simulator:
    """
    Simulador multinúcleo por pasos discretos.

    Cada step() procesa, para todos los núcleos y en este orden fijo:
      Commit → Memory → Execute → Fetch → Admisión
    y luego avanza el reloj global en 1. El orden es parte del protocolo:
    cada subetapa ve los cambios de las anteriores del mismo ciclo.
    """

    def __init__(self,
                 num_cores: int,
                 num_threads: int,
                 cache_config: CacheConfig,
                 memory_config: MemoryConfig,
                 pipeline_width: int,
                 stage_cycles: Optional[StageCycles] = None) -> None:
        """
        Construye el motor. Cualquier error de configuración se lanza aquí,
        antes de exponer estado alguno.

        1. Planificador (falla si num_cores == 0).
        2. Geometría de caché (S potencia de 2) y ancho de pipeline (>= 1).
        3. Una L1 independiente por núcleo.
        4. Métricas vacías y reloj en 0.
        """
        # 1. Planificador
        self.scheduler: Scheduler = Scheduler(num_cores, num_threads)

        # 2. Validaciones
        cache_config.validate()
        if pipeline_width < 1:
            raise ConfigurationError(f"pipeline_width debe ser >= 1 (recibido {pipeline_width}).")
        self.stage_cycles: StageCycles = stage_cycles or StageCycles()
        for name in ("fetch_cycles", "execute_cycles", "commit_cycles"):
            if getattr(self.stage_cycles, name) < 0:
                raise ConfigurationError(f"{name} no puede ser negativo.")

        # 3. Núcleos
        self.num_cores: int = num_cores
        self.num_threads: int = num_threads
        self.pipeline_width: int = pipeline_width
        self.memory: Memory = Memory(memory_config)
        self.cores: List[CoreState] = [
            CoreState(core_id, Cache(replace(cache_config)), pipeline_width)
            for core_id in range(num_cores)
        ]

        # 4. Métricas / reloj
        self.metrics: Metrics = Metrics()
        self.current_cycle: Cycle = 0

    # ------------------------------ carga -----------------------------------

    def load_workload(self, thread_workloads: Sequence[Sequence[Instruction]]) -> None:
        """
        thread_workloads[t] = instrucciones del hilo t, en orden de programa.
        Cada flujo se encola en su núcleo según thread_to_core(t). El núcleo
        guarda su propia copia de cada instrucción; las del llamador no cambian.
        """
        for thread_id, instrs in enumerate(thread_workloads):
            core = self.cores[self.scheduler.thread_to_core(thread_id)]
            core.workload.extend(replace(instr) for instr in instrs)

    # ------------------------------ subetapas -------------------------------

    def step(self) -> None:
        """Un ciclo: Commit → Memory → Execute → Fetch → Admisión, en cada núcleo."""
        metrics = self.metrics

        for core in self.cores:
            self._stage_commit(core)
        for core in self.cores:
            self._stage_memory(core, metrics)
        for core in self.cores:
            self._stage_execute(core, metrics)
        for core in self.cores:
            self._stage_fetch(core)
        for core in self.cores:
            self._stage_admit(core)

        self.current_cycle += 1
        metrics.total_cycles = self.current_cycle

    def _stage_commit(self, core: CoreState) -> None:
        """Commit: retira las que llegan con 0 ciclos; el resto descuenta uno."""
        kept: List[Instruction] = []
        for instr in core.pipeline:
            if instr.stage is PipelineStage.COMMIT:
                if instr.stage_cycles_left == 0:
                    core.retired_instrs += 1
                    continue
                instr.stage_cycles_left -= 1
            kept.append(instr)
        core.pipeline = kept

    def _stage_memory(self, core: CoreState, metrics: Metrics) -> None:
        """Memory: consume stalls de miss o avanza a Commit."""
        hit_latency = core.cache.hit_latency_cycles()
        for instr in core.pipeline:
            if instr.stage is not PipelineStage.MEMORY:
                continue
            if instr.stalled:
                if instr.stall_cycles_left > 0:
                    instr.stall_cycles_left -= 1
                    metrics.record_stall_cycle(core.core_id)
                if instr.stall_cycles_left == 0:
                    instr.stalled = False
                    instr.stage_cycles_left = hit_latency
                continue
            if instr.stage_cycles_left > 0:
                instr.stage_cycles_left -= 1
                continue
            instr.advance_to(PipelineStage.COMMIT, self.stage_cycles.commit_cycles)

    def _stage_execute(self, core: CoreState, metrics: Metrics) -> None:
        """Execute: al terminar, las de memoria acceden a la L1 una sola vez."""
        miss_latency = self.memory.access_latency_cycles()
        for instr in core.pipeline:
            if instr.stage is not PipelineStage.EXECUTE:
                continue
            if instr.stage_cycles_left > 0:
                instr.stage_cycles_left -= 1
                continue
            if not instr.is_memory_op():
                instr.advance_to(PipelineStage.COMMIT, self.stage_cycles.commit_cycles)
                continue

            hit = core.cache.access(instr.address) is CacheAccessResult.HIT
            metrics.record_access(core.core_id, hit, 0 if hit else miss_latency)
            if hit:
                instr.advance_to(PipelineStage.MEMORY, core.cache.hit_latency_cycles())
            else:
                instr.advance_to(PipelineStage.MEMORY, 0)
                instr.stalled = True
                instr.stall_cycles_left = miss_latency

    def _stage_fetch(self, core: CoreState) -> None:
        """Fetch: pasa a Execute al agotar sus ciclos."""
        for instr in core.pipeline:
            if instr.stage is not PipelineStage.FETCH:
                continue
            if instr.stage_cycles_left > 0:
                instr.stage_cycles_left -= 1
                continue
            instr.advance_to(PipelineStage.EXECUTE, self.stage_cycles.execute_cycles)

    def _stage_admit(self, core: CoreState) -> None:
        """Admisión: rellena el pipeline desde la cola FIFO hasta el ancho configurado."""
        while len(core.pipeline) < core.pipeline_width and core.workload:
            instr = core.workload.popleft()
            instr.stage = PipelineStage.FETCH
            instr.stage_cycles_left = self.stage_cycles.fetch_cycles
            instr.stalled = False
            instr.stall_cycles_left = 0
            core.pipeline.append(instr)
        assert len(core.pipeline) <= core.pipeline_width, (
            f"Núcleo {core.core_id}: pipeline excede el ancho ({len(core.pipeline)} > {core.pipeline_width})."
        )

    # ------------------------------ ejecución -------------------------------

    def is_idle(self) -> bool:
        return all(core.is_idle() for core in self.cores)

    def run_to_completion(self) -> Cycle:
        """
        Avanza hasta que todas las colas y pipelines queden vacíos.

        :return: Ciclo final (== metrics.total_cycles).
        """
        while not self.is_idle():
            self.step()
        return self.current_cycle

    # ------------------------------ consultas -------------------------------

    def pending_count(self, core_id: int) -> int:
        return len(self.cores[core_id].workload)

    def in_flight_count(self, core_id: int) -> int:
        return len(self.cores[core_id].pipeline)

    def cache_of(self, core_id: int) -> Cache:
        return self.cores[core_id].cache

    def retired_count(self) -> int:
        return sum(core.retired_instrs for core in self.cores)


# ============================================================================
#  # G. Carga sintética — patrones secuencial y conflictivo
# ============================================================================

class AccessPattern(Enum):
    """Patrón de direcciones de las instrucciones de memoria."""

    SEQUENTIAL = "sequential"          # 0, B, 2B, ... (alta localidad)
    CONFLICT_HEAVY = "conflict_heavy"  # todas al mismo conjunto → desalojos


@dataclass
class WorkloadConfig:
    """
    :param instructions_per_thread: Instrucciones por hilo.
    :param memory_fraction: Fracción de instrucciones de memoria (0..1).
    :param access_pattern: Patrón de direcciones.
    :param line_size: Tamaño de línea (paso secuencial y conflictivo).
    :param cache_num_sets: S de la caché (paso conflictivo = S × B).
    :param working_set_lines: Secuencial: líneas distintas antes de reutilizar (0 = sin tope).
    """
    instructions_per_thread: int = INSTRUCTIONS_PER_THREAD
    memory_fraction: float = MEMORY_FRACTION
    access_pattern: AccessPattern = AccessPattern.SEQUENTIAL
    line_size: int = CACHE_LINE_BYTES
    cache_num_sets: int = CACHE_SIZE_BYTES // CACHE_LINE_BYTES
    working_set_lines: int = WORKING_SET_LINES


class WorkloadGenerator:
    """
    Genera el flujo de un hilo.

    La mezcla memoria/cómputo es un patrón por módulo 100: la instrucción i
    es de memoria si i mod 100 < round(fracción × 100). No hay fuente
    aleatoria; el resultado es determinista.
    """

    def __init__(self, config: WorkloadConfig) -> None:
        self.config = config
        self.index = 0

    def next_instruction(self, issue_cycle: Cycle) -> Optional[Instruction]:
        cfg = self.config
        if self.index >= cfg.instructions_per_thread:
            return None
        frac = min(_round_half_up(cfg.memory_fraction * 100.0), 100)
        use_memory = (self.index % 100) < frac or cfg.memory_fraction >= 1.0
        self.index += 1

        if not use_memory:
            return Instruction.compute(issue_cycle)
        kind = InstructionKind.LOAD if self.index % 2 == 0 else InstructionKind.STORE
        return Instruction.memory(kind, self._next_address(), issue_cycle)

    def _next_address(self) -> int:
        cfg = self.config
        idx = self.index - 1
        if cfg.access_pattern is AccessPattern.SEQUENTIAL:
            line_idx = idx % cfg.working_set_lines if cfg.working_set_lines > 0 else idx
            return mask_n_bits(line_idx * cfg.line_size, ADDRESS_BITS)
        # Conflictivo: línea = idx × S → conjunto 0 siempre.
        return mask_n_bits(idx * cfg.cache_num_sets * cfg.line_size, ADDRESS_BITS)

    def remaining(self) -> int:
        return max(0, self.config.instructions_per_thread - self.index)


def build_workload(num_threads: int, config: WorkloadConfig) -> List[List[Instruction]]:
    """Un flujo por hilo; el ciclo de emisión es la posición dentro del flujo."""
    workloads: List[List[Instruction]] = []
    for _ in range(num_threads):
        gen = WorkloadGenerator(config)
        stream: List[Instruction] = []
        cycle = 0
        instr = gen.next_instruction(cycle)
        while instr is not None:
            stream.append(instr)
            cycle += 1
            instr = gen.next_instruction(cycle)
        workloads.append(stream)
    return workloads


# ============================================================================
#  # H. Benchmark — secuencial vs conflictivo y barrido de latencia
# ============================================================================

def run_benchmark(num_cores: int,
                  num_threads: int,
                  instructions_per_thread: int,
                  memory_fraction: float,
                  access_pattern: AccessPattern,
                  cache_num_sets: int,
                  working_set_lines: int,
                  memory_latency_cycles: int,
                  pipeline_width: int = PIPELINE_WIDTH) -> Dict[str, object]:
    """
    Corre una carga hasta completar sobre L1 de 2 vías y líneas de 64 B
    (C = S × 64 × 2) y retorna métricas listas para serializar.
    """
    line_size = 64
    associativity = 2
    cache_config = CacheConfig(size_bytes=cache_num_sets * line_size * associativity,
                               line_size=line_size,
                               associativity=associativity,
                               hit_latency_cycles=CACHE_HIT_LATENCY)
    sim = Simulator(num_cores, num_threads, cache_config,
                    MemoryConfig(access_latency_cycles=memory_latency_cycles),
                    pipeline_width)
    workload = build_workload(num_threads, WorkloadConfig(
        instructions_per_thread=instructions_per_thread,
        memory_fraction=memory_fraction,
        access_pattern=access_pattern,
        line_size=line_size,
        cache_num_sets=cache_num_sets,
        working_set_lines=working_set_lines,
    ))
    sim.load_workload(workload)
    sim.run_to_completion()

    m = sim.metrics
    report: Dict[str, object] = {
        "pattern": access_pattern.value,
        "cycles": m.total_cycles,
        "retired": sim.retired_count(),
        "accesses": m.total_memory_accesses,
        "hits": m.cache_hits,
        "misses": m.cache_misses,
        "hit_rate": m.hit_rate(),
        "miss_rate": m.miss_rate(),
        "stall_cycles": m.memory_stall_cycles,
        "memory_latency": memory_latency_cycles,
        "per_core": m.as_dict()["per_core"],
    }
    report.update(sim.cache_of(0).report())
    return report


def compare_access_patterns(num_cores: int = NUM_CORES,
                            num_threads: int = NUM_THREADS,
                            instructions_per_thread: int = BENCH_INSTRUCTIONS_PER_THREAD,
                            memory_fraction: float = BENCH_MEMORY_FRACTION,
                            cache_num_sets: int = BENCH_CACHE_NUM_SETS,
                            working_set_lines: int = BENCH_WORKING_SET_LINES,
                            memory_latency_cycles: int = BENCH_MEMORY_LATENCY) -> Dict[str, object]:
    """
    Base (secuencial, working set cabe en L1) vs adversa (todas las
    direcciones en un conjunto). Reporta la desaceleración porcentual.
    """
    baseline = run_benchmark(num_cores, num_threads, instructions_per_thread, memory_fraction,
                             AccessPattern.SEQUENTIAL, cache_num_sets, working_set_lines,
                             memory_latency_cycles)
    adverse = run_benchmark(num_cores, num_threads, instructions_per_thread, memory_fraction,
                            AccessPattern.CONFLICT_HEAVY, cache_num_sets, 0,
                            memory_latency_cycles)

    ref = Metrics(total_cycles=int(adverse["cycles"]))
    return {
        "baseline": baseline,
        "adverse": adverse,
        "slowdown_percent": ref.slowdown_percent(int(baseline["cycles"])),
    }


def sweep_memory_latency(latencies: List[int],
                         num_cores: int = NUM_CORES,
                         num_threads: int = NUM_THREADS,
                         instructions_per_thread: int = BENCH_INSTRUCTIONS_PER_THREAD,
                         memory_fraction: float = BENCH_MEMORY_FRACTION,
                         cache_num_sets: int = BENCH_CACHE_NUM_SETS,
                         working_set_lines: int = BENCH_WORKING_SET_LINES) -> List[Dict[str, float]]:
    """
    Repite la comparación para cada latencia de memoria.
    Latencias negativas se omiten.
    """
    rows: List[Dict[str, float]] = []
    for latency in latencies:
        if latency < 0:
            continue
        cmp = compare_access_patterns(num_cores, num_threads, instructions_per_thread,
                                      memory_fraction, cache_num_sets, working_set_lines,
                                      latency)
        base, adv = cmp["baseline"], cmp["adverse"]
        rows.append({
            "memory_latency": float(latency),
            "baseline_cycles": float(base["cycles"]),
            "adverse_cycles": float(adv["cycles"]),
            "baseline_hit_rate": float(base["hit_rate"]),
            "adverse_hit_rate": float(adv["hit_rate"]),
            "slowdown_percent": float(cmp["slowdown_percent"]),
        })
    return rows


def collect_all_results() -> Dict[str, object]:
    """
    Reúne parámetros y comparación base/adversa.
    No imprime ni guarda; retorna estructura para serialización externa.
    """
    return {
        "params": {
            "NUM_CORES": NUM_CORES,
            "NUM_THREADS": NUM_THREADS,
            "PIPELINE_WIDTH": PIPELINE_WIDTH,
            "INSTRUCTIONS_PER_THREAD": BENCH_INSTRUCTIONS_PER_THREAD,
            "MEMORY_FRACTION": BENCH_MEMORY_FRACTION,
            "CACHE_NUM_SETS": BENCH_CACHE_NUM_SETS,
            "WORKING_SET_LINES": BENCH_WORKING_SET_LINES,
            "MEMORY_LATENCY": BENCH_MEMORY_LATENCY,
        },
        "comparison": compare_access_patterns(NUM_CORES, NUM_THREADS,
                                              BENCH_INSTRUCTIONS_PER_THREAD, BENCH_MEMORY_FRACTION,
                                              BENCH_CACHE_NUM_SETS, BENCH_WORKING_SET_LINES,
                                              BENCH_MEMORY_LATENCY),
    }


def format_report(results: Dict[str, object]) -> List[str]:
    """Líneas legibles de una comparación base/adversa."""
    cmp = results.get("comparison") or {}
    lines: List[str] = ["# ============ Simulador multinúcleo — Benchmark ============", ""]
    titles = (("baseline", "Base (patrón secuencial)"), ("adverse", "Adversa (patrón conflictivo)"))
    for key, title in titles:
        rep = cmp.get(key) or {}
        lines.append(f"--- {title} ---")
        lines.append(f"  Ciclos totales      : {rep.get('cycles')}")
        lines.append(f"  Hit rate            : {float(rep.get('hit_rate', 0.0)) * 100:.2f}%")
        lines.append(f"  Miss rate           : {float(rep.get('miss_rate', 0.0)) * 100:.2f}%")
        lines.append(f"  Ciclos de stall     : {rep.get('stall_cycles')}")
        lines.append("")
    lines.append("--- Desaceleración por conflictos de caché ---")
    lines.append(f"  Slowdown            : {float(cmp.get('slowdown_percent', 0.0)):.2f}%")
    return lines


# ============================================================================
#  Punto de entrada (CLI)
# ============================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """
    CLI de referencia: corre la comparación secuencial vs conflictiva con
    parámetros ajustables y opcionalmente guarda JSON.
    """
    import argparse
    import json
    from pathlib import Path

    parser = argparse.ArgumentParser(
        prog="mcsim.py",
        description="Simulador multinúcleo: ciclos, hit/miss de L1 y desaceleración por conflictos."
    )
    parser.add_argument("--cores", type=int, default=NUM_CORES,
                        help=f"Número de núcleos (por defecto: {NUM_CORES}).")
    parser.add_argument("--threads", type=int, default=NUM_THREADS,
                        help=f"Número de hilos (por defecto: {NUM_THREADS}).")
    parser.add_argument("--instructions", type=int, default=BENCH_INSTRUCTIONS_PER_THREAD,
                        help=f"Instrucciones por hilo (por defecto: {BENCH_INSTRUCTIONS_PER_THREAD}).")
    parser.add_argument("--memory-fraction", type=float, default=BENCH_MEMORY_FRACTION,
                        help=f"Fracción de instrucciones de memoria (por defecto: {BENCH_MEMORY_FRACTION}).")
    parser.add_argument("--sets", type=int, default=BENCH_CACHE_NUM_SETS,
                        help=f"Conjuntos de la L1, potencia de 2 (por defecto: {BENCH_CACHE_NUM_SETS}).")
    parser.add_argument("--working-set", type=int, default=BENCH_WORKING_SET_LINES,
                        help=f"Líneas del working set secuencial (por defecto: {BENCH_WORKING_SET_LINES}).")
    parser.add_argument("--latency", type=int, default=BENCH_MEMORY_LATENCY,
                        help=f"Latencia de memoria en ciclos (por defecto: {BENCH_MEMORY_LATENCY}).")
    parser.add_argument("--sweep", action="store_true",
                        help="Agrega barrido de latencia de memoria al resultado.")
    parser.add_argument("--out-json", type=Path, default=None,
                        help="Ruta para guardar un JSON con resultados (opcional).")
    parser.add_argument("--quiet", action="store_true",
                        help="No imprime resultados; solo guarda JSON si se indica.")

    args = parser.parse_args(argv)

    try:
        comparison = compare_access_patterns(args.cores, args.threads, args.instructions,
                                             args.memory_fraction, args.sets, args.working_set,
                                             args.latency)
    except ConfigurationError as exc:
        parser.error(str(exc))

    result: Dict[str, object] = {
        "params": {
            "NUM_CORES": args.cores,
            "NUM_THREADS": args.threads,
            "PIPELINE_WIDTH": PIPELINE_WIDTH,
            "INSTRUCTIONS_PER_THREAD": args.instructions,
            "MEMORY_FRACTION": args.memory_fraction,
            "CACHE_NUM_SETS": args.sets,
            "WORKING_SET_LINES": args.working_set,
            "MEMORY_LATENCY": args.latency,
        },
        "comparison": comparison,
    }
    if args.sweep:
        result["latency_sweep"] = sweep_memory_latency(BENCH_LATENCY_SWEEP, args.cores, args.threads,
                                                       args.instructions, args.memory_fraction,
                                                       args.sets, args.working_set)

    if not args.quiet:
        for line in format_report(result):
            print(line)
        for row in result.get("latency_sweep", []):
            print(f"[latency={int(row['memory_latency'])}] "
                  f"base={int(row['baseline_cycles'])}  adversa={int(row['adverse_cycles'])}  "
                  f"slowdown={row['slowdown_percent']:.2f}%")

    if args.out_json is not None:
        args.out_json.parent.mkdir(parents=True, exist_ok=True)
        with args.out_json.open("w", encoding="utf-8") as f:
            json.dump(result, f, ensure_ascii=False, indent=2)
        if not args.quiet:
            print(f"[OK] JSON: {args.out_json}")


if __name__ == "__main__":
    main()
