"""Liveness analysis and tree reduction for sassreduce.

Provides:
- Reducer: single-pass override-driven tree reduction
- LivenessState: selector stack, extend/mixin registries, loop scope
- walk / find_all: read-only traversal helpers
"""

from sassreduce.analysis.liveness import LivenessState
from sassreduce.analysis.reducer import Reducer, ReduceStats, reduce_stylesheet
from sassreduce.analysis.visitor import find_all, walk

__all__ = [
    "LivenessState",
    "ReduceStats",
    "Reducer",
    "find_all",
    "reduce_stylesheet",
    "walk",
]
