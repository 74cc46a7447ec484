"""Composite evaluation.

Module structure:
    chains: EvaluationContext and per-property law chains
    evaluator: CompositeEvaluator over an explicit (property, law) table
    result: CompositeResult

Presets that assemble chains into tables live in mmc_rom.catalog.
"""

from mmc_rom.evaluation import chains
from mmc_rom.evaluation.chains import Chain, EvaluationContext
from mmc_rom.evaluation.evaluator import CompositeEvaluator, LawTable, OutputProperty
from mmc_rom.evaluation.result import CompositeResult

__all__ = [
    "chains",
    "Chain",
    "EvaluationContext",
    "CompositeEvaluator",
    "LawTable",
    "OutputProperty",
    "CompositeResult",
]
