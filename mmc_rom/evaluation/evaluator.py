"""Composite evaluator.

Applies a preset's law table to a pair of constituents. The table maps
each output property to the chain to run for every law the preset
supports; a (property, law) pair with no entry evaluates to NaN.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Mapping

import numpy as np

from mmc_rom.config.enums import MixtureLaw
from mmc_rom.evaluation.chains import Chain, EvaluationContext
from mmc_rom.evaluation.result import CompositeResult
from mmc_rom.materials.descriptor import PropertyId, PropertyInput, PropertyValue

logger = logging.getLogger(__name__)

LawTable = Mapping[PropertyId, Mapping[MixtureLaw, Chain]]


def _law_name(law) -> str:
    return law.value if isinstance(law, MixtureLaw) else str(law)


class CompositeEvaluator:
    """Stateless evaluator over an explicit (property, law) -> chain table.

    The evaluator holds only the table. Every call builds its own
    EvaluationContext, so evaluators can be shared across threads and
    sweep workers.
    """

    def __init__(self, law_table: LawTable, name: str = ""):
        """Initialize evaluator.

        Args:
            law_table: Output property -> {law -> chain}. Iteration order
                is the output order.
            name: Preset name recorded on results
        """
        self.name = name
        self._table: Dict[PropertyId, Dict[MixtureLaw, Chain]] = {
            prop: dict(chains) for prop, chains in law_table.items()
        }

    @property
    def outputs(self) -> List[PropertyId]:
        return list(self._table)

    def chain_for(self, prop: PropertyId, law) -> Chain | None:
        """Look up the chain for a property and law selection.

        Returns:
            The chain, or None for an unknown law or a law the
            property has no chain for

        Raises:
            KeyError: If the property is not an output of this evaluator
        """
        prop = PropertyId.parse(prop)
        if prop not in self._table:
            raise KeyError(f"'{prop.display_name}' is not computed by {self.name or 'this model'}")
        parsed = MixtureLaw.parse(law)
        if parsed is None:
            return None
        return self._table[prop].get(parsed)

    def properties_using(self, law_fn, law) -> List[PropertyId]:
        """Outputs whose chain for ``law`` applies the mixture law ``law_fn``."""
        return [
            prop for prop in self._table
            if law_fn in getattr(self.chain_for(prop, law), "laws", ())
        ]

    def evaluate_property(
        self,
        prop,
        matrix: PropertyInput,
        reinforcement: PropertyInput,
        config,
    ) -> float:
        """Compute one output property.

        Args:
            prop: Output property identifier
            matrix: Matrix constituent
            reinforcement: Reinforcement constituent
            config: Object with law, percentage and aspect_ratio
                (normally a ModelConfiguration)

        Returns:
            The property value. NaN for an unknown law selection; inf/NaN
            for degenerate inputs.
        """
        ctx = EvaluationContext(
            matrix=matrix,
            reinforcement=reinforcement,
            percentage=config.percentage,
            aspect_ratio=config.aspect_ratio,
        )
        return self._run(PropertyId.parse(prop), config.law, ctx)

    def evaluate(
        self,
        matrix: PropertyInput,
        reinforcement: PropertyInput,
        config,
    ) -> CompositeResult:
        """Compute every output property.

        Returns:
            CompositeResult in output order
        """
        ctx = EvaluationContext(
            matrix=matrix,
            reinforcement=reinforcement,
            percentage=config.percentage,
            aspect_ratio=config.aspect_ratio,
        )
        values = {}
        for prop in self._table:
            value = float(self._run(prop, config.law, ctx))
            values[prop] = PropertyValue(value, prop.unit)

        result = CompositeResult(
            preset=self.name,
            law=_law_name(config.law),
            percentage=config.percentage,
            aspect_ratio=config.aspect_ratio,
            matrix_name=matrix.name,
            reinforcement_name=reinforcement.name,
            values=values,
        )

        degenerate = result.non_finite()
        if degenerate:
            logger.debug(
                f"{self.name}: non-finite results for "
                f"{', '.join(p.display_name for p in degenerate)}"
            )
        return result

    def evaluate_arrays(
        self,
        matrix: PropertyInput,
        reinforcement: PropertyInput,
        law,
        percentage,
        aspect_ratio,
    ) -> Dict[PropertyId, np.ndarray]:
        """Vectorized evaluation over arrays of percentage and aspect ratio.

        percentage and aspect_ratio broadcast against each other; every
        output array has the broadcast shape.
        """
        percentage = np.asarray(percentage, dtype=np.float64)
        aspect_ratio = np.asarray(aspect_ratio, dtype=np.float64)
        shape = np.broadcast(percentage, aspect_ratio).shape

        ctx = EvaluationContext(
            matrix=matrix,
            reinforcement=reinforcement,
            percentage=percentage,
            aspect_ratio=aspect_ratio,
        )
        return {
            prop: np.broadcast_to(
                np.asarray(self._run(prop, law, ctx), dtype=np.float64), shape
            ).copy()
            for prop in self._table
        }

    def _run(self, prop: PropertyId, law, ctx: EvaluationContext):
        chain = self.chain_for(prop, law)
        if chain is None:
            logger.debug(
                f"{self.name}: no chain for '{prop.display_name}' under law "
                f"{_law_name(law)!r}, returning NaN"
            )
            return math.nan
        return chain(ctx)


@dataclass(frozen=True)
class OutputProperty:
    """One exposed output of a preset with its pure evaluation entry point."""

    prop: PropertyId
    evaluator: CompositeEvaluator

    @property
    def display_name(self) -> str:
        return self.prop.display_name

    @property
    def unit(self) -> str:
        return self.prop.unit

    def evaluate(self, matrix: PropertyInput, reinforcement: PropertyInput, config) -> float:
        return float(self.evaluator.evaluate_property(self.prop, matrix, reinforcement, config))
