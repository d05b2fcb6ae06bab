"""Spiral component -- the host-facing solve boundary.

Input:  ``Steps`` (int, default from config).
Output: ``Rectangles`` (closed polylines), ``Arcs`` (quarter circles) and
``Spiral`` (joined curve), or nothing when the input is rejected.

The two recognised input conditions never escape as exceptions here.
They are reported as runtime messages, the way a hosting environment
surfaces them next to the component:

    steps < 1    -> ERROR   "Steps must be at least 1"   (no outputs)
    steps > max  -> WARNING "Steps clamped to <max>"     (outputs built)
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from enum import Enum

from fib_spiral.configs.loader import SpiralConfig, load_config
from fib_spiral.construction.assembler import (
    InvalidStepCountError,
    SpiralGeometry,
    StepCountClampedWarning,
    assemble_spiral,
    resolve_step_count,
)
from fib_spiral.geometry.curves import Arc, PolyCurve, Polyline

logger = logging.getLogger(__name__)


class RuntimeMessageLevel(str, Enum):
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class RuntimeMessage:
    level: RuntimeMessageLevel
    text: str

    def __str__(self) -> str:
        return f"{self.level.value.upper()}: {self.text}"


@dataclass
class SolveResult:
    """Outputs of one :meth:`SpiralComponent.solve` call.

    ``rectangles``, ``arcs`` and ``spiral`` are ``None`` when an error
    message was reported.
    """

    steps_requested: int
    steps_used: int | None = None
    geometry: SpiralGeometry | None = None
    messages: list[RuntimeMessage] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not any(m.level is RuntimeMessageLevel.ERROR for m in self.messages)

    @property
    def warnings(self) -> list[RuntimeMessage]:
        return [m for m in self.messages if m.level is RuntimeMessageLevel.WARNING]

    @property
    def errors(self) -> list[RuntimeMessage]:
        return [m for m in self.messages if m.level is RuntimeMessageLevel.ERROR]

    @property
    def rectangles(self) -> tuple[Polyline, ...] | None:
        return self.geometry.squares if self.geometry is not None else None

    @property
    def arcs(self) -> tuple[Arc, ...] | None:
        return self.geometry.arcs if self.geometry is not None else None

    @property
    def spiral(self) -> PolyCurve | None:
        return self.geometry.spiral if self.geometry is not None else None


class SpiralComponent:
    """Validate ``Steps``, build the spiral, report runtime messages.

    Parameters
    ----------
    config : SpiralConfig | None
        Validated configuration.  ``None`` loads the shipped default.
    """

    def __init__(self, config: SpiralConfig | None = None) -> None:
        self._cfg = config if config is not None else load_config()

    @property
    def config(self) -> SpiralConfig:
        return self._cfg

    def solve(self, steps: int | None = None) -> SolveResult:
        """Run one invocation.

        Parameters
        ----------
        steps : int | None
            Requested step count.  ``None`` uses ``steps.default``.

        Returns
        -------
        SolveResult
        """
        requested = self._cfg.steps.default if steps is None else int(steps)
        result = SolveResult(steps_requested=requested)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", StepCountClampedWarning)
            try:
                used = resolve_step_count(requested, self._cfg.steps.max)
            except InvalidStepCountError as exc:
                logger.error("Rejected step count %d: %s", requested, exc)
                result.messages.append(
                    RuntimeMessage(RuntimeMessageLevel.ERROR, str(exc))
                )
                return result

        for w in caught:
            if issubclass(w.category, StepCountClampedWarning):
                result.messages.append(
                    RuntimeMessage(RuntimeMessageLevel.WARNING, str(w.message))
                )
            else:
                warnings.warn_explicit(
                    w.message, w.category, w.filename, w.lineno
                )

        result.steps_used = used
        result.geometry = assemble_spiral(used)
        return result
