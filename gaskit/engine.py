"""Simulation driver: owns the atom list, steps it and reports energy statistics."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Optional

import numpy as np

from gaskit.atoms import AtomList, Mode
from gaskit.logs import HtmlLog

REPORT_PERIOD = 100


class EngineError(Exception):
    """Raised when the simulation cannot be set up."""


@dataclass(frozen=True)
class EnergyReport:
    """Mean energy of the gas in the box against that of atoms leaving through the hole."""

    avg_energy: float
    avg_out_energy: float

    @property
    def coefficient(self) -> float:
        return _divide(self.avg_out_energy, self.avg_energy)


def _divide(numerator: float, denominator: float) -> float:
    with np.errstate(all="ignore"):
        return float(np.float32(numerator) / np.float32(denominator))


class Engine:
    """Steps a gas of atoms in a box and periodically reports escape energies."""

    def __init__(
        self,
        n_atoms: int,
        log: Optional[HtmlLog] = None,
        stats_file: Optional[IO[str]] = None,
        out: Optional[IO[str]] = None,
        seed=None,
    ) -> None:
        self._log = log if log is not None else HtmlLog(None)
        self._log.func_start("Engine.__init__")
        try:
            self.atoms = AtomList(n_atoms, 1, self._log)
        except ValueError as exc:
            self._log.error(f"Ctor error: {exc}\n")
            raise EngineError(str(exc)) from exc
        self.atoms.set_random_positions(seed)
        self._stats_file = stats_file
        self._out = out
        self._ticks = 0
        self._log.func_end("Engine.__init__")

    def positions(self) -> np.ndarray:
        """The live array of atom coordinates, one row per atom."""
        return self.atoms.positions

    def set_mode(self, mode: Mode) -> None:
        self.atoms.mode = mode

    def compute(self, delta_time: float, hole_radius: float) -> Optional[EnergyReport]:
        """Advance one step; every 100 steps return (and print) an energy report."""
        self._log.func_start("Engine.compute")
        atoms = self.atoms
        atoms.hole_radius = hole_radius

        atoms.handle_interactions()
        atoms.update_positions(delta_time)

        report = None
        if self._ticks == REPORT_PERIOD:
            report = EnergyReport(
                avg_energy=atoms.avg_speed_squared(),
                avg_out_energy=_divide(atoms.total_hole_energy, atoms.n_hole_hits),
            )
            self._emit_report(report)
            atoms.n_hole_hits = 0
            atoms.total_hole_energy = 0.0
            self._ticks = 0

        self._ticks += 1
        self._log.func_end("Engine.compute")
        return report

    def _emit_report(self, report: EnergyReport) -> None:
        out = self._out if self._out is not None else sys.stdout
        out.write("average gas energy: %g\n" % report.avg_energy)
        out.write("average out energy: %g\n" % report.avg_out_energy)
        out.write("coefficient: %g\n\n" % report.coefficient)
        if self._stats_file is not None:
            self._stats_file.write("%g " % report.avg_energy)
            self._stats_file.write("%g\n" % report.avg_out_energy)