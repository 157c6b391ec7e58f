"""Atom storage and the per-step physics of a gas in a cubic box with a hole."""

from __future__ import annotations

import enum
import os
from typing import Optional, Union

import numpy as np

from gaskit.logs import HtmlLog

DEFAULT_RADIUS = 0.00005
DEFAULT_BOX_SIZE = 0.89

_F32 = np.float32
_TINY = np.finfo(np.float64).tiny


class Mode(enum.Enum):
    """Interaction model: ``REAL`` adds pair forces and collisions, ``IDEAL`` only walls."""

    REAL = 0
    IDEAL = 1


def box_muller(u1, u2):
    """Turn two uniform samples into two standard normal samples.

    Returns ``(r * cos(2*pi*u2), r * sin(2*pi*u2))`` with ``r = sqrt(-2 ln u1)``.
    Works on scalars and on numpy arrays alike.
    """
    r = np.sqrt(-2.0 * np.log(u1))
    angle = 2.0 * np.pi * np.asarray(u2, dtype=np.float64)
    return r * np.cos(angle), r * np.sin(angle)


def _pow_neg7(num):
    num2 = num * num
    num4 = num2 * num2
    return _F32(1) / (num4 * num2 * num)


def _pow_neg13(num):
    num2 = num * num
    num4 = num2 * num2
    num8 = num4 * num4
    return _F32(1) / (num8 * num4 * num)


class AtomList:
    """Positions, velocities and flags of every atom, plus spatial cell lists."""

    def __init__(
        self, size: int, divisions: int = 1, log: Optional[HtmlLog] = None
    ) -> None:
        if size < 1:
            raise ValueError("an atom list needs at least one atom")
        if divisions < 1:
            raise ValueError("the box needs at least one division per axis")
        self._log = log if log is not None else HtmlLog(None)
        self._log.func_start("AtomList.__init__")

        self.n_hole_hits = 0
        self.total_hole_energy = 0.0
        self.radius = DEFAULT_RADIUS
        self.box_size = DEFAULT_BOX_SIZE
        self.hole_radius = 0.0
        self.axis_divisions = divisions
        self.space_divisions = divisions**3
        self.mode = Mode.IDEAL

        self.positions = np.zeros((size, 3), dtype=_F32)
        self.velocities = np.zeros((size, 3), dtype=_F32)
        self.is_out_of_box = np.zeros(size, dtype=bool)
        self.is_frozen = np.zeros(size, dtype=bool)

        # Cell list headers sit at negative ids -1 .. -space_divisions.
        self._next = np.zeros(size + self.space_divisions, dtype=np.int64)
        self._prev = np.zeros(size + self.space_divisions, dtype=np.int64)
        self._reset_lists()

        self._log.func_end("AtomList.__init__")

    @property
    def size(self) -> int:
        return len(self.positions)

    # -- initial state -------------------------------------------------------

    def set_random_positions(self, rng=None) -> None:
        """Place atoms uniformly in [-1, 1]^3 and draw normal velocities."""
        rng = np.random.default_rng(rng)
        size = self.size
        self.positions[:] = rng.uniform(-1.0, 1.0, (size, 3)).astype(_F32)

        n_values = size * 3
        n_pairs = (n_values + 1) // 2
        u1 = rng.random(n_pairs)
        bad = u1 <= _TINY
        while bad.any():
            u1[bad] = rng.random(int(bad.sum()))
            bad = u1 <= _TINY
        u2 = rng.random(n_pairs)
        z0, z1 = box_muller(u1, u2)
        normals = np.column_stack((z0, z1)).ravel()[:n_values]
        self.velocities[:] = normals.reshape(size, 3).astype(_F32)

    # -- time stepping -------------------------------------------------------

    def update_positions(self, delta_time: float) -> None:
        """Advance every unfrozen atom by ``velocity * delta_time``."""
        moving = ~self.is_frozen
        self.positions[moving] += self.velocities[moving] * _F32(delta_time)

    def handle_interactions(self) -> None:
        """Apply pair interactions (in real mode) and wall/hole collisions."""
        self._log.func_start("AtomList.handle_interactions")
        handled = self.size - 1
        if self.mode is Mode.REAL:
            with np.errstate(all="ignore"):
                for i in range(handled):
                    for j in range(i + 1, self.size):
                        self._atom_collision(i, j)
                        self._van_der_waals(i, j)
        self._wall_collisions(handled)
        self._log.func_end("AtomList.handle_interactions")

    def _atom_collision(self, i: int, j: int) -> bool:
        radius = _F32(self.radius)
        delta = self.positions[j] - self.positions[i]
        distance2 = np.dot(delta, delta)
        if distance2 >= _F32(4) * radius * radius:
            return False
        vel1 = self.velocities[i]
        vel2 = self.velocities[j]
        normal = delta / np.sqrt(distance2)
        dot = np.dot(vel2 - vel1, normal)
        if dot > 0:
            return False
        impulse = _F32(-2) * dot
        vel1 += impulse * normal
        vel2 -= impulse * normal
        return True

    def _van_der_waals(self, i: int, j: int) -> None:
        sigma = _F32(2) * _F32(self.radius)
        epsilon = _F32(1)
        delta = self.positions[j] - self.positions[i]
        distance = np.sqrt(np.dot(delta, delta))
        r = distance / sigma
        force = _F32(24) * epsilon * (_F32(2) * _pow_neg13(r) - _pow_neg7(r))
        force_vec = force * (delta / distance)
        self.velocities[i] += force_vec
        self.velocities[j] -= force_vec

    def _wall_collisions(self, count: int) -> None:
        if count <= 0:
            return
        pos = self.positions[:count]
        vel = self.velocities[:count]
        radius = _F32(self.radius)
        box = _F32(self.box_size)
        hole_r2 = _F32(self.hole_radius) * _F32(self.hole_radius)

        active = ~(self.is_out_of_box[:count] | self.is_frozen[:count])
        at_left = pos[:, 0] - radius <= -box
        in_hole = active & at_left & (pos[:, 1] ** 2 + pos[:, 2] ** 2 <= hole_r2)

        total = _F32(self.total_hole_energy)
        for index in np.flatnonzero(in_hole):
            self.is_out_of_box[index] = True
            speed = np.sqrt(np.dot(vel[index], vel[index]))
            total += speed * speed
            self.n_hole_hits += 1
        self.total_hole_energy = float(total)

        reflect = active & ~in_hole
        for axis in range(3):
            coord = pos[:, axis]
            low = reflect & (coord - radius <= -box)
            high = reflect & ~low & (coord + radius >= box)
            pos[low, axis] = radius - box
            pos[high, axis] = box - radius
            vel[low | high, axis] *= -1

    # -- statistics ----------------------------------------------------------

    def avg_speed(self) -> float:
        """Mean speed over all atoms."""
        speeds = np.linalg.norm(self.velocities, axis=1)
        return float(np.sum(speeds, dtype=_F32) / _F32(self.size))

    def avg_speed_squared(self) -> float:
        """Mean squared speed over atoms still inside the box (NaN if none)."""
        inside = ~self.is_out_of_box
        count = int(inside.sum())
        if count == 0:
            return float("nan")
        speeds = np.linalg.norm(self.velocities[inside], axis=1)
        return float(np.sum(speeds * speeds, dtype=_F32) / _F32(count))

    def dump_velocities(self, path: Union[str, os.PathLike]) -> None:
        """Write the speed of every atom, one per line."""
        speeds = np.linalg.norm(self.velocities, axis=1)
        with open(path, "w", encoding="utf-8") as out:
            out.writelines(f"{float(speed):g}\n" for speed in speeds)

    # -- cell lists ----------------------------------------------------------

    def _slot(self, element: int) -> int:
        return element + self.space_divisions

    @staticmethod
    def _header(cell: int) -> int:
        return -(cell + 1)

    def _reset_lists(self) -> None:
        for cell in range(self.space_divisions):
            header = self._header(cell)
            self._next[self._slot(header)] = header
            self._prev[self._slot(header)] = header

    def _push(self, cell: int, atom: int) -> None:
        self._log.info(f"list push: {cell} {atom}\n")
        header = self._header(cell)
        last = int(self._prev[self._slot(header)])
        self._next[self._slot(atom)] = header
        self._prev[self._slot(atom)] = last
        self._next[self._slot(last)] = atom
        self._prev[self._slot(header)] = atom

    def _cells_of_atoms(self) -> np.ndarray:
        divisions = self.axis_divisions
        box = _F32(self.box_size)
        div_length = _F32(2) * box / _F32(divisions)
        steps = np.arange(divisions, dtype=_F32)
        lows = steps * div_length - box
        tops = (steps + _F32(1)) * div_length - box

        inside = np.ones(self.size, dtype=bool)
        cell = np.zeros(self.size, dtype=np.int64)
        for axis in range(3):
            coord = self.positions[:, axis][:, None]
            matches = (lows <= coord) & (coord <= tops)
            inside &= matches.any(axis=1)
            cell = cell * divisions + matches.argmax(axis=1)
        return np.where(inside, cell, -1)

    def adjust_lists(self) -> None:
        """Rebuild the cell lists from the current positions."""
        self._reset_lists()
        cells = self._cells_of_atoms()
        for atom in np.flatnonzero(cells >= 0):
            self._push(int(cells[atom]), int(atom))

    def cell_members(self, cell: int) -> list[int]:
        """Atom indices in *cell*, in the order they were added."""
        if not 0 <= cell < self.space_divisions:
            raise IndexError(f"cell {cell} out of range")
        members = []
        current = int(self._next[self._slot(self._header(cell))])
        while current >= 0:
            members.append(current)
            current = int(self._next[self._slot(current)])
        return members

    def dump_divisions(self) -> list[int]:
        """Log every list entry and each cell's members; return the cell sizes."""
        log = self._log
        log.logf("ALL ELEMENTS\n", "green")
        for element in range(-self.space_divisions, self.size):
            log.logf(
                f"#{element}: PREV: {int(self._prev[self._slot(element)])} "
                f"NEXT: {int(self._next[self._slot(element)])}\n",
                "green",
            )

        log.logf("LISTS\n", "green")
        sizes = []
        for cell in range(self.space_divisions):
            log.logf(f"List #{cell + 1}\t\n", "green")
            members = self.cell_members(cell)
            for member in members:
                log.logf(f"\t\t elem: {member}\n", "orange")
            log.logf(f"List #{cell + 1}: {len(members)}\n", "green")
            sizes.append(len(members))
        return sizes