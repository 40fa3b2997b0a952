#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Field Line Tracer
================================================================================

Project:        Magnetic Field Around a Coil
Module:         tracer.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

Integrates field lines (curves everywhere tangent to B) with fixed-step
forward Euler:

    x(s + ds) = x(s) + ds * B(x) / |B(x)|

A line through a seed is traced twice, once with +ds and once with -ds, and
the two halves are joined as reversed(backward) + forward so that the points
run continuously in the direction of the field.

A half trace ends early when |B| falls below a threshold or the point leaves
the bounding box; both are normal outcomes. Fixed-step Euler drifts on the
strongly curved lines near the open ends of a coil. This is an accepted
approximation for drawing purposes.
"""

import math
import numpy as np
from typing import Iterator, List, Sequence, Tuple
from dataclasses import dataclass

from .geometry import FieldFunction


Point = Tuple[float, float]

DEFAULT_MIN_FIELD = 1e-16  # Tesla


@dataclass(frozen=True, eq=False)
class Streamline:
    """
    Immutable polyline of (r, z) points along one field line.

    The points are copied on construction into a read-only (N, 2) array.
    """
    points: np.ndarray

    def __post_init__(self):
        pts = np.array(self.points, dtype=np.float64).reshape(-1, 2)
        pts.flags.writeable = False
        object.__setattr__(self, "points", pts)

    @property
    def r(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def z(self) -> np.ndarray:
        return self.points[:, 1]

    def __len__(self) -> int:
        return self.points.shape[0]

    def __iter__(self) -> Iterator[Point]:
        for r, z in self.points:
            yield float(r), float(z)

    def __getitem__(self, index: int) -> Point:
        r, z = self.points[index]
        return float(r), float(z)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Streamline):
            return NotImplemented
        return np.array_equal(self.points, other.points)

    def __hash__(self) -> int:
        return hash(self.points.tobytes())

    def mirrored(self) -> "Streamline":
        """Reflection through the axis (r -> -r), used to draw the lower half."""
        return Streamline(self.points * np.array([-1.0, 1.0]))


def trace_half(
    field_fn: FieldFunction,
    seed: Sequence[float],
    step_size: float,
    max_steps: int,
    max_extent: float = np.inf,
    min_field: float = DEFAULT_MIN_FIELD
) -> List[Point]:
    """
    Follow the field from `seed` in one direction.

    Args:
        field_fn: (r, z) -> (B_r, B_z)
        seed: Starting (r, z)
        step_size: Signed arc length per step; negative walks against B
        max_steps: Maximum number of recorded points
        max_extent: Stop once |r| or |z| exceeds this
        min_field: Stop where |B| is below this

    Returns:
        List of (r, z) points, starting with the seed
    """
    points: List[Point] = []
    r = float(seed[0])
    z = float(seed[1])

    for _ in range(max_steps):
        points.append((r, z))

        br, bz = field_fn(r, z)
        b_mag = math.hypot(br, bz)
        if not b_mag >= min_field:
            break  # Field vanishes (or is NaN)

        r += br / b_mag * step_size
        z += bz / b_mag * step_size

        if abs(r) > max_extent or abs(z) > max_extent:
            break

    return points


def trace_streamline(
    field_fn: FieldFunction,
    seed: Sequence[float],
    step_size: float,
    max_steps: int,
    max_extent: float = np.inf,
    min_field: float = DEFAULT_MIN_FIELD
) -> Streamline:
    """
    Trace a field line through `seed` in both directions.

    Each half gets up to `max_steps` points; the seed appears once in the
    joined line.
    """
    forward = trace_half(field_fn, seed, step_size, max_steps, max_extent, min_field)
    backward = trace_half(field_fn, seed, -step_size, max_steps, max_extent, min_field)

    if not forward:
        return Streamline(backward[::-1])

    return Streamline(backward[::-1] + forward[1:])
