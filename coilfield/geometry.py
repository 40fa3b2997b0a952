#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Coil Geometry and Field Values
================================================================================

Project:        Magnetic Field Around a Coil
Module:         geometry.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

Value types shared by the field solver, the field-line tracer and the
renderers:

    - CoilGeometry: radius, length, number of turns and current of a solenoid
    - FieldVector:  (B_r, B_z) in the coil's cylindrical coordinates

The solenoid is modelled as `turns` coaxial circular loops whose centres sit
at the midpoints of `turns` equal slices of [-L/2, +L/2]:

    z_t = -L/2 + L (t + 1/2) / N

The ideal (infinitely long) solenoid has a uniform interior field

    B = μ₀ n I,    n = N / L

and the finite solenoid has the closed-form on-axis field

    B_z(z) = μ₀ n I / 2 [ (z + L/2) / √(R² + (z + L/2)²)
                         - (z - L/2) / √(R² + (z - L/2)²) ]
"""

import math
import numpy as np
from typing import Any, Callable, Mapping, Optional, Tuple
from dataclasses import dataclass


MU_0 = 4.0 * np.pi * 1e-7  # Permeability of free space (T·m/A)

# Defaults of the interactive visualization
DEFAULT_CURRENT = 5.0       # A
DEFAULT_TURNS = 10
DEFAULT_LENGTH_CM = 20.0    # cm
RADIUS_TO_LENGTH = 0.25     # coil radius as a fraction of its length

# Slider ranges used to clamp loosely typed UI input
CURRENT_RANGE = (0.1, 50.0)
TURNS_RANGE = (1, 500)
LENGTH_CM_RANGE = (1.0, 100.0)


class DegenerateGeometryError(ValueError):
    """Raised when a coil has non-positive radius/length or fewer than one turn."""


@dataclass(frozen=True)
class FieldVector:
    """Magnetic field in cylindrical components (no azimuthal part by symmetry)."""
    br: float
    bz: float

    @property
    def magnitude(self) -> float:
        return math.hypot(self.br, self.bz)

    def __add__(self, other: "FieldVector") -> "FieldVector":
        return FieldVector(self.br + other.br, self.bz + other.bz)


ZERO_FIELD = FieldVector(0.0, 0.0)

# (r, z) -> (B_r, B_z), the form consumed by the field line tracer
FieldFunction = Callable[[float, float], Tuple[float, float]]


@dataclass(frozen=True)
class CoilGeometry:
    """
    Geometry and drive current of a finite solenoid.

    Units are SI: radius and length in meters, current in amperes.

    A degenerate value (see `is_degenerate`) can still be constructed; the
    solver answers it with a zero field instead of raising, and `validate()`
    is available for callers that want a hard failure.
    """
    radius: float
    length: float
    turns: int
    current: float

    def __post_init__(self):
        # Frozen dataclass: normalise types through object.__setattr__
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "length", float(self.length))
        object.__setattr__(self, "current", float(self.current))
        try:
            turns = int(round(float(self.turns)))
        except (TypeError, ValueError, OverflowError):
            turns = 0
        object.__setattr__(self, "turns", turns)

    @property
    def is_degenerate(self) -> bool:
        """True if the coil cannot produce a well-defined field."""
        values = (self.radius, self.length, self.current)
        if not all(math.isfinite(v) for v in values):
            return True
        return self.radius <= 0.0 or self.length <= 0.0 or self.turns < 1

    def validate(self) -> "CoilGeometry":
        """Return self, or raise DegenerateGeometryError."""
        if self.is_degenerate:
            raise DegenerateGeometryError(
                f"Degenerate coil: radius={self.radius}, length={self.length}, "
                f"turns={self.turns}, current={self.current}"
            )
        return self

    @property
    def turns_per_meter(self) -> float:
        """Winding density n = N / L."""
        if self.length <= 0.0:
            return 0.0
        return self.turns / self.length

    @property
    def aspect_ratio(self) -> float:
        """L / R; large values approach the ideal solenoid."""
        if self.radius <= 0.0:
            return 0.0
        return self.length / self.radius


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _as_float(value: Any, default: float) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return result if math.isfinite(result) else default


def geometry_from_params(params: Optional[Mapping[str, Any]] = None) -> CoilGeometry:
    """
    Build a valid CoilGeometry from a loosely typed UI parameter bag.

    Recognised keys (all optional):
        current:    Current in amperes
        numTurns:   Number of turns (rounded to the nearest integer)
        coilLength: Coil length in centimeters
        radius:     Coil radius in meters (default: 0.25 * length)

    Out-of-range or non-numeric values are clamped or replaced by the
    defaults, so the result always passes `validate()`.
    """
    params = params or {}

    current = _clamp(_as_float(params.get("current"), DEFAULT_CURRENT), *CURRENT_RANGE)
    turns = int(round(_clamp(_as_float(params.get("numTurns"), DEFAULT_TURNS), *TURNS_RANGE)))
    length_cm = _clamp(_as_float(params.get("coilLength"), DEFAULT_LENGTH_CM), *LENGTH_CM_RANGE)
    length = length_cm / 100.0

    radius = _as_float(params.get("radius"), RADIUS_TO_LENGTH * length)
    if radius <= 0.0:
        radius = RADIUS_TO_LENGTH * length

    return CoilGeometry(radius=radius, length=length, turns=turns, current=current)


def turn_positions(geometry: CoilGeometry) -> np.ndarray:
    """Axial positions of the turn centres, evenly spread over [-L/2, L/2]."""
    if geometry.is_degenerate:
        return np.zeros(0)
    L = geometry.length
    N = geometry.turns
    return -L / 2 + L * (np.arange(N) + 0.5) / N


def ideal_interior_field(geometry: CoilGeometry) -> float:
    """Interior field of an infinitely long solenoid, B = μ₀ n I."""
    if geometry.is_degenerate:
        return 0.0
    return MU_0 * geometry.turns_per_meter * geometry.current


def loop_on_axis_field(radius: float, current: float, z: float) -> float:
    """
    Closed-form axial field of a single loop.

    B_z(z) = μ₀ I R² / (2 (R² + z²)^(3/2))
    """
    if not radius > 0.0:
        return 0.0
    return MU_0 * current * radius * radius / (2.0 * (radius * radius + z * z) ** 1.5)


def on_axis_field(geometry: CoilGeometry, z: float = 0.0) -> float:
    """Closed-form axial field of a uniformly wound finite solenoid."""
    if geometry.is_degenerate:
        return 0.0
    R = geometry.radius
    half = geometry.length / 2
    a = z + half
    b = z - half
    return 0.5 * ideal_interior_field(geometry) * (
        a / math.sqrt(R * R + a * a) - b / math.sqrt(R * R + b * b)
    )
