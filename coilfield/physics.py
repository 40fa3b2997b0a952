#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Biot-Savart Field Engine
================================================================================

Project:        Magnetic Field Around a Coil
Module:         physics.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This module computes the magnetic field of a solenoid by numerically
integrating the Biot-Savart law around each turn and superposing the turns.

For a current element I dl at position r', the field at r is:
    dB = (μ₀ I / 4π) (dl × s) / |s|³,    s = r - r'

Each loop of radius R is split into K equal angular segments. With the field
point placed at azimuth φ = 0, i.e. at Cartesian (r, 0, z), the x and z
components of the summed field are the cylindrical B_r and B_z; the
y component (B_φ) cancels by symmetry and is not accumulated.

The kernels are compiled with Numba since they are evaluated once per
background grid cell and once per tracer step.
"""

import math
import numpy as np
from numba import jit, prange
from typing import List, Tuple

from .geometry import (
    MU_0,
    ZERO_FIELD,
    CoilGeometry,
    FieldFunction,
    FieldVector,
    ideal_interior_field,
)


DEFAULT_SEGMENTS = 80       # Angular segments per loop
SINGULARITY_EPS = 1e-10     # Field points closer than this to a segment skip it


@jit(nopython=True, cache=True)
def loop_field(
    radius: float,
    current: float,
    r: float,
    z: float,
    n_segments: int
) -> Tuple[float, float]:
    """
    Field of a single circular loop centred at the origin in the z = 0 plane.

    Args:
        radius: Loop radius R (m)
        current: Loop current I (A), positive = counter-clockwise seen from +z
        r: Radial coordinate of the field point (may be negative)
        z: Axial coordinate of the field point relative to the loop
        n_segments: Number of angular segments K

    Returns:
        (B_r, B_z) in tesla
    """
    if not radius > 0.0 or n_segments < 1:
        return 0.0, 0.0

    dphi = 2.0 * np.pi / n_segments
    eps_sq = SINGULARITY_EPS * SINGULARITY_EPS

    br = 0.0
    bz = 0.0

    for i in range(n_segments):
        # Segment midpoint
        phi = (i + 0.5) * dphi
        cos_phi = np.cos(phi)
        sin_phi = np.sin(phi)

        # Current element dl = R dφ (-sin φ, cos φ, 0)
        dlx = -radius * sin_phi * dphi
        dly = radius * cos_phi * dphi

        # Separation from the element to (r, 0, z)
        sx = r - radius * cos_phi
        sy = -radius * sin_phi
        sz = z

        s_sq = sx * sx + sy * sy + sz * sz
        if s_sq < eps_sq:
            continue  # Field point on the wire
        s3 = s_sq * np.sqrt(s_sq)

        # dl × s, x and z components
        br += dly * sz / s3
        bz += (dlx * sy - dly * sx) / s3

    prefactor = MU_0 * current / (4.0 * np.pi)
    return prefactor * br, prefactor * bz


@jit(nopython=True, cache=True)
def solenoid_field(
    radius: float,
    length: float,
    turns: int,
    current: float,
    r: float,
    z: float,
    n_segments: int
) -> Tuple[float, float]:
    """
    Superpose `turns` loops spread evenly along [-L/2, L/2].

    Returns (0, 0) for non-positive radius or length, or fewer than one turn.
    """
    if not radius > 0.0 or not length > 0.0 or turns < 1:
        return 0.0, 0.0

    br = 0.0
    bz = 0.0
    half = 0.5 * length

    for t in range(turns):
        z0 = -half + length * (t + 0.5) / turns
        dbr, dbz = loop_field(radius, current, r, z - z0, n_segments)
        br += dbr
        bz += dbz

    return br, bz


@jit(nopython=True, parallel=True, cache=True)
def solenoid_field_grid(
    radius: float,
    length: float,
    turns: int,
    current: float,
    r_points: np.ndarray,
    z_points: np.ndarray,
    n_segments: int
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluate the solenoid field at many points.

    Args:
        r_points, z_points: 1D arrays of equal length

    Returns:
        br, bz: 1D arrays of field components
    """
    n_points = r_points.shape[0]
    br = np.zeros(n_points)
    bz = np.zeros(n_points)

    for k in prange(n_points):
        b_r, b_z = solenoid_field(
            radius, length, turns, current,
            r_points[k], z_points[k], n_segments
        )
        br[k] = b_r
        bz[k] = b_z

    return br, bz


def evaluate_loop(
    radius: float,
    current: float,
    r: float,
    z: float,
    n_segments: int = DEFAULT_SEGMENTS
) -> FieldVector:
    """
    Field of one circular loop at (r, z) relative to the loop centre.

    Non-finite inputs give the zero field rather than NaN.
    """
    if not all(math.isfinite(v) for v in (radius, current, r, z)):
        return ZERO_FIELD
    br, bz = loop_field(float(radius), float(current), float(r), float(z), int(n_segments))
    return FieldVector(br, bz)


def evaluate_field(
    geometry: CoilGeometry,
    r: float,
    z: float,
    n_segments: int = DEFAULT_SEGMENTS
) -> FieldVector:
    """
    Net field of the solenoid at (r, z).

    Degenerate geometry evaluates to ZERO_FIELD.
    """
    if geometry.is_degenerate or not (math.isfinite(r) and math.isfinite(z)):
        return ZERO_FIELD
    br, bz = solenoid_field(
        geometry.radius, geometry.length, geometry.turns, geometry.current,
        float(r), float(z), int(n_segments)
    )
    return FieldVector(br, bz)


def make_field_function(
    geometry: CoilGeometry,
    n_segments: int = DEFAULT_SEGMENTS
) -> FieldFunction:
    """
    Bind a geometry into a plain (r, z) -> (B_r, B_z) callable for the tracer.
    """
    if geometry.is_degenerate:
        def zero_field(r: float, z: float) -> Tuple[float, float]:
            return 0.0, 0.0
        return zero_field

    radius = geometry.radius
    length = geometry.length
    turns = geometry.turns
    current = geometry.current

    def field_fn(r: float, z: float) -> Tuple[float, float]:
        return solenoid_field(radius, length, turns, current, r, z, n_segments)

    return field_fn


def field_grid(
    geometry: CoilGeometry,
    r: np.ndarray,
    z: np.ndarray,
    n_segments: int = DEFAULT_SEGMENTS
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Evaluate the field over broadcastable arrays of r and z.

    Returns:
        br, bz: Arrays with the broadcast shape of r and z
    """
    r_arr, z_arr = np.broadcast_arrays(
        np.asarray(r, dtype=np.float64), np.asarray(z, dtype=np.float64)
    )
    shape = r_arr.shape

    if geometry.is_degenerate:
        return np.zeros(shape), np.zeros(shape)

    br, bz = solenoid_field_grid(
        geometry.radius, geometry.length, geometry.turns, geometry.current,
        np.array(r_arr.ravel(), dtype=np.float64),
        np.array(z_arr.ravel(), dtype=np.float64),
        int(n_segments)
    )
    return br.reshape(shape), bz.reshape(shape)


def field_magnitude_grid(
    geometry: CoilGeometry,
    r: np.ndarray,
    z: np.ndarray,
    n_segments: int = DEFAULT_SEGMENTS
) -> np.ndarray:
    """|B| over a grid of points."""
    br, bz = field_grid(geometry, r, z, n_segments)
    return np.hypot(br, bz)


def field_intensity_grid(
    geometry: CoilGeometry,
    r: np.ndarray,
    z: np.ndarray,
    reference_fraction: float = 0.4,
    n_segments: int = DEFAULT_SEGMENTS
) -> np.ndarray:
    """
    Normalized field strength used to shade the background.

    intensity = min(1, |B| / (reference_fraction * μ₀ n I))
    """
    magnitude = field_magnitude_grid(geometry, r, z, n_segments)
    reference = abs(ideal_interior_field(geometry)) * reference_fraction
    if reference <= 0.0:
        return np.zeros_like(magnitude)
    return np.clip(magnitude / reference, 0.0, 1.0)


def interior_vector_samples(
    geometry: CoilGeometry,
    n_z: int = 5,
    n_r: int = 3,
    n_segments: int = DEFAULT_SEGMENTS
) -> List[Tuple[float, float, FieldVector]]:
    """
    Sample the field at a small grid inside the coil, above and below the axis.

    Returns:
        List of (r, z, field) tuples
    """
    samples = []
    if geometry.is_degenerate:
        return samples

    R = geometry.radius
    L = geometry.length

    for iz in range(n_z):
        z = -L / 2 + L * (iz + 0.5) / n_z
        for ir in range(n_r):
            r_val = R * (ir + 0.5) / (n_r + 1)
            for sign in (-1.0, 1.0):
                r = sign * r_val
                samples.append((r, z, evaluate_field(geometry, r, z, n_segments)))

    return samples


def format_field_strength(b: float, precision: int = 2) -> str:
    """Format a field in mT above 1 mT, otherwise in µT."""
    if abs(b) >= 1e-3:
        return f"{b * 1e3:.{precision}f} mT"
    return f"{b * 1e6:.{precision}f} uT"


def describe_state(geometry: CoilGeometry) -> str:
    """Short plain-text description of the coil and its interior field."""
    if geometry.is_degenerate:
        return "Coil geometry is degenerate; no magnetic field is produced."

    b_inside = ideal_interior_field(geometry)
    return (
        f"Solenoid (coil) with {geometry.turns} turns, length "
        f"{geometry.length * 100:.1f} cm, carrying {geometry.current:.1f} A. "
        f"Interior field B = mu0*n*I = {format_field_strength(b_inside, 3)} "
        f"(nearly uniform). Field lines are parallel inside the solenoid and "
        f"curve around outside like a bar magnet, with N pole at right and "
        f"S pole at left."
    )
