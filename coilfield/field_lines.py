#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Field Line Set Builder
================================================================================

Project:        Magnetic Field Around a Coil
Module:         field_lines.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

Seeds a batch of field lines inside and outside the coil, traces each one
through the solenoid field and keeps the result until the coil changes.
"""

import math
import logging
import numpy as np
from typing import Callable, Hashable, Optional, Tuple
from dataclasses import dataclass

from .geometry import CoilGeometry, FieldFunction
from .physics import DEFAULT_SEGMENTS, make_field_function
from .tracer import DEFAULT_MIN_FIELD, Streamline, trace_streamline


logger = logging.getLogger(__name__)

FieldFactory = Callable[[CoilGeometry, int], FieldFunction]
CacheKey = Tuple[Hashable, ...]

KEY_DIGITS = 4  # Significant digits of length and radius in the cache key


@dataclass(frozen=True)
class FieldLineConfig:
    """Configuration for seeding and tracing field lines."""
    # Seeds inside the winding: r = R * interior_scale * (i + 1) / (n + 1)
    n_interior: int = 6
    interior_scale: float = 0.85

    # Seeds outside: r = R * (exterior_offset + exterior_span * (i + 1) / (n + 1))
    n_exterior: int = 5
    exterior_offset: float = 1.3
    exterior_span: float = 3.0

    # Just off the mid-plane, as a fraction of the coil length (1 mm at 20 cm)
    seed_z_fraction: float = 0.005

    # Integration, relative to the coil length
    step_fraction: float = 0.012
    max_steps: int = 800
    extent_factor: float = 4.0
    min_field: float = DEFAULT_MIN_FIELD

    # Lines with this many points or fewer are dropped
    min_points: int = 10

    n_segments: int = DEFAULT_SEGMENTS


@dataclass(frozen=True)
class FieldLineCache:
    """Field lines computed for one cache key."""
    key: CacheKey
    lines: Tuple[Streamline, ...]


def seed_height(geometry: CoilGeometry, config: FieldLineConfig) -> float:
    """Axial position shared by all seeds."""
    return geometry.length * config.seed_z_fraction


def interior_seed_radii(geometry: CoilGeometry, config: FieldLineConfig) -> np.ndarray:
    """Evenly spaced radii strictly inside the winding."""
    fractions = np.arange(1, config.n_interior + 1) / (config.n_interior + 1)
    return geometry.radius * config.interior_scale * fractions


def exterior_seed_radii(geometry: CoilGeometry, config: FieldLineConfig) -> np.ndarray:
    """Radii from just outside the winding out to a few coil radii."""
    fractions = np.arange(1, config.n_exterior + 1) / (config.n_exterior + 1)
    return geometry.radius * (config.exterior_offset + config.exterior_span * fractions)


def _round_significant(value: float, digits: int = KEY_DIGITS) -> float:
    if value == 0.0 or not math.isfinite(value):
        return value
    return round(value, digits - 1 - math.floor(math.log10(abs(value))))


def build_field_lines(
    geometry: CoilGeometry,
    config: Optional[FieldLineConfig] = None,
    field_fn: Optional[FieldFunction] = None
) -> Tuple[Streamline, ...]:
    """
    Trace the full set of field lines for a coil, without caching.

    Args:
        geometry: Coil to trace
        config: Seeding and integration settings
        field_fn: (r, z) -> (B_r, B_z); defaults to the solenoid field

    Returns:
        Tuple of streamlines, interior seeds first
    """
    config = config or FieldLineConfig()

    if geometry.is_degenerate:
        logger.warning("Degenerate coil geometry %s, no field lines traced", geometry)
        return ()

    if field_fn is None:
        field_fn = make_field_function(geometry, config.n_segments)

    step_size = geometry.length * config.step_fraction
    max_extent = geometry.length * config.extent_factor

    seed_z = seed_height(geometry, config)
    radii = np.concatenate([
        interior_seed_radii(geometry, config),
        exterior_seed_radii(geometry, config),
    ])

    lines = []
    for seed_r in radii:
        line = trace_streamline(
            field_fn,
            (float(seed_r), seed_z),
            step_size,
            config.max_steps,
            max_extent,
            config.min_field
        )
        if len(line) > config.min_points:
            lines.append(line)
        else:
            logger.debug("Dropped short field line from r=%.4g (%d points)", seed_r, len(line))

    return tuple(lines)


class FieldLineSetBuilder:
    """
    Computes field lines for a coil and remembers the last result.

    The cache holds a single FieldLineCache snapshot. It is replaced as a
    whole when the structural key of the geometry changes, and returned
    unchanged otherwise.
    """

    def __init__(
        self,
        config: Optional[FieldLineConfig] = None,
        field_factory: Optional[FieldFactory] = None
    ):
        self._config = config or FieldLineConfig()
        self._field_factory = field_factory or make_field_function
        self._cache: Optional[FieldLineCache] = None

        # Bookkeeping
        self.n_computations = 0

    @staticmethod
    def cache_key(geometry: CoilGeometry) -> CacheKey:
        """
        Structural key of a geometry.

        Current is rounded to 0.01 A like the UI control but keeps its sign,
        since reversing the current reverses every line. Length and radius
        keep KEY_DIGITS significant digits at any scale.
        """
        return (
            math.copysign(1.0, geometry.current),
            round(geometry.current, 2),
            geometry.turns,
            _round_significant(geometry.length),
            _round_significant(geometry.radius),
        )

    @property
    def config(self) -> FieldLineConfig:
        return self._config

    @config.setter
    def config(self, config: FieldLineConfig) -> None:
        """Replacing the configuration invalidates the cached lines."""
        self._config = config
        self.clear()

    @property
    def cached_key(self) -> Optional[CacheKey]:
        return self._cache.key if self._cache is not None else None

    def compute_field_lines(self, geometry: CoilGeometry) -> Tuple[Streamline, ...]:
        """
        Field lines for `geometry`, reusing the cached set when the key matches.
        """
        key = self.cache_key(geometry)
        cache = self._cache

        if cache is not None and cache.key == key:
            logger.debug("Field line cache hit for %s", key)
            return cache.lines

        logger.debug("Field line cache miss for %s, tracing", key)

        if geometry.is_degenerate:
            lines = build_field_lines(geometry, self.config)
        else:
            field_fn = self._field_factory(geometry, self.config.n_segments)
            lines = build_field_lines(geometry, self.config, field_fn)

        self._cache = FieldLineCache(key=key, lines=lines)
        self.n_computations += 1

        logger.info("Traced %d field lines for %s", len(lines), key)
        return lines

    def clear(self) -> None:
        """Drop the cached field lines."""
        self._cache = None
