#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Magnetic Field Around a Coil
================================================================================

Project:        Magnetic Field Around a Coil
Description:    Biot-Savart field solver and field-line tracer for a finite
                solenoid, with interactive visualization

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This package computes and draws the magnetic field of a solenoid:
- Discretized Biot-Savart integration around each turn, compiled with Numba
- Superposition of all turns of a finite coil
- Fixed-step field line tracing through the coil field
- Cached field line sets keyed by coil geometry

Modules:
    - geometry: Coil geometry, field vectors and reference formulas
    - physics: Loop and solenoid field evaluation
    - tracer: Field line integration
    - field_lines: Field line seeding and caching
    - visualization: Matplotlib rendering of the coil field
"""

from .geometry import (
    MU_0,
    ZERO_FIELD,
    CoilGeometry,
    DegenerateGeometryError,
    FieldVector,
    geometry_from_params,
)
from .physics import evaluate_field, evaluate_loop
from .tracer import Streamline, trace_streamline
from .field_lines import FieldLineConfig, FieldLineSetBuilder

__version__ = "1.0.0"
__author__ = "Ryan Kamp"
