#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Geometry Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
License:        MIT License
================================================================================
"""

import dataclasses
import numpy as np
import pytest
from coilfield.geometry import (
    MU_0,
    CoilGeometry,
    DegenerateGeometryError,
    FieldVector,
    geometry_from_params,
    ideal_interior_field,
    loop_on_axis_field,
    on_axis_field,
    turn_positions,
)


class TestCoilGeometry:
    """Tests for the coil geometry value."""

    def test_fields(self):
        """Test stored values and derived winding density."""
        geometry = CoilGeometry(radius=0.02, length=0.2, turns=200, current=5.0)
        assert geometry.radius == 0.02
        assert geometry.length == 0.2
        assert geometry.turns == 200
        assert geometry.current == 5.0
        assert abs(geometry.turns_per_meter - 1000.0) < 1e-9
        assert abs(geometry.aspect_ratio - 10.0) < 1e-9

    def test_immutable(self):
        """Geometry cannot be modified after construction."""
        geometry = CoilGeometry(radius=0.02, length=0.2, turns=10, current=5.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            geometry.turns = 20

    def test_equal_geometries_hash_equal(self):
        """Equal values compare and hash equal."""
        a = CoilGeometry(radius=0.05, length=0.2, turns=10, current=5.0)
        b = CoilGeometry(radius=0.05, length=0.2, turns=10, current=5.0)
        assert a == b
        assert hash(a) == hash(b)

    def test_turns_coerced_to_int(self):
        """Float turn counts are rounded to integers."""
        geometry = CoilGeometry(radius=0.05, length=0.2, turns=7.6, current=5.0)
        assert geometry.turns == 8
        assert isinstance(geometry.turns, int)

    def test_valid_geometry_not_degenerate(self):
        """A normal coil validates."""
        geometry = CoilGeometry(radius=0.05, length=0.2, turns=10, current=5.0)
        assert not geometry.is_degenerate
        assert geometry.validate() is geometry

    @pytest.mark.parametrize("kwargs", [
        dict(radius=0.0, length=0.2, turns=10, current=5.0),
        dict(radius=-0.1, length=0.2, turns=10, current=5.0),
        dict(radius=0.05, length=0.0, turns=10, current=5.0),
        dict(radius=0.05, length=0.2, turns=0, current=5.0),
        dict(radius=float('nan'), length=0.2, turns=10, current=5.0),
        dict(radius=0.05, length=0.2, turns=10, current=float('inf')),
        dict(radius=0.05, length=0.2, turns=float('nan'), current=5.0),
    ])
    def test_degenerate_geometry(self, kwargs):
        """Degenerate coils are flagged and rejected by validate()."""
        geometry = CoilGeometry(**kwargs)
        assert geometry.is_degenerate
        with pytest.raises(DegenerateGeometryError):
            geometry.validate()

    def test_error_is_value_error(self):
        """DegenerateGeometryError can be caught as ValueError."""
        with pytest.raises(ValueError):
            CoilGeometry(radius=0.0, length=0.2, turns=1, current=1.0).validate()


class TestGeometryFromParams:
    """Tests for UI parameter validation."""

    def test_defaults(self):
        """Missing parameters take the visualization defaults."""
        geometry = geometry_from_params({})
        assert geometry.current == 5.0
        assert geometry.turns == 10
        assert abs(geometry.length - 0.2) < 1e-12
        assert abs(geometry.radius - 0.05) < 1e-12

    def test_none_params(self):
        """No parameter bag at all is accepted."""
        assert geometry_from_params(None) == geometry_from_params({})

    def test_length_in_centimeters(self):
        """coilLength is given in cm and the radius follows the length."""
        geometry = geometry_from_params({'coilLength': 40})
        assert abs(geometry.length - 0.4) < 1e-12
        assert abs(geometry.radius - 0.1) < 1e-12

    def test_explicit_radius(self):
        """An explicit radius in meters is kept."""
        geometry = geometry_from_params({'coilLength': 20, 'radius': 0.02})
        assert geometry.radius == 0.02

    def test_clamping(self):
        """Out-of-range values are clamped into a valid geometry."""
        geometry = geometry_from_params({
            'current': -3.0, 'numTurns': 0, 'coilLength': -5.0, 'radius': -1.0
        })
        assert not geometry.is_degenerate
        assert geometry.current > 0
        assert geometry.turns == 1
        assert geometry.length > 0
        assert geometry.radius > 0

    def test_garbage_values(self):
        """Non-numeric and non-finite values fall back to defaults."""
        geometry = geometry_from_params({
            'current': float('nan'), 'numTurns': 'many', 'coilLength': None
        })
        assert geometry == geometry_from_params({})

    def test_turns_rounded(self):
        """Slider values for turns are rounded."""
        assert geometry_from_params({'numTurns': 12.7}).turns == 13


class TestReferenceFields:
    """Tests for closed-form field helpers."""

    def test_turn_positions(self):
        """Turn centres sit at the midpoints of equal slices."""
        geometry = CoilGeometry(radius=0.1, length=1.0, turns=4, current=1.0)
        expected = np.array([-0.375, -0.125, 0.125, 0.375])
        assert np.allclose(turn_positions(geometry), expected)

    def test_single_turn_position(self):
        """A single turn sits at the centre."""
        geometry = CoilGeometry(radius=0.1, length=0.3, turns=1, current=1.0)
        assert np.allclose(turn_positions(geometry), [0.0])

    def test_degenerate_turn_positions(self):
        """Degenerate coils have no turns to place."""
        geometry = CoilGeometry(radius=0.0, length=0.3, turns=3, current=1.0)
        assert len(turn_positions(geometry)) == 0

    def test_ideal_field(self):
        """B = μ₀ n I."""
        geometry = CoilGeometry(radius=0.02, length=0.2, turns=200, current=5.0)
        assert abs(ideal_interior_field(geometry) - MU_0 * 1000 * 5) < 1e-12

    def test_loop_centre_field(self):
        """Loop field at its centre is μ₀ I / 2R."""
        B = loop_on_axis_field(0.05, 2.0, 0.0)
        assert abs(B - MU_0 * 2.0 / 0.1) < 1e-15

    def test_on_axis_symmetric(self):
        """Finite solenoid axial field is even in z."""
        geometry = CoilGeometry(radius=0.05, length=0.2, turns=10, current=5.0)
        assert abs(on_axis_field(geometry, 0.07) - on_axis_field(geometry, -0.07)) < 1e-15

    def test_on_axis_approaches_ideal(self):
        """A long thin coil approaches μ₀ n I at the centre."""
        geometry = CoilGeometry(radius=0.001, length=1.0, turns=1000, current=1.0)
        ratio = on_axis_field(geometry, 0.0) / ideal_interior_field(geometry)
        assert abs(ratio - 1.0) < 1e-4

    def test_field_vector(self):
        """Magnitude and addition of field vectors."""
        v = FieldVector(3.0, 4.0) + FieldVector(0.0, 0.0)
        assert v.magnitude == 5.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
