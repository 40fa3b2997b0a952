#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Visualization Module Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
License:        MIT License
================================================================================
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from coilfield.geometry import CoilGeometry
from coilfield.tracer import Streamline
from coilfield.visualization import (
    VisualizationConfig,
    render_axial_profile,
    render_coil_field,
    render_coil_png,
    strength_image,
    view_extent,
)


@pytest.fixture
def coil():
    return CoilGeometry(radius=0.02, length=0.1, turns=5, current=5.0)


@pytest.fixture
def lines():
    z = np.linspace(-0.08, 0.08, 20)
    return (Streamline(np.column_stack([np.full_like(z, 0.01), z])),)


class TestLayout:
    """Tests for view sizing and the strength image."""

    def test_view_extent(self, coil):
        """The larger of 8 R and 3 L fits 80% of the short side."""
        z_half, r_half = view_extent(coil, (8, 6))
        assert 2 * r_half == pytest.approx(3 * coil.length / 0.8)
        assert z_half / r_half == pytest.approx(8 / 6)

    def test_view_extent_degenerate(self):
        """A zero-size coil still gives a finite view."""
        geometry = CoilGeometry(radius=0.0, length=0.0, turns=1, current=1.0)
        z_half, r_half = view_extent(geometry, (8, 6))
        assert np.isfinite(z_half) and z_half > 0
        assert np.isfinite(r_half) and r_half > 0

    def test_strength_image(self, coil):
        """RGBA image within [0, 1], transparent where the field is faint."""
        config = VisualizationConfig(strength_resolution=40)
        rgba = strength_image(coil, view_extent(coil, config.figsize), config)
        assert rgba.shape == (30, 40, 4)
        assert np.all(rgba >= 0.0) and np.all(rgba <= 1.0)
        assert rgba[..., 3].max() == pytest.approx(config.strength_alpha)


class TestRendering:
    """Tests for figure rendering."""

    def test_render_figure(self, coil, lines):
        """The coil picture draws both halves of each line."""
        config = VisualizationConfig(strength_resolution=20)
        fig = render_coil_field(coil, lines, config)
        ax = fig.axes[0]
        assert len(ax.lines) == 2
        plt.close(fig)

    def test_render_png(self, coil, lines):
        """PNG output starts with the PNG signature."""
        config = VisualizationConfig(strength_resolution=20)
        data = render_coil_png(coil, lines, config, dpi=40)
        assert data[:8] == b"\x89PNG\r\n\x1a\n"

    def test_render_degenerate(self, lines):
        """Degenerate coils render an empty picture without raising."""
        geometry = CoilGeometry(radius=0.0, length=0.1, turns=5, current=5.0)
        data = render_coil_png(geometry, (), dpi=40)
        assert data.startswith(b"\x89PNG")

    def test_axial_profile(self, coil):
        """The profile has the Biot-Savart and closed-form curves."""
        fig = render_axial_profile(coil, n_points=50)
        ax = fig.axes[0]
        labels = [line.get_label() for line in ax.lines]
        assert "Biot-Savart sum" in labels
        assert "Closed form" in labels
        plt.close(fig)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
