#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Field Visualization Module
================================================================================

Project:        Magnetic Field Around a Coil
Module:         visualization.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This module draws the solenoid cross-section with Matplotlib:
- Background shading by local field strength
- Field lines (upper half traced, lower half mirrored) with direction arrows
- Wire cross-sections (dot = current out of page, cross = into page)
- Field arrows inside the coil
- Axial field profile against the closed-form and ideal values

The horizontal axis is the coil axis z, the vertical axis is r.
"""

import io
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass

from .geometry import (
    CoilGeometry,
    ideal_interior_field,
    on_axis_field,
    turn_positions,
)
from .physics import (
    field_grid,
    field_intensity_grid,
    format_field_strength,
    interior_vector_samples,
)
from .tracer import Streamline


@dataclass
class VisualizationConfig:
    """Configuration for visualization."""
    figsize: Tuple[int, int] = (8, 6)
    background_color: str = "#0f172a"
    text_color: str = "#e2e8f0"
    info_color: str = "#67e8f9"
    field_line_color: Tuple[float, float, float, float] = (0.39, 0.78, 1.0, 0.6)
    arrow_color: Tuple[float, float, float, float] = (0.39, 0.78, 1.0, 0.9)
    vector_color: Tuple[float, float, float, float] = (0.2, 0.83, 0.6, 0.8)
    wire_color: str = "#f59e0b"
    wire_edge_color: str = "#d97706"
    show_strength: bool = True
    show_vectors: bool = True
    strength_resolution: int = 120   # Grid cells along the long side
    strength_alpha: float = 0.2
    arrow_fraction: float = 0.3      # Position of the direction arrow along a line


def view_extent(geometry: CoilGeometry, figsize: Tuple[float, float]) -> Tuple[float, float]:
    """
    Half-widths (z_half, r_half) of the visible region.

    The larger of 8 R and 3 L spans 80% of the shorter figure side.
    """
    max_dim = max(geometry.radius * 8, geometry.length * 3)
    if not max_dim > 0:
        max_dim = 1.0
    width, height = figsize
    scale = min(width, height) * 0.8 / max_dim
    return width / (2 * scale), height / (2 * scale)


def strength_image(
    geometry: CoilGeometry,
    extent: Tuple[float, float],
    config: VisualizationConfig
) -> np.ndarray:
    """
    RGBA image of the normalized field strength over the view.

    Red grows and blue fades with intensity; faint cells stay transparent.
    """
    z_half, r_half = extent
    n_z = config.strength_resolution
    n_r = max(2, int(round(n_z * r_half / z_half)))

    z = np.linspace(-z_half, z_half, n_z)
    r = np.linspace(-r_half, r_half, n_r)
    zz, rr = np.meshgrid(z, r)

    intensity = field_intensity_grid(geometry, rr, zz)

    rgba = np.zeros(intensity.shape + (4,))
    rgba[..., 0] = intensity
    rgba[..., 1] = 30.0 / 255.0
    rgba[..., 2] = 180.0 / 255.0 * (1.0 - intensity)
    rgba[..., 3] = np.where(intensity > 0.01, intensity * config.strength_alpha, 0.0)
    return rgba


def draw_field_lines(
    ax: plt.Axes,
    field_lines: Sequence[Streamline],
    config: VisualizationConfig
):
    """Draw each line and its mirror image with one direction arrow apiece."""
    for line in field_lines:
        if len(line) < 2:
            continue

        for half in (line, line.mirrored()):
            ax.plot(half.z, half.r, color=config.field_line_color, linewidth=1.5)

            i = int(len(half) * config.arrow_fraction)
            if i < len(half) - 1:
                r1, z1 = half[i]
                r2, z2 = half[i + 1]
                ax.annotate(
                    "", xy=(z2, r2), xytext=(z1, r1),
                    arrowprops=dict(
                        arrowstyle="-|>", color=config.arrow_color,
                        lw=1.5, mutation_scale=14
                    )
                )


def draw_coil(ax: plt.Axes, geometry: CoilGeometry, config: VisualizationConfig):
    """Wire cross-sections and the coil outline."""
    R = geometry.radius
    L = geometry.length
    z_wires = turn_positions(geometry)

    # Top row: current out of the page
    ax.scatter(z_wires, np.full_like(z_wires, R), s=60, c=config.wire_color,
               edgecolors=config.wire_edge_color, linewidths=1.5, zorder=5)
    ax.scatter(z_wires, np.full_like(z_wires, R), s=4, c=config.background_color, zorder=6)

    # Bottom row: current into the page
    ax.scatter(z_wires, np.full_like(z_wires, -R), s=60, c=config.wire_color,
               edgecolors=config.wire_edge_color, linewidths=1.5, zorder=5)
    ax.scatter(z_wires, np.full_like(z_wires, -R), s=20, marker='x',
               c=config.background_color, linewidths=1.5, zorder=6)

    ax.add_patch(Rectangle(
        (-L / 2, -R), L, 2 * R,
        fill=False, edgecolor=config.wire_color, alpha=0.3, linewidth=1
    ))

    ax.text(L / 2 + L * 0.15, 0, "N", color="#ef4444", fontsize=16,
            fontweight='bold', ha='center', va='center')
    ax.text(-L / 2 - L * 0.15, 0, "S", color="#3b82f6", fontsize=16,
            fontweight='bold', ha='center', va='center')


def draw_interior_vectors(
    ax: plt.Axes,
    geometry: CoilGeometry,
    config: VisualizationConfig
):
    """Unit arrows showing the field direction inside the coil."""
    samples = [s for s in interior_vector_samples(geometry) if s[2].magnitude >= 1e-14]
    if not samples:
        return

    r = np.array([s[0] for s in samples])
    z = np.array([s[1] for s in samples])
    br = np.array([s[2].br for s in samples])
    bz = np.array([s[2].bz for s in samples])
    magnitude = np.hypot(br, bz)

    ax.quiver(
        z, r, bz / magnitude, br / magnitude,
        color=config.vector_color,
        angles='xy', scale_units='width', scale=30,
        width=0.003, headwidth=4, headlength=5, zorder=4
    )


def render_coil_field(
    geometry: CoilGeometry,
    field_lines: Sequence[Streamline],
    config: Optional[VisualizationConfig] = None,
    ax: Optional[plt.Axes] = None
) -> plt.Figure:
    """
    Render the full coil picture.

    Args:
        geometry: Coil to draw
        field_lines: Lines from FieldLineSetBuilder (upper half only)
        config: Visualization configuration
        ax: Optional existing axes to draw on

    Returns:
        Matplotlib figure
    """
    if config is None:
        config = VisualizationConfig()

    if ax is None:
        fig = plt.figure(figsize=config.figsize)
        ax = fig.add_axes([0, 0, 1, 1])
    else:
        fig = ax.figure

    ax.clear()
    ax.set_facecolor(config.background_color)
    fig.patch.set_facecolor(config.background_color)

    width, height = config.figsize
    z_half, r_half = view_extent(geometry, (width, height))

    if not geometry.is_degenerate:
        if config.show_strength:
            ax.imshow(
                strength_image(geometry, (z_half, r_half), config),
                origin='lower',
                extent=[-z_half, z_half, -r_half, r_half],
                aspect='auto',
                interpolation='nearest'
            )

        draw_field_lines(ax, field_lines, config)
        draw_coil(ax, geometry, config)

        if config.show_vectors:
            draw_interior_vectors(ax, geometry, config)

    ax.set_xlim(-z_half, z_half)
    ax.set_ylim(-r_half, r_half)
    ax.set_aspect('equal')

    ax.text(0.5, 0.96, "Magnetic Field Around a Coil (Solenoid)",
            transform=ax.transAxes, color=config.text_color,
            fontsize=13, fontweight='bold', ha='center', va='top')

    b_inside = ideal_interior_field(geometry)
    info = (
        f"B(inside) ≈ {format_field_strength(b_inside)}\n"
        f"I = {geometry.current:.1f} A, N = {geometry.turns}, "
        f"L = {geometry.length * 100:.1f} cm"
    )
    ax.text(0.02, 0.1, info, transform=ax.transAxes, color=config.info_color,
            fontsize=10, family='monospace', va='bottom')
    ax.text(0.02, 0.03, "B = μ₀nI  (n = N/L, inside solenoid)",
            transform=ax.transAxes, color="#94a3b8", fontsize=10,
            family='monospace', va='bottom')

    ax.set_xticks([])
    ax.set_yticks([])
    ax.axis('off')

    return fig


def render_coil_png(
    geometry: CoilGeometry,
    field_lines: Sequence[Streamline],
    config: Optional[VisualizationConfig] = None,
    dpi: int = 100
) -> bytes:
    """Render the coil picture and return PNG bytes."""
    fig = render_coil_field(geometry, field_lines, config)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=dpi,
                facecolor=fig.get_facecolor(), edgecolor='none')
    plt.close(fig)
    buf.seek(0)

    return buf.getvalue()


def render_axial_profile(
    geometry: CoilGeometry,
    ax: Optional[plt.Axes] = None,
    n_points: int = 200
) -> plt.Figure:
    """
    Plot B_z along the axis: Biot-Savart sum, closed form and μ₀nI.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 4))
    else:
        fig = ax.figure

    ax.clear()

    L = geometry.length
    z = np.linspace(-1.5 * L, 1.5 * L, n_points)
    _, bz = field_grid(geometry, np.zeros_like(z), z)
    analytic = np.array([on_axis_field(geometry, zi) for zi in z])

    ax.plot(z * 100, bz * 1e3, 'b-', label='Biot-Savart sum', linewidth=2)
    ax.plot(z * 100, analytic * 1e3, 'k--', label='Closed form', linewidth=1)
    ax.axhline(y=ideal_interior_field(geometry) * 1e3, color='red',
               linestyle=':', alpha=0.7, label='μ₀nI')
    ax.axvspan(-L * 50, L * 50, alpha=0.1, color='orange', label='Coil')

    ax.set_xlabel('z (cm)')
    ax.set_ylabel('B_z (mT)')
    ax.set_title('Axial Field Profile')
    ax.legend(loc='best')
    ax.grid(True, alpha=0.3)

    return fig
