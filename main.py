#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Magnetic Field Around a Coil - Command Line Interface
================================================================================

Project:        Magnetic Field Around a Coil
Module:         main.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

Command line interface for checking and rendering the solenoid field.
"""

import argparse
import logging
import time
import matplotlib.pyplot as plt

from coilfield.geometry import (
    CoilGeometry,
    geometry_from_params,
    ideal_interior_field,
    on_axis_field,
)
from coilfield.physics import evaluate_field, format_field_strength, describe_state
from coilfield.field_lines import FieldLineSetBuilder
from coilfield.logging_config import setup_logging
from coilfield.visualization import (
    VisualizationConfig, render_coil_field, render_axial_profile
)


def make_geometry(args: argparse.Namespace) -> CoilGeometry:
    """Clamp the command line values into a valid coil."""
    params = {
        'current': args.current,
        'numTurns': args.turns,
        'coilLength': args.length,
    }
    if args.radius is not None:
        params['radius'] = args.radius
    return geometry_from_params(params)


def run_field_check(geometry: CoilGeometry):
    """
    Compare the Biot-Savart centre field with the closed-form values.

    Args:
        geometry: Coil to check
    """
    print("=" * 60)
    print("Magnetic Field Around a Coil - Field Check")
    print("=" * 60)

    print(f"\nCoil: R = {geometry.radius * 100:.2f} cm, L = {geometry.length * 100:.1f} cm, "
          f"N = {geometry.turns}, I = {geometry.current:.2f} A")
    print(f"  Aspect ratio L/R: {geometry.aspect_ratio:.1f}")

    t_start = time.time()
    center = evaluate_field(geometry, 0.0, 0.0)
    t_field = time.time() - t_start

    ideal = ideal_interior_field(geometry)
    analytic = on_axis_field(geometry, 0.0)

    print(f"\nCentre field:")
    print(f"  Biot-Savart sum: {format_field_strength(center.bz, 4)}")
    print(f"  Closed form:     {format_field_strength(analytic, 4)}")
    print(f"  Ideal μ₀nI:      {format_field_strength(ideal, 4)}")
    print(f"  B_r at centre:   {center.br:.3e} T")
    print(f"  (first call including compilation: {t_field:.2f} s)")

    if analytic != 0:
        error = abs(center.bz - analytic) / abs(analytic)
        print(f"\n  Relative error vs closed form: {error * 100:.3f}%")
        if error < 0.01:
            print("  ✓ Excellent agreement")
        elif error < 0.05:
            print("  ✓ Good agreement")
        else:
            print("  ⚠ Consider more turns or a longer coil")

    builder = FieldLineSetBuilder()

    t_start = time.time()
    lines = builder.compute_field_lines(geometry)
    t_lines = time.time() - t_start

    t_start = time.time()
    builder.compute_field_lines(geometry)
    t_cached = time.time() - t_start

    print(f"\nField lines:")
    print(f"  Lines traced:   {len(lines)}")
    print(f"  Points total:   {sum(len(line) for line in lines)}")
    print(f"  Trace time:     {t_lines:.2f} s")
    print(f"  Cached lookup:  {t_cached * 1e6:.1f} µs")

    print(f"\n{describe_state(geometry)}")


def run_plot(geometry: CoilGeometry, output: str, show: bool = True):
    """
    Render the coil field and the axial profile.

    Args:
        geometry: Coil to draw
        output: PNG file for the field picture
        show: Open the figures interactively
    """
    print("=" * 60)
    print("Magnetic Field Around a Coil - Render")
    print("=" * 60)

    builder = FieldLineSetBuilder()
    lines = builder.compute_field_lines(geometry)
    print(f"\nTraced {len(lines)} field lines")

    config = VisualizationConfig()
    fig = render_coil_field(geometry, lines, config)
    fig.savefig(output, dpi=150, facecolor=fig.get_facecolor())
    print(f"Field picture saved to {output}")

    profile = render_axial_profile(geometry)
    profile.tight_layout()
    profile_output = output.rsplit('.', 1)[0] + '_profile.png'
    profile.savefig(profile_output, dpi=150)
    print(f"Axial profile saved to {profile_output}")

    if show:
        plt.show()


def main():
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        description="Magnetic Field Around a Coil - Biot-Savart Solenoid Field",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --check                       Compare centre field with theory
  python main.py --check -n 200 -L 20 -r 0.02  Long thin coil
  python main.py --plot                        Render field lines
  python main.py --app                         Launch Streamlit app
        """
    )

    parser.add_argument('--check', action='store_true',
                        help='Compare centre field with closed-form values')
    parser.add_argument('--plot', action='store_true',
                        help='Render field lines and axial profile')
    parser.add_argument('--app', action='store_true',
                        help='Launch Streamlit web app')
    parser.add_argument('--current', '-I', type=float, default=5.0,
                        help='Current in amperes (default: 5)')
    parser.add_argument('--turns', '-n', type=int, default=10,
                        help='Number of turns (default: 10)')
    parser.add_argument('--length', '-L', type=float, default=20.0,
                        help='Coil length in cm (default: 20)')
    parser.add_argument('--radius', '-r', type=float, default=None,
                        help='Coil radius in m (default: length / 4)')
    parser.add_argument('--output', '-o', default='coil_field.png',
                        help='Output file for --plot (default: coil_field.png)')
    parser.add_argument('--no-show', action='store_true',
                        help='Do not open plot windows')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    geometry = make_geometry(args)

    if args.check:
        run_field_check(geometry)
    elif args.plot:
        run_plot(geometry, args.output, show=not args.no_show)
    elif args.app:
        import subprocess
        print("Launching Streamlit app...")
        subprocess.run(['streamlit', 'run', 'app.py'])
    else:
        parser.print_help()
        print("\nNo action specified. Run with --check, --plot, or --app")


if __name__ == "__main__":
    main()
