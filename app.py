#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Magnetic Field Around a Coil - Interactive Streamlit Application
================================================================================

Project:        Magnetic Field Around a Coil
Module:         app.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

This is the Streamlit application for the solenoid field visualization.
Users can:
- Change the current, number of turns and length of the coil
- See the field lines and field strength around the coil
- Compare the interior field with the ideal solenoid formula
"""

import io
import base64
import logging
import streamlit as st
import matplotlib.pyplot as plt
from PIL import Image

from coilfield.geometry import (
    geometry_from_params, ideal_interior_field, on_axis_field
)
from coilfield.physics import evaluate_field, format_field_strength, describe_state
from coilfield.field_lines import FieldLineSetBuilder
from coilfield.logging_config import setup_logging
from coilfield.visualization import (
    VisualizationConfig, render_coil_png, render_axial_profile
)


# Page configuration
st.set_page_config(
    page_title="Magnetic Field Around a Coil",
    page_icon="🧲",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
.stApp {
    background-color: #0e1117;
}
.coil-container {
    background-color: #0f172a;
    border-radius: 8px;
    overflow: hidden;
}
.coil-container img {
    width: 100%;
    height: auto;
}
.info-text {
    font-size: 14px;
    color: #94a3b8;
}
</style>
""", unsafe_allow_html=True)


def initialize_session_state():
    """Initialize Streamlit session state variables."""
    if 'builder' not in st.session_state:
        setup_logging(logging.INFO)
        st.session_state.builder = FieldLineSetBuilder()
    if 'vis_config' not in st.session_state:
        st.session_state.vis_config = VisualizationConfig()


def render_sidebar() -> dict:
    """Render the sidebar controls and return the raw parameter bag."""
    st.sidebar.title("🧲 Magnetic Field Around a Coil")

    st.sidebar.markdown("""
    ---
    ### About This Simulation

    A **solenoid** is a coil of wire. Each turn is a circular current loop,
    and the field of the coil is the sum of the fields of all its turns,
    computed here with the **Biot-Savart law**:

    $$d\\vec{B} = \\frac{\\mu_0 I}{4\\pi} \\frac{d\\vec{l} \\times \\hat{r}}{r^2}$$

    Inside a long solenoid the field is nearly uniform:

    $$B = \\mu_0 n I, \\quad n = N / L$$

    ---
    """)

    st.sidebar.subheader("⚙️ Coil")

    current = st.sidebar.slider(
        "Current (A)",
        min_value=0.5, max_value=20.0, value=5.0, step=0.5,
        help="Current through the wire"
    )

    num_turns = st.sidebar.slider(
        "Number of Turns",
        min_value=1, max_value=50, value=10, step=1,
        help="More turns = stronger, more uniform interior field"
    )

    coil_length = st.sidebar.slider(
        "Coil Length (cm)",
        min_value=5.0, max_value=50.0, value=20.0, step=1.0,
        help="Coil radius is a quarter of its length"
    )

    st.sidebar.markdown("---")
    st.sidebar.subheader("🎨 Visualization")

    show_vectors = st.sidebar.checkbox(
        "Show Field Strength",
        value=True,
        help="Shade the background by |B| and draw field arrows inside the coil"
    )

    return {
        'current': current,
        'numTurns': num_turns,
        'coilLength': coil_length,
        'showVectors': 1 if show_vectors else 0,
    }


def render_main_content(params: dict):
    """Render the coil picture and the field metrics."""
    geometry = geometry_from_params(params)
    builder: FieldLineSetBuilder = st.session_state.builder
    lines = builder.compute_field_lines(geometry)

    config: VisualizationConfig = st.session_state.vis_config
    config.show_strength = params['showVectors'] >= 0.5
    config.show_vectors = params['showVectors'] >= 0.5

    st.title("🧲 Magnetic Field Around a Coil")

    # Canvas size for display (matches the 8:6 figure)
    canvas_width = 800
    canvas_height = 600

    col1, col2 = st.columns([2, 1])

    with col1:
        img_bytes = render_coil_png(geometry, lines, config)

        pil_image = Image.open(io.BytesIO(img_bytes))
        pil_image = pil_image.resize((canvas_width, canvas_height), Image.Resampling.LANCZOS)

        buffered = io.BytesIO()
        pil_image.save(buffered, format="PNG")
        img_base64 = base64.b64encode(buffered.getvalue()).decode()

        st.markdown(
            f'<div class="coil-container"><img src="data:image/png;base64,{img_base64}"></div>',
            unsafe_allow_html=True
        )

    with col2:
        st.subheader("Field")

        center = evaluate_field(geometry, 0.0, 0.0)
        ideal = ideal_interior_field(geometry)
        analytic = on_axis_field(geometry, 0.0)

        st.metric("B at centre (Biot-Savart)", format_field_strength(center.bz))
        st.metric("B closed form (finite coil)", format_field_strength(analytic))
        st.metric("B = μ₀nI (ideal)", format_field_strength(ideal))

        met1, met2 = st.columns(2)
        with met1:
            st.metric("n (turns/m)", f"{geometry.turns_per_meter:.0f}")
        with met2:
            st.metric("Field lines", len(lines))

        st.markdown(f'<p class="info-text">{describe_state(geometry)}</p>',
                    unsafe_allow_html=True)

        st.markdown("### Axial Profile")
        fig = render_axial_profile(geometry)
        fig.tight_layout()
        st.pyplot(fig)
        plt.close(fig)


def main():
    """Main application entry point."""
    initialize_session_state()
    params = render_sidebar()
    render_main_content(params)


if __name__ == "__main__":
    main()
