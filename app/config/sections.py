from __future__ import annotations

from typing import Dict

import streamlit as st

from pi_casso.generator import generate_palette
from pi_casso.palette import DIGITS
from pi_casso.session import (
    Session,
    apply_preset,
    can_generate,
    run_generation,
    set_digit_color,
    update_view,
)
from pi_casso.types import PresetName
from pi_casso.view import (
    CELL_SIZE_RANGE,
    DIGIT_COUNT_RANGE,
    GRID_WIDTH_RANGE,
    START_OFFSET_STEP,
    max_start,
)

PRESET_LABELS: Dict[PresetName, str] = {
    PresetName.DEFAULT: "↩️ Default",
    PresetName.PASTEL: "🌸 Pastel",
    PresetName.MONOCHROME: "🌓 Mono",
}


def canvas_section(session: Session) -> Session:
    st.subheader("Canvas & Grid")
    view = session.view

    upper = max_start(view.digit_count, len(session.digits))
    if upper > 0:
        start_offset: int = st.slider(
            "Start digit",
            0,
            upper,
            min(view.start_offset, upper),
            step=START_OFFSET_STEP,
            key=f"start_offset_{upper}",
        )
    else:
        # Slider needs min < max
        start_offset = 0
        st.caption("Start digit: 0")

    lo, hi, step = DIGIT_COUNT_RANGE
    digit_count: int = st.slider(
        "Total digits",
        lo,
        min(hi, len(session.digits)),
        view.digit_count,
        step=step,
        key="digit_count",
    )
    lo, hi, step = GRID_WIDTH_RANGE
    grid_width: int = st.slider(
        "Grid width (columns)", lo, hi, view.grid_width, step=step, key="grid_width"
    )
    lo, hi, step = CELL_SIZE_RANGE
    cell_size: int = st.slider(
        "Cell size (px)", lo, hi, view.cell_size, step=step, key="cell_size"
    )
    return update_view(
        session,
        start_offset=start_offset,
        digit_count=digit_count,
        grid_width=grid_width,
        cell_size=cell_size,
    )


def preset_section(session: Session) -> Session:
    columns = st.columns(len(PRESET_LABELS))
    for column, (name, label) in zip(columns, PRESET_LABELS.items()):
        with column:
            if st.button(label, key=f"preset_{name}", use_container_width=True):
                session = apply_preset(session, name)
    return session


def palette_section(session: Session) -> Session:
    st.subheader("Color Palette")
    session = preset_section(session)
    # Two rows of five pickers; no widget key so a new palette resets them
    for row_digits in (DIGITS[:5], DIGITS[5:]):
        for column, digit in zip(st.columns(5), row_digits):
            with column:
                color = st.color_picker(digit, session.palette[digit])
                if color != session.palette[digit]:
                    session = set_digit_color(session, digit, color)
    return session


def generator_section(session: Session) -> Session:
    st.subheader("✨ AI Palette Generator")
    theme: str = st.text_input(
        "Theme", placeholder="e.g., Cyberpunk, Ocean...", key="theme_prompt"
    )
    if st.button(
        "✨ Generate",
        key="generate_palette_btn",
        disabled=not can_generate(session, theme),
        use_container_width=True,
    ):
        with st.spinner("Generating palette..."):
            session = run_generation(session, theme, generate_palette)
    if session.error:
        st.error(session.error)
    return session
