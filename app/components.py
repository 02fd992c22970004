import streamlit as st

from pi_casso.renderer import RenderedGrid, hit_test
from pi_casso.session import Session


def display_grid_info(grid: RenderedGrid) -> None:
    st.caption(
        f"Grid: {grid.columns}x{grid.rows} • {grid.config.digit_count} Digits"
    )


def display_cell_inspector(session: Session, grid: RenderedGrid) -> None:
    st.text("Inspect cell")
    x_col, y_col = st.columns(2)
    with x_col:
        px = st.number_input(
            "x (px)",
            min_value=0,
            max_value=grid.width - 1,
            value=0,
            key=f"inspect_x_{grid.width}",
        )
    with y_col:
        py = st.number_input(
            "y (px)",
            min_value=0,
            max_value=grid.height - 1,
            value=0,
            key=f"inspect_y_{grid.height}",
        )

    hit = hit_test(px, py, session.view, session.palette, session.digits)
    if hit is None:
        st.warning("No digit at this position", icon="🚫")
        return
    st.markdown(
        f"**Digit** `{hit.digit}` &nbsp; **Position** `#{hit.position}` &nbsp; "
        f"**Color** <span style='color:{hit.color}'>■</span> `{hit.color.upper()}`",
        unsafe_allow_html=True,
    )
