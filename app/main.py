import os
import streamlit as st

from dotenv import load_dotenv

from config import (
    canvas_section,
    generator_section,
    get_session,
    palette_section,
    set_default_session,
    store_session,
)
from components import display_cell_inspector, display_grid_info
from pi_casso.renderer import export_filename, export_png, render

script_dir: str = os.path.dirname(os.path.realpath(__file__))

load_dotenv()

st.set_page_config(layout="wide", page_title="Pi-casso", page_icon="π")

with open(os.path.join(script_dir, "styles.css")) as f:
    st.markdown(f"<style>{f.read()}</style>", unsafe_allow_html=True)


# --------- Main App ---------

set_default_session()

with st.sidebar:
    st.title("π Pi-casso")
    st.caption("Generative Art from Infinite Digits")

    session = canvas_section(get_session())
    st.divider()
    session = palette_section(session)
    st.divider()
    session = generator_section(session)
    store_session(session)

grid = render(session.view, session.palette, session.digits)

with st.sidebar:
    st.divider()
    st.download_button(
        "⬇️ Download Art",
        data=export_png(grid),
        file_name=export_filename(session.view),
        mime="image/png",
        key="download_btn",
        use_container_width=True,
    )

image_col, info_col = st.columns([0.75, 0.25])

with image_col:
    st.image(grid.to_image())
    display_grid_info(grid)

with info_col:
    display_cell_inspector(session, grid)
