"""Modular Project Configurator — Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_project,
    tab_design,
    tab_cost_analysis,
)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    st.set_page_config(
        page_title="Modular Configurator",
        page_icon="🏗️",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3 = st.tabs([
        "📋 Project",
        "📐 Design",
        "💰 Cost Analysis",
    ])

    with tab1:
        tab_project.render(sidebar_state)
    with tab2:
        tab_design.render(sidebar_state)
    with tab3:
        tab_cost_analysis.render(sidebar_state)


if __name__ == "__main__":
    main()
