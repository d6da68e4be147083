import os
import streamlit as st
from catalog import (CARD_CSS, CATALOG_ENV_VAR, INTRO_TEXT,
                     get_provider_from_session, render_cards)

st.set_page_config(page_title="Developmental Disorders", page_icon="🧠", layout="centered")

st.title("Developmental Disorders")
st.caption(INTRO_TEXT)

# Provider lives in session state; built once per browser session
provider = get_provider_from_session(os.getenv(CATALOG_ENV_VAR))

st.markdown(CARD_CSS, unsafe_allow_html=True)

# --- One card per disorder, in catalog order ---
for card in render_cards(provider.disorders):
    st.markdown(card, unsafe_allow_html=True)

st.divider()
st.caption(f"{len(provider.disorders)} disorders • Gene Index and About pages in the sidebar")
