# carbonmap/components/config.py

import streamlit as st


def _secret(key: str, default):
    try:
        return st.secrets.get(key, default)
    except Exception:
        # no secrets.toml (plain `python`/pytest imports)
        return default


API_BASE  = _secret("API_BASE", "https://api.carbonintensity.org.uk")
APP_NAME  = _secret("APP_NAME", "Carbon Intensity Map")
LOG_LEVEL = _secret("LOG_LEVEL", "INFO")
