# carbonmap/components/last_update.py
from __future__ import annotations
from datetime import datetime
from html import escape
from typing import Optional

import streamlit as st


def badge_parts(window_label: Optional[str] = None,
                fetched_at: Optional[datetime] = None,
                next_in_sec: Optional[float] = None) -> list:
    parts = []
    if window_label: parts.append(f"Window: {window_label}")
    if fetched_at: parts.append(f"Updated: {fetched_at.strftime('%H:%M:%S UTC')}")
    if next_in_sec is not None: parts.append(f"Next poll in {int(next_in_sec // 60)}m {int(next_in_sec % 60):02d}s")
    return parts


def show_last_update_badge(window_label=None, fetched_at=None, next_in_sec=None):
    parts = badge_parts(window_label, fetched_at, next_in_sec)
    if not parts: return
    st.markdown(
        "<div style='display:inline-block;padding:.25rem .5rem;border:1px solid #ccd;"
        "border-radius:.5rem;background:#eef;'>" + " | ".join(escape(p) for p in parts) + "</div>",
        unsafe_allow_html=True,
    )
