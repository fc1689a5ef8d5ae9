import base64
import logging
import os

import streamlit as st
import streamlit.components.v1 as components

from modes import MODES
from ui.session import can_submit, init_state, process_images, request_processing, select_images
from utils.audio import AUDIO_MIME

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

# --- Page config
st.set_page_config(page_title="Roast Me", layout="centered")
st.title("🔥 Roast, Compliment or Judge Me")
st.caption("Upload your dating profile pictures and let the AI have its say.")

API_URL = os.getenv("API_URL", "http://localhost:8000")
API_TIMEOUT = float(os.getenv("API_TIMEOUT")) if os.getenv("API_TIMEOUT") else None

PREVIEW_COLUMNS = 4

# --- State init
init_state(st.session_state)
state = st.session_state

def trigger_download(audio: bytes, file_name: str):
    """Click a hidden link inside the component frame so the browser saves the MP3."""
    b64 = base64.b64encode(audio).decode("utf-8")
    components.html(
        f"""
        <a id="dl" href="data:{AUDIO_MIME};base64,{b64}" download="{file_name}"></a>
        <script>document.getElementById("dl").click();</script>
        """,
        height=0,
    )

def render_previews(files):
    if not files:
        return
    cols = st.columns(PREVIEW_COLUMNS)
    for idx, f in enumerate(files):
        cols[idx % PREVIEW_COLUMNS].image(f, caption=f.name)

# --- Upload
uploaded = st.file_uploader(
    "Upload Your Image",
    type=["png", "jpg", "jpeg", "webp", "gif", "bmp"],
    accept_multiple_files=True,
    disabled=state.is_processing,
)
select_images(state, uploaded)
render_previews(state.images)

# --- Actions
enabled = can_submit(state)
cols = st.columns(len(MODES))
for col, mode in zip(cols, MODES.values()):
    label = mode.busy_label if state.is_processing and state.mode == mode.name else mode.button_label
    col.button(
        label,
        key=f"btn_{mode.name}",
        disabled=not enabled,
        on_click=request_processing,
        args=(state, mode.name),
    )
if not state.images:
    st.caption("Need to upload images so I can roast, compliment, or judge you")

# Second phase of a click: controls are already rendered disabled
if state.pending_mode:
    with st.spinner(MODES[state.pending_mode].busy_label):
        process_images(state, state.pending_mode, api_url=API_URL, timeout=API_TIMEOUT)
    st.rerun()

# --- Notification
if state.notice:
    ok, text = state.notice
    st.toast(text, icon="✅" if ok else "⚠️")
    state.notice = None

# --- AI Output Box
with st.container(border=True):
    st.subheader("AI Output:")
    st.write(state.ai_output or "AI output will appear here...")

if state.audio:
    st.audio(state.audio, format=AUDIO_MIME)
    st.download_button(
        "Download audio",
        data=state.audio,
        file_name=state.download_name,
        mime=AUDIO_MIME,
    )
    if state.download_pending:
        trigger_download(state.audio, state.download_name)
        state.download_pending = False
