"""
Client-side state and submission logic for the Streamlit page.

Every function takes the state mapping explicitly (``st.session_state`` in
the app, a plain dict in tests) so the flow can run without a browser.
"""
import logging
from dataclasses import dataclass
from typing import Any, List, MutableMapping, Optional, Sequence

import requests

from modes import MODES
from utils.audio import decode_audio, download_name
from utils.image_utils import file_to_data_url

logger = logging.getLogger(__name__)

PROCESS_PATH = "/api/process"

DEFAULTS = {
    "images": [],
    "mode": "roast",
    "ai_output": "",
    "is_processing": False,
    "pending_mode": None,
    "audio": None,
    "download_name": None,
    "download_pending": False,
    "notice": None,
}


@dataclass
class Outcome:
    ok: bool
    notice: str
    text: Optional[str] = None
    audio: Optional[bytes] = None
    download_name: Optional[str] = None


def init_state(state: MutableMapping[str, Any]) -> None:
    for k, v in DEFAULTS.items():
        state.setdefault(k, list(v) if isinstance(v, list) else v)


def select_images(state: MutableMapping[str, Any], files: Optional[Sequence[Any]]) -> None:
    """Replace the current upload batch wholesale."""
    state["images"] = list(files or [])


def can_submit(state: MutableMapping[str, Any]) -> bool:
    return bool(state.get("images")) and not state.get("is_processing")


def request_processing(state: MutableMapping[str, Any], mode: str) -> None:
    """Button callback: lock the controls; the next script run does the work."""
    if not can_submit(state):
        return
    state["is_processing"] = True
    state["mode"] = mode
    state["pending_mode"] = mode


def encode_images(files: Sequence[Any]) -> List[str]:
    # One unreadable file fails the whole batch
    return [file_to_data_url(f.getvalue(), getattr(f, "type", None)) for f in files]


def success_notice(mode: str) -> str:
    return f"{mode.capitalize()} generated successfully!"


def error_notice(mode: str) -> str:
    return f"Uh oh, it looks like can't generate {mode}!"


def process_images(
    state: MutableMapping[str, Any],
    mode: str,
    *,
    api_url: str,
    timeout: Optional[float] = None,
) -> Outcome:
    """
    Send the current batch to the processing endpoint.

    On success the returned text replaces ``ai_output`` and the decoded MP3 is
    stored for playback and download. On any failure the previous output is
    left untouched. ``is_processing`` is always cleared on return.
    """
    state["is_processing"] = True
    state["mode"] = mode
    state["pending_mode"] = None

    try:
        if mode not in MODES:
            raise ValueError(f"Unknown mode {mode!r}")
        payload = {"images": encode_images(state.get("images") or []), "mode": mode}
        resp = requests.post(f"{api_url.rstrip('/')}{PROCESS_PATH}", json=payload, timeout=timeout)
        if not resp.ok:
            raise RuntimeError(f"Error generating {mode}: HTTP {resp.status_code} {resp.text[:200]}")

        data = resp.json()
        text = data["text"]
        audio = decode_audio(data["audioBase64"])
    except Exception as exc:
        logger.exception("Processing %s failed: %s", mode, exc)
        outcome = Outcome(ok=False, notice=error_notice(mode))
    else:
        state["ai_output"] = text
        state["audio"] = audio
        state["download_name"] = download_name(mode)
        state["download_pending"] = True
        outcome = Outcome(
            ok=True,
            notice=success_notice(mode),
            text=text,
            audio=audio,
            download_name=download_name(mode),
        )
    finally:
        state["is_processing"] = False

    state["notice"] = (outcome.ok, outcome.notice)
    return outcome
