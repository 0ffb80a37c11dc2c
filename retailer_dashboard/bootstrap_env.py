"""
Bootstrap environment for Streamlit Cloud & local dev:
- Copy the settings this app reads from st.secrets into os.environ
- Finally, load .env (without overriding existing env vars)
"""

from __future__ import annotations

import os

import streamlit as st
from dotenv import load_dotenv
from streamlit.errors import StreamlitAPIException

from retailer_dashboard.config import ENV_KEYS


def _secrets_dict() -> dict:
    try:
        items = getattr(st, "secrets", None)
        if not items:
            return {}
        return items.to_dict()
    except (FileNotFoundError, StreamlitAPIException):
        # No secrets.toml outside Streamlit Cloud
        return {}


def _bridge_secrets_to_env(secrets: dict) -> None:
    for key in ENV_KEYS:
        value = secrets.get(key)
        if value is not None and not isinstance(value, dict):
            os.environ.setdefault(key, str(value))


def ensure_env() -> None:
    """Idempotent: make sure env vars are available.
    Safe to call multiple times, both inside and outside Streamlit runtime.
    """
    _bridge_secrets_to_env(_secrets_dict())
    # load_dotenv will not override existing env vars by default
    load_dotenv()


# Execute on import for Streamlit main process, but also allow explicit calls elsewhere.
ensure_env()
