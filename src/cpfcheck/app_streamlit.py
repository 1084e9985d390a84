"""cpfcheck Streamlit App (locally run CPF checker UI)."""

from __future__ import annotations

import logging

import streamlit as stream

from cpfcheck.utils import get_logger
from cpfcheck.validators import validate_cpf

MAX_RECENT_CHECKS = 10

# --- Caching Functions ---


@stream.cache_resource
def get_cached_logger(name: str):
    """Initializes and caches the logger."""
    return get_logger(name)


def check_candidate(raw: str, log: logging.Logger) -> bool:
    """Validate one typed candidate and log the verdict without the number."""
    is_valid = validate_cpf(raw)
    log.info("CPF check: valid=%s length=%d", is_valid, len(raw))
    return is_valid


# --- Main Application Logic Wrapped in a Function ---


def main():
    # 1. Page Config
    stream.set_page_config(
        page_title="cpfcheck - CPF Validator",
        page_icon="🇧🇷",
        layout="centered",
    )

    # 2. Logger
    log = get_cached_logger("cpfcheck")

    stream.title("cpfcheck 🇧🇷 — CPF Validator")
    stream.caption(
        "Checks format, repeated digits and both verifier digits. "
        "Dots and dashes are ignored; any other character makes the number invalid."
    )

    # 3. Sidebar Recent Checks (verdicts only, numbers are never kept)
    with stream.sidebar:
        stream.header("Your Session")
        recent_checks = stream.session_state.get("recent_checks", [])

        if not recent_checks:
            stream.caption("No numbers checked yet.")
        else:
            stream.caption(f"Total Checks: {len(recent_checks)}")
            for entry in recent_checks[::-1]:
                stream.markdown("✅ Valid" if entry["valid"] else "❌ Invalid")

    # 4. Input
    with stream.form("cpf_form", clear_on_submit=False):
        candidate = stream.text_input(
            "CPF",
            placeholder="529.982.247-25",
            max_chars=64,
        )
        submitted = stream.form_submit_button("Validate", type="primary")

    if not submitted:
        return

    # 5. Verdict
    is_valid = check_candidate(candidate, log)

    recent = stream.session_state.setdefault("recent_checks", [])
    recent.append({"valid": is_valid})
    if len(recent) > MAX_RECENT_CHECKS:
        del recent[:-MAX_RECENT_CHECKS]

    if is_valid:
        stream.success("Valid CPF.")
    else:
        stream.error("Invalid CPF.")


if __name__ == "__main__":
    main()
