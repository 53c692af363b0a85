"""Helpers for embedded image payloads."""

from __future__ import annotations

import html

IMAGE_WIDTH = 80
IMAGE_HEIGHT = 80


def embedded_image_reference(payload: str) -> str:
    """Return an inline ``<img>`` tag for a mind map node.

    The payload is escaped as an HTML attribute value so quotes in it
    cannot terminate the ``src`` attribute.
    """
    src = html.escape(payload, quote=True)
    return f"<img src='{src}' width='{IMAGE_WIDTH}' height='{IMAGE_HEIGHT}' />"


def payload_size_kb(payload: str) -> float:
    """Estimate the decoded size of a base64 data URI in kilobytes.

    Parameters
    ----------
    payload : str
        A ``data:<mime>;base64,<data>`` string or bare base64 data.

    Returns
    -------
    float
        Approximate decoded size in KB.

    """
    data = payload[payload.find(",") + 1 :]
    padding = len(data) - len(data.rstrip("="))
    return max(len(data) * 0.75 - min(padding, 2), 0) / 1024
