#!/usr/bin/env python3
"""Healthcheck script for the server container.

Probes the local /api/health endpoint and exits 0 when the server answers OK.
"""

import os
import sys

import httpx


def is_server_healthy(url: str, transport: httpx.BaseTransport | None = None) -> bool:
    """Check that ``url`` answers 200 with ``{"status": "OK"}``."""
    try:
        with httpx.Client(transport=transport, timeout=5) as client:
            resp = client.get(url)
            data = resp.json()
    except (httpx.HTTPError, ValueError):
        return False
    return resp.status_code == 200 and isinstance(data, dict) and data.get("status") == "OK"


if __name__ == "__main__":
    port = os.environ.get("PORT", "3000")
    sys.exit(0 if is_server_healthy(f"http://127.0.0.1:{port}/api/health") else 1)
