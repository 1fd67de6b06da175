"""Application settings constants."""

from __future__ import annotations

import os

# Seconds to wait for a remote playlist before giving up.
M3U_HTTP_TIMEOUT_SECONDS = float(os.getenv("M3U_HTTP_TIMEOUT_SECONDS", "10"))

M3U_HTTP_USER_AGENT = os.getenv("M3U_HTTP_USER_AGENT", "m3ukit/1.0")

# Transport-level retries for GET on 429/5xx responses.
M3U_HTTP_RETRIES = int(os.getenv("M3U_HTTP_RETRIES", "3"))
M3U_HTTP_BACKOFF_FACTOR = float(os.getenv("M3U_HTTP_BACKOFF_FACTOR", "0.4"))

# utf-8-sig drops a leading byte order mark.
M3U_SOURCE_ENCODING = os.getenv("M3U_SOURCE_ENCODING", "utf-8-sig")
M3U_OUTPUT_ENCODING = os.getenv("M3U_OUTPUT_ENCODING", "utf-8")
