#!/usr/bin/env python3
"""Launch the planner API under uvicorn with PORT and TRUCKPLAN_LOG_LEVEL from the environment."""

import os
import sys
import subprocess

port = os.environ.get("PORT", "8000")
try:
    port_int = int(port)
except ValueError:
    print(f"Warning: Invalid PORT value '{port}', using default 8000", file=sys.stderr)
    port_int = 8000

cmd = [
    sys.executable,
    "-m",
    "uvicorn",
    "truckplan.main:app",
    "--app-dir",
    "src",
    "--host",
    "0.0.0.0",
    "--port",
    str(port_int),
    "--log-level",
    os.environ.get("TRUCKPLAN_LOG_LEVEL", "info").strip().lower(),
]

print(f"Starting server on port {port_int}...", file=sys.stderr)
sys.exit(subprocess.call(cmd))
