"""HTTP API for the transcriber (FastAPI)."""
