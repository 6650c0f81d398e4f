"""HTTP API for title analysis (FastAPI)."""
