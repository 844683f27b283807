# app.py
"""
Thin entrypoint for the API.

Usage example:
    python app.py            # listens on $PORT (default 3000)
    uvicorn app:app --reload
"""

import uvicorn

from app.config import get_settings
from app.main import app  # re-export FastAPI instance


if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
