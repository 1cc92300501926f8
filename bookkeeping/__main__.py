"""
Server entry point.

Usage:
    python -m bookkeeping
"""

import uvicorn

from bookkeeping.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(
        "bookkeeping.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
