"""Run the API with uvicorn: `python -m catalog`."""

import uvicorn

from catalog.core.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "catalog.main:app",
        host="0.0.0.0",
        port=settings.app_port,
        reload=settings.is_development,
    )
