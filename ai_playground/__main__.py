"""
Run the API server: python -m ai_playground
"""
import os

import uvicorn

from ai_playground.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "ai_playground.api.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
        reload=settings.is_development(),
    )


if __name__ == "__main__":
    main()
