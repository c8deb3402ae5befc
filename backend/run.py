"""Run the ThumbAudit web server."""

import os
import sys
from pathlib import Path

import uvicorn

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from thumbaudit.config import get_settings  # noqa: E402


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "backend.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=os.environ.get("THUMBAUDIT_ENV", "development") == "development",
    )


if __name__ == "__main__":
    main()
