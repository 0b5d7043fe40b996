"""Run the API with uvicorn: `python -m tracker` (or `project-tracker`)."""

import uvicorn

from tracker.core.config import settings


def main() -> None:
    uvicorn.run(
        "tracker.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )


if __name__ == "__main__":
    main()
