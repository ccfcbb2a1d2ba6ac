import os

from fastapi.openapi.utils import get_openapi
from dotenv import load_dotenv
from riderkit.main import app

# Load environment variables for development
load_dotenv()  # This reads .env into os.environ


def custom_openapi() -> dict:
    """Return OpenAPI schema with project metadata."""
    if app.openapi_schema:
        return app.openapi_schema
    app.openapi_schema = get_openapi(
        title="Rider Builder API",
        version="1.0.0",
        description=(
            "Generates technical and hospitality riders, including stage plots, "
            "from a performing act's lineup."
        ),
        routes=app.routes,
    )
    return app.openapi_schema


app.openapi = custom_openapi

if __name__ == "__main__":
    import uvicorn

    workers = int(os.getenv("UVICORN_WORKERS", "1"))
    uvicorn.run(
        "riderkit.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", "8000")),
        reload=True,
        workers=workers,
    )
