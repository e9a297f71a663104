"""Generate an OpenAPI schema file for the FastAPI application."""

from pathlib import Path
import json

from tododag.main import app


def generate_openapi(output_path: Path | None = None) -> Path:
    """Write the current OpenAPI schema to ``openapi.json``."""
    schema = app.openapi()
    if output_path is None:
        output_path = Path(__file__).resolve().parent / "openapi.json"
    output_path.write_text(json.dumps(schema, indent=2))
    return output_path


if __name__ == "__main__":
    generate_openapi()
