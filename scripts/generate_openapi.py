import argparse
import json
from pathlib import Path

from bookshelf_api.config import Settings
from bookshelf_api.main import create_app


def main() -> None:
    parser = argparse.ArgumentParser(description="Write the OpenAPI schema to a JSON file.")
    parser.add_argument("--output", type=Path, default=Path("docs") / "openapi.json")
    args = parser.parse_args()

    # the schema does not depend on the database, only on routes and models
    app = create_app(Settings(log_format="text"))
    schema = app.openapi()

    output_path: Path = args.output
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2)

    print(f"OpenAPI spec successfully written to {output_path}")


if __name__ == "__main__":
    main()
