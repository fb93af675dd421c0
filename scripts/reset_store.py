import argparse
import sys
from pathlib import Path


def main():
    backend_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(backend_root))

    from blog_backend.config import get_settings  # type: ignore
    from blog_backend.store import DocumentStore  # type: ignore

    parser = argparse.ArgumentParser(description="Recreate an empty blog document file")
    parser.add_argument("--file", default=get_settings().DB_FILE, help="JSON document path")
    args = parser.parse_args()

    DocumentStore(args.file).reset()
    print(f"Document {args.file} recreated.")


if __name__ == "__main__":
    main()
