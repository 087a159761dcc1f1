import argparse
import sys
from typing import Optional

import requests


def identify_scene(base_url: str, description: str, timeout: float) -> tuple[int, Optional[dict]]:
    url = base_url.rstrip("/") + "/identify-movie"
    r = requests.post(url, json={"description": description}, timeout=timeout)
    try:
        return r.status_code, r.json()
    except ValueError:
        return r.status_code, None


def main() -> None:
    parser = argparse.ArgumentParser(description="Ask a running SceneMemory instance which movie a scene is from")
    parser.add_argument("description", type=str)
    parser.add_argument("--base_url", type=str, default="http://localhost:8000")
    parser.add_argument("--timeout", type=float, default=60.0)
    args = parser.parse_args()

    status, body = identify_scene(args.base_url, args.description, args.timeout)
    if body is None:
        print(f"Unexpected response (status {status})", file=sys.stderr)
        sys.exit(1)
    if status != 200:
        print(f"Error ({status}): {body.get('error')}", file=sys.stderr)
        sys.exit(1)

    movies = body.get("movies", [])
    if not movies:
        print("No movies found. Try describing the scene with more detail.")
        return
    for movie in movies:
        print(f"- [{movie['confidence']}] {movie['title']} ({movie['year']})")
        print(f"  {movie['description']}")


if __name__ == "__main__":
    main()
