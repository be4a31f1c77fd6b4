"""CLI demo that validates a tag name and checks whether it already exists.

Run with the virtual environment activated::

    GITHUB_TOKEN=... python examples/demo_check_tag.py owner/repo v1.2.3

Nothing is created; only the tag listing endpoint is called.
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from tag_action import GitHub, is_valid_tag_name

logging.basicConfig(level=logging.INFO)

def main() -> None:
    if len(sys.argv) != 3:
        print("Usage: demo_check_tag.py owner/repo tag_name")
        sys.exit(2)

    owner, _, repo = sys.argv[1].partition("/")
    tag_name = sys.argv[2]

    if not is_valid_tag_name(tag_name):
        print(f"{tag_name!r} is not a valid tag name")
        return

    github = GitHub(os.environ.get("GITHUB_TOKEN", ""), raise_on_error=True)

    first_page = github.tags.list(owner, repo) or []
    print(f"First page holds {len(first_page)} tags")

    if github.tags.exists(owner, repo, tag_name):
        print(f"{tag_name} already exists in {owner}/{repo}")
    else:
        print(f"{tag_name} is free in {owner}/{repo}")


if __name__ == "__main__":
    main()
