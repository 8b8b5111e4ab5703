"""
Example runner.

Walks through the common PathValue operations and prints the results:

    python -m pathkit.presentation.demo
"""

import uuid
from datetime import date
from typing import List, Optional

from pathkit.domain.value_objects.path_value import PathValue
from pathkit.infrastructure.config.settings import get_settings
from pathkit.infrastructure.logging.config import setup_logging


def run_examples(
    separator: str = "/",
    today: Optional[date] = None,
    unique: Optional[str] = None,
) -> List[str]:
    """Run every example and return the output lines."""
    today = today or date.today()
    unique = unique or uuid.uuid4().hex[:13]
    lines = ["=== pathkit examples ===", ""]

    lines.append("1. Basic path operations:")
    path = PathValue.parse("uploads/images/photo.jpg", separator=separator)
    lines.append(f"   Original path: {path}")
    lines.append(f"   Filename: {path.filename}")
    lines.append(f"   Extension: {path.extension}")
    lines.append(f"   Directory: {path.path}")
    lines.append("")

    lines.append("2. Modifying a path:")
    modified = path.with_path("2024/11").with_filename("newphoto")
    lines.append(f"   Modified: {modified}")
    lines.append("")

    lines.append("3. URL handling:")
    url = PathValue.parse(
        "https://example.com/files/document.pdf?download=1", separator=separator
    )
    lines.append(f"   Full URL: {url.render_full()}")
    lines.append(f"   Scheme: {url.scheme}")
    lines.append(f"   Host: {url.host}")
    lines.append(f"   Query: {url.query}")
    lines.append("")

    lines.append("4. Chained calls:")
    chained = (
        PathValue.parse("temp/file.txt", separator=separator)
        .with_path_all("storage")
        .with_path(today.strftime("%Y/%m"))
        .with_filename(unique)
        .with_extension("jpg")
    )
    lines.append(f"   Result: {chained}")
    lines.append("")

    backslash = "\\"
    lines.append("5. Directory separators:")
    lines.append(f"   Unix style: {path.with_dir_separator('/')}")
    lines.append(f"   Windows style: {path.with_dir_separator(backslash)}")
    lines.append("")

    lines.append("=== done ===")
    return lines


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level)
    for line in run_examples(separator=settings.dir_separator):
        print(line)


if __name__ == "__main__":
    main()
