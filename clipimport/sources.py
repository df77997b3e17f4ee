"""Import source resolution.

Responsibilities:
- Read caller-provided text from files or standard input.
- Decide whether provided text is worth importing.
- Substitute deterministic placeholder content when nothing usable is given.
"""

from __future__ import annotations

from pathlib import Path
import sys

from .errors import ImportStageError
from .models.datatypes import ImportResult
from .text.segmentation import count_words

SOURCE_PROVIDED = "provided"
SOURCE_SAMPLE = "sample"
STDIN_MARKER = "-"

_SAMPLE_TITLES = (
    "Introduction to Research",
    "Methodology and Approach",
    "Key Findings",
    "Discussion and Analysis",
)
_SAMPLE_PARAGRAPHS = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor "
    "incididunt ut labore et dolore magna aliqua. Ut enim ad minim veniam, quis nostrud "
    "exercitation ullamco laboris.",
    "Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu "
    "fugiat nulla pariatur. Excepteur sint occaecat cupidatat non proident, sunt in culpa "
    "qui officia deserunt mollit anim.",
    "Sed ut perspiciatis unde omnis iste natus error sit voluptatem accusantium doloremque "
    "laudantium, totam rem aperiam, eaque ipsa quae ab illo inventore veritatis et quasi "
    "architecto beatae vitae.",
    "At vero eos et accusamus et iusto odio dignissimos ducimus qui blanditiis praesentium "
    "voluptatum deleniti atque corrupti quos dolores et quas molestias excepturi sint "
    "occaecati cupiditate non provident.",
    "Temporibus autem quibusdam et aut officiis debitis aut rerum necessitatibus saepe "
    "eveniet ut et voluptates repudiandae sint et molestiae non recusandae. Itaque earum "
    "rerum hic tenetur a sapiente delectus.",
    "Nam libero tempore, cum soluta nobis est eligendi optio cumque nihil impedit quo minus "
    "id quod maxime placeat facere possimus, omnis voluptas assumenda est, omnis dolor "
    "repellendus.",
)


def generate_sample_text() -> str:
    """Build the placeholder document used when no importable text exists.

    Each title is rendered as a `#` heading followed by its paragraph and the
    next one, so consecutive sections share one paragraph.
    """

    blocks: list[str] = []
    for index, title in enumerate(_SAMPLE_TITLES):
        blocks.append(f"# {title}")
        blocks.append(_SAMPLE_PARAGRAPHS[index])
        if index < len(_SAMPLE_PARAGRAPHS) - 1:
            blocks.append(_SAMPLE_PARAGRAPHS[index + 1])
    return "\n\n".join(blocks)


def is_substantial_content(text: str | None, min_chars: int = 10) -> bool:
    """Return whether trimmed text is longer than `min_chars` characters."""

    if text is None:
        return False
    return len(text.strip()) > min_chars


def import_text(text: str | None, use_sample_content: bool = False) -> ImportResult:
    """Select the text to import and report where it came from.

    Args:
        text: Caller-provided text, possibly blank.
        use_sample_content: Force placeholder content regardless of `text`.

    Returns:
        Import result with content, word count, and source label.
    """

    if use_sample_content or text is None or not text.strip():
        content = generate_sample_text()
        source = SOURCE_SAMPLE
    else:
        content = text
        source = SOURCE_PROVIDED
    return ImportResult(content=content, word_count=count_words(content), source=source)


def read_text_source(path: Path | str | None) -> str:
    """Read UTF-8 text from a file path, or from stdin for `-`/`None`.

    Raises:
        ImportStageError: If the file is missing or cannot be decoded.
    """

    if path is None or str(path) == STDIN_MARKER:
        return sys.stdin.read()

    source_path = Path(path)
    if not source_path.exists():
        raise ImportStageError(
            stage="read",
            detail=f"Input file not found: `{source_path}`.",
            hint="Pass an existing text file path or `-` to read from stdin.",
        )
    try:
        return source_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ImportStageError(
            stage="read",
            detail=f"Input file `{source_path}` is not valid UTF-8 text.",
            hint="Convert the file to UTF-8 and rerun.",
        ) from exc
    except OSError as exc:
        raise ImportStageError(
            stage="read",
            detail=f"Failed to read input file `{source_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc
