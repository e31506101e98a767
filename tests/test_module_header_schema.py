"""
Summary: Validate What/Why header docstrings for modules that carry one.
Why: Prevent regression to inconsistent header formats across touched files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

HEADER_OPEN: str = '"""'
WHAT_PREFIX: str = "What: "
WHY_PREFIX: str = "Why: "

REPO_ROOT: Path = Path(__file__).resolve().parents[1]

TARGET_MODULES: tuple[Path, ...] = (
    Path("src/camlib/config/settings.py"),
    Path("src/camlib/platform/logging/config.py"),
    Path("src/camlib/platform/logging/handlers.py"),
    Path("src/camlib/platform/tinify/http_client.py"),
    Path("src/camlib/platform/tinify/responses.py"),
    Path("src/camlib/features/compression/usecases/cache_store.py"),
    Path("src/camlib/features/compression/usecases/coordinator.py"),
    Path("src/camlib/features/compression/usecases/in_flight.py"),
    Path("src/camlib/features/compression/usecases/processing_types.py"),
    Path("src/camlib/ui/cli/commands/compress.py"),
    Path("src/camlib/ui/cli/commands/executor.py"),
    Path("src/camlib/ui/cli/display/result.py"),
)


def _header_lines(module_path: Path) -> list[str]:
    content_lines = (REPO_ROOT / module_path).read_text(encoding="utf-8").splitlines()
    start_index = next(
        (index for index, line in enumerate(content_lines) if line.strip()),
        None,
    )
    assert start_index is not None, f"{module_path} must not be empty"
    assert content_lines[start_index].startswith(HEADER_OPEN), (
        f"{module_path} must start with header docstring"
    )

    header: list[str] = [content_lines[start_index].removeprefix(HEADER_OPEN)]
    for line in content_lines[start_index + 1 :]:
        if line.rstrip().endswith(HEADER_OPEN):
            header.append(line.rstrip().removesuffix(HEADER_OPEN))
            break
        header.append(line)
    return header


@pytest.mark.parametrize("module_path", TARGET_MODULES, ids=lambda path: str(path))
def test_module_headers_follow_what_why_schema(module_path: Path) -> None:
    """Ensure module header docstring has non-empty What and Why lines, in that order."""

    header = _header_lines(module_path)
    what_lines = [index for index, line in enumerate(header) if line.startswith(WHAT_PREFIX)]
    why_lines = [index for index, line in enumerate(header) if line.startswith(WHY_PREFIX)]

    assert what_lines, f"{module_path} header must contain a '{WHAT_PREFIX}' line"
    assert why_lines, f"{module_path} header must contain a '{WHY_PREFIX}' line"
    assert what_lines[0] < why_lines[0], f"{module_path} must state What before Why"
    assert header[what_lines[0]].removeprefix(WHAT_PREFIX).strip()
    assert header[why_lines[0]].removeprefix(WHY_PREFIX).strip()
