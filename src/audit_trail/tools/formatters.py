"""Compact output formatters for MCP tool responses."""

from collections.abc import Sequence

from audit_trail.models.version import Version

_EMPTY = "—"


def format_word_list(words: Sequence[str]) -> str:
    """Comma-separated words, or a dash when there are none."""
    return ", ".join(words) if words else _EMPTY


def format_version_header(version: Version) -> str:
    """Format: [id] 2024-05-01 09:30 | 12 words, 64 chars."""
    return (
        f"[{version.id}] {version.timestamp} | "
        f"{version.new_word_count} words, {version.new_length} chars"
    )


def format_version_changes(version: Version) -> str:
    """Format: Added (2): a, b / Removed (0): —."""
    added = f"Added ({len(version.added_words)}): {format_word_list(version.added_words)}"
    removed = f"Removed ({len(version.removed_words)}): {format_word_list(version.removed_words)}"
    return f"  {added}\n  {removed}"


def format_version(version: Version, include_content: bool = False) -> str:
    """Header + added/removed lines, optionally followed by the snapshot text."""
    lines = [format_version_header(version), format_version_changes(version)]
    if include_content:
        lines.append("  Content:")
        lines.extend(f"    {line}" for line in (version.content.splitlines() or [""]))
    return "\n".join(lines)


def format_save_result(version: Version) -> str:
    """Format the result of a save for the MCP response."""
    delta_words = version.new_word_count - version.old_word_count
    delta_chars = version.new_length - version.old_length
    return (
        f"Saved {version.id} at {version.timestamp}\n"
        f"{format_version_changes(version)}\n"
        f"  Words: {version.old_word_count} -> {version.new_word_count} ({delta_words:+d})\n"
        f"  Chars: {version.old_length} -> {version.new_length} ({delta_chars:+d})"
    )


def format_version_list(formatted_versions: list[str], total: int | None = None) -> str:
    """Count line + versions joined by blank lines."""
    if not formatted_versions:
        return "No versions recorded."
    shown = len(formatted_versions)
    count = f"{shown} version(s)"
    if total is not None and total > shown:
        count = f"{shown} of {total} version(s)"
    return f"{count}\n\n" + "\n\n".join(formatted_versions)
