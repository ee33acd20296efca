"""
Subtitle parsing task.

Converts SRT and VTT byte content into clean prose: timestamps, sequence
numbers, stage directions and stray numbers are stripped.

Dependencies: re, lecturelens.core.exceptions
System role: First stage of subtitle ingestion pipeline
"""

import logging
import re
from pathlib import PurePosixPath

from lecturelens.core.exceptions import ParsingError

logger = logging.getLogger(__name__)

_BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")
_VTT_MARKUP = re.compile(r"<[^>]*>")

# Cleanup rules, applied in order. Later rules assume earlier ones ran.
_CLEANUP_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\[.*?\]"), ""),  # [music], [applause]
    (re.compile(r"\(.*?\)"), ""),  # (laughs), (clears throat)
    (re.compile(r"(?<!\S)\d+\.?(?=\s|$)"), ""),  # standalone 3, 12, 1.
    (re.compile(r"\s+"), " "),
    (re.compile(r"\s+([.,!?;:])"), r"\1"),
    (re.compile(r"([,;])(?=[^\s\d])"), r"\1 "),
    (re.compile(r"([.!?])(?=[A-Z])"), r"\1 "),
]


def clean_text(text: str) -> str:
    """
    Apply the subtitle cleanup rules to already-extracted text.

    Args:
        text: Text collected from subtitle cues

    Returns:
        str: Cleaned single-line prose
    """
    for pattern, replacement in _CLEANUP_RULES:
        text = pattern.sub(replacement, text)
    return text.strip()


def _parse_srt(content: str) -> str:
    parts = []
    for block in _BLOCK_SEPARATOR.split(content):
        lines = block.strip().split("\n")
        if len(lines) < 3:
            continue
        text = " ".join(line.strip() for line in lines[2:]).strip()
        if text:
            parts.append(text)
    return " ".join(parts)


def _parse_vtt(content: str) -> str:
    parts = []
    in_text_block = False
    for line in content.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith("WEBVTT") or stripped.startswith("NOTE"):
            in_text_block = False
            continue
        if "-->" in stripped:
            in_text_block = True
            continue
        if in_text_block:
            text = _VTT_MARKUP.sub("", stripped).strip()
            if text:
                parts.append(text)
    return " ".join(parts)


_PARSERS = {
    ".srt": _parse_srt,
    ".vtt": _parse_vtt,
}


def _decode(raw: bytes, file_path: str) -> str:
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ParsingError(
            f"File is not valid UTF-8: {e}",
            document_id=file_path,
        ) from e
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_subtitles(raw: bytes, file_path: str) -> str:
    """
    Parse subtitle bytes into clean prose.

    Fails soft: any parse error is logged and an empty string is returned so
    one malformed file never aborts a batch ingest.

    Args:
        raw: Raw file content
        file_path: Logical path used for format dispatch (.srt / .vtt)

    Returns:
        str: Normalized text, or "" when nothing could be extracted
    """
    try:
        suffix = PurePosixPath(file_path.replace("\\", "/")).suffix.lower()
        parser = _PARSERS.get(suffix)
        if parser is None:
            raise ParsingError(
                f"Unsupported subtitle format: {suffix or '<none>'}",
                document_id=file_path,
                file_type=suffix,
            )
        if not raw:
            return ""
        return clean_text(parser(_decode(raw, file_path)))
    except Exception as e:
        logger.warning(f"{__name__}:normalize_subtitles - Failed to parse {file_path}: {e}")
        return ""


class SubtitleParsingTask:
    """Normalize SRT/VTT subtitle files into plain text."""

    def __init__(self, supported_extensions: list[str] | None = None) -> None:
        """
        Initialize parsing task.

        Args:
            supported_extensions: Extensions accepted by is_supported (default .srt, .vtt)
        """
        self._extensions = {ext.lower() for ext in (supported_extensions or list(_PARSERS))}

    def is_supported(self, file_path: str) -> bool:
        """Return True when the path has a subtitle extension we can parse."""
        suffix = PurePosixPath(file_path.replace("\\", "/")).suffix.lower()
        return suffix in self._extensions and suffix in _PARSERS

    def normalize(self, raw: bytes, file_path: str) -> str:
        """
        Normalize subtitle content.

        Args:
            raw: Raw file bytes
            file_path: Relative path of the file

        Returns:
            str: Clean prose ("" on any parse failure)
        """
        return normalize_subtitles(raw, file_path)
