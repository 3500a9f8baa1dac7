"""Read-only catalog of named skin presets.

Each preset is a markdown file with YAML frontmatter:

    ---
    name: Dragon Gold
    color: "#FFD700"
    segments:
      - legendary
      - {tier: 3, edition: first}
    ---
    Free-form description.

The directory is scanned once at startup into an in-memory index.
Files are never written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import frontmatter

from skinmemo.colors import Color
from skinmemo.memo import format_token_skin_memo

logger = logging.getLogger(__name__)


@dataclass
class SkinPreset:
    """A named skin described by an ordered list of segments."""

    name: str
    segments: list[Any] = field(default_factory=list)
    color: Color | None = None
    description: str = ""
    path: Path | None = None

    def to_segments(self) -> list[Any]:
        if self.color is None:
            return list(self.segments)
        return [*self.segments, self.color]

    def memo(self) -> str:
        return format_token_skin_memo(*self.to_segments())


class PresetStore:
    """Lookup of skin presets stored under a single directory."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self._presets: list[SkinPreset] = []
        self._by_name: dict[str, SkinPreset] = {}
        self._by_stem: dict[str, SkinPreset] = {}
        self._build_index()

    def _build_index(self) -> None:
        """Scan root/*.md once, indexing lowercased names and file stems separately."""
        self._presets.clear()
        self._by_name.clear()
        self._by_stem.clear()
        if not self.root.is_dir():
            logger.debug("Preset directory %s does not exist", self.root)
            return
        for md_file in sorted(self.root.glob("*.md")):
            preset = self._load_preset(md_file)
            if preset is None:
                continue
            self._presets.append(preset)
            self._by_stem[md_file.stem.lower()] = preset

            key = preset.name.lower()
            existing = self._by_name.get(key)
            if existing is not None:
                logger.warning(
                    "Preset name %r in %s already used by %s; reachable by file stem only",
                    preset.name, md_file.name, existing.path.name if existing.path else "?",
                )
                continue
            self._by_name[key] = preset

    def _load_preset(self, path: Path) -> SkinPreset | None:
        try:
            post = frontmatter.load(str(path))
        except Exception as e:
            logger.warning("Skipping unreadable preset %s: %s", path.name, e)
            return None

        meta = dict(post.metadata)
        segments = meta.get("segments", [])
        if not isinstance(segments, list):
            segments = [segments]

        color = None
        raw_color = meta.get("color")
        if raw_color is not None:
            try:
                color = Color.from_hex(str(raw_color))
            except ValueError:
                logger.warning("Ignoring invalid color %r in preset %s", raw_color, path.name)

        return SkinPreset(
            name=str(meta.get("name") or "").strip() or path.stem,
            segments=segments,
            color=color,
            description=post.content.strip(),
            path=path,
        )

    def names(self) -> list[str]:
        return sorted(preset.name for preset in self._presets)

    def get(self, name: str) -> SkinPreset | None:
        """Find a preset by name, then by file stem, case-insensitive."""
        key = name.strip().lower()
        return self._by_name.get(key) or self._by_stem.get(key)
