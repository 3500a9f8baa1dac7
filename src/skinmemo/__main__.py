"""Entry point: python -m skinmemo [format|preset|list]

- "format SEG...": Build a memo from command-line segments
- "preset NAME":   Print the memo of a stored preset
- "list":          List stored preset names
"""

from __future__ import annotations

import logging
import sys

from skinmemo.colors import Color
from skinmemo.config import SkinMemoConfig, load_config
from skinmemo.memo import KEY_VALUE_SEPARATOR, format_token_skin_memo

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _parse_arg(arg: str) -> object:
    """'k=v' -> {k: v}, '#RRGGBB' -> Color, anything else stays text."""
    if arg.startswith("#"):
        try:
            return Color.from_hex(arg)
        except ValueError:
            logger.debug("%r is not a hex color, keeping as text", arg)
    if KEY_VALUE_SEPARATOR in arg:
        key, _, value = arg.partition(KEY_VALUE_SEPARATOR)
        return {key: value}
    return arg


def _run_format(args: list[str]) -> int:
    print(format_token_skin_memo(*[_parse_arg(a) for a in args]))
    return 0


def _run_preset(config: SkinMemoConfig, args: list[str]) -> int:
    from skinmemo.presets import PresetStore

    if not args:
        print("Usage: python -m skinmemo preset NAME")
        return 1

    preset = PresetStore(config.presets_dir).get(args[0])
    if preset is None:
        print(f"Unknown preset: {args[0]}", file=sys.stderr)
        return 1
    print(preset.memo())
    return 0


def _run_list(config: SkinMemoConfig) -> int:
    from skinmemo.presets import PresetStore

    for name in PresetStore(config.presets_dir).names():
        print(name)
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    cmd = argv[0] if argv else ""

    config = load_config()
    _setup_logging(config.log_level)

    if cmd == "format":
        return _run_format(argv[1:])
    if cmd == "preset":
        return _run_preset(config, argv[1:])
    if cmd == "list":
        return _run_list(config)

    print("Usage: python -m skinmemo [format|preset|list]")
    print("  format SEG...  Build a memo (k=v -> key/value, #RRGGBB -> color)")
    print("  preset NAME    Print the memo of a stored preset")
    print("  list           List stored presets")
    return 1


if __name__ == "__main__":
    sys.exit(main())
