"""CLI entrypoints for rendering initials avatars and inspecting settings."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict, replace
from pathlib import Path

from monogram_core import load_config, save_config, to_avatar_options
from monogram_core.config import config_path
from monogram_core.logging_setup import configure_logging, get_logger
from monogram_renderer import (
    AvatarError,
    LoadedFont,
    PaletteConfigError,
    extract_initials,
    get_palette,
    list_palettes,
    new_avatar_from_initials,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str, ensure_ascii=False))


def _config_file(args: argparse.Namespace) -> Path | None:
    return Path(args.config).expanduser() if args.config else None


def cmd_render(args: argparse.Namespace) -> int:
    cfg = load_config(_config_file(args))
    render = cfg.render
    if args.size is not None:
        render.size = max(1, args.size)
    if args.font is not None:
        render.font_path = args.font
    if args.font_size is not None:
        render.font_size = max(0.0, args.font_size)
    if args.initials is not None:
        render.n_initials = args.initials
    if args.bg is not None:
        render.bg_color = args.bg
    if args.fg is not None:
        render.text_color = args.fg
    if args.palette is not None:
        render.palette = args.palette or None
    shape = args.shape or render.shape

    try:
        options = to_avatar_options(render)
        if options.font_path is None:
            get_logger().info("no font configured, using bundled face", extra={"event": "builtin_font"})
            options = replace(options, font=LoadedFont.builtin())
        avatar = new_avatar_from_initials(args.text, options)
    except (AvatarError, ValueError) as exc:
        get_logger().error(f"render failed: {exc}", extra={"event": "render_failed", "shape": shape})
        _print_json({"success": False, "error": str(exc)})
        return 2

    payload = avatar.square() if shape == "square" else avatar.circle()
    summary: dict[str, object] = {
        "success": True,
        "text": args.text,
        "shape": shape,
        "size": avatar.settings.size,
        "bytes": len(payload),
    }
    if args.out:
        out = Path(args.out).expanduser()
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(payload)
        summary["out"] = str(out)
    if args.data_url:
        summary["data_url"] = avatar.data_url(shape)

    _print_json(summary)
    return 0


def cmd_initials(args: argparse.Namespace) -> int:
    _print_json({"text": args.text, "initials": extract_initials(args.text, args.n)})
    return 0


def cmd_palettes(_args: argparse.Namespace) -> int:
    _print_json(
        {
            name: [{"color": stop.color.hex(), "position": stop.position} for stop in get_palette(name)]
            for name in list_palettes()
        }
    )
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    path = _config_file(args) or config_path()
    cfg = load_config(path)
    payload: dict[str, object] = {"path": str(path), "config": asdict(cfg)}
    if args.save:
        payload["saved"] = str(save_config(cfg, path))
    _print_json(payload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="monogram", description="Initials avatar generator")
    parser.add_argument("--config", default=None, help="Optional path to a JSON settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render an avatar PNG")
    render_cmd.add_argument("text", help="Name, handle or e-mail address")
    render_cmd.add_argument("--out", default=None, help="Output PNG path")
    render_cmd.add_argument("--shape", choices=["square", "circle"], default=None)
    render_cmd.add_argument("--size", type=int, default=None, help="Output size in pixels")
    render_cmd.add_argument("--font", default=None, help="TrueType/OpenType font file")
    render_cmd.add_argument("--font-size", type=float, default=None, help="Font size on the 3x oversampled canvas, 0 to auto-fit")
    render_cmd.add_argument("--initials", type=int, default=None, help="Max initials, 0 renders the raw text")
    render_cmd.add_argument("--bg", default=None, help="Background color (#rgb or #rrggbb)")
    render_cmd.add_argument("--fg", default=None, help="Text color (#rgb or #rrggbb)")
    render_cmd.add_argument("--palette", default=None, help="Gradient palette name, overrides --bg")
    render_cmd.add_argument("--data-url", action="store_true", help="Include a data URL in the output")
    render_cmd.set_defaults(func=cmd_render)

    initials_cmd = sub.add_parser("initials", help="Print the initials derived from text")
    initials_cmd.add_argument("text")
    initials_cmd.add_argument("-n", type=int, default=2, help="Max initials")
    initials_cmd.set_defaults(func=cmd_initials)

    palettes_cmd = sub.add_parser("palettes", help="List built-in gradient palettes")
    palettes_cmd.set_defaults(func=cmd_palettes)

    config_cmd = sub.add_parser("config", help="Show effective settings")
    config_cmd.add_argument("--save", action="store_true", help="Write the effective settings back to disk")
    config_cmd.set_defaults(func=cmd_config)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config(_config_file(args))
    logger = configure_logging(keep_files=cfg.logging.keep_log_files, console=False, level=cfg.logging.level)

    try:
        list_palettes()
    except PaletteConfigError as exc:
        logger.critical(str(exc), extra={"event": "palette_config_fatal", "problems": exc.problems})
        _print_json({"success": False, "error": str(exc)})
        return 2

    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
