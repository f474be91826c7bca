"""CLI entrypoints for rendering the donation thermometer and managing its data."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, replace
from datetime import datetime, timezone
from pathlib import Path

from thermometer_core import (
    SAMPLE_CSV,
    StorageError,
    TeamsCsvError,
    apply_teams,
    create_store,
    load_settings,
    parse_teams_csv,
)
from thermometer_core.logging_setup import configure_logging, get_logger
from thermometer_renderer import (
    DonationConfig,
    RasterizationError,
    clamp_scale,
    clamp_width,
    list_themes,
    render_raster,
    render_scene,
    summarize,
)


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _write_output(payload: bytes, out: str | None) -> None:
    if out:
        path = Path(out).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
        return
    sys.stdout.buffer.write(payload)
    sys.stdout.buffer.flush()


def cmd_render(args: argparse.Namespace) -> int:
    settings = load_settings()
    render = settings.render
    config = create_store(settings).load_config()

    width = clamp_width(args.width, default=render.width)
    theme = args.theme or render.theme
    scene = render_scene(config, width, theme)

    if args.format == "svg":
        _write_output(scene.encode("utf-8"), args.out)
        return 0

    scale = clamp_scale(
        render.default_scale if args.scale is None else args.scale,
        min_scale=render.min_scale,
        max_scale=render.max_scale,
    )
    try:
        png = render_raster(scene, scale)
    except (RasterizationError, RuntimeError) as exc:
        get_logger().error("failed to render thermometer PNG: %s", exc, extra={"event": "render_failed"})
        _print_json({"success": False, "error": "Failed to render thermometer image"})
        return 1

    _write_output(png, args.out)
    return 0


def cmd_summary(_args: argparse.Namespace) -> int:
    settings = load_settings()
    config = create_store(settings).load_config()
    payload = asdict(summarize(config))
    payload["organization_name"] = config.organization_name
    payload["title"] = config.title
    payload["last_updated"] = config.last_updated
    _print_json(payload)
    return 0


def cmd_show_config(_args: argparse.Namespace) -> int:
    config = create_store(load_settings()).load_config()
    _print_json(config.to_dict())
    return 0


def cmd_import_csv(args: argparse.Namespace) -> int:
    store = create_store(load_settings())
    teams = parse_teams_csv(Path(args.file).expanduser().read_text(encoding="utf-8"))
    config = apply_teams(store.load_config(), teams)
    store.save_config(config)
    get_logger().info("updated thermometer config with %d teams", len(config.teams), extra={"event": "teams_imported"})
    _print_json({"success": True, "message": "CSV uploaded successfully", "config": config.to_dict()})
    return 0


def cmd_update_config(args: argparse.Namespace) -> int:
    store = create_store(load_settings())
    raw = json.loads(Path(args.file).expanduser().read_text(encoding="utf-8"))
    config = replace(DonationConfig.from_dict(raw), last_updated=datetime.now(timezone.utc).isoformat())
    store.save_config(config)
    get_logger().info("updated thermometer config via JSON", extra={"event": "config_updated"})
    _print_json({"success": True, "message": "Configuration updated successfully", "config": config.to_dict()})
    return 0


def cmd_sample_csv(_args: argparse.Namespace) -> int:
    print(SAMPLE_CSV)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="thermometer", description="Donation thermometer renderer and data tools")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render the thermometer as SVG or PNG")
    render_cmd.add_argument("--theme", choices=list_themes(), default=None)
    render_cmd.add_argument("--format", choices=["svg", "png"], default="png")
    render_cmd.add_argument("--scale", type=float, default=None, help="PNG scale factor, clamped to the configured bounds")
    render_cmd.add_argument("--width", type=int, default=None, help="SVG canvas width in pixels")
    render_cmd.add_argument("--out", default=None, help="Output file (stdout when omitted)")
    render_cmd.set_defaults(func=cmd_render)

    summary_cmd = sub.add_parser("summary", help="Print fundraising progress")
    summary_cmd.set_defaults(func=cmd_summary)

    show_cmd = sub.add_parser("show-config", help="Print the stored donation configuration")
    show_cmd.set_defaults(func=cmd_show_config)

    import_cmd = sub.add_parser("import-csv", help="Replace teams from a CSV file")
    import_cmd.add_argument("file", help="CSV with name,image_url,total_raised columns")
    import_cmd.set_defaults(func=cmd_import_csv)

    update_cmd = sub.add_parser("update-config", help="Replace the configuration from a JSON file")
    update_cmd.add_argument("file", help="JSON document with goal, title and teams")
    update_cmd.set_defaults(func=cmd_update_config)

    sample_cmd = sub.add_parser("sample-csv", help="Print a sample teams CSV")
    sample_cmd.set_defaults(func=cmd_sample_csv)

    return parser


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    configure_logging(keep_files=settings.logging.keep_log_files, console=False, level=settings.logging.level)
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return int(args.func(args))
    except (StorageError, TeamsCsvError, OSError, ValueError) as exc:
        get_logger().error("%s failed: %s", args.command, exc, extra={"event": "command_failed"})
        _print_json({"success": False, "error": str(exc)})
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
