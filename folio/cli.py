from __future__ import annotations

import argparse
import asyncio
import subprocess
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Folio personal site (no subcommand serves the site)")
    subparsers = parser.add_subparsers(dest="command", required=False)

    serve_parser = subparsers.add_parser("serve", help="Serve the site with live data")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)
    serve_parser.add_argument("--no-open", action="store_true", help="Do not auto-open a browser tab")

    export_parser = subparsers.add_parser("build", help="Export the site as static HTML")
    export_parser.add_argument("--output-dir", default=None, help="Target directory (default from FOLIO_OUTPUT_DIR)")

    theme_parser = subparsers.add_parser("theme", help="Show or change the stored theme preference")
    theme_parser.add_argument("action", nargs="?", choices=["show", "toggle", "set"], default="show")
    theme_parser.add_argument("value", nargs="?", choices=["dark", "light"], default=None)

    test_parser = subparsers.add_parser("test", help="Run all tests with pytest")
    test_parser.add_argument(
        "pytest_args",
        nargs=argparse.REMAINDER,
        help="Optional extra pytest args; use `--` before args (e.g. folio test -- -k render)",
    )

    return parser


def run_build(args: argparse.Namespace) -> int:
    from folio.core.config import get_settings
    from folio.web.export import export_site

    settings = get_settings()
    output_dir = Path(args.output_dir).expanduser() if args.output_dir else None
    result = asyncio.run(export_site(settings, output_dir=output_dir))
    print(f"Wrote {len(result.pages)} pages and {len(result.data_files)} data files to {result.output_dir}")
    return 0


def run_theme(args: argparse.Namespace) -> int:
    from folio.core.config import get_settings
    from folio.core.theme import THEME_KEY, JsonPreferenceStore, ThemeController

    settings = get_settings()
    controller = ThemeController(JsonPreferenceStore(settings.preferences_path), prefers_dark=settings.prefers_dark)

    if args.action == "toggle":
        print(controller.toggle_stored())
        return 0
    if args.action == "set":
        if args.value is None:
            print("theme set requires a value: dark or light", file=sys.stderr)
            return 2
        controller.store.set(THEME_KEY, args.value)
        print(args.value)
        return 0

    stored = controller.stored_theme()
    source = "stored" if stored is not None else "system"
    print(f"{controller.initial_theme()} ({source})")
    return 0


def run_tests(args: argparse.Namespace) -> int:
    cmd = [sys.executable, "-m", "pytest"]
    if args.pytest_args:
        cmd.extend(args.pytest_args)
    print("Running:", " ".join(cmd))
    return subprocess.call(cmd)


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.command in {None, "serve"}:
        from folio.core.config import get_settings
        from folio.web_server import run_web_server

        run_web_server(
            get_settings(),
            host=getattr(args, "host", None),
            port=getattr(args, "port", None),
            no_open=bool(getattr(args, "no_open", False)),
        )
        return

    if args.command == "build":
        raise SystemExit(run_build(args))

    if args.command == "theme":
        raise SystemExit(run_theme(args))

    if args.command == "test":
        raise SystemExit(run_tests(args))

    parser.print_help()


if __name__ == "__main__":
    main()
