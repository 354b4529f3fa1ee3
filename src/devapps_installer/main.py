import argparse, sys, time, traceback
from pathlib import Path
from . import __version__
from .core.admin import is_admin, run_as_admin, check_admin_or_confirm
from .core.console import Console
from .core.prompts import AutoConfirmer, ConsoleConfirmer
from .data.paths import BASE_DIR, LOG_DIR
from .domain.catalog import looks_like_id, resolve_apps, split_ids
from .domain.config import DEFAULT_PAUSE_SECONDS, ConfigStore
from .domain.reports import RunReport
from .services.dependencies import DependencyService, WingetNotFoundError
from .services.processor import AppProcessor
from .services.winget import WingetClient
from .ui.summary import print_plan, print_summary

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="devapps-installer",
        description="Install and update a set of developer apps with winget.",
    )
    p.add_argument("--apps", nargs="+", metavar="ID", help="winget package ids (space or comma separated); default: built-in list")
    p.add_argument("--skip-dependencies", action="store_true", help="do not check for winget or refresh its sources")
    p.add_argument("--skip-updates", action="store_true", help="leave installed apps alone")
    p.add_argument("--profile", type=str, help="use a saved list of package ids")
    p.add_argument("--save-profile", type=str, metavar="NAME", help="save --apps under NAME and exit")
    p.add_argument("--list-profiles", action="store_true")
    p.add_argument("--yes", action="store_true", help="answer yes to every prompt and do not pause")
    p.add_argument("--no-pause", action="store_true", help="do not wait for Enter before exiting")
    p.add_argument("--pause-seconds", type=float, help="delay between apps")
    p.add_argument("--report", choices=["json", "txt"])
    p.add_argument("--out", type=str)
    p.add_argument("--elevate", action="store_true", help="relaunch as Administrator when needed")
    p.add_argument("--tui", action="store_true", help="show progress in a terminal UI")
    p.add_argument("--no-log", action="store_true", help="do not write a run log")
    p.add_argument("--dry-run", action="store_true")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p

def _apply_defaults(args, defaults: dict, console: Console):
    if not args.skip_updates and defaults.get("skip_updates"):
        args.skip_updates = True
    if not args.skip_dependencies and defaults.get("skip_dependencies"):
        args.skip_dependencies = True
    if not args.yes and defaults.get("yes"):
        args.yes = True
    if args.pause_seconds is None:
        raw = defaults.get("pause_seconds")
        try:
            args.pause_seconds = max(0.0, float(raw))
        except (TypeError, ValueError):
            console.warn(f"Ignoring pause_seconds={raw!r} in settings; using {DEFAULT_PAUSE_SECONDS}s.")
            args.pause_seconds = DEFAULT_PAUSE_SECONDS
    if not args.report:
        args.report = defaults.get("report")
    if not args.out:
        args.out = defaults.get("out")

def _profile_commands(args, console: Console, cfg: ConfigStore) -> int | None:
    if args.list_profiles:
        names = cfg.list_profiles()
        if not names:
            console.info("No saved profiles.")
        for n in names:
            print(f"  {n}: {', '.join(cfg.get_profile(n) or [])}")
        return 0
    if args.save_profile:
        ids = split_ids(args.apps)
        if not ids:
            console.err("--save-profile needs --apps.")
            return 1
        cfg.set_profile(args.save_profile, ids)
        console.ok(f"Saved profile '{args.save_profile}' ({len(ids)} apps).")
        return 0
    return None

def _selected_ids(args, console: Console, cfg: ConfigStore):
    if args.apps:
        return split_ids(args.apps)
    if args.profile:
        ids = cfg.get_profile(args.profile)
        if ids is None:
            raise KeyError(args.profile)
        return ids
    return []

def _save_report(args, console: Console, report: RunReport):
    if not args.report:
        return
    out_path = Path(args.out).expanduser() if args.out else BASE_DIR / f"last-run.{args.report}"
    try:
        report.save(args.report, out_path)
        console.ok(f"Report written: {out_path}")
    except OSError as e:
        console.warn(f"Could not write report: {e}")

def _run(args, console: Console, cfg: ConfigStore, confirmer, winget: WingetClient, sleep) -> int:
    rc = _profile_commands(args, console, cfg)
    if rc is not None:
        return rc

    admin = is_admin()
    console.banner(__version__, admin)
    if not admin:
        if args.elevate and run_as_admin():
            console.info("Relaunched as Administrator in a new window.")
            return 0
        if not check_admin_or_confirm(console, confirmer):
            console.warn("Cancelled.")
            return 1

    if args.skip_dependencies:
        console.info("Skipping the winget check.")
    else:
        try:
            DependencyService(console, winget, confirmer).ensure()
        except WingetNotFoundError as e:
            console.err(f"{e}. Nothing was installed.")
            return 1

    try:
        ids = _selected_ids(args, console, cfg)
    except KeyError:
        console.err(f"Unknown profile: {args.profile}")
        return 1
    for pid in ids:
        if not looks_like_id(pid):
            console.warn(f"'{pid}' does not look like a winget package id; trying it anyway.")
    entries = resolve_apps(ids, cfg.get_catalog())

    print_plan(console, entries, args.skip_updates)
    if not confirmer.confirm(f"Process {len(entries)} apps?"):
        console.warn("Cancelled.")
        return 1

    processor = AppProcessor(console, winget, pause_seconds=args.pause_seconds, sleep=sleep)
    if args.tui:
        from .ui.tui import InstallerTUI
        tui = InstallerTUI(processor, entries, skip_updates=args.skip_updates)
        tui.run()
        report = tui.report or RunReport()
    else:
        report = processor.run(entries, skip_updates=args.skip_updates)
    report.dry_run = args.dry_run
    if report.total < len(entries):
        console.warn(f"Stopped early: {report.total} of {len(entries)} apps processed.")

    print_summary(console, report)
    _save_report(args, console, report)
    return 0

def run_cli(argv=None, confirmer=None, winget: WingetClient | None = None,
            cfg: ConfigStore | None = None, sleep=time.sleep) -> int:
    args = _build_parser().parse_args(argv)
    console = Console(debug=args.debug, dry_run=args.dry_run)
    console.enable_windows_ansi_utf8()
    rc = 2
    try:
        if not args.no_log:
            console.start_run_log(LOG_DIR)
        cfg = cfg or ConfigStore()
        _apply_defaults(args, cfg.get_defaults(), console)
        if confirmer is None:
            confirmer = AutoConfirmer(True) if args.yes else ConsoleConfirmer()
        winget = winget or WingetClient(console)
        rc = _run(args, console, cfg, confirmer, winget, sleep)
    except Exception as e:
        console.err(f"Unexpected error: {e}")
        traceback.print_exc()
        rc = 2
    finally:
        if not (args.yes or args.no_pause):
            (confirmer or ConsoleConfirmer()).wait("Press Enter to exit…")
        console.close()
    return rc

def main():
    return run_cli()

if __name__ == "__main__":
    sys.exit(main())
