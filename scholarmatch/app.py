import argparse
import asyncio
from pathlib import Path

from . import __version__
from .env import Settings
from .services import UploadedFile
from .session import MatchSession, build_session


def _split(value):
    return [v.strip() for v in value.split(",") if v.strip()] if value else None


def _print_error(session: MatchSession) -> None:
    error = session.store.state.last_error
    if error:
        print(f"Error: {error}")
        session.dismiss_error()


async def _load_inputs(session: MatchSession, args: argparse.Namespace) -> bool:
    """Upload the résumé and/or link the profile named on the command line."""
    if getattr(args, "resume", None):
        path = Path(args.resume)
        if not path.exists():
            raise SystemExit(f"Input file not found: {path}")
        result = await session.upload_resume(UploadedFile.from_path(path))
        if not result.ok:
            _print_error(session)
            return False
        record = result.value["data"]
        print(f"Resume: {record['name']} ({len(record.get('skills', []))} skills, "
              f"processed in {result.value['processingTime']}s)")
    if getattr(args, "scholar", None):
        result = await session.link_profile(args.scholar)
        if not result.ok:
            _print_error(session)
            return False
        record = result.value["data"]
        print(f"Scholar: {record['name']} - {len(record.get('publications', []))} publications, "
              f"{record.get('totalCitations', 0)} citations")
    return True


async def _inputs_only(session: MatchSession, args: argparse.Namespace) -> int:
    return 0 if await _load_inputs(session, args) else 2


async def _suggest(session: MatchSession, args: argparse.Namespace) -> int:
    if not await _load_inputs(session, args):
        return 2
    result = await session.update_filters(
        difficulty=_split(args.difficulty),
        collaboration_type=_split(args.collaboration),
        skills=_split(args.skills),
        location=args.location,
        compensation=True if args.paid else None,
        sort_by=args.sort,
    )
    while result and result.ok and session.page < args.page:
        result = await session.load_more()
    if result is None:
        print("No more results.")
        return 0
    if not result.ok:
        _print_error(session)
        return 2

    response = result.value
    print(f"Page {response['page']} - {len(response['data'])} of {response['total']} projects"
          f"{' (more available)' if response['hasMore'] else ''}")
    for project in response["data"]:
        print(f" - [{project['matchScore']}] {project['title']} "
              f"({project['difficulty']}, {project['collaborationType']}) - {project['organization']['name']}")
    return 0


def cmd_resume(args: argparse.Namespace) -> None:
    _run(args, _inputs_only)


def cmd_scholar(args: argparse.Namespace) -> None:
    _run(args, _inputs_only)


def cmd_suggest(args: argparse.Namespace) -> None:
    if not args.resume and not args.scholar:
        raise SystemExit("Provide --resume and/or --scholar to get suggestions.")
    _run(args, _suggest)


def _run(args: argparse.Namespace, handler) -> None:
    settings = Settings.from_env()
    session = build_session(settings)
    if args.page_size:
        session.page_size = args.page_size
    code = asyncio.run(handler(session, args))
    if args.verbose:
        session.logger.log_metrics_summary()
    if code:
        raise SystemExit(code)


def main():
    parser = argparse.ArgumentParser(prog="scholarmatch", description="Resume + Scholar profile project matching")
    parser.add_argument("--version", action="store_true", help="Show version")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--page-size", type=int, help="Suggestions per page (default 12)")
    common.add_argument("--verbose", action="store_true", help="Log a metrics summary when done")

    subparsers = parser.add_subparsers(dest="command")
    res = subparsers.add_parser("resume", parents=[common], help="Upload a resume (PDF/DOC/DOCX, max 10MB)")
    res.add_argument("resume", help="Path to the resume document")
    res.set_defaults(func=cmd_resume)

    sch = subparsers.add_parser("scholar", parents=[common], help="Link a Google Scholar profile")
    sch.add_argument("scholar", help="Google Scholar profile URL (scholar.google.com/citations?user=...)")
    sch.set_defaults(func=cmd_scholar)

    sug = subparsers.add_parser("suggest", parents=[common], help="Show project suggestions")
    sug.add_argument("--resume", help="Path to the resume document")
    sug.add_argument("--scholar", help="Google Scholar profile URL")
    sug.add_argument("--difficulty", help="Comma-separated: Beginner,Intermediate,Advanced")
    sug.add_argument("--collaboration", help="Comma-separated: Research,Industry,Academic")
    sug.add_argument("--skills", help="Comma-separated skills; any overlap matches")
    sug.add_argument("--location", help="Organization location substring")
    sug.add_argument("--paid", action="store_true", help="Only projects listing compensation")
    sug.add_argument("--sort", choices=["relevance", "date", "match_score"], help="Sort order")
    sug.add_argument("--page", type=int, default=1, help="Page to show (default 1)")
    sug.set_defaults(func=cmd_suggest)

    args = parser.parse_args()

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
