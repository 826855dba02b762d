"""Main entry point for Resume Tailor."""

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path

from resume_tailor import __version__
from resume_tailor.config.settings import get_settings
from resume_tailor.errors import ResumeTailorError
from resume_tailor.utils.logging import configure_logging


def _read_source(path: Path) -> tuple[str, str | bytes]:
    """Pick the acquisition mode for a local file from its extension."""
    if path.suffix.lower() == ".pdf":
        return "document", path.read_bytes()
    return "text", path.read_text(encoding="utf-8")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return number


def _export_filename(timestamp_ms: int) -> str:
    day = datetime.fromtimestamp(timestamp_ms / 1000).strftime("%Y-%m-%d")
    return f"resume-tailored-{day}.html"


def _emit(text: str, out: Path | None) -> None:
    if out is None:
        print(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    print(f"Wrote: {out}")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="resume-tailor",
        description="Resume Tailor: tailor your resume to a job posting with an LLM",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m resume_tailor fetch-job https://example.com/jobs/123
  python -m resume_tailor tailor --resume resume.pdf --job-url https://example.com/jobs/123 \\
      --experience experience.yaml --out tailored.html
  python -m resume_tailor history list
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set the log level (overrides settings)",
    )

    parser.add_argument(
        "--history",
        type=Path,
        default=None,
        help="Override history file path (defaults to settings)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
    )

    # fetch-job
    fetch_parser = subparsers.add_parser(
        "fetch-job",
        help="Fetch a job posting URL and print its plain text",
    )
    fetch_parser.add_argument("url", help="URL of the job posting")
    fetch_parser.add_argument(
        "--out", type=Path, default=None, help="Write the text to a file"
    )

    # extract-pdf
    extract_parser = subparsers.add_parser(
        "extract-pdf",
        help="Extract plain text from a PDF (resume or job posting)",
    )
    extract_parser.add_argument("file", type=Path, help="Path to the PDF")
    extract_parser.add_argument(
        "--out", type=Path, default=None, help="Write the text to a file"
    )

    # tailor
    tailor_parser = subparsers.add_parser(
        "tailor",
        help="Tailor a resume to a job posting and save it to history",
    )
    resume_group = tailor_parser.add_mutually_exclusive_group(required=True)
    resume_group.add_argument(
        "--resume", type=Path, help="Resume file (.pdf, or plain text)"
    )
    resume_group.add_argument("--resume-text", help="Resume as pasted text")
    job_group = tailor_parser.add_mutually_exclusive_group(required=True)
    job_group.add_argument(
        "--job", type=Path, help="Job posting file (.pdf, or plain text)"
    )
    job_group.add_argument("--job-url", help="Job posting URL to fetch")
    job_group.add_argument("--job-text", help="Job posting as pasted text")
    tailor_parser.add_argument(
        "--experience",
        type=Path,
        required=True,
        help="Experience entry to add (YAML or JSON)",
    )
    tailor_parser.add_argument(
        "--out", type=Path, default=None, help="Write the HTML resume to a file"
    )

    # history
    history_parser = subparsers.add_parser(
        "history",
        help="History utilities (list, show, clear)",
    )
    history_subparsers = history_parser.add_subparsers(
        dest="history_cmd",
        title="history",
        description="History operations",
        required=True,
    )
    history_list = history_subparsers.add_parser("list", help="List tailored resumes")
    history_list.add_argument(
        "--limit", type=_positive_int, default=None, help="Maximum number of entries"
    )
    history_show = history_subparsers.add_parser("show", help="Show one resume")
    history_show.add_argument("id", help="History entry identifier")
    history_show.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the HTML to a file (a directory gets a dated filename)",
    )
    history_clear = history_subparsers.add_parser("clear", help="Clear all history")
    history_clear.add_argument(
        "--yes", action="store_true", help="Skip the confirmation prompt"
    )

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind host")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")

    return parser


async def _run_tailor(parsed: argparse.Namespace, store) -> int:
    from resume_tailor.intake.service import SourceAcquirer
    from resume_tailor.tailoring.experience import load_experience
    from resume_tailor.tailoring.service import TailoringService

    acquirer = SourceAcquirer()

    if parsed.resume is not None:
        resume_text = await acquirer.acquire_resume(*_read_source(parsed.resume))
    else:
        resume_text = await acquirer.acquire_resume("text", parsed.resume_text)

    if parsed.job is not None:
        job_text = await acquirer.acquire_job_posting(*_read_source(parsed.job))
    elif parsed.job_url is not None:
        job_text = await acquirer.acquire_job_posting("remote", parsed.job_url)
    else:
        job_text = await acquirer.acquire_job_posting("text", parsed.job_text)

    experience = load_experience(parsed.experience)

    result = await TailoringService().tailor(resume_text, job_text, experience)
    store.append(result, store.load())

    print(f"Saved to history: {result.id} ({result.job_title})", file=sys.stderr)
    _emit(result.html, parsed.out)
    return 0


def _run_history(parsed: argparse.Namespace, store) -> int:
    log = store.load()

    if parsed.history_cmd == "list":
        entries = log[: parsed.limit] if parsed.limit is not None else log
        if not entries:
            print("History is empty.")
            return 0
        print(f"Tailor History ({len(log)})")
        for item in entries:
            created = datetime.fromtimestamp(item.timestamp / 1000).strftime("%b %d, %Y")
            print(f"- {item.id}  {created}  {item.job_title}")
        return 0

    if parsed.history_cmd == "show":
        item = store.get(log, parsed.id)
        if item is None:
            print(f"Error: no history entry with id {parsed.id}", file=sys.stderr)
            return 1
        out = parsed.out
        if out is not None and out.is_dir():
            out = out / _export_filename(item.timestamp)
        _emit(item.html, out)
        return 0

    if parsed.history_cmd == "clear":
        if not parsed.yes:
            answer = input(f"Are you sure you want to clear all history ({len(log)})? [y/N] ")
            if answer.strip().lower() not in {"y", "yes"}:
                print("Aborted.")
                return 0
        store.clear()
        print("History cleared.")
        return 0

    return 1


def main(args: list[str] | None = None) -> int:
    """Main entry point for the application.

    Args:
        args: Command line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    try:
        settings = get_settings()
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    log_level = parsed.log_level or settings.log_level
    logger = configure_logging(level=log_level)

    if parsed.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Resume Tailor v{__version__} running '{parsed.command}'")

    from resume_tailor.history.store import HistoryStore

    store = HistoryStore(parsed.history or settings.history_path)

    try:
        if parsed.command == "fetch-job":
            from resume_tailor.intake.service import SourceAcquirer

            text = asyncio.run(SourceAcquirer().fetch_job_posting(parsed.url))
            _emit(text, parsed.out)
            return 0

        if parsed.command == "extract-pdf":
            from resume_tailor.intake.service import SourceAcquirer

            if not parsed.file.exists():
                print(f"Error: file not found: {parsed.file}", file=sys.stderr)
                return 1
            text = SourceAcquirer().extract_document(parsed.file.read_bytes())
            _emit(text, parsed.out)
            return 0

        if parsed.command == "tailor":
            return asyncio.run(_run_tailor(parsed, store))

        if parsed.command == "history":
            return _run_history(parsed, store)

        if parsed.command == "serve":
            import uvicorn

            from resume_tailor.api.app import create_app

            uvicorn.run(
                create_app(),
                host=parsed.host or settings.api_host,
                port=parsed.port or settings.api_port,
            )
            return 0

    except ResumeTailorError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
