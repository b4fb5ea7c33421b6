"""AI Notes entry point.

Usage:
    python -m ainotes [OPTIONS] COMMAND ...

Commands:
    analyze [TEXT]        Analyze text (read from stdin when omitted)
    notes add TEXT        Create a note with generated title, summary and tags
    notes list            List notes, most recently updated first
    notes search QUERY    Search notes by title, content or tag
    notes delete ID       Delete a note
    notes watch           Print the note list whenever it changes
"""

import argparse
import json
import logging
import sys
import threading
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv
from pymongo.errors import PyMongoError

from . import __version__
from .analysis import TextAnalyzer
from .config import AinotesConfig
from .config.loader import load_config
from .config.profiles import detect_profile
from .notes import Note, NoteError, NoteService
from .storage import MongoStorageClient, NoteFeed

logger = logging.getLogger("ainotes")


def setup_logging(level: str) -> None:
    """Configure logging based on config."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="ainotes",
        description="AI Notes - note taking with on-device text analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m ainotes analyze "Met with the team today. Great progress."
  echo "Some long text." | python -m ainotes analyze --json
  python -m ainotes --profile prod notes list
  python -m ainotes notes add "Buy milk and eggs."

Environment:
  AINOTES_PROFILE       Set profile (dev, prod, test)
  AINOTES_MONGODB_URI   MongoDB connection URI
  AINOTES_USER_ID       Owner of the notes
  AINOTES_LOG_LEVEL     Logging level
""",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML config file",
        metavar="PATH",
    )
    parser.add_argument(
        "--profile",
        choices=["dev", "prod", "test"],
        help="Configuration profile to use",
    )
    parser.add_argument(
        "--user",
        help="User ID owning the notes (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"AI Notes v{__version__}",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    analyze = commands.add_parser("analyze", help="Analyze text")
    analyze.add_argument("text", nargs="?", help="Text to analyze (default: stdin)")
    analyze.add_argument("--json", action="store_true", help="Print JSON output")
    analyze.add_argument("--max-sentences", type=int, metavar="N", help="Summary length")
    analyze.add_argument("--keywords", type=int, metavar="N", help="Number of keywords")

    notes = commands.add_parser("notes", help="Manage stored notes")
    note_commands = notes.add_subparsers(dest="notes_command", required=True)

    add = note_commands.add_parser("add", help="Create a note")
    add.add_argument("text", help="Note content")
    add.add_argument("--recorded", action="store_true", help="Mark as dictated")

    list_ = note_commands.add_parser("list", help="List notes")
    list_.add_argument("--limit", type=int, help="Maximum number of notes")
    list_.add_argument("--json", action="store_true", help="Print JSON output")

    search = note_commands.add_parser("search", help="Search notes")
    search.add_argument("query", help="Text to look for")
    search.add_argument("--limit", type=int, default=20, help="Maximum number of notes")
    search.add_argument("--json", action="store_true", help="Print JSON output")

    delete = note_commands.add_parser("delete", help="Delete a note")
    delete.add_argument("note_id", metavar="ID", help="Note ID")

    note_commands.add_parser("watch", help="Print notes whenever they change")

    return parser


def load_app_config(args: argparse.Namespace) -> AinotesConfig:
    """Load configuration from --config, --profile or the environment."""
    if args.config:
        config = load_config(path=args.config)
    elif args.profile:
        config = load_config(profile=args.profile)
    else:
        config = load_config(profile=detect_profile().value)

    if args.user:
        config.user.user_id = args.user
    return config


def format_note(note: Note) -> str:
    """Format a note as a single listing line."""
    line = f"{note.id}  {note.formatted_date}  {note.title}"
    if note.tags:
        line += f"  [{', '.join(note.tags)}]"
    return line


def print_notes(notes: list[Note], as_json: bool = False) -> None:
    """Print notes as listing lines or a JSON array."""
    if as_json:
        records = [{"id": note.id, **note.to_dict()} for note in notes]
        print(json.dumps(records, indent=2, default=str, ensure_ascii=False))
        return

    if not notes:
        print("No notes.")
    for note in notes:
        print(format_note(note))


def run_analyze(args: argparse.Namespace, config: AinotesConfig) -> int:
    """Handle the analyze command."""
    text = args.text if args.text is not None else sys.stdin.read()
    analyzer = TextAnalyzer(config=config.analysis)

    try:
        analysis = analyzer.analyze(
            text,
            max_sentences=args.max_sentences,
            keyword_limit=args.keywords,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(analysis.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(f"Title:     {analysis.title}")
    print(f"Summary:   {analysis.summary}")
    print(f"Keywords:  {', '.join(analysis.keywords)}")
    print(f"Sentiment: {analysis.sentiment.display}")
    return 0


def run_notes(args: argparse.Namespace, config: AinotesConfig) -> int:
    """Handle the notes commands against MongoDB."""
    with MongoStorageClient.from_config(config.storage) as client:
        service = NoteService(
            analyzer=TextAnalyzer(config=config.analysis),
            repository=client.notes,
            user_id=config.user.user_id,
            auto_summarize=config.analysis.auto_summarize,
        )

        if args.notes_command == "add":
            note = service.create_note(args.text, is_recorded=args.recorded)
            print(format_note(note))
            if note.summary:
                print(f"Summary: {note.summary}")
            return 0

        if args.notes_command == "list":
            print_notes(service.list_notes(args.limit), as_json=args.json)
            return 0

        if args.notes_command == "search":
            results = client.notes.search_text(service.user_id, args.query, args.limit)
            print_notes(results, as_json=args.json)
            return 0

        if args.notes_command == "delete":
            found = client.notes.get_by_id(args.note_id)
            if found is None or found.user_id != service.user_id:
                print(f"Error: Note not found: {args.note_id}", file=sys.stderr)
                return 1
            service.delete(found)
            print(f"Deleted {args.note_id}")
            return 0

        return watch_notes(client, service.user_id, config.storage.poll_interval)


def watch_notes(client: MongoStorageClient, user_id: str, poll_interval: float) -> int:
    """Print the note list on every change until interrupted."""

    def on_change(notes: list[Note]) -> None:
        print(f"--- {len(notes)} notes ---")
        print_notes(notes)
        sys.stdout.flush()

    def on_error(message: str) -> None:
        print(f"Error: {message}", file=sys.stderr)

    feed = NoteFeed(
        client.notes,
        user_id,
        poll_interval=poll_interval,
        on_change=on_change,
        on_error=on_error,
    )

    logger.info("Watching notes for %s (Ctrl+C to stop)", user_id)
    with feed:
        try:
            threading.Event().wait()
        except KeyboardInterrupt:
            logger.info("Stopped watching")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for AI Notes.

    Args:
        argv: Command line arguments, sys.argv[1:] if None

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = load_app_config(args)
    except FileNotFoundError as e:
        print(f"Error: Config file not found: {e}", file=sys.stderr)
        return 1

    setup_logging(config.logging.level)
    logger.debug("AI Notes v%s, log level %s", __version__, config.logging.level)

    if args.command == "analyze":
        return run_analyze(args, config)

    try:
        return run_notes(args, config)
    except PyMongoError as e:
        print(f"Storage error: {e}", file=sys.stderr)
        return 1
    except NoteError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
