import argparse
import logging
import signal
import sys

from bm25_search.config.settings import Settings, settings
from bm25_search.container import Container, configure_container
from bm25_search.core.models.cancellation import CancellationToken
from bm25_search.presentation.tool import BM25SearchTool

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bm25-search",
        description="Rank chunks of workspace files against a query with BM25.",
    )
    parser.add_argument(
        "--target-dir",
        help="Directory relative paths are resolved against (default: cwd)",
    )
    parser.add_argument(
        "--workspace",
        action="append",
        dest="workspace_dirs",
        metavar="DIR",
        help="Workspace directory; repeat for a multi-root workspace",
    )
    parser.add_argument("--log-level", help="Logging level (default: INFO)")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for command, help_text in (
        ("search", "Search the workspace"),
        ("describe", "Print the one-line description of a search"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("query")
        sub.add_argument("--path", help="Directory to search within")
        sub.add_argument("--include", help="Glob of files to search, e.g. '*.{ts,tsx}'")
        sub.add_argument("--chunk-size", type=int, help="Lines per chunk")
        sub.add_argument("--overlap", type=int, help="Lines shared by consecutive chunks")

    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {}
    if args.target_dir:
        overrides["target_dir"] = args.target_dir
    if args.workspace_dirs:
        overrides["workspace_dirs"] = args.workspace_dirs
    if args.log_level:
        overrides["log_level"] = args.log_level
    return settings.model_copy(update=overrides) if overrides else settings


def _tool_params(args: argparse.Namespace) -> dict:
    return {
        "query": args.query,
        "path": args.path,
        "include": args.include,
        "chunk_size": args.chunk_size,
        "overlap": args.overlap,
    }


def cmd_search(tool: BM25SearchTool, args: argparse.Namespace) -> int:
    """Search command - print report to stdout, status to stderr."""
    token = CancellationToken()

    def _on_sigint(signum, frame):
        logger.info("Interrupted, cancelling search...")
        token.cancel()

    previous = signal.signal(signal.SIGINT, _on_sigint)
    try:
        result = tool.execute(_tool_params(args), token)
    finally:
        signal.signal(signal.SIGINT, previous)

    print(result.llm_content)
    print(result.return_display, file=sys.stderr)

    if token.is_cancelled:
        return EXIT_INTERRUPTED
    if result.llm_content.startswith("Error"):
        return EXIT_ERROR
    return EXIT_OK


def cmd_describe(tool: BM25SearchTool, args: argparse.Namespace) -> int:
    """Describe command - print the search description."""
    print(tool.get_description(_tool_params(args)))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    app_settings = _settings_from_args(args)

    logging.basicConfig(
        level=app_settings.log_level.upper(), format="%(levelname)s %(message)s"
    )

    c = configure_container(app_settings, Container())
    tool = c.resolve(BM25SearchTool)

    if args.command == "search":
        return cmd_search(tool, args)
    return cmd_describe(tool, args)


if __name__ == "__main__":
    sys.exit(main())
