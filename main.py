import argparse
import anyio
from src.toolscout.cli import cmd_leaderboard, cmd_refresh, cmd_search
from src.toolscout.settings import ToolscoutSettings
from src.utils.logger import configure_logging


def parse_args():
    parser = argparse.ArgumentParser(description="Toolscout: AI tool search and leaderboards")
    parser.add_argument(
        "--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default=None,
        help="Overrides TOOLSCOUT_LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # search
    search = sub.add_parser("search", help="Search published tools with a free-text query")
    search.add_argument("query", nargs="+", help="Query text")

    # leaderboard
    sub.add_parser("leaderboard", help="Rank public collections")

    # refresh
    sub.add_parser("refresh", help="Trigger the backend ranking refresh procedures")

    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()
    settings = ToolscoutSettings()
    configure_logging(args.log_level or settings.log_level)

    if args.command == "search":
        query = " ".join(args.query)

        async def _search():
            return await cmd_search(query, settings=settings)
        print(anyio.run(_search))

    elif args.command == "leaderboard":
        async def _leaderboard():
            return await cmd_leaderboard(settings=settings)
        print(anyio.run(_leaderboard))

    elif args.command == "refresh":
        async def _refresh():
            return await cmd_refresh(settings=settings)
        print(anyio.run(_refresh))
