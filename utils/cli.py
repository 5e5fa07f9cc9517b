import argparse

from utils.app_config import set_api_base_url


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="category-manager",
        description="Manage income and expense categories.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--api-url", metavar="URL",
        help="save URL as the backend base URL before starting",
    )
    group.add_argument(
        "--reset-api-url", action="store_true",
        help="forget the saved backend URL and use the default",
    )
    return parser.parse_args(argv)


def apply_args(args: argparse.Namespace) -> None:
    """Persist config changes requested on the command line."""
    if args.api_url:
        set_api_base_url(args.api_url)
    elif args.reset_api_url:
        set_api_base_url(None)
