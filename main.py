"""CLI entrypoint for the articles API client."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict

from dotenv import load_dotenv

from article_client import ArticleClient
from errors import ArticleClientError, NotFoundError
from models import Article
from transport import RequestsTransport


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Create, read, update and delete articles over HTTP")
    parser.add_argument("--base-url", default=None, help="API root, overrides ARTICLES_API_BASE_URL")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("--verbose", action="store_true", help="Log response headers")

    commands = parser.add_subparsers(dest="command", required=True)

    create = commands.add_parser("create", help="Create an article")
    _add_content_flags(create)

    get = commands.add_parser("get", help="Fetch one article")
    get.add_argument("id", type=int)

    listing = commands.add_parser("list", help="List articles, optionally one page at a time")
    listing.add_argument("--page", type=int, default=None, help="Zero-based page index")
    listing.add_argument("--limit", type=int, default=10, help="Page size when --page is given")

    update = commands.add_parser("update", help="Replace an article")
    update.add_argument("id", type=int)
    _add_content_flags(update)

    delete = commands.add_parser("delete", help="Delete an article")
    delete.add_argument("id", type=int)

    return parser.parse_args(argv)


def _add_content_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--title", required=True)
    parser.add_argument("--body", default="")
    parser.add_argument("--author", default="")


def run(client: ArticleClient, args: argparse.Namespace) -> object:
    """Dispatch one subcommand and return a JSON-serializable result."""
    if args.command == "create":
        article = Article(title=args.title, body=args.body, author=args.author)
        return asdict(client.create(article))

    if args.command == "get":
        return asdict(client.read_one(args.id))

    if args.command == "list":
        if args.page is None:
            articles = client.read_all()
        else:
            articles = client.read_page(page=args.page, limit=args.limit)
        logging.info("Fetched %s articles", len(articles))
        return [asdict(article) for article in articles]

    if args.command == "update":
        article = Article(title=args.title, body=args.body, author=args.author)
        updated = client.update(args.id, article)
        return asdict(updated) if updated is not None else None

    if args.command == "delete":
        client.delete(args.id)
        return None

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Load config, run one command and print its result."""
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
    )

    client = ArticleClient(RequestsTransport(base_url=args.base_url, timeout=args.timeout))
    try:
        result = run(client, args)
    except NotFoundError as exc:
        logging.error("Article not found: %s", exc)
        return 1
    except ArticleClientError as exc:
        logging.error("Request failed: %s", exc)
        return 1
    except ValueError as exc:
        logging.error("Invalid arguments: %s", exc)
        return 2

    if result is not None:
        print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
