"""Command-line interface for the file protocol."""

import argparse
import logging
import sys
from dataclasses import replace

from .config import Config, load_config
from .core import LocatorDecodingError, MalformedLocatorError, Metadata, ProtocolResponse
from .protocol import FileProtocol


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Fetch file: URLs as protocol responses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s file:/etc/hostname              # Fetch a file
  %(prog)s file:/tmp/                      # List a directory as a sitemap
  %(prog)s --show-content file:/tmp/       # Also print the sitemap
  %(prog)s -c config.yaml file:/data/      # Use specific config file
  %(prog)s -e ISO-8859-1 file:/tmp/caf%%E9  # Decode paths as Latin-1
""",
    )

    parser.add_argument(
        "urls",
        metavar="URL",
        nargs="+",
        help="file: URL to fetch",
    )

    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="Path to YAML configuration file",
    )

    parser.add_argument(
        "-e", "--encoding",
        metavar="NAME",
        help="Character encoding of URL paths",
    )

    parent_group = parser.add_mutually_exclusive_group()
    parent_group.add_argument(
        "--crawl-parent",
        dest="crawl_parent",
        action="store_true",
        default=None,
        help="Include the parent directory in listings",
    )
    parent_group.add_argument(
        "--no-crawl-parent",
        dest="crawl_parent",
        action="store_false",
        help="Leave the parent directory out of listings",
    )

    parser.add_argument(
        "--show-content",
        action="store_true",
        help="Write the response content after the metadata",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def print_response(url: str, response: ProtocolResponse, show_content: bool = False) -> None:
    """Write a protocol response to stdout."""
    out = sys.stdout
    out.write(f"URL: {url}\n")
    out.write(f"Status: {int(response.status_code)}\n")
    for key in response.metadata.keys():
        for value in response.metadata.get_values(key):
            out.write(f"{key}: {value}\n")
    out.write(f"Content length: {len(response.content)}\n")

    if show_content and response.content:
        out.write("\n")
        out.flush()
        sys.stdout.buffer.write(response.content)
        sys.stdout.buffer.write(b"\n")
        sys.stdout.buffer.flush()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    logger = logging.getLogger(__name__)

    # Load configuration
    if args.config:
        try:
            config = load_config(args.config)
        except FileNotFoundError:
            logger.error(f"Config file not found: {args.config}")
            return 1
        except ValueError as e:
            logger.error(f"Invalid config file {args.config}: {e}")
            return 1
    else:
        config = Config()

    # Override config with command line arguments
    if args.encoding:
        config = replace(config, encoding=args.encoding)

    if args.crawl_parent is not None:
        config = replace(config, crawl_parent=args.crawl_parent)

    protocol = FileProtocol(config)

    exit_code = 0
    try:
        for url in args.urls:
            try:
                response = protocol.get_protocol_output(url, Metadata())
            except (MalformedLocatorError, LocatorDecodingError) as e:
                logger.error(f"Cannot fetch {url}: {e}")
                exit_code = 1
                continue

            print_response(url, response, args.show_content)
    finally:
        protocol.cleanup()

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
