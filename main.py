#!/usr/bin/env python3
"""
contenttype - Main CLI Application
"""
import argparse
import sys
from pathlib import Path

from contenttype.base import ContentType
from contenttype.config import configure_logging, get_config
from contenttype.resolvers.composite_resolver import ContentTypeResolver


def format_row(label: str, content_type: ContentType) -> str:
    """One tab-separated output line: label, MIME string, member name."""
    return f"{label}\t{content_type}\t{content_type.name}"


def detect_command(args, resolver: ContentTypeResolver):
    """Handle detect command."""
    unknown = 0

    for raw in args.paths:
        path = Path(raw)
        if args.bytes_only:
            try:
                with open(path, 'rb') as f:
                    head = f.read(get_config().sniff_length)
            except OSError as e:
                print(f"Error: cannot read {path}: {e}", file=sys.stderr)
                head = b''
            content_type = resolver.from_bytes(head)
        else:
            content_type = resolver.from_path(path)

        if content_type is ContentType.UNKNOWN:
            unknown += 1
        print(format_row(str(path), content_type))

    return 1 if args.strict and unknown else 0


def ext_command(args, resolver: ContentTypeResolver):
    """Handle ext command."""
    unknown = 0

    for extension in args.extensions:
        content_type = resolver.from_extension(extension)
        if content_type is ContentType.UNKNOWN:
            unknown += 1
        print(format_row(extension, content_type))

    return 1 if args.strict and unknown else 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="contenttype - classify files, buffers and extensions"
    )
    parser.add_argument('--strict', action='store_true',
                        help='Exit with status 1 if anything resolves to unknown')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Detect command
    detect_parser = subparsers.add_parser('detect', help='Detect the content type of files')
    detect_parser.add_argument('paths', nargs='+', help='Files to classify')
    detect_parser.add_argument('--bytes-only', '-b', action='store_true',
                               help='Sniff bytes only; never fall back to the extension')

    # Extension command
    ext_parser = subparsers.add_parser('ext', help='Resolve file extensions')
    ext_parser.add_argument('extensions', nargs='+', help='Extensions, without the dot')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    configure_logging()
    resolver = ContentTypeResolver()

    # Execute command
    if args.command == 'detect':
        return detect_command(args, resolver)
    elif args.command == 'ext':
        return ext_command(args, resolver)

    return 0


if __name__ == '__main__':
    sys.exit(main())
