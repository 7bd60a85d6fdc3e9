#!/usr/bin/env python3
"""
Command-line interface for Markup Text Tool.
Extracts color segments from markup text and strips markup tags.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from helpers.http_client import HttpClientOptions, create_session
from helpers.text_helpers import split_at_upper_case
from markup_engine.colors import parse_color, to_hex
from markup_engine.color_segments import ColorSegmentExtractor
from markup_engine.errors import MarkupError
from markup_engine.markup_stripper import MarkupStripper
from renderers.html_renderer import segments_to_html
from settings.tool_settings import SettingsManager
from tag_patterns import get_tag_patterns
import requests


def _load_settings(args) -> SettingsManager:
    manager = SettingsManager(getattr(args, 'settings', None))
    manager.load()
    return manager


def _read_input(args, manager: SettingsManager) -> str:
    """Read the text to process from the argument, stdin ('-') or a URL."""
    url = getattr(args, 'url', None)
    if url:
        options = manager.settings.http_options()
        if getattr(args, 'insecure', False):
            options = HttpClientOptions(timeout=options.timeout, allow_untrusted_certificates=True)
        session = create_session(options)
        response = session.get(url)
        response.raise_for_status()
        return response.text

    if args.text is None or args.text == '-':
        return sys.stdin.read()
    return args.text


def _default_color(args, manager: SettingsManager) -> int:
    if getattr(args, 'default_color', None):
        return parse_color(args.default_color)
    return manager.settings.default_argb()


def segments_command(args):
    """Print the color segments of the input."""
    manager = _load_settings(args)
    text = _read_input(args, manager)
    default_color = _default_color(args, manager)

    segments = ColorSegmentExtractor().extract(text, default_color)

    if args.json:
        output = [{'color': to_hex(color), 'text': part} for color, part in segments]
        print(json.dumps(output, ensure_ascii=False, indent=manager.settings.json_indent))
        return 0

    for color, part in segments:
        print(f"{to_hex(color)}  {part!r}")
    print(f"\nTotal segments: {len(segments)}")
    return 0


def strip_command(args):
    """Print the input with markup removed."""
    manager = _load_settings(args)
    text = _read_input(args, manager)

    stripper = MarkupStripper()
    result = stripper.strip_lazy(text) if args.lazy else stripper.strip(text)
    print(result)
    return 0


def html_command(args):
    """Print the input's color segments as HTML."""
    manager = _load_settings(args)
    text = _read_input(args, manager)
    default_color = _default_color(args, manager)

    segments = ColorSegmentExtractor().extract(text, default_color)
    print(segments_to_html(segments, default_color))
    return 0


def split_caps_command(args):
    """Print the input with a space before each capital letter."""
    manager = _load_settings(args)
    print(split_at_upper_case(_read_input(args, manager)))
    return 0


def patterns_command(args):
    """List the tag grammars."""
    library = get_tag_patterns()

    if args.json:
        print(json.dumps(library.to_dict(), indent=2))
        return 0

    for pattern in library.patterns:
        print(f"{pattern.name}")
        print(f"    {pattern.description}")
        print(f"    Pattern: {pattern.pattern}")
        print()
    return 0


def settings_command(args):
    """Show or change settings."""
    manager = _load_settings(args)

    if args.action == 'show':
        print(f"Settings file: {manager.settings_path}")
        for key, value in manager.settings.to_dict().items():
            print(f"  {key}: {value}")
        return 0

    if not args.key or args.value is None:
        print("Both KEY and VALUE are required for 'set'")
        return 1

    try:
        manager.update(args.key, args.value)
    except KeyError:
        print(f"Unknown setting: {args.key}")
        return 1
    except ValueError as e:
        print(f"Invalid value: {e}")
        return 1

    if not manager.save():
        print("✗ Failed to save settings")
        return 1

    print(f"✓ {args.key} = {getattr(manager.settings, args.key)}")
    return 0


def _add_input_arguments(parser):
    parser.add_argument('text', nargs='?', help="Markup text ('-' or omitted reads stdin)")
    parser.add_argument('--url', help='Fetch the text from a URL instead')
    parser.add_argument('--insecure', action='store_true',
                        help='Do not validate TLS certificates when fetching --url')


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='Markup Text Tool - Extract color segments and strip markup tags'
    )
    parser.add_argument('--settings', help='Settings file (default: ~/.markup_text_tool/settings.json)')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Segments command
    segments_parser = subparsers.add_parser('segments', help='Split markup text into color segments')
    _add_input_arguments(segments_parser)
    segments_parser.add_argument('--default-color', help='Color for untagged text (RRGGBB or AARRGGBB)')
    segments_parser.add_argument('--json', action='store_true', help='Output as JSON')
    segments_parser.set_defaults(func=segments_command)

    # Strip command
    strip_parser = subparsers.add_parser('strip', help='Remove markup tags')
    _add_input_arguments(strip_parser)
    strip_parser.add_argument('--lazy', action='store_true',
                              help='Remove every <...> token, paired or not')
    strip_parser.set_defaults(func=strip_command)

    # HTML command
    html_parser = subparsers.add_parser('html', help='Render color markup as HTML')
    _add_input_arguments(html_parser)
    html_parser.add_argument('--default-color', help='Color for untagged text (RRGGBB or AARRGGBB)')
    html_parser.set_defaults(func=html_command)

    # Split-caps command
    split_parser = subparsers.add_parser('split-caps', help='Insert spaces before capital letters')
    _add_input_arguments(split_parser)
    split_parser.set_defaults(func=split_caps_command)

    # Patterns command
    patterns_parser = subparsers.add_parser('patterns', help='List tag patterns')
    patterns_parser.add_argument('--json', action='store_true', help='Output as JSON')
    patterns_parser.set_defaults(func=patterns_command)

    # Settings command
    settings_parser = subparsers.add_parser('settings', help='Show or change settings')
    settings_parser.add_argument('action', choices=['show', 'set'], help='Settings action')
    settings_parser.add_argument('key', nargs='?', help='Setting name (for set)')
    settings_parser.add_argument('value', nargs='?', help='New value (for set)')
    settings_parser.set_defaults(func=settings_command)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        return args.func(args)
    except MarkupError as e:
        print(f"Error: {e}")
        return 1
    except requests.RequestException as e:
        print(f"Failed to fetch {args.url}: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
