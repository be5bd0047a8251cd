"""idpix — Decode hex identifiers into pixel-art colour grids and PNGs.

Usage: idpix <variant> <identifier> [options]

Variants are listed in idpix/registry.py.
Each variant module's docstring is its documentation.
Run `idpix help <variant>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, idpix looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import os
import sys

from idpix import registry
from idpix.core.decoder import inspect
from idpix.core.designs import parse_catalog_file
from idpix.core.env import Settings, load_env, settings
from idpix.core.raster import render_png
from idpix.core.report import format_json, format_text
from idpix.core.types import Variant


def _short_doc(name: str, variant: Variant) -> str:
    doc = registry.docs(name)
    return doc.splitlines()[0] if doc else variant.help


def _build_parser() -> argparse.ArgumentParser:
    variants = registry.all_variants()

    epilog = (
        'Examples:\n'
        '  idpix labubu 0000000000\n'
        '  idpix labubu 0x0080ff8800 -o out/labubu.png --scale 20\n'
        '  idpix mooncat 0x00800000ff --designs cats.txt --json\n'
        '  idpix mooncat 0x0000ff0000 --designs cats.txt --no-image\n'
        '  idpix help mooncat\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  IDPIX_SCALE       default upscale factor (12)\n'
        '  IDPIX_DESIGNS     default design catalog file\n'
        '  IDPIX_OUTPUT_DIR  directory for default PNG output (.)\n'
    )
    parser = argparse.ArgumentParser(
        prog='idpix',
        description='Decode hex identifiers into pixel-art colour grids and PNGs.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='variant', help='Variant to decode')

    for name, variant in sorted(variants.items()):
        p = sub.add_parser(name, help=_short_doc(name, variant))
        p.add_argument('identifier', help='Hex identifier, optionally 0x-prefixed (at least 10 hex chars)')
        p.add_argument('-d', '--designs', help='Design catalog file (one template per line)')
        p.add_argument('-o', '--output', help='PNG output path (default: <output_dir>/<variant>.png)')
        p.add_argument('-s', '--scale', type=int, default=None, metavar='N', help='Nearest-neighbour upscale factor')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-n', '--no-image', action='store_true', help='Decode and report only, write no PNG')

    help_parser = sub.add_parser('help', help='Print full docs for a variant')
    help_parser.add_argument('command', nargs='?', help='Variant name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a variant."""
    variants = registry.all_variants()

    if command is None:
        print('Available variants:\n')
        for name, variant in sorted(variants.items()):
            print(f'  {name:<10} {_short_doc(name, variant)}')
        print('\nRun: idpix help <variant> for full docs.')
        return

    if command not in variants:
        print(f'Unknown variant: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(variants))}', file=sys.stderr)
        sys.exit(1)

    print(registry.docs(command) or f'(No module docs for {command!r})')


def _load_designs(variant: Variant, args: argparse.Namespace, conf: Settings) -> tuple[str, ...]:
    """Catalog from --designs, then IDPIX_DESIGNS, then the variant's built-ins."""
    path = args.designs or conf.designs
    if path:
        return parse_catalog_file(path, variant)
    return variant.designs


def _run(args: argparse.Namespace) -> None:
    conf = settings()
    variant = registry.get(args.variant)
    designs = _load_designs(variant, args, conf)

    decoded = inspect(args.identifier, designs, variant)
    print(f'idpix: decoded {variant.name} identifier {args.identifier}', file=sys.stderr)

    image_path = None
    if not args.no_image:
        scale = args.scale if args.scale is not None else conf.scale
        output = args.output or os.path.join(conf.output_dir, f'{variant.name}.png')
        image_path = render_png(decoded.grid, output, scale)
        print(f'idpix: saved image as {image_path}', file=sys.stderr)

    if args.json:
        print(format_json(decoded, image_path))
    else:
        print(format_text(decoded, image_path))


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Load .env before anything else — OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'idpix: loaded {env_path}', file=sys.stderr)

    if not args.variant:
        parser.print_help()
        sys.exit(1)

    if args.variant == 'help':
        _print_help(getattr(args, 'command', None))
        return

    try:
        _run(args)
    except KeyError as e:
        print(f'Error: {e.args[0]}', file=sys.stderr)
        sys.exit(1)
    except (ValueError, OSError) as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
