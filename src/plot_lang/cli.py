import sys
import argparse
import logging

from . import defaults
from .errors import PlotError
from .main import run_plot


def main(argv=None):
    parser = argparse.ArgumentParser(description='Plot implicit equations to an image')
    parser.add_argument('filename', help='Path to the script to render')
    parser.add_argument('-o', '--output', help='Write the image here instead of the #export path')
    parser.add_argument('--no-print', action='store_true', help='Ignore #print_now() in the script')
    parser.add_argument('--max-branches', type=int, default=defaults.MAX_BRANCHES,
                        help='Largest number of values one sub-expression may produce')
    parser.add_argument('--debug', action='store_true', help='Also log tokens and parsed nodes')

    args = parser.parse_args(argv)
    level = logging.DEBUG if args.debug else logging.INFO
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    logging.getLogger('plot_lang').setLevel(level)

    try:
        with open(args.filename, 'r', encoding='utf-8') as file:
            code = file.read()
    except FileNotFoundError:
        print(f"Error: File '{args.filename}' not found")
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read '{args.filename}': {e}")
        return 1

    try:
        _, _, path = run_plot(code, source_name=args.filename, output=args.output,
                              allow_print=not args.no_print, max_branches=args.max_branches)
    except PlotError as e:
        print(e.describe())
        return 1

    print(f"Image saved to: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
