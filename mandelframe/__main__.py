"""
Command line entry point: python -m mandelframe

Without --output the interactive viewer opens. With --output a single
frame is rendered headless and written to the given image file.
"""

import logging
import sys
from argparse import ArgumentParser

from .config import load_settings
from .errors import RenderError

logger = logging.getLogger('mandelframe')


def build_parser():
    parser = ArgumentParser(prog='mandelframe',
                            description='Render or explore the Mandelbrot set.')
    parser.add_argument('--output', type=str, default=None,
                        help='render one frame to this image file instead of '
                             'opening the viewer')
    parser.add_argument('--width', type=int, default=None,
                        help='frame width in pixels (default: window_width setting)')
    parser.add_argument('--height', type=int, default=None,
                        help='frame height in pixels (default: window_height setting)')
    parser.add_argument('--mouse-x', type=int, default=None,
                        help='pan point column in pixels (default: centre)')
    parser.add_argument('--mouse-y', type=int, default=None,
                        help='pan point row in pixels (default: centre)')
    parser.add_argument('--scale', type=float, default=None,
                        help='zoom factor, > 0 (default: initial_scale setting)')
    parser.add_argument('--settings', type=str, default=None,
                        help='path to a settings.json overriding the bundled one')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def render_to_file(args, settings):
    from .canvas import save_image
    from .renderer import render_frame

    width = settings['window_width'] if args.width is None else args.width
    height = settings['window_height'] if args.height is None else args.height
    mouse_x = width // 2 if args.mouse_x is None else args.mouse_x
    mouse_y = height // 2 if args.mouse_y is None else args.mouse_y
    scale = settings['initial_scale'] if args.scale is None else args.scale

    screen = render_frame(width, height, mouse_x, mouse_y, scale)
    save_image(screen, args.output)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    settings = load_settings(args.settings)

    if args.output:
        try:
            render_to_file(args, settings)
        except RenderError as e:
            logger.error("%s", e)
            return 1
        return 0

    from .app import run
    run(settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
