"""Command line interface for dominantcolor."""
import argparse
import logging
import sys
from pathlib import Path

from dominantcolor.dominant import format_hex
from dominantcolor.engine import ClusteringEngine
from dominantcolor.raster_ingest import ingest
from dominantcolor.selector import ColorSelector
from dominantcolor.swatch import save_swatch
from dominantcolor.types import DominantColorConfig, DominantColorError


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='dominantcolor',
        description='Find the dominant color of an image',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dominantcolor cover.png
  dominantcolor cover.png --all -n 6
  dominantcolor cover.png --all --swatch palette.png
  dominantcolor cover.png --resize 64
        """,
    )

    parser.add_argument(
        'input',
        type=str,
        help='Input image path'
    )

    parser.add_argument(
        '-n', '--clusters',
        type=int,
        default=4,
        help='Number of clusters (default: 4)'
    )

    parser.add_argument(
        '--all',
        action='store_true',
        help='Print every cluster color with its weight instead of a single color'
    )

    parser.add_argument(
        '--resize',
        type=int,
        default=256,
        help='Shrink the image so neither edge exceeds this many pixels (default: 256)'
    )

    parser.add_argument(
        '--max-brightness',
        type=int,
        default=665,
        help='Reject colors whose r+g+b is at or above this value (default: 665)'
    )

    parser.add_argument(
        '--min-darkness',
        type=int,
        default=100,
        help='Reject colors whose r+g+b is at or below this value (default: 100)'
    )

    parser.add_argument(
        '--swatch',
        type=str,
        default=None,
        help='Save a PNG swatch of the weighted palette to this path'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    return parser


def main(args=None):
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed_args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    input_path = Path(parsed_args.input)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        return 1

    try:
        config = DominantColorConfig(
            n_clusters=parsed_args.clusters,
            resize_to=parsed_args.resize,
            max_brightness=parsed_args.max_brightness,
            min_darkness=parsed_args.min_darkness,
        )

        grid = ingest(input_path, max_edge=config.resize_to)
        result = ClusteringEngine(config).run(grid, parsed_args.clusters)
        selector = ColorSelector(config.max_brightness, config.min_darkness)
        palette = selector.weighted(
            result.clusters, result.total_pixels, limit=config.cluster_count(parsed_args.clusters)
        )

        if parsed_args.all:
            for entry in palette:
                print(f"{format_hex(entry.color)}  {entry.weight * 100:.1f}%")
        else:
            print(format_hex(selector.select(result.clusters)))

        if parsed_args.swatch:
            swatch_path = save_swatch(palette, parsed_args.swatch)
            print(f"Swatch saved: {swatch_path}")

        return 0

    except (FileNotFoundError, DominantColorError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
