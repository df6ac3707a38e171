"""
Command-line entry point.

    colorquant input.jpg output.jpg -k 32 --sample-size 1000
"""

import argparse
import sys
import time
from typing import List, Optional

from .algorithms.kmeans import INIT_METHODS
from .base.exceptions import QuantizationError
from .io import load_image, save_image, file_size_kb
from .quantization.pipeline import (
    ColorQuantizer, QuantizerConfig, DEFAULT_N_COLORS
)
from .quantization.sampler import DEFAULT_SAMPLE_SIZE


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='colorquant',
        description='Reduce the number of colors in an image with k-means clustering'
    )
    parser.add_argument('input', help='Path to the source image')
    parser.add_argument('output', help='Path of the quantized image to write')
    parser.add_argument('-k', '--colors', type=int, default=DEFAULT_N_COLORS,
                        help=f'Number of colors (default: {DEFAULT_N_COLORS})')
    parser.add_argument('--sample-size', type=int, default=DEFAULT_SAMPLE_SIZE,
                        help=f'Pixels used for training (default: {DEFAULT_SAMPLE_SIZE})')
    parser.add_argument('--max-iter', type=int, default=100,
                        help='Maximum k-means iterations (default: 100)')
    parser.add_argument('--init', choices=INIT_METHODS, default='k-means++',
                        help='Centroid initialization (default: k-means++)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducible output')
    parser.add_argument('--device', default=None,
                        help="Torch device: cpu, cuda, cuda:N, mps or auto (default: cpu)")
    parser.add_argument('--quality', type=int, default=95,
                        help='Encoder quality for JPEG/WebP output (default: 95)')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Print progress (repeat for per-iteration output)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = QuantizerConfig(
        n_colors=args.colors,
        sample_size=args.sample_size,
        init=args.init,
        max_iter=args.max_iter,
        random_state=args.seed,
        device=args.device,
        verbose=args.verbose
    )

    try:
        quantizer = ColorQuantizer(config)
        image = load_image(args.input)

        start = time.perf_counter()
        result = quantizer.quantize_image(image.pixels)
        elapsed = time.perf_counter() - start

        save_image(result.image, args.output, quality=args.quality)
    except (QuantizationError, ValueError, TypeError, OSError) as e:
        print(f"colorquant: error: {e}", file=sys.stderr)
        return 1

    print(f"Model trained in {result.timings['train'] * 1000:.0f} ms.")
    print(f"Quantized {image.width}x{image.height} image to {result.centroids.n_clusters} "
          f"colors in {elapsed:.3f}s ({result.n_iter} iterations"
          f"{'' if result.converged else ', not converged'}).")
    print(f"Original size: {file_size_kb(args.input):.2f} KB.")
    print(f"Result size: {file_size_kb(args.output):.2f} KB.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
