"""
Demo of k-means color quantization.

This example shows how to:
1. Build a synthetic image with smooth gradients
2. Quantize it to several palette sizes
3. Visualize the results, their palettes and the error per palette size

Pass an image path to quantize a real photo instead.
"""

import sys
import time

import torch
import numpy as np
import matplotlib.pyplot as plt

from colorquant import ColorQuantizer, extract_features
from colorquant.io import load_image
from colorquant.utils.metrics import mean_squared_error, count_colors
from colorquant.visualization import plot_palette, plot_color_clusters_3d


def generate_gradient_image(width=256, height=192):
    """Horizontal hue sweep fading to dark at the bottom."""
    x = torch.linspace(0, 1, width)
    y = torch.linspace(1, 0.15, height)

    red = (0.5 + 0.5 * torch.cos(2 * np.pi * x)).unsqueeze(0)
    green = (0.5 + 0.5 * torch.cos(2 * np.pi * (x - 1 / 3))).unsqueeze(0)
    blue = (0.5 + 0.5 * torch.cos(2 * np.pi * (x - 2 / 3))).unsqueeze(0)

    image = torch.stack([red, green, blue], dim=-1) * y.view(height, 1, 1)
    return torch.round(image * 255).to(torch.uint8)


def main():
    """Run the demo."""
    print("=== Color Quantization Demo ===\n")

    if len(sys.argv) > 1:
        image = load_image(sys.argv[1]).pixels
        print(f"Loaded {sys.argv[1]}")
    else:
        image = generate_gradient_image()
        print("Generated synthetic gradient image")

    height, width = image.shape[0], image.shape[1]
    features = extract_features(image)
    print(f"Image: {width}x{height}, {count_colors(image)} distinct colors\n")

    palette_sizes = [2, 4, 8, 16, 32]
    results = {}

    for k in palette_sizes:
        start = time.time()
        quantizer = ColorQuantizer(n_colors=k, sample_size=1000, random_state=42)
        result = quantizer.quantize(features, width, height)
        elapsed = time.time() - start

        mse = mean_squared_error(image, result.image)
        results[k] = (result, mse)
        print(f"K={k:2d}: {result.n_iter:3d} iterations, "
              f"MSE={mse:8.2f}, {elapsed * 1000:.0f} ms")

    # Images and palettes
    fig, axes = plt.subplots(2, len(palette_sizes) + 1, figsize=(18, 6),
                             gridspec_kw={'height_ratios': [4, 1]})

    axes[0, 0].imshow(image.numpy())
    axes[0, 0].set_title('Original')
    axes[0, 0].axis('off')
    axes[1, 0].axis('off')

    for i, k in enumerate(palette_sizes, start=1):
        result, mse = results[k]
        axes[0, i].imshow(result.image.numpy())
        axes[0, i].set_title(f'K={k}')
        axes[0, i].axis('off')
        plot_palette(result.centroids, labels=result.labels, ax=axes[1, i], show_hex=k <= 8)

    plt.tight_layout()

    # Error curve and the largest palette in RGB space
    fig = plt.figure(figsize=(14, 6))
    ax1 = fig.add_subplot(121)
    ax1.plot(palette_sizes, [results[k][1] for k in palette_sizes], 'o-')
    ax1.set_xscale('log', base=2)
    ax1.set_xlabel('Palette size K')
    ax1.set_ylabel('Mean Squared Error')
    ax1.set_title('Quantization Error')

    largest, _ = results[palette_sizes[-1]]
    ax2 = fig.add_subplot(122, projection='3d')
    plot_color_clusters_3d(features, largest.labels, centroids=largest.centroids, ax=ax2,
                           title=f'Pixels by centroid (K={palette_sizes[-1]})')

    plt.tight_layout()
    plt.show()


if __name__ == '__main__':
    main()
