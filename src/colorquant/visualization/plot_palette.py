"""
Palette visualization utilities.

Shows a learned palette as color swatches sized by pixel share, and the
training sample in the RGB cube colored by the centroid it belongs to.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import matplotlib.pyplot as plt
import numpy as np
from mpl_toolkits.mplot3d import Axes3D

from ..base.data_structures import CentroidSet


def _means_numpy(centroids: Union[CentroidSet, Tensor]) -> np.ndarray:
    means = centroids.means if isinstance(centroids, CentroidSet) else centroids
    return np.clip(means.detach().cpu().numpy().astype(np.float64), 0.0, 1.0)


def plot_palette(centroids: Union[CentroidSet, Tensor],
                 labels: Optional[Tensor] = None,
                 ax: Optional[plt.Axes] = None,
                 sort_by_share: bool = True,
                 show_hex: bool = True,
                 title: Optional[str] = None) -> plt.Axes:
    """Plot the palette as a horizontal bar of swatches.

    Args:
        centroids: CentroidSet or (K, 3) normalized colors
        labels: Optional (n,) label array; swatch widths follow pixel share
        ax: Matplotlib axes (created if None)
        sort_by_share: Order swatches by decreasing share
        show_hex: Annotate swatches with their hex code
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 2))

    colors = _means_numpy(centroids)
    n_clusters = colors.shape[0]

    if labels is not None:
        counts = torch.bincount(labels.detach().cpu().long(), minlength=n_clusters).numpy()
        shares = counts / max(counts.sum(), 1)
    else:
        shares = np.full(n_clusters, 1.0 / n_clusters)

    order = np.argsort(-shares, kind='stable') if sort_by_share else np.arange(n_clusters)

    left = 0.0
    for k in order:
        width = shares[k]
        if width <= 0:
            continue
        ax.barh(0, width, left=left, color=colors[k], edgecolor='none')
        if show_hex and width > 0.04:
            rgb = np.rint(colors[k] * 255).astype(int)
            hex_value = '#{:02X}{:02X}{:02X}'.format(*rgb)
            # Dark text on light swatches
            luminance = 0.299 * colors[k][0] + 0.587 * colors[k][1] + 0.114 * colors[k][2]
            ax.text(left + width / 2, 0, hex_value, ha='center', va='center',
                    rotation=90, fontsize=8,
                    color='black' if luminance > 0.5 else 'white')
        left += width

    ax.set_xlim(0, 1)
    ax.set_yticks([])
    ax.set_xlabel('Pixel share' if labels is not None else 'Palette')

    if title:
        ax.set_title(title)

    return ax


def plot_color_clusters_3d(features: Tensor,
                           labels: Tensor,
                           centroids: Optional[Union[CentroidSet, Tensor]] = None,
                           ax: Optional[Axes3D] = None,
                           max_points: int = 5000,
                           alpha: float = 0.6,
                           center_size: int = 200,
                           point_size: int = 10,
                           elev: float = 30,
                           azim: float = 45,
                           title: Optional[str] = None) -> Axes3D:
    """Scatter feature vectors in the RGB cube, each painted its centroid's color.

    Args:
        features: (n, 3) normalized colors
        labels: (n,) cluster labels
        centroids: Optional centroids to mark
        ax: 3D axes (created if None)
        max_points: Only the first max_points rows are drawn
        alpha: Point transparency
        center_size: Size of center markers
        point_size: Size of data points
        elev: Elevation angle
        azim: Azimuth angle
        title: Plot title

    Returns:
        3D axes
    """
    if ax is None:
        fig = plt.figure(figsize=(8, 7))
        ax = fig.add_subplot(111, projection='3d')

    X_np = features[:max_points].detach().cpu().numpy()
    labels_np = labels[:max_points].detach().cpu().numpy()

    if centroids is not None:
        palette = _means_numpy(centroids)
        point_colors = palette[labels_np]
    else:
        point_colors = np.clip(X_np, 0.0, 1.0)

    ax.scatter(X_np[:, 0], X_np[:, 1], X_np[:, 2],
               c=point_colors,
               s=point_size,
               alpha=alpha,
               linewidth=0)

    if centroids is not None:
        ax.scatter(palette[:, 0], palette[:, 1], palette[:, 2],
                   c=palette,
                   marker='X',
                   s=center_size,
                   edgecolors='black',
                   linewidth=1.5,
                   label='Centroids')
        ax.legend()

    ax.set_xlabel('R')
    ax.set_ylabel('G')
    ax.set_zlabel('B')
    ax.set_xlim(0, 1)
    ax.set_ylim(0, 1)
    ax.set_zlim(0, 1)

    ax.view_init(elev=elev, azim=azim)

    if title:
        ax.set_title(title)

    return ax
