"""
Rotating 2D points stored interleaved as [x0, y0, x1, y1, ...].

The x coordinates are the view (buf, inc=2) and the y coordinates the view
(buf[1:], inc=2); a single drot turns every point in place.
"""

import math

import numpy as np

from strided_blas import dcopy, drot


def rotate_interleaved(points: np.ndarray, theta: float) -> bool:
    n = points.size // 2
    # drot rotates by -theta with (c, s) = (cos, sin), see the matrix in
    # strided_blas.level1.plane_rotation
    return drot(n, points, 2, points[1:], 2, math.cos(theta), -math.sin(theta))


def main() -> None:
    square = np.array([1.0, 0.0, 0.0, 1.0, -1.0, 0.0, 0.0, -1.0])
    rotated = np.empty_like(square)
    dcopy(square.size, square, 1, rotated, 1)

    rotate_interleaved(rotated, math.pi / 4)
    for (x0, y0), (x1, y1) in zip(square.reshape(-1, 2), rotated.reshape(-1, 2)):
        print(f"({x0:+.3f}, {y0:+.3f}) -> ({x1:+.3f}, {y1:+.3f})")


if __name__ == "__main__":
    main()
