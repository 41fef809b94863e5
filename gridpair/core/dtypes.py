"""Type definitions for gridpair kernels.

Coordinates are compared in double precision so the Taichi reference
solver agrees with the pure-Python grid on distances to ~15 digits.
"""

import taichi as ti

# Default floating-point type for kernel fields and arguments
DTYPE = ti.f64
