import os
import sys
import logging
import numpy as np

# Add the src directory to Python path to import local dok_matrix
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from dok_matrix import DOKMatrix, DOKConfig, IndexOutOfBoundsError, cartesian_product



logging.basicConfig(level=logging.DEBUG)

entries = {(0, 1): 1.0, (0, 2): 2.0, (0, 3): 3.0, (2, 2): -4.0}
m = DOKMatrix(4, 8, entries)
print(m)

t = m.transposed()
print(f"transposed shape: {t.shape}")
for i, j in cartesian_product(range(t.nrows), range(t.ncols)):
    if t[i, j] != 0:
        print(f"  t[{i}, {j}] = {t[i, j]}")

try:
    m[4, 0]
except IndexOutOfBoundsError as e:
    print(f"caught: {e}")

# shape only bounds the coordinates, memory follows the stored entries
big = DOKMatrix.identity(1_000_000, dtype=np.float32)
print(f"identity {big.shape} stores {big.nnz} entries, big[10, 10] = {big[10, 10]}")

# opt in to checking coordinates at construction
try:
    DOKMatrix(2, 2, {(2, 0): 1.0}, config=DOKConfig(eager_bounds_check=True))
except IndexOutOfBoundsError as e:
    print(f"caught at construction: {e}")
