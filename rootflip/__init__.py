"""rootflip: enumeration of rooted trees and their unrooted equivalence classes.

## Features

### Rooted trees
- Canonical forms invariant to child order
- Enumeration of all rooted trees with n nodes (OEIS A000081)
- Independent enumeration by canonical level sequences
- Batched parent-array forests

### Flip transform
- Re-rooting at any node
- Unrooted canonical forms
- Clustering into unrooted equivalence classes (OEIS A000055)
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__license__ = "MIT"
