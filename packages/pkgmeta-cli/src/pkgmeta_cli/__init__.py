# SPDX-License-Identifier: MIT
"""Package metadata utility.

Collects project metadata into a pkg.info file, validates it, bumps its
semantic version and renders a README from it.
"""

__version__ = "0.1.0"
