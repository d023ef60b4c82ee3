"""Entry point for Geometry TD."""

import sys

from geometry_td.app import main


if __name__ == "__main__":
    sys.exit(main())
