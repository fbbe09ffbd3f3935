"""Allow running the catalog with ``python -m design_catalog``."""
import sys

from design_catalog.cli.main import main

sys.exit(main())
