"""Allow running as ``python -m keepipe``."""

from keepipe.cli import main

raise SystemExit(main())
