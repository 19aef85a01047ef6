"""Allow ``python -m autorun``."""

from autorun.cli import main

raise SystemExit(main())
