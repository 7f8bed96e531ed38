"""Allow ``python -m media_masonry``."""

from media_masonry.cli import main

raise SystemExit(main())
