from __future__ import annotations

from luvatrix_guide.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
