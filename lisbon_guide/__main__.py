from __future__ import annotations

from lisbon_guide.runtime.lifecycle import main


if __name__ == "__main__":
    raise SystemExit(main())
