"""Module entrypoint for `python -m contrast_widget`.

Delegates to `contrast_widget.launcher` to launch the desktop widget.
"""

from __future__ import annotations

from . import launcher as _launcher


def main():  # pragma: no cover - runtime delegation
    return _launcher.main()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
