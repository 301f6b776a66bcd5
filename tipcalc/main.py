"""Entry point for the tipcalc Textual app."""

from __future__ import annotations

from tipcalc.tip_app import create_app


def main() -> None:
    """Run the Textual application."""
    create_app().run()


if __name__ == "__main__":
    main()
