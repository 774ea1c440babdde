"""Permite ejecutar la CLI con `python -m make_sdk`."""

from __future__ import annotations

from make_sdk.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
