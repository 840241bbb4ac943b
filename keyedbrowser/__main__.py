"""Module entrypoint for ``python -m keyedbrowser``.

All argument parsing happens in ``keyedbrowser.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
