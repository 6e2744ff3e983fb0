"""Module entrypoint for ``python -m lazyrouter``."""

from .cli import main


if __name__ == "__main__":
    main()
