"""Package entry point for ``python -m ja_title_wrap``.

Delegates to the CLI's main().
"""

from ja_title_wrap.cli import main

if __name__ == "__main__":
    main()
