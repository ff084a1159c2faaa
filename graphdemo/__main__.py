"""Allow ``python -m graphdemo``."""

from graphdemo.cli import main

if __name__ == "__main__":
    main()
