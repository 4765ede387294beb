# src/textstats/__main__.py
from textstats.cli import main

if __name__ == "__main__":
    main()
