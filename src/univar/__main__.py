"""
Module entry point so that `python -m univar ...` works without the console
script installed.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

from univar.cli import main

if __name__ == "__main__":
    main()
