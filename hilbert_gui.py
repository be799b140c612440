#!/usr/bin/env python3
"""
Interactive Hilbert curve viewer with a live order control.
"""

from hilbert_sketch.gui import main

if __name__ == "__main__":
    main()
