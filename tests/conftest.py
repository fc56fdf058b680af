import sys
import os

# Shared sample tables (color_samples.py) live next to this file
tests_root = os.path.dirname(os.path.abspath(__file__))
if tests_root not in sys.path:
    sys.path.insert(0, tests_root)
