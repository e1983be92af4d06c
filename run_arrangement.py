"""
run_arrangement.py: CLI entry point

Command-line entry point for the Photo Arrangement project. It forwards
execution to the CLI logic defined in `src/photo_arrangement/cli.py`.

Usage:
    python run_arrangement.py photo1.jpg photo2.jpg [options]

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_arrangement.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import photo_arrangement.cli as pa_cli

if __name__ == "__main__":
    sys.exit(pa_cli.main())
