#!/usr/bin/env python3
"""
Card Stack launcher script.

Run this from the project root to start the card list demo.
"""

import sys
from pathlib import Path

# Add the cardstack package directory to Python path
project_root = Path(__file__).parent
cardstack_package = project_root / "cardstack"
sys.path.insert(0, str(cardstack_package))

# Now import and run - imports will work relative to cardstack package
if __name__ == '__main__':
    from run_gui import main
    main()
