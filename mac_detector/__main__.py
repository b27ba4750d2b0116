"""
Точка входа для запуска модуля.

    python -m mac_detector [опции]
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
