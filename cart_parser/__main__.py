"""python -m cart_parser のエントリーポイント."""
import sys

from cart_parser.cli import main

sys.exit(main())
