"""
Copyright (c) 2020, The Decred developers
See LICENSE for details
"""

import sys

from p224.cli import main


sys.exit(main())
