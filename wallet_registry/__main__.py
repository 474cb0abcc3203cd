import sys

from wallet_registry.cli import main

sys.exit(main())
