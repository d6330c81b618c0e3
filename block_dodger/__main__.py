import sys

from block_dodger.main import main

sys.exit(main())
