import sys

from eviction.main import main

sys.exit(main())
