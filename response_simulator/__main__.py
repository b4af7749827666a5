import sys

from .run_api import main

sys.exit(main())
