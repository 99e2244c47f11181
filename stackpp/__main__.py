import sys

from stackpp.cli import main

sys.exit(main())
