import sys

from lsh.main import main

sys.exit(main())
