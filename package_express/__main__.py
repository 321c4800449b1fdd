import sys

from package_express.scripts.calculator import main

sys.exit(main())
