import sys

from trekk.app import main

sys.exit(main())
