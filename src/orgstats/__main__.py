import sys

from orgstats.cli.main import main

sys.exit(main())
