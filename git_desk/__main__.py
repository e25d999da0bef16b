import sys

from git_desk.cli.main import main

sys.exit(main())
