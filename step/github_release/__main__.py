import sys

from github_release.main import main

sys.exit(main())
