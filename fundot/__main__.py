import sys

from fundot.repl import main

sys.exit(main())
