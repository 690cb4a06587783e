import sys

from minilisp.repl import main

sys.exit(main())
