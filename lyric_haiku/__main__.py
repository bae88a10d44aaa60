import sys

from lyric_haiku.cli import main

sys.exit(main())
