from .cli import invalidate_main

invalidate_main()
