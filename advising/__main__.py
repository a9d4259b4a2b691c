from .menu import main

raise SystemExit(main())
