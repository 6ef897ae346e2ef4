from bulbapy.cli import main

raise SystemExit(main())
