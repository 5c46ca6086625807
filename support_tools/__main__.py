from support_tools.main import main

raise SystemExit(main())
