from ed_engine.adapters.console import main

raise SystemExit(main())
