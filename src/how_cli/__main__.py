from how_cli.main import main

raise SystemExit(main())
