from localeid.cli import main

raise SystemExit(main())
