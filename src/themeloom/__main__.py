from themeloom.cli import main

raise SystemExit(main())
