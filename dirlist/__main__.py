from dirlist.cli import main

raise SystemExit(main())
