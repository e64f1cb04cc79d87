from intl_lint.cli import main

raise SystemExit(main())
