from vaneck.cli import main

raise SystemExit(main())
