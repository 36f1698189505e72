from streamcipher.cli import main

raise SystemExit(main())
