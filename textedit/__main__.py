from textedit.main import main

raise SystemExit(main())
