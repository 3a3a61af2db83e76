from pocket_notes.main import main

raise SystemExit(main())
