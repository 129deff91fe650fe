from luvatrix_guide.cli import main

raise SystemExit(main())
