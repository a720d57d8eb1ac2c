from feedback_report.app import main

raise SystemExit(main())
