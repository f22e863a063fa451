from adder.interfaces.cli import main

raise SystemExit(main())
