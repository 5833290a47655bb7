from vevolab_parser.cli import main

raise SystemExit(main())
