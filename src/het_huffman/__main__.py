from het_huffman.cli import main

raise SystemExit(main())
