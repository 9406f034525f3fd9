import sys

from vocab_trie.cli import main

sys.exit(main())
