import sys

from atoll_rpc.cli import main

if __name__ == "__main__":
    sys.exit(main())
