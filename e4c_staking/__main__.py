import sys

from e4c_staking.cli import main

if __name__ == "__main__":
    sys.exit(main())
