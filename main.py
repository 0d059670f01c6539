import sys

from curvist.main import main


if __name__ == "__main__":
    sys.exit(main())
