import sys

from newtoncotes._cli import main

if __name__ == "__main__":
    sys.exit(main())
