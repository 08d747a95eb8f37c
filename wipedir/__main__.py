import sys

from wipedir.app import main

if __name__ == "__main__":
    sys.exit(main())
