import sys

from .unitconv import main

if __name__ == '__main__':
    sys.exit(main())
