"""Module entry point.

Invokes the CLI main function when the package is executed
directly with python -m cricmirror.
"""

from cricmirror.cli import main

if __name__ == '__main__':
    main()
