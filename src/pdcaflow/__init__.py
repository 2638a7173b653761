# SPDX-License-Identifier: MIT

from pdcaflow.cleanup import register_cleanup
from pdcaflow.initialize import initialize
from pdcaflow.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
